from lox.runner import Lox, EX_DATAERR, EX_OK, EX_SOFTWARE


def write_script(tmp_path, source, name='script.lox'):
    path = tmp_path / name
    path.write_text(source, encoding='utf-8')
    return str(path)


def test_clean_run_exits_zero(tmp_path, capsys):
    path = write_script(tmp_path, 'var a = 1; var b = 2; print a + b;')
    assert Lox().run_file(path) == EX_OK
    assert capsys.readouterr().out == '3\n'


def test_undeclared_assignment_exits_with_runtime_category(tmp_path, capsys):
    path = write_script(tmp_path, 'a = 1;')
    assert Lox().run_file(path) == EX_SOFTWARE == 70
    captured = capsys.readouterr()
    assert captured.out == ''
    assert "Undefined variable 'a'." in captured.err


def test_syntax_error_exits_with_syntax_category(tmp_path, capsys):
    path = write_script(tmp_path, 'print 1 +;')
    assert Lox().run_file(path) == EX_DATAERR == 65
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == "[line 1] Error at ';': Expect expression.\n"


def test_scanner_errors_count_as_syntax_errors(tmp_path, capsys):
    path = write_script(tmp_path, 'print 1;\nprint 2 # 3;')
    assert Lox().run_file(path) == EX_DATAERR
    captured = capsys.readouterr()
    assert captured.out == ''
    assert '[line 2] Error: Unexpected character.' in captured.err


def test_variables_persist_across_runs(capsys):
    lox = Lox()
    assert lox.run('var count = 1;') == EX_OK
    assert lox.run('count = count + 1;') == EX_OK
    assert lox.run('print count;') == EX_OK
    assert capsys.readouterr().out == '2\n'


def test_latches_stay_set_until_reset(capsys):
    lox = Lox()
    assert lox.run('print nope;') == EX_SOFTWARE
    assert lox.run('print 1;') == EX_SOFTWARE
    lox.diagnostics.reset()
    assert lox.run('print 1;') == EX_OK
    assert capsys.readouterr().out == '1\n1\n'


def test_debug_trace_written_when_verbose(tmp_path, capsys):
    debug_file = tmp_path / 'debug.txt'
    path = write_script(tmp_path, 'var a = 1;\na = a + 1;\nprint a;')
    lox = Lox(debug_level=2, debug_file=str(debug_file))
    assert lox.run_file(path) == EX_OK
    trace = debug_file.read_text(encoding='utf-8')
    assert 'parsed (var a = 1)' in trace
    assert 'define a: Number = 1' in trace
    assert 'assign a: Number = 2' in trace
    assert 'executed 3 statements' in trace
    # level 3 lines are filtered out at level 2
    assert 'eval ' not in trace
    assert capsys.readouterr().out == '2\n'


def test_debug_trace_off_by_default(tmp_path, capsys):
    debug_file = tmp_path / 'debug.txt'
    path = write_script(tmp_path, 'print 1;')
    assert Lox(debug_file=str(debug_file)).run_file(path) == EX_OK
    assert not debug_file.exists()
    capsys.readouterr()
