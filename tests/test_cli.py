import json

from lox.__main__ import main


def write_script(tmp_path, source, name='script.lox'):
    path = tmp_path / name
    path.write_text(source, encoding='utf-8')
    return path


def test_run_script(tmp_path, capsys):
    path = write_script(tmp_path, 'print "a" + "b";')
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == 'ab\n'


def test_exit_codes(tmp_path, capsys):
    assert main([str(write_script(tmp_path, 'a = 1;', 'runtime.lox'))]) == 70
    assert main([str(write_script(tmp_path, 'print 1 +;', 'syntax.lox'))]) == 65
    assert capsys.readouterr().out == ''


def test_missing_script(tmp_path, capsys):
    assert main([str(tmp_path / 'nope.lox')]) == 1
    assert 'not found' in capsys.readouterr().err


def test_print_ast(tmp_path, capsys):
    path = write_script(tmp_path, 'var a = -1;\nprint (a + 2) * 3;')
    assert main(['--print-ast', str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        '(var a = (- 1))',
        '(print (* (group (+ a 2)) 3))',
    ]


def test_emit_ast_then_run_it(tmp_path, capsys):
    path = write_script(tmp_path, 'var a = 2;\nprint a * 21;\nprint b;')
    assert main(['--emit-ast', str(path)]) == 0
    ast_path = tmp_path / 'script.lox.ast.json'
    assert capsys.readouterr().out.strip() == str(ast_path)
    data = json.loads(ast_path.read_text(encoding='utf-8'))
    assert data['type'] == 'Program'
    assert [node['type'] for node in data['body']] == ['Var', 'Print', 'Print']

    assert main(['--ast', str(ast_path)]) == 70
    captured = capsys.readouterr()
    assert captured.out == '42\n'
    # lines survive serialization
    assert captured.err == "Undefined variable 'b'.\n[line 3]\n"


def test_emit_ast_refuses_invalid_program(tmp_path, capsys):
    path = write_script(tmp_path, 'print (1;')
    assert main(['--emit-ast', str(path)]) == 65
    assert not (tmp_path / 'script.lox.ast.json').exists()
    capsys.readouterr()


def test_invalid_ast_file(tmp_path, capsys):
    ast_path = tmp_path / 'bad.ast.json'
    ast_path.write_text('{"type": "Program", "body": [{"type": "Loop"}]}', encoding='utf-8')
    assert main(['--ast', str(ast_path)]) == 1
    assert 'invalid AST file' in capsys.readouterr().err


def test_ast_file_with_malformed_number_literal(tmp_path, capsys):
    token = {'__type__': 'Token', 'value': {'type': 'NUMBER', 'lexeme': 'abc', 'line': 1, 'literal': 'NUMBER'}}
    program = {'type': 'Program', 'body': [
        {'type': 'Print', 'expression': {'type': 'Literal', 'kind': 'NUMBER', 'token': token}},
    ]}
    ast_path = tmp_path / 'bad.ast.json'
    ast_path.write_text(json.dumps(program), encoding='utf-8')
    assert main(['--ast', str(ast_path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'invalid AST file' in captured.err
