from pathlib import Path

from lox.runner import Lox

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1_arithmetic(capsys):
    code = Lox().run_file(EXAMPLES / 'program_1.lox')
    out = capsys.readouterr().out.strip()
    assert code == 0
    assert out.splitlines() == ['7', '9', '2.5', '2', '2']


def test_program_2_variables(capsys):
    code = Lox().run_file(EXAMPLES / 'program_2.lox')
    out = capsys.readouterr().out.strip()
    assert code == 0
    assert out.splitlines() == ['nil', 'Hello, Lox!', 'Bye', '3', '3', '3']


def test_program_3_truthiness_and_equality(capsys):
    code = Lox().run_file(EXAMPLES / 'program_3.lox')
    out = capsys.readouterr().out.strip()
    assert code == 0
    assert out.splitlines() == ['true', 'true', 'false', 'false', 'true', 'false', 'true', 'false', 'true']


def test_program_4_runtime_error(capsys):
    code = Lox().run_file(EXAMPLES / 'program_4.lox')
    captured = capsys.readouterr()
    assert code == 70
    # output before the error is kept
    assert captured.out.strip() == '42'
    assert captured.err.strip() == 'Operands must be either numbers or strings.\n[line 4]'


def test_program_5_syntax_errors(capsys):
    code = Lox().run_file(EXAMPLES / 'program_5.lox')
    captured = capsys.readouterr()
    assert code == 65
    # the valid first statement is not run either
    assert captured.out == ''
    assert captured.err.splitlines() == [
        "[line 3] Error at ';': Expect expression.",
        "[line 4] Error at '=': Expect variable name.",
        "[line 5] Error at ';': Expect ')' after expression.",
    ]
