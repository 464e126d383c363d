import json

import pytest

from lox.ast import Binary, Literal
from lox.ast_json import ast_from_obj, ast_to_obj, program_from_obj, program_to_obj
from lox.ast_printer import print_expr, print_stmt
from lox.parser import parse_program
from lox.tokens import LiteralKind, Token, TokenType


def test_program_survives_json_encoding():
    statements = parse_program('var a;\nvar b = "x";\na = -(1 + 2) >= 3 == !nil;\nprint b = true;')
    restored = program_from_obj(json.loads(json.dumps(program_to_obj(statements))))
    assert restored == statements


def test_tokens_are_stored_whole():
    token = Token(TokenType.NUMBER, '1.5', 4, LiteralKind.NUMBER)
    obj = ast_to_obj(Literal(LiteralKind.NUMBER, token))
    assert obj == {
        'type': 'Literal',
        'kind': 'NUMBER',
        'token': {'__type__': 'Token', 'value': {'type': 'NUMBER', 'lexeme': '1.5', 'line': 4, 'literal': 'NUMBER'}},
    }


def test_unknown_nodes_are_rejected():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'While'})
    with pytest.raises(ValueError):
        program_from_obj({'type': 'Block', 'body': []})
    with pytest.raises(TypeError):
        ast_to_obj(object())


def test_print_expr():
    one = Literal(LiteralKind.NUMBER, Token(TokenType.NUMBER, '1', 1, LiteralKind.NUMBER))
    two = Literal(LiteralKind.NUMBER, Token(TokenType.NUMBER, '2', 1, LiteralKind.NUMBER))
    plus = Token(TokenType.PLUS, '+', 1)
    assert print_expr(Binary(one, plus, two)) == '(+ 1 2)'


@pytest.mark.parametrize('kind, lexeme', [
    ('NUMBER', 'abc'),
    ('NUMBER', '1e5'),
    ('STRING', 'no quotes'),
    ('BOOL', 'yes'),
    ('NIL', 'null'),
    ('NONE', 'x'),
])
def test_literals_must_be_scannable(kind, lexeme):
    token = {'__type__': 'Token', 'value': {'type': 'NUMBER', 'lexeme': lexeme, 'line': 1, 'literal': kind}}
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'Literal', 'kind': kind, 'token': token})


def test_printer_rejects_unknown_nodes():
    with pytest.raises(TypeError):
        print_expr(object())
    with pytest.raises(TypeError):
        print_stmt(object())
