"""JSON serialization/deserialization for Lox ASTs.

This module converts between Lox AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Tokens are kept whole
(type, lexeme, line and literal kind) so that a deserialized program
reports runtime errors on the same lines as the script they came from.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List

from .ast import (
    Stmt,
    Literal,
    Grouping,
    Unary,
    Binary,
    Variable,
    Assign,
    Expression,
    Print,
    Var,
)
from .tokens import LiteralKind, Token, TokenType


LITERAL_LEXEMES = {
    LiteralKind.NUMBER: re.compile(r'[0-9]+(?:\.[0-9]+)?'),
    LiteralKind.STRING: re.compile(r'"[^"]*"'),
    LiteralKind.BOOL: re.compile(r'true|false'),
    LiteralKind.NIL: re.compile(r'nil'),
}


def literal_from_obj(obj: Dict[str, Any]) -> Literal:
    """Rebuild a literal, refusing lexemes the scanner could not have produced."""
    kind = LiteralKind[obj["kind"]]
    token = ast_from_obj(obj["token"])
    pattern = LITERAL_LEXEMES.get(kind)
    if not isinstance(token, Token):
        raise TypeError("Invalid AST object: literal without a token")
    if pattern is None or not isinstance(token.lexeme, str) or not pattern.fullmatch(token.lexeme):
        raise ValueError(f"Invalid {kind.name} literal: {token.lexeme!r}")
    return Literal(kind=kind, token=token)


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"type": t.type.name, "lexeme": t.lexeme, "line": t.line, "literal": t.literal.name}


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(
        TokenType[o["type"]],
        o["lexeme"],
        int(o["line"]),
        LiteralKind[o.get("literal", "NONE")],
    )


def program_to_obj(statements: List[Stmt]) -> Dict[str, Any]:
    return {"type": "Program", "body": [ast_to_obj(s) for s in statements]}


def program_from_obj(obj: Dict[str, Any]) -> List[Stmt]:
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise ValueError("Invalid AST object: expected a Program")
    return [ast_from_obj(s) for s in obj["body"]]


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    if isinstance(node, Token):
        return {"__type__": "Token", "value": token_to_obj(node)}

    # Statements
    if isinstance(node, Expression):
        return {"type": "Expression", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Print):
        return {"type": "Print", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Var):
        return {
            "type": "Var",
            "name": ast_to_obj(node.name),
            "initializer": ast_to_obj(node.initializer),
        }

    # Expressions
    if isinstance(node, Literal):
        return {"type": "Literal", "kind": node.kind.name, "token": ast_to_obj(node.token)}
    if isinstance(node, Grouping):
        return {"type": "Grouping", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": ast_to_obj(node.operator), "right": ast_to_obj(node.right)}
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "left": ast_to_obj(node.left),
            "operator": ast_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Variable):
        return {"type": "Variable", "name": ast_to_obj(node.name)}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": ast_to_obj(node.name), "value": ast_to_obj(node.value)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    if obj.get("__type__") == "Token":
        return token_from_obj(obj["value"])
    t = obj.get("type")
    if t == "Expression":
        return Expression(expression=ast_from_obj(obj["expression"]))
    if t == "Print":
        return Print(expression=ast_from_obj(obj["expression"]))
    if t == "Var":
        return Var(name=ast_from_obj(obj["name"]), initializer=ast_from_obj(obj.get("initializer")))
    if t == "Literal":
        return literal_from_obj(obj)
    if t == "Grouping":
        return Grouping(expression=ast_from_obj(obj["expression"]))
    if t == "Unary":
        return Unary(operator=ast_from_obj(obj["operator"]), right=ast_from_obj(obj["right"]))
    if t == "Binary":
        return Binary(
            left=ast_from_obj(obj["left"]),
            operator=ast_from_obj(obj["operator"]),
            right=ast_from_obj(obj["right"]),
        )
    if t == "Variable":
        return Variable(name=ast_from_obj(obj["name"]))
    if t == "Assign":
        return Assign(name=ast_from_obj(obj["name"]), value=ast_from_obj(obj["value"]))

    raise ValueError(f"Unknown AST node type: {t}")
