"""Abstract Syntax Tree (AST) definitions for the Lox language.

The AST classes defined in this module represent the syntactic structure
of parsed Lox programs. Expressions and statements are two closed sets of
frozen dataclasses: once the parser has built a node it never changes, so
sub-trees may be shared freely and are never copied. Nodes keep the tokens
they were built from so that the interpreter can report errors with line
numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .tokens import LiteralKind, Token


@dataclass(frozen=True)
class Expr:
    """Base class for expression nodes."""
    pass


@dataclass(frozen=True)
class Literal(Expr):
    kind: LiteralKind
    token: Token  # value is rebuilt from token.lexeme when evaluated


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token  # MINUS or BANG
    right: Expr


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Variable(Expr):
    name: Token


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Stmt:
    """Base class for statement nodes."""
    pass


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr]
