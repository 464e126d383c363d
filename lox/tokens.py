"""Token definitions shared by the scanner and the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    # Single-character tokens
    LEFT_PAREN = '('
    RIGHT_PAREN = ')'
    LEFT_BRACE = '{'
    RIGHT_BRACE = '}'
    COMMA = ','
    DOT = '.'
    MINUS = '-'
    PLUS = '+'
    SEMICOLON = ';'
    SLASH = '/'
    STAR = '*'

    # One or two character tokens
    BANG = '!'
    BANG_EQUAL = '!='
    EQUAL = '='
    EQUAL_EQUAL = '=='
    GREATER = '>'
    GREATER_EQUAL = '>='
    LESS = '<'
    LESS_EQUAL = '<='

    # Literals
    IDENTIFIER = 'identifier'
    STRING = 'string'
    NUMBER = 'number'

    # Keywords
    TRUE = 'true'
    FALSE = 'false'
    NIL = 'nil'
    VAR = 'var'
    PRINT = 'print'

    EOF = 'eof'


class LiteralKind(Enum):
    """Which runtime value a literal token reconstructs to."""
    NONE = 'None'
    STRING = 'String'
    NUMBER = 'Number'
    BOOL = 'Bool'
    NIL = 'Nil'


LITERAL_KINDS = {
    TokenType.STRING: LiteralKind.STRING,
    TokenType.NUMBER: LiteralKind.NUMBER,
    TokenType.TRUE: LiteralKind.BOOL,
    TokenType.FALSE: LiteralKind.BOOL,
    TokenType.NIL: LiteralKind.NIL,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    line: int
    literal: LiteralKind = LiteralKind.NONE

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.line}"
