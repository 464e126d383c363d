"""Scanner for the Lox language.

Token patterns are declared as a lark grammar and matched by lark's basic
lexer. The grammar's only rule lists every terminal so that lark keeps
them all; nothing is ever parsed with it. Keywords are plain string
terminals, which lark matches as exact-identifier exceptions to the
`IDENTIFIER` pattern, so `var` is a keyword while `variable` is a name.

Lexical errors do not stop the scan: the offending character is reported
through the diagnostics collector and lexing resumes after it.
"""

from __future__ import annotations

from typing import List, Optional

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .debug import DebugLog
from .diagnostics import Diagnostics
from .tokens import LITERAL_KINDS, LiteralKind, Token, TokenType


LOX_TOKENS = r"""
    start: _token*

    _token: LEFT_PAREN | RIGHT_PAREN | LEFT_BRACE | RIGHT_BRACE
          | COMMA | DOT | MINUS | PLUS | SEMICOLON | SLASH | STAR
          | BANG | BANG_EQUAL | EQUAL | EQUAL_EQUAL
          | GREATER | GREATER_EQUAL | LESS | LESS_EQUAL
          | IDENTIFIER | STRING | UNTERMINATED_STRING | NUMBER
          | TRUE | FALSE | NIL | VAR | PRINT

    LEFT_PAREN: "("
    RIGHT_PAREN: ")"
    LEFT_BRACE: "{"
    RIGHT_BRACE: "}"
    COMMA: ","
    DOT: "."
    MINUS: "-"
    PLUS: "+"
    SEMICOLON: ";"
    SLASH: "/"
    STAR: "*"

    BANG_EQUAL: "!="
    BANG: "!"
    EQUAL_EQUAL: "=="
    EQUAL: "="
    GREATER_EQUAL: ">="
    GREATER: ">"
    LESS_EQUAL: "<="
    LESS: "<"

    TRUE: "true"
    FALSE: "false"
    NIL: "nil"
    VAR: "var"
    PRINT: "print"

    IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/
    NUMBER: /[0-9]+(?:\.[0-9]+)?/
    STRING.2: /"[^"]*"/
    UNTERMINATED_STRING: /"[^"]*/

    COMMENT: /\/\/[^\n]*/
    WS: /[ \t\r\n]+/
    %ignore COMMENT
    %ignore WS
"""


LOX_LEXER = Lark(
    LOX_TOKENS,
    parser='lalr',
    lexer='basic',
)


class Scanner:
    def __init__(self, source: str, diagnostics: Optional[Diagnostics] = None,
                 debug: Optional[DebugLog] = None):
        self.source = source
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.debug = debug if debug is not None else DebugLog()
        self.tokens: List[Token] = []

    def scan_tokens(self) -> List[Token]:
        self.tokens = []
        pos = 0
        line_offset = 0
        while True:
            try:
                for raw in LOX_LEXER.lex(self.source[pos:]):
                    self.add_token(raw.type, str(raw), raw.line + line_offset)
                break
            except UnexpectedCharacters as e:
                line = e.line + line_offset
                self.diagnostics.error(line, 'Unexpected character.')
                pos += e.pos_in_stream + 1
                line_offset = line - 1
        eof_line = self.source.count('\n') + 1
        self.tokens.append(Token(TokenType.EOF, '', eof_line))
        self.debug.log(1, f"scanned {len(self.tokens)} tokens")
        return self.tokens

    def add_token(self, name: str, lexeme: str, line: int):
        if name == 'UNTERMINATED_STRING':
            self.diagnostics.error(line, 'Unterminated string.')
            return
        token_type = TokenType[name]
        token = Token(token_type, lexeme, line, LITERAL_KINDS.get(token_type, LiteralKind.NONE))
        self.debug.log(4, f"token {token}")
        self.tokens.append(token)


def scan(source: str, diagnostics: Optional[Diagnostics] = None) -> List[Token]:
    """Tokenize `source`, always ending with an EOF token."""
    return Scanner(source, diagnostics).scan_tokens()
