"""Error reporting for the Lox pipeline.

A `Diagnostics` instance is handed to the scanner, the parser and the
interpreter. Each stage reports through it, and the driver inspects the two
latches (`had_error` for syntax errors, `had_runtime_error` for runtime
errors) once a stage has finished. Nothing here is global: an interactive
session calls `reset()` between inputs.
"""

import sys
from typing import List, TextIO

from lox.errors import LoxRuntimeError
from lox.tokens import Token, TokenType


class Diagnostics:
    def __init__(self, stream: TextIO = None):
        self.stream = stream
        self.had_error = False
        self.had_runtime_error = False
        self.errors: List[str] = []

    @property
    def failed(self) -> bool:
        return self.had_error or self.had_runtime_error

    def reset(self):
        self.had_error = False
        self.had_runtime_error = False
        self.errors = []

    def error(self, line: int, message: str):
        """Report a syntax error that has no token to point at."""
        self.report(line, '', message)

    def token_error(self, token: Token, message: str):
        if token.type == TokenType.EOF:
            self.report(token.line, ' at end', message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str):
        self._write(f"[line {line}] Error{where}: {message}")
        self.had_error = True

    def runtime_error(self, error: LoxRuntimeError):
        self._write(f"{error.message}\n[line {error.line}]")
        self.had_runtime_error = True

    def _write(self, text: str):
        self.errors.append(text)
        # sys.stderr is looked up per call, it may be swapped after construction
        stream = self.stream if self.stream is not None else sys.stderr
        print(text, file=stream)
        stream.flush()
