from lox.tokens import Token


class LoxError(Exception):
    """Base class for errors raised while processing a Lox program."""


class ParseError(LoxError):
    """Internal exception used to unwind the parser to a statement boundary."""


class LoxRuntimeError(LoxError):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message

    @property
    def line(self) -> int:
        return self.token.line
