from typing import Dict, Optional

from lox.errors import LoxRuntimeError
from lox.tokens import Token
from lox.types import Value


class Environment:
    """Represents a scope mapping variable names to runtime values.

    The interpreter runs every program in one global environment. An
    environment may name an `enclosing` one; lookups and assignments that
    miss locally continue there.
    """
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, Value] = {}

    def __contains__(self, name: str) -> bool:
        if name in self.values:
            return True
        return self.enclosing is not None and name in self.enclosing

    def define(self, name: str, value: Value):
        # redeclaration simply replaces the previous binding
        self.values[name] = value

    def get(self, name: Token) -> Value:
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing is not None:
            return self.enclosing.get(name)
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Value) -> Value:
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
            return value
        if self.enclosing is not None:
            return self.enclosing.assign(name, value)
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")
