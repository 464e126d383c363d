"""Interpreter for the Lox language.

The interpreter walks the statement list produced by the parser and
evaluates each expression directly against a single global environment.
Every operator checks the tags of its operands itself and raises a
`LoxRuntimeError` pointing at the operator token when they do not fit;
the first runtime error ends the run. Output already printed stays
printed.
"""

from __future__ import annotations

import math
import sys
from typing import List, Optional, TextIO

from .ast import (
    Expr, Stmt, Literal, Grouping, Unary, Binary, Variable, Assign,
    Expression, Print, Var,
)
from .debug import DebugLog
from .diagnostics import Diagnostics
from .environment import Environment
from .errors import LoxRuntimeError
from .parser import parse_program
from .tokens import LiteralKind, Token, TokenType
from .types import (
    Value, Number, StringValue, NIL,
    boolean, is_truthy, stringify, type_name, values_equal,
)


class Interpreter:
    """Core interpreter that executes Lox ASTs."""
    def __init__(self, diagnostics: Optional[Diagnostics] = None,
                 debug: Optional[DebugLog] = None, out: Optional[TextIO] = None):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.debug = debug if debug is not None else DebugLog()
        self.out = out
        self.globals = Environment()
        self.environment = self.globals

    # Public API
    def interpret(self, statements: List[Stmt]) -> bool:
        """Execute `statements` in order. Returns False if a runtime error stopped the run."""
        try:
            for stmt in statements:
                try:
                    self.execute(stmt)
                except RecursionError:
                    raise LoxRuntimeError(statement_token(stmt), "Expression nesting too deep.") from None
        except LoxRuntimeError as e:
            self.debug.log(1, f"runtime error at line {e.line}: {e.message}")
            self.diagnostics.runtime_error(e)
            return False
        self.debug.log(1, f"executed {len(statements)} statements")
        return True

    def execute(self, stmt: Stmt):
        if isinstance(stmt, Expression):
            self.evaluate(stmt.expression)
            return
        if isinstance(stmt, Print):
            value = self.evaluate(stmt.expression)
            self.write(stringify(value))
            return
        if isinstance(stmt, Var):
            value = NIL
            if stmt.initializer is not None:
                value = self.evaluate(stmt.initializer)
            self.environment.define(stmt.name.lexeme, value)
            self.debug.log(2, f"define {stmt.name.lexeme}: {type_name(value)} = {stringify(value)}")
            return
        raise TypeError(f"execute: unexpected node type {type(stmt).__name__}")

    def evaluate(self, expr: Expr) -> Value:
        value = self._evaluate(expr)
        if self.debug.enabled(3):
            self.debug.log(3, f"eval {type(expr).__name__} -> {value!r}")
        return value

    def _evaluate(self, expr: Expr) -> Value:
        if isinstance(expr, Literal):
            return self.literal_value(expr)
        if isinstance(expr, Grouping):
            return self.evaluate(expr.expression)
        if isinstance(expr, Unary):
            right = self.evaluate(expr.right)
            return self.apply_unary_op(expr.operator, right)
        if isinstance(expr, Binary):
            left = self.evaluate(expr.left)
            right = self.evaluate(expr.right)
            return self.apply_binary_op(expr.operator, left, right)
        if isinstance(expr, Variable):
            return self.environment.get(expr.name)
        if isinstance(expr, Assign):
            value = self.evaluate(expr.value)
            self.environment.assign(expr.name, value)
            self.debug.log(2, f"assign {expr.name.lexeme}: {type_name(value)} = {stringify(value)}")
            return value
        raise TypeError(f"evaluate: unexpected node type {type(expr).__name__}")

    def literal_value(self, expr: Literal) -> Value:
        lexeme = expr.token.lexeme
        if expr.kind == LiteralKind.NUMBER:
            return Number(float(lexeme))
        if expr.kind == LiteralKind.STRING:
            # the lexeme still carries its quotes
            return StringValue(lexeme[1:-1])
        if expr.kind == LiteralKind.BOOL:
            return boolean(lexeme == 'true')
        if expr.kind == LiteralKind.NIL:
            return NIL
        raise LoxRuntimeError(expr.token, f"Unknown literal '{lexeme}'.")

    def apply_unary_op(self, operator: Token, right: Value) -> Value:
        if operator.type == TokenType.MINUS:
            self.check_number_operand(operator, right)
            return Number(-right.value)
        if operator.type == TokenType.BANG:
            return boolean(not is_truthy(right))
        raise LoxRuntimeError(operator, f"Unsupported unary operator '{operator.lexeme}'.")

    def apply_binary_op(self, operator: Token, a: Value, b: Value) -> Value:
        op = operator.type
        if op == TokenType.PLUS:
            if isinstance(a, StringValue) and isinstance(b, StringValue):
                return StringValue(a.value + b.value)
            if isinstance(a, Number) and isinstance(b, Number):
                return Number(a.value + b.value)
            raise LoxRuntimeError(operator, "Operands must be either numbers or strings.")
        if op == TokenType.EQUAL_EQUAL:
            return boolean(values_equal(a, b))
        if op == TokenType.BANG_EQUAL:
            return boolean(not values_equal(a, b))

        self.check_number_operands(operator, a, b)
        if op == TokenType.MINUS:
            return Number(a.value - b.value)
        if op == TokenType.STAR:
            return Number(a.value * b.value)
        if op == TokenType.SLASH:
            return Number(divide(a.value, b.value))
        if op == TokenType.GREATER:
            return boolean(a.value > b.value)
        if op == TokenType.GREATER_EQUAL:
            return boolean(a.value >= b.value)
        if op == TokenType.LESS:
            return boolean(a.value < b.value)
        if op == TokenType.LESS_EQUAL:
            return boolean(a.value <= b.value)
        raise LoxRuntimeError(operator, f"Unsupported binary operator '{operator.lexeme}'.")

    def check_number_operand(self, operator: Token, operand: Value):
        if not isinstance(operand, Number):
            raise LoxRuntimeError(operator, "Operand must be a number.")

    def check_number_operands(self, operator: Token, a: Value, b: Value):
        if not (isinstance(a, Number) and isinstance(b, Number)):
            raise LoxRuntimeError(operator, "Operands must be numbers.")

    def write(self, text: str):
        out = self.out if self.out is not None else sys.stdout
        out.write(text + '\n')
        out.flush()


def statement_token(stmt: Stmt) -> Token:
    """A token locating `stmt` in the source, found without recursing."""
    if isinstance(stmt, Var):
        return stmt.name
    node = stmt.expression
    while isinstance(node, Grouping):
        node = node.expression
    if isinstance(node, (Unary, Binary)):
        return node.operator
    if isinstance(node, Literal):
        return node.token
    return node.name


def divide(a: float, b: float) -> float:
    """IEEE 754 division: x/0 is a signed infinity and 0/0 is nan."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def run_source(source: str, diagnostics: Optional[Diagnostics] = None) -> Diagnostics:
    """Convenience function to parse and run a Lox program from a source string.

    The program is not run if it has a syntax error. The returned
    diagnostics tell which kind of error, if any, occurred.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    statements = parse_program(source, diagnostics)
    if not diagnostics.had_error:
        Interpreter(diagnostics).interpret(statements)
    return diagnostics
