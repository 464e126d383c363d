"""Parenthesized rendering of Lox syntax trees.

`-123 * (45.67)` prints as `(* (- 123) (group 45.67))`. Used by the
`--print-ast` command line option and by the level 2 debug trace.
"""

from .ast import (
    Expr, Stmt, Literal, Grouping, Unary, Binary, Variable, Assign,
    Expression, Print, Var,
)


def print_expr(expr: Expr) -> str:
    if isinstance(expr, Literal):
        return expr.token.lexeme
    if isinstance(expr, Grouping):
        return parenthesize('group', expr.expression)
    if isinstance(expr, Unary):
        return parenthesize(expr.operator.lexeme, expr.right)
    if isinstance(expr, Binary):
        return parenthesize(expr.operator.lexeme, expr.left, expr.right)
    if isinstance(expr, Variable):
        return expr.name.lexeme
    if isinstance(expr, Assign):
        return f"(= {expr.name.lexeme} {print_expr(expr.value)})"
    raise TypeError(f"print_expr: unexpected node type {type(expr).__name__}")


def print_stmt(stmt: Stmt) -> str:
    if isinstance(stmt, Expression):
        return parenthesize(';', stmt.expression)
    if isinstance(stmt, Print):
        return parenthesize('print', stmt.expression)
    if isinstance(stmt, Var):
        if stmt.initializer is None:
            return f"(var {stmt.name.lexeme})"
        return f"(var {stmt.name.lexeme} = {print_expr(stmt.initializer)})"
    raise TypeError(f"print_stmt: unexpected node type {type(stmt).__name__}")


def parenthesize(name: str, *exprs: Expr) -> str:
    parts = [name] + [print_expr(e) for e in exprs]
    return '(' + ' '.join(parts) + ')'
