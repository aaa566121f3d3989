"""Canonical, fully parenthesized rendering of Lox syntax trees.

Every compound node prints as `(name child ...)`, so the output shows
exactly how the parser grouped operators. Used by the CLI's
`--print-ast` mode and by tests.
"""

from __future__ import annotations

from typing import Union

from .ast import (
    Assign, Binary, Block, Expr, Expression, ExprVisitor, Grouping,
    Literal, Print, Stmt, StmtVisitor, Unary, Var, Variable,
)
from .types import stringify


class AstPrinter(ExprVisitor, StmtVisitor):
    def print(self, node: Union[Expr, Stmt]) -> str:
        return node.accept(self)

    def visit_assign_expr(self, expr: Assign) -> str:
        return self.parenthesize('=', expr.name.lexeme, expr.value)

    def visit_binary_expr(self, expr: Binary) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self.parenthesize('group', expr.expression)

    def visit_literal_expr(self, expr: Literal) -> str:
        return stringify(expr.value)

    def visit_unary_expr(self, expr: Unary) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def visit_variable_expr(self, expr: Variable) -> str:
        return expr.name.lexeme

    def visit_block_stmt(self, stmt: Block) -> str:
        return self.parenthesize('block', *stmt.statements)

    def visit_expression_stmt(self, stmt: Expression) -> str:
        return self.parenthesize(';', stmt.expression)

    def visit_print_stmt(self, stmt: Print) -> str:
        return self.parenthesize('print', stmt.expression)

    def visit_var_stmt(self, stmt: Var) -> str:
        if stmt.initializer is None:
            return self.parenthesize('var', stmt.name.lexeme)
        return self.parenthesize('var', stmt.name.lexeme, '=', stmt.initializer)

    def parenthesize(self, name: str, *parts: Union[Expr, Stmt, str]) -> str:
        pieces = [name]
        for part in parts:
            pieces.append(part if isinstance(part, str) else part.accept(self))
        return '(' + ' '.join(pieces) + ')'
