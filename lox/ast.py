"""Abstract Syntax Tree (AST) definitions for the Lox language.

Nodes are immutable dataclasses in two closed families, expressions and
statements. Each node's `accept` hands itself to the matching method of
a visitor, so operations over the tree (printing, evaluation, JSON
export) live in visitor classes and the node definitions never change
when a new operation is added.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .tokens import Token


class ExprVisitor(ABC):
    @abstractmethod
    def visit_assign_expr(self, expr: 'Assign') -> Any: ...

    @abstractmethod
    def visit_binary_expr(self, expr: 'Binary') -> Any: ...

    @abstractmethod
    def visit_grouping_expr(self, expr: 'Grouping') -> Any: ...

    @abstractmethod
    def visit_literal_expr(self, expr: 'Literal') -> Any: ...

    @abstractmethod
    def visit_unary_expr(self, expr: 'Unary') -> Any: ...

    @abstractmethod
    def visit_variable_expr(self, expr: 'Variable') -> Any: ...


class StmtVisitor(ABC):
    @abstractmethod
    def visit_block_stmt(self, stmt: 'Block') -> Any: ...

    @abstractmethod
    def visit_expression_stmt(self, stmt: 'Expression') -> Any: ...

    @abstractmethod
    def visit_print_stmt(self, stmt: 'Print') -> Any: ...

    @abstractmethod
    def visit_var_stmt(self, stmt: 'Var') -> Any: ...


@dataclass(frozen=True)
class Expr:
    """Base class for all expression nodes."""

    def accept(self, visitor: ExprVisitor) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_assign_expr(self)


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class Literal(Expr):
    value: Any  # float, str, bool or None

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_unary_expr(self)


@dataclass(frozen=True)
class Variable(Expr):
    name: Token

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_variable_expr(self)


@dataclass(frozen=True)
class Stmt:
    """Base class for all statement nodes."""

    def accept(self, visitor: StmtVisitor) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Block(Stmt):
    statements: Tuple[Stmt, ...]

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_block_stmt(self)


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_expression_stmt(self)


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_print_stmt(self)


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr]

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_var_stmt(self)
