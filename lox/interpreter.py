"""Tree-walking interpreter for the Lox language.

The interpreter is a visitor over the AST. Statements are executed for
their effect and expressions are evaluated to Lox values (see
`lox.types`). Variables live in chained `Environment` scopes; the
interpreter holds the current one and swaps it around block execution.

`run_program` and `run_file` tie scanner, parser and interpreter
together for one run and report what happened in a `RunResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Iterable, List, Optional

from .ast import (
    Assign, Binary, Block, Expr, Expression, ExprVisitor, Grouping,
    Literal, Print, Stmt, StmtVisitor, Unary, Var, Variable,
)
from .environment import Environment
from .errors import ErrorReporter, LoxRuntimeError
from .parser import parse_program
from .tokens import Token, TokenKind
from .types import divide, is_equal, is_number, is_truthy, stringify


class Interpreter(ExprVisitor, StmtVisitor):
    """Core interpreter that executes Lox statements."""
    def __init__(self, reporter: Optional[ErrorReporter] = None,
                 debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.globals = Environment()
        self.environment = self.globals
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def interpret(self, statements: Iterable[Stmt]):
        """Execute statements in order, stopping at the first runtime error."""
        for stmt in statements:
            if self.debug_level >= 1:
                self.debug(f"execute {type(stmt).__name__}")
            try:
                self.execute(stmt)
            except LoxRuntimeError as error:
                if self.debug_level >= 1:
                    self.debug(f"runtime error at line {error.token.line}: {error.message}")
                self.reporter.runtime_error(error)
                return
            except RecursionError:
                self.reporter.stack_overflow(statement_line(stmt))
                return

    def execute(self, stmt: Stmt):
        stmt.accept(self)

    def execute_block(self, statements: Iterable[Stmt], environment: Environment):
        previous = self.environment
        self.environment = environment
        if self.debug_level >= 3:
            self.debug(f"enter scope depth {environment.depth}")
        try:
            for stmt in statements:
                self.execute(stmt)
        finally:
            self.environment = previous
            if self.debug_level >= 3:
                self.debug(f"leave scope depth {environment.depth}")

    def evaluate(self, expr: Expr) -> Any:
        return expr.accept(self)

    # Statements

    def visit_block_stmt(self, stmt: Block):
        self.execute_block(stmt.statements, Environment(enclosing=self.environment))

    def visit_expression_stmt(self, stmt: Expression):
        self.evaluate(stmt.expression)

    def visit_print_stmt(self, stmt: Print):
        value = self.evaluate(stmt.expression)
        print(stringify(value))

    def visit_var_stmt(self, stmt: Var):
        value = None
        if stmt.initializer is not None:
            value = self.evaluate(stmt.initializer)
        self.environment.define(stmt.name.lexeme, value)
        if self.debug_level >= 2:
            self.debug(f"define {stmt.name.lexeme} = {stringify(value)}")

    # Expressions

    def visit_assign_expr(self, expr: Assign) -> Any:
        value = self.evaluate(expr.value)
        self.environment.assign(expr.name, value)
        if self.debug_level >= 2:
            self.debug(f"assign {expr.name.lexeme} = {stringify(value)}")
        return value

    def visit_binary_expr(self, expr: Binary) -> Any:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.operator
        kind = op.kind

        if kind == TokenKind.COMMA:
            return right
        if kind == TokenKind.BANG_EQUAL:
            return not is_equal(left, right)
        if kind == TokenKind.EQUAL_EQUAL:
            return is_equal(left, right)
        if kind == TokenKind.PLUS:
            if is_number(left) and is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise LoxRuntimeError(op, 'Operands must be two numbers or two strings.')

        check_number_operands(op, left, right)
        if kind == TokenKind.GREATER:
            return left > right
        if kind == TokenKind.GREATER_EQUAL:
            return left >= right
        if kind == TokenKind.LESS:
            return left < right
        if kind == TokenKind.LESS_EQUAL:
            return left <= right
        if kind == TokenKind.MINUS:
            return left - right
        if kind == TokenKind.SLASH:
            return divide(left, right)
        if kind == TokenKind.STAR:
            return left * right
        raise LoxRuntimeError(op, f"Unknown binary operator '{op.lexeme}'.")

    def visit_grouping_expr(self, expr: Grouping) -> Any:
        return self.evaluate(expr.expression)

    def visit_literal_expr(self, expr: Literal) -> Any:
        return expr.value

    def visit_unary_expr(self, expr: Unary) -> Any:
        right = self.evaluate(expr.right)
        op = expr.operator
        if op.kind == TokenKind.BANG:
            return not is_truthy(right)
        if op.kind == TokenKind.MINUS:
            check_number_operand(op, right)
            return -right
        raise LoxRuntimeError(op, f"Unknown unary operator '{op.lexeme}'.")

    def visit_variable_expr(self, expr: Variable) -> Any:
        return self.environment.get(expr.name)


def check_number_operand(operator: Token, operand: Any):
    if not is_number(operand):
        raise LoxRuntimeError(operator, 'Operand must be a number.')


def check_number_operands(operator: Token, left: Any, right: Any):
    if not (is_number(left) and is_number(right)):
        raise LoxRuntimeError(operator, 'Operands must be numbers.')


def statement_line(stmt: Stmt) -> Optional[int]:
    """Line of the first token in `stmt`, or None when it holds no token.

    The walk keeps its own stack: the statement is nested deeper than
    the Python one allows.
    """
    pending: List[Any] = [stmt]
    while pending:
        item = pending.pop()
        if isinstance(item, Token):
            return item.line
        if isinstance(item, tuple):
            pending.extend(reversed(item))
        elif isinstance(item, (Expr, Stmt)):
            pending.extend(getattr(item, f.name) for f in reversed(fields(item)))
    return None


@dataclass
class RunResult:
    """What one run produced besides its printed output."""
    had_error: bool = False
    had_runtime_error: bool = False
    diagnostics: List[str] = field(default_factory=list)


def run_program(source: str, interpreter: Optional[Interpreter] = None) -> RunResult:
    """Scan, parse and execute Lox source code.

    The program is only executed when it parsed without errors. Passing
    an existing interpreter keeps its global variables between runs,
    which is how the interactive prompt works; its reporter is reset
    first.
    """
    if interpreter is None:
        interpreter = Interpreter()
    reporter = interpreter.reporter
    reporter.reset()

    statements = parse_program(source, reporter)
    if not reporter.had_error:
        interpreter.interpret(statements)

    return RunResult(
        had_error=reporter.had_error,
        had_runtime_error=reporter.had_runtime_error,
        diagnostics=list(reporter.diagnostics),
    )


def run_file(file_path: str, interpreter: Optional[Interpreter] = None) -> RunResult:
    """Read a UTF-8 Lox file and run it."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source, interpreter)
