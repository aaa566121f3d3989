"""Recursive-descent parser for the Lox language.

Each precedence level of the expression grammar is one method; the
binary levels share `binary_level`, which folds operators to the left.
Assignment is right-recursive.

Syntax errors are reported through the `ErrorReporter` and then raised
as `ParseError`, which unwinds only as far as `declaration`. There the
partial statement is dropped and the parser skips ahead to a likely
statement boundary, so one malformed statement yields one diagnostic.
Source nested too deeply for the Python stack is reported once as a
syntax error and ends the parse.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from .ast import (
    Assign, Binary, Block, Expr, Expression, Grouping, Literal, Print,
    Stmt, Unary, Var, Variable,
)
from .errors import ErrorReporter, ParseError
from .scanner import Scanner
from .tokens import Token, TokenKind


# Tokens that start a statement; synchronization stops in front of them.
STATEMENT_STARTS = {
    TokenKind.CLASS,
    TokenKind.FUN,
    TokenKind.VAR,
    TokenKind.FOR,
    TokenKind.IF,
    TokenKind.WHILE,
    TokenKind.PRINT,
    TokenKind.RETURN,
}


class Parser:
    def __init__(self, tokens: List[Token], reporter: ErrorReporter):
        self.tokens = tokens
        self.reporter = reporter
        self.pos = 0

    def parse(self) -> List[Stmt]:
        statements: List[Stmt] = []
        try:
            while not self.is_at_end():
                stmt = self.declaration()
                if stmt is not None:
                    statements.append(stmt)
        except RecursionError:
            # Nothing after this point can be trusted, so parsing stops here.
            self.error(self.peek(), 'Too much nesting.')
        return statements

    # Statements

    def declaration(self) -> Optional[Stmt]:
        try:
            if self.match(TokenKind.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError:
            self.synchronize()
            return None

    def var_declaration(self) -> Stmt:
        name = self.consume(TokenKind.IDENTIFIER, 'Expect variable name.')
        initializer: Optional[Expr] = None
        if self.match(TokenKind.EQUAL):
            initializer = self.expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after variable declaration.")
        return Var(name, initializer)

    def statement(self) -> Stmt:
        if self.match(TokenKind.PRINT):
            return self.print_statement()
        if self.match(TokenKind.LEFT_BRACE):
            return Block(tuple(self.block()))
        return self.expression_statement()

    def print_statement(self) -> Stmt:
        value = self.expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after value.")
        return Print(value)

    def expression_statement(self) -> Stmt:
        expr = self.expression()
        self.consume(TokenKind.SEMICOLON, "Expect ';' after expression.")
        return Expression(expr)

    def block(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.check(TokenKind.RIGHT_BRACE) and not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        self.consume(TokenKind.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    # Expressions, lowest precedence first

    def expression(self) -> Expr:
        return self.assignment()

    def assignment(self) -> Expr:
        expr = self.comma()

        if self.match(TokenKind.EQUAL):
            equals = self.previous()
            value = self.assignment()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            # Reported without raising; the parse continues from here.
            self.error(equals, 'Invalid assignment target.')

        return expr

    def comma(self) -> Expr:
        return self.binary_level(self.equality, TokenKind.COMMA)

    def equality(self) -> Expr:
        return self.binary_level(self.comparison, TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL)

    def comparison(self) -> Expr:
        return self.binary_level(
            self.addition,
            TokenKind.GREATER, TokenKind.GREATER_EQUAL,
            TokenKind.LESS, TokenKind.LESS_EQUAL,
        )

    def addition(self) -> Expr:
        return self.binary_level(self.multiplication, TokenKind.MINUS, TokenKind.PLUS)

    def multiplication(self) -> Expr:
        return self.binary_level(self.unary, TokenKind.SLASH, TokenKind.STAR)

    def binary_level(self, operand: Callable[[], Expr], *kinds: TokenKind) -> Expr:
        expr = operand()
        while self.match(*kinds):
            operator = self.previous()
            right = operand()
            expr = Binary(expr, operator, right)
        return expr

    def unary(self) -> Expr:
        if self.match(TokenKind.BANG, TokenKind.MINUS):
            operator = self.previous()
            right = self.unary()
            return Unary(operator, right)
        return self.primary()

    def primary(self) -> Expr:
        if self.match(TokenKind.FALSE):
            return Literal(False)
        if self.match(TokenKind.TRUE):
            return Literal(True)
        if self.match(TokenKind.NIL):
            return Literal(None)
        if self.match(TokenKind.NUMBER, TokenKind.STRING):
            return Literal(self.previous().literal)
        if self.match(TokenKind.IDENTIFIER):
            return Variable(self.previous())
        if self.match(TokenKind.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenKind.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        raise self.error(self.peek(), 'Expect expression.')

    # Token helpers

    def consume(self, kind: TokenKind, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        self.reporter.token_error(token, message)
        return ParseError(message)

    def synchronize(self):
        self.advance()
        while not self.is_at_end():
            if self.previous().kind == TokenKind.SEMICOLON:
                return
            if self.peek().kind in STATEMENT_STARTS:
                return
            self.advance()

    def match(self, *kinds: TokenKind) -> bool:
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.peek().kind == kind

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().kind == TokenKind.EOF

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]


def parse_program(source: str, reporter: Optional[ErrorReporter] = None) -> List[Stmt]:
    """Scan and parse Lox source code into a list of statements.

    Syntax errors do not raise; they are recorded on `reporter`, and a
    caller must check `reporter.had_error` before running the result.
    """
    if reporter is None:
        reporter = ErrorReporter()
    tokens = Scanner(source, reporter).scan_tokens()
    return Parser(tokens, reporter).parse()
