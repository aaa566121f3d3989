"""Check the hand-written parser against a grammar-driven one.

The expression grammar is written out a second time as a Lark LALR
grammar. Both parsers must group every sample expression the same way,
compared through the canonical parenthesized form.
"""

import pytest
from lark import Lark, Transformer

from lox.ast_printer import AstPrinter
from lox.errors import ErrorReporter
from lox.parser import Parser
from lox.scanner import scan
from lox.types import stringify

LOX_EXPRESSION_GRAMMAR = r"""
    ?start: expression

    ?expression: assignment
    ?assignment: NAME EQUAL assignment -> assign
               | comma
    ?comma: comma COMMA equality -> binary
          | equality
    ?equality: equality (BANG_EQUAL | EQUAL_EQUAL) comparison -> binary
             | comparison
    ?comparison: comparison (GREATER | GREATER_EQUAL | LESS | LESS_EQUAL) addition -> binary
               | addition
    ?addition: addition (PLUS | MINUS) multiplication -> binary
             | multiplication
    ?multiplication: multiplication (STAR | SLASH) unary -> binary
                   | unary
    ?unary: (BANG | MINUS) unary -> unary
          | primary
    ?primary: NUMBER -> number
            | STRING -> string
            | NAME -> variable
            | "(" expression ")" -> grouping

    EQUAL: "="
    EQUAL_EQUAL: "=="
    BANG: "!"
    BANG_EQUAL: "!="
    GREATER: ">"
    GREATER_EQUAL: ">="
    LESS: "<"
    LESS_EQUAL: "<="
    PLUS: "+"
    MINUS: "-"
    STAR: "*"
    SLASH: "/"
    COMMA: ","
    NUMBER: /[0-9]+(\.[0-9]+)?/
    STRING: /"[^"]*"/
    NAME: /[A-Za-z_][A-Za-z0-9_]*/

    %import common.WS
    %ignore WS
"""


class ParenthesizedForm(Transformer):
    """Render a Lark parse tree in the same form as `AstPrinter`."""

    def assign(self, items):
        name, _, value = items
        return f"(= {name} {value})"

    def binary(self, items):
        left, op, right = items
        return f"({op} {left} {right})"

    def unary(self, items):
        op, right = items
        return f"({op} {right})"

    def grouping(self, items):
        return f"(group {items[0]})"

    def number(self, items):
        return stringify(float(items[0]))

    def string(self, items):
        return str(items[0])[1:-1]

    def variable(self, items):
        return str(items[0])


@pytest.fixture(scope='module')
def reference_parser():
    return Lark(LOX_EXPRESSION_GRAMMAR, parser='lalr')


def recursive_descent(source):
    reporter = ErrorReporter()
    expr = Parser(scan(source, reporter), reporter).expression()
    assert not reporter.had_error
    return AstPrinter().print(expr)


@pytest.mark.parametrize('source', [
    '1',
    'x',
    '"some text"',
    '1 + 2 * 3 - 4 / 5',
    '(1 + 2) * (3 - 4)',
    '1 - 2 - 3 - 4',
    '-a * -b',
    '!!ready == !done',
    'a < b == c >= d',
    'a != b != c',
    'a = b = c = 3',
    'a = 1, 2, 3',
    '(a = 1), (b = 2)',
    '-(x + 1.25) <= y * 2, "z"',
    '((((1))))',
])
def test_parsers_agree(reference_parser, source):
    tree = reference_parser.parse(source)
    assert ParenthesizedForm().transform(tree) == recursive_descent(source)
