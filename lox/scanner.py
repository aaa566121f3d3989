"""Scanner for the Lox language.

The scanner makes a single left-to-right pass over the source text and
produces a list of tokens terminated by an EOF token. Lexical errors
(unexpected characters, unterminated strings) are reported through the
`ErrorReporter` and the offending input is skipped; scanning itself
never raises.
"""

from __future__ import annotations

from typing import Any, List, Optional

from .errors import ErrorReporter
from .tokens import KEYWORDS, Token, TokenKind


SINGLE_CHAR_TOKENS = {
    '(': TokenKind.LEFT_PAREN,
    ')': TokenKind.RIGHT_PAREN,
    '{': TokenKind.LEFT_BRACE,
    '}': TokenKind.RIGHT_BRACE,
    ',': TokenKind.COMMA,
    '.': TokenKind.DOT,
    '-': TokenKind.MINUS,
    '+': TokenKind.PLUS,
    ';': TokenKind.SEMICOLON,
    '*': TokenKind.STAR,
}

# Operators that become a different token when followed by '='.
EQUAL_SUFFIX_TOKENS = {
    '!': (TokenKind.BANG, TokenKind.BANG_EQUAL),
    '=': (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    '<': (TokenKind.LESS, TokenKind.LESS_EQUAL),
    '>': (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or c == '_'


def is_alphanumeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


class Scanner:
    def __init__(self, source: str, reporter: ErrorReporter):
        self.source = source
        self.reporter = reporter
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenKind.EOF, '', None, self.line))
        return self.tokens

    def scan_token(self):
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIX_TOKENS:
            plain, with_equal = EQUAL_SUFFIX_TOKENS[c]
            self.add_token(with_equal if self.match('=') else plain)
        elif c == '/':
            if self.match('/'):
                # A comment goes until the end of the line.
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenKind.SLASH)
        elif c in (' ', '\r', '\t'):
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self.string()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            self.reporter.error(self.line, 'Unexpected character.')

    def string(self):
        chars: List[str] = []
        while self.peek() != '"' and not self.is_at_end():
            ch = self.advance()
            if ch == '\\' and not self.is_at_end():
                ch = self.advance()
            if ch == '\n':
                self.line += 1
            chars.append(ch)

        if self.is_at_end():
            self.reporter.error(self.line, 'Unterminated string.')
            return

        # The closing quote.
        self.advance()
        self.add_token(TokenKind.STRING, ''.join(chars))

    def number(self):
        while is_digit(self.peek()):
            self.advance()

        # Look for a fractional part.
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()

        self.add_token(TokenKind.NUMBER, float(self.lexeme()))

    def identifier(self):
        while is_alphanumeric(self.peek()):
            self.advance()
        self.add_token(KEYWORDS.get(self.lexeme(), TokenKind.IDENTIFIER))

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        self.current += 1
        return self.source[self.current - 1]

    def add_token(self, kind: TokenKind, literal: Any = None):
        self.tokens.append(Token(kind, self.lexeme(), literal, self.line))

    def lexeme(self) -> str:
        return self.source[self.start:self.current]


def scan(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """Convert source code into a list of tokens ending with EOF."""
    if reporter is None:
        reporter = ErrorReporter()
    return Scanner(source, reporter).scan_tokens()
