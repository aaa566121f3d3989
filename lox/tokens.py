"""Token definitions for the Lox scanner.

A token is the smallest lexical unit the parser works with. Tokens are
created once by the scanner and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict


class TokenKind(Enum):
    # Single-character tokens.
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens.
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals.
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords.
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


KEYWORDS: Dict[str, TokenKind] = {
    'and': TokenKind.AND,
    'class': TokenKind.CLASS,
    'else': TokenKind.ELSE,
    'false': TokenKind.FALSE,
    'for': TokenKind.FOR,
    'fun': TokenKind.FUN,
    'if': TokenKind.IF,
    'nil': TokenKind.NIL,
    'or': TokenKind.OR,
    'print': TokenKind.PRINT,
    'return': TokenKind.RETURN,
    'super': TokenKind.SUPER,
    'this': TokenKind.THIS,
    'true': TokenKind.TRUE,
    'var': TokenKind.VAR,
    'while': TokenKind.WHILE,
}


@dataclass(frozen=True)
class Token:
    """A scanned token.

    `literal` holds the decoded value for NUMBER (a float) and STRING
    (a str) tokens and is None for every other kind. `line` is the
    1-based source line, used for diagnostics.
    """
    kind: TokenKind
    lexeme: str
    literal: Any
    line: int

    def __str__(self) -> str:
        literal = 'null' if self.literal is None else self.literal
        return f"{self.kind.name} {self.lexeme} {literal}"
