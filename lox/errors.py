import sys
from typing import List, Optional, TextIO

from lox.tokens import Token, TokenKind


class ParseError(Exception):
    """Internal exception used to unwind the parser to a statement boundary."""


class LoxRuntimeError(Exception):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class ErrorReporter:
    """Collects diagnostics for one or more runs and tracks the error flags.

    Diagnostic lines are written to `stream` (standard error when not
    given) as they are reported and kept in `diagnostics` so callers can
    inspect them after a run.
    """
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.diagnostics: List[str] = []
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line: int, message: str):
        self.report(line, '', message)

    def token_error(self, token: Token, message: str):
        if token.kind == TokenKind.EOF:
            self.report(token.line, ' at end', message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str):
        self.emit(f"[line {line}] Error{where}: {message}")
        self.had_error = True

    def runtime_error(self, error: LoxRuntimeError):
        self.emit(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def stack_overflow(self, line: Optional[int]):
        """Report a program nested deeper than the interpreter can evaluate."""
        if line is None:
            self.emit('Stack overflow.')
        else:
            self.emit(f"Stack overflow.\n[line {line}]")
        self.had_runtime_error = True

    def emit(self, text: str):
        self.diagnostics.append(text)
        print(text, file=self.stream if self.stream is not None else sys.stderr)

    def reset(self):
        # The interactive prompt keeps going after a bad line.
        self.diagnostics = []
        self.had_error = False
        self.had_runtime_error = False
