from typing import Any, Dict, Optional

from lox.errors import LoxRuntimeError
from lox.tokens import Token


class Environment:
    """Represents a scope mapping variable names to values, chained to its enclosing scope."""
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, Any] = {}

    @property
    def depth(self) -> int:
        # Number of scopes between this one and the global scope.
        env, depth = self.enclosing, 0
        while env is not None:
            env, depth = env.enclosing, depth + 1
        return depth

    def define(self, name: str, value: Any):
        # Redefinition in the same scope replaces the old binding.
        self.values[name] = value

    def get(self, name: Token) -> Any:
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing is not None:
            return self.enclosing.get(name)
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any):
        # Assign where the name is declared: this scope, otherwise bubble to the enclosing one
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
            return
        if self.enclosing is not None:
            self.enclosing.assign(name, value)
            return
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")
