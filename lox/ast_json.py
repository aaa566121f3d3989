"""JSON serialization/deserialization for the Lox AST.

This module converts between Lox AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. It supports a full
round-trip for all node types and for `Token`.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import (
    Assign,
    Binary,
    Block,
    Expression,
    Grouping,
    Literal,
    Print,
    Stmt,
    Unary,
    Var,
    Variable,
)
from .tokens import Token, TokenKind


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"kind": t.kind.name, "lexeme": t.lexeme, "literal": t.literal, "line": t.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    try:
        kind = TokenKind[o["kind"]]
    except KeyError:
        raise ValueError(f"Unknown token kind: {o.get('kind')!r}")
    literal = o.get("literal")
    if kind == TokenKind.NUMBER and literal is not None:
        literal = float(literal)
    return Token(kind, o["lexeme"], literal, int(o["line"]))


def program_to_obj(statements: List[Stmt]) -> Dict[str, Any]:
    return {"type": "Program", "body": [ast_to_obj(s) for s in statements]}


def program_from_obj(obj: Any) -> List[Stmt]:
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise ValueError("Invalid AST object: expected a Program")
    return [ast_from_obj(s) for s in obj["body"]]


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    # Statements
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, Expression):
        return {"type": "Expression", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Print):
        return {"type": "Print", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Var):
        return {"type": "Var", "name": token_to_obj(node.name), "initializer": ast_to_obj(node.initializer)}

    # Expressions
    if isinstance(node, Assign):
        return {"type": "Assign", "name": token_to_obj(node.name), "value": ast_to_obj(node.value)}
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "left": ast_to_obj(node.left),
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Grouping):
        return {"type": "Grouping", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": token_to_obj(node.operator), "right": ast_to_obj(node.right)}
    if isinstance(node, Variable):
        return {"type": "Variable", "name": token_to_obj(node.name)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Block":
        return Block(tuple(ast_from_obj(s) for s in obj["statements"]))
    if t == "Expression":
        return Expression(ast_from_obj(obj["expression"]))
    if t == "Print":
        return Print(ast_from_obj(obj["expression"]))
    if t == "Var":
        return Var(token_from_obj(obj["name"]), ast_from_obj(obj.get("initializer")))
    if t == "Assign":
        return Assign(token_from_obj(obj["name"]), ast_from_obj(obj["value"]))
    if t == "Binary":
        return Binary(
            ast_from_obj(obj["left"]),
            token_from_obj(obj["operator"]),
            ast_from_obj(obj["right"]),
        )
    if t == "Grouping":
        return Grouping(ast_from_obj(obj["expression"]))
    if t == "Literal":
        return Literal(literal_from_obj(obj.get("value")))
    if t == "Unary":
        return Unary(token_from_obj(obj["operator"]), ast_from_obj(obj["right"]))
    if t == "Variable":
        return Variable(token_from_obj(obj["name"]))

    raise ValueError(f"Unknown AST node type: {t}")


def literal_from_obj(value: Any) -> Any:
    # Lox numbers are always floats, even when written as 3 in the JSON
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if value is None or isinstance(value, (bool, float, str)):
        return value
    raise ValueError(f"Invalid literal value: {value!r}")
