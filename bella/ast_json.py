"""JSON serialization/deserialization for the Bella AST.

This module converts between Bella AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. It lets a tree built by
any external parser be handed to the interpreter as a JSON document.
Every node is encoded as ``{"type": <class name>, ...fields}``.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Program,
    Block,
    VariableDeclaration,
    FunctionDeclaration,
    Assignment,
    PrintStatement,
    WhileStatement,
    Numeral,
    BooleanLiteral,
    Identifier,
    UnaryExpression,
    BinaryExpression,
    CallExpression,
    ConditionalExpression,
    ArrayLiteral,
    SubscriptExpression,
)


def ast_to_obj(node: Any) -> Dict[str, Any]:
    if isinstance(node, Program):
        return {"type": "Program", "block": ast_to_obj(node.block)}
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}

    # Statements
    if isinstance(node, VariableDeclaration):
        return {"type": "VariableDeclaration", "name": node.name, "expr": ast_to_obj(node.expr)}
    if isinstance(node, FunctionDeclaration):
        return {
            "type": "FunctionDeclaration",
            "name": node.name,
            "params": list(node.params),
            "body": ast_to_obj(node.body),
        }
    if isinstance(node, Assignment):
        return {"type": "Assignment", "name": node.name, "expr": ast_to_obj(node.expr)}
    if isinstance(node, PrintStatement):
        return {"type": "PrintStatement", "expr": ast_to_obj(node.expr)}
    if isinstance(node, WhileStatement):
        return {"type": "WhileStatement", "test": ast_to_obj(node.test), "body": ast_to_obj(node.body)}

    # Expressions
    if isinstance(node, Numeral):
        return {"type": "Numeral", "value": node.value}
    if isinstance(node, BooleanLiteral):
        return {"type": "BooleanLiteral", "value": node.value}
    if isinstance(node, Identifier):
        return {"type": "Identifier", "name": node.name}
    if isinstance(node, UnaryExpression):
        return {"type": "UnaryExpression", "op": node.op, "operand": ast_to_obj(node.operand)}
    if isinstance(node, BinaryExpression):
        return {
            "type": "BinaryExpression",
            "op": node.op,
            "left": ast_to_obj(node.left),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, CallExpression):
        return {"type": "CallExpression", "callee": node.callee, "args": [ast_to_obj(a) for a in node.args]}
    if isinstance(node, ConditionalExpression):
        return {
            "type": "ConditionalExpression",
            "test": ast_to_obj(node.test),
            "consequent": ast_to_obj(node.consequent),
            "alternate": ast_to_obj(node.alternate),
        }
    if isinstance(node, ArrayLiteral):
        return {"type": "ArrayLiteral", "elements": [ast_to_obj(e) for e in node.elements]}
    if isinstance(node, SubscriptExpression):
        return {"type": "SubscriptExpression", "array": ast_to_obj(node.array), "index": ast_to_obj(node.index)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(block=ast_from_obj(obj["block"]))
    if t == "Block":
        return Block(statements=tuple(ast_from_obj(s) for s in obj["statements"]))
    if t == "VariableDeclaration":
        return VariableDeclaration(name=obj["name"], expr=ast_from_obj(obj["expr"]))
    if t == "FunctionDeclaration":
        return FunctionDeclaration(
            name=obj["name"],
            params=tuple(obj["params"]),
            body=ast_from_obj(obj["body"]),
        )
    if t == "Assignment":
        return Assignment(name=obj["name"], expr=ast_from_obj(obj["expr"]))
    if t == "PrintStatement":
        return PrintStatement(expr=ast_from_obj(obj["expr"]))
    if t == "WhileStatement":
        return WhileStatement(test=ast_from_obj(obj["test"]), body=ast_from_obj(obj["body"]))
    if t == "Numeral":
        return Numeral(value=float(obj["value"]))
    if t == "BooleanLiteral":
        return BooleanLiteral(value=bool(obj["value"]))
    if t == "Identifier":
        return Identifier(name=obj["name"])
    if t == "UnaryExpression":
        return UnaryExpression(op=obj["op"], operand=ast_from_obj(obj["operand"]))
    if t == "BinaryExpression":
        return BinaryExpression(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
    if t == "CallExpression":
        return CallExpression(callee=obj["callee"], args=tuple(ast_from_obj(a) for a in obj["args"]))
    if t == "ConditionalExpression":
        return ConditionalExpression(
            test=ast_from_obj(obj["test"]),
            consequent=ast_from_obj(obj["consequent"]),
            alternate=ast_from_obj(obj["alternate"]),
        )
    if t == "ArrayLiteral":
        return ArrayLiteral(elements=tuple(ast_from_obj(e) for e in obj["elements"]))
    if t == "SubscriptExpression":
        return SubscriptExpression(array=ast_from_obj(obj["array"]), index=ast_from_obj(obj["index"]))

    raise ValueError(f"Unknown AST node type: {t}")
