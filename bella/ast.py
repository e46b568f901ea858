"""Abstract Syntax Tree (AST) definitions for the Bella language.

The AST classes defined in this module represent the syntactic structure
of parsed Bella programs. Nodes are frozen dataclasses and hold tuples
rather than lists, so a tree cannot change once the parser has built it.
The interpreter walks these nodes directly; they carry no behavior.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


# Expressions

@dataclass(frozen=True)
class Numeral(Node):
    value: float


@dataclass(frozen=True)
class BooleanLiteral(Node):
    value: bool


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class UnaryExpression(Node):
    op: str
    operand: 'Expression'


@dataclass(frozen=True)
class BinaryExpression(Node):
    op: str
    left: 'Expression'
    right: 'Expression'


@dataclass(frozen=True)
class CallExpression(Node):
    callee: str
    args: Tuple['Expression', ...] = ()


@dataclass(frozen=True)
class ConditionalExpression(Node):
    test: 'Expression'
    consequent: 'Expression'
    alternate: 'Expression'


@dataclass(frozen=True)
class ArrayLiteral(Node):
    elements: Tuple['Expression', ...] = ()


@dataclass(frozen=True)
class SubscriptExpression(Node):
    array: 'Expression'
    index: 'Expression'


Expression = Union[
    Numeral, BooleanLiteral, Identifier, UnaryExpression, BinaryExpression,
    CallExpression, ConditionalExpression, ArrayLiteral, SubscriptExpression,
]


# Statements

@dataclass(frozen=True)
class VariableDeclaration(Node):
    name: str
    expr: Expression


@dataclass(frozen=True)
class FunctionDeclaration(Node):
    name: str
    params: Tuple[str, ...]
    body: Expression


@dataclass(frozen=True)
class Assignment(Node):
    name: str
    expr: Expression


@dataclass(frozen=True)
class PrintStatement(Node):
    expr: Expression


@dataclass(frozen=True)
class Block(Node):
    statements: Tuple['Statement', ...] = ()


@dataclass(frozen=True)
class WhileStatement(Node):
    test: Expression
    body: Block


Statement = Union[
    VariableDeclaration, FunctionDeclaration, Assignment, PrintStatement, WhileStatement,
]


@dataclass(frozen=True)
class Program(Node):
    block: Block
