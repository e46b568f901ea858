"""Tree-walking interpreter for the Bella language.

The interpreter evaluates a `Program` AST directly: statements are
executed for their effects on the namespace and the output sink, and
expressions are reduced to runtime values. Each call to `run` starts from
a fresh `Environment`, so bindings never leak from one program into the
next.
"""

from __future__ import annotations

import math
from typing import Any, Callable, List, Optional

from .ast import (
    Program, Block, VariableDeclaration, FunctionDeclaration, Assignment,
    PrintStatement, WhileStatement, Numeral, BooleanLiteral, Identifier,
    UnaryExpression, BinaryExpression, CallExpression, ConditionalExpression,
    ArrayLiteral, SubscriptExpression, Node,
)
from .environment import Environment
from .errors import ArityMismatch, IndexOutOfRange, TypeMismatch, UnknownOperator
from .types import ArrayVal, FunctionVal, is_boolean, is_number, to_string, type_name

ARITHMETIC_OPS = ('+', '-', '*', '/', '%')
COMPARISON_OPS = ('<', '>', '<=', '>=')
EQUALITY_OPS = ('==', '!=')
LOGICAL_OPS = ('&&', '||')


class Interpreter:
    """Core interpreter that executes a Bella AST."""
    def __init__(self, output: Optional[Callable[[str], Any]] = None,
                 debug_level: int = 0, debug_file: Optional[str] = 'debug.txt'):
        self.output = output if output is not None else print
        self.global_env: Optional[Environment] = None
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp = None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    # Public API
    def run(self, program: Program) -> Environment:
        env = Environment()
        self.global_env = env
        if self.debug_level > 0 and self.debug_file:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        try:
            self.debug("run start")
            self.execute_block(program.block, env)
            self.debug("run finished")
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None
        return env

    def execute_block(self, block: Block, env: Environment):
        for stmt in block.statements:
            self.execute(stmt, env)

    def execute(self, node: Node, env: Environment):
        if isinstance(node, VariableDeclaration):
            value = self.evaluate(node.expr, env)
            env.declare_variable(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"declare {node.name}: {type_name(value)} = {to_string(value)}")
            return
        if isinstance(node, FunctionDeclaration):
            env.declare_function(node.name, node.params, node.body)
            if self.debug_level >= 2:
                self.debug(f"define function {node.name}({', '.join(node.params)})")
            return
        if isinstance(node, Assignment):
            value = self.evaluate(node.expr, env)
            env.assign(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.name} = {to_string(value)}")
            return
        if isinstance(node, PrintStatement):
            self.output(to_string(self.evaluate(node.expr, env)))
            return
        if isinstance(node, WhileStatement):
            while True:
                test = self.evaluate(node.test, env)
                if not is_boolean(test):
                    raise TypeMismatch(f'while test must be Boolean, got {type_name(test)}')
                if self.debug_level >= 3:
                    self.debug(f"while test -> {to_string(test)}")
                if not test:
                    break
                self.execute_block(node.body, env)
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node).__name__}")

    def evaluate(self, node: Node, env: Environment) -> Any:
        if isinstance(node, Numeral):
            return float(node.value)
        if isinstance(node, BooleanLiteral):
            return bool(node.value)
        if isinstance(node, Identifier):
            return env.get(node.name)
        if isinstance(node, UnaryExpression):
            return self.apply_unary_op(node.op, self.evaluate(node.operand, env))
        if isinstance(node, BinaryExpression):
            left = self.evaluate(node.left, env)
            # Short-circuit for && and ||
            if node.op in LOGICAL_OPS:
                self.require_boolean(node.op, left)
                if node.op == '&&' and not left:
                    return False
                if node.op == '||' and left:
                    return True
                right = self.evaluate(node.right, env)
                self.require_boolean(node.op, right)
                return right
            right = self.evaluate(node.right, env)
            return self.apply_binary_op(node.op, left, right)
        if isinstance(node, ConditionalExpression):
            test = self.evaluate(node.test, env)
            if not is_boolean(test):
                raise TypeMismatch(f'conditional test must be Boolean, got {type_name(test)}')
            if self.debug_level >= 3:
                self.debug(f"conditional test -> {to_string(test)}")
            return self.evaluate(node.consequent if test else node.alternate, env)
        if isinstance(node, ArrayLiteral):
            return ArrayVal([self.evaluate(el, env) for el in node.elements])
        if isinstance(node, SubscriptExpression):
            target = self.evaluate(node.array, env)
            index = self.evaluate(node.index, env)
            if not isinstance(target, ArrayVal):
                raise TypeMismatch(f'cannot index type {type_name(target)}')
            if not is_number(index) or not index.is_integer():
                raise TypeMismatch(f'array index must be an integral Number, got {to_string(index)}')
            if index < 0 or index >= len(target.items):
                raise IndexOutOfRange(f'array index {to_string(index)} out of range for length {len(target.items)}')
            return target.items[int(index)]
        if isinstance(node, CallExpression):
            func = env.get_function(node.callee)
            # Arguments are evaluated in the caller's scope, before the new frame exists
            args = [self.evaluate(arg, env) for arg in node.args]
            return self.call_function(func, args, env)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node).__name__}")

    def call_function(self, func: FunctionVal, args: List[Any], env: Environment) -> Any:
        if len(args) != func.arity:
            raise ArityMismatch(f"{func.name} expects {func.arity} arguments, got {len(args)}", func.name)
        for i, arg in enumerate(args):
            if not is_number(arg):
                raise TypeMismatch(f"argument {i + 1} of {func.name} must be a Number, got {type_name(arg)}", func.name)
        if self.debug_level >= 3:
            self.debug(f"call {func.name}({', '.join(to_string(a) for a in args)})")
        with env.call_frame(func, args):
            result = self.evaluate(func.body, env)
        if self.debug_level >= 3:
            self.debug(f"return {func.name} -> {to_string(result)}")
        return result

    def require_boolean(self, op: str, value: Any):
        if not is_boolean(value):
            raise TypeMismatch(f'operator {op} expects Boolean operands, got {type_name(value)}', op)

    def require_numbers(self, op: str, *values: Any):
        for value in values:
            if not is_number(value):
                raise TypeMismatch(f'operator {op} expects Number operands, got {type_name(value)}', op)

    def apply_unary_op(self, op: str, operand: Any) -> Any:
        if op == '-':
            self.require_numbers(op, operand)
            return -operand
        if op == '+':
            self.require_numbers(op, operand)
            return operand
        if op == '!':
            self.require_boolean(op, operand)
            return not operand
        raise UnknownOperator(f'unknown unary operator {op}', op)

    def apply_binary_op(self, op: str, a: Any, b: Any) -> Any:
        if op in ARITHMETIC_OPS:
            self.require_numbers(op, a, b)
            if op == '+':
                return a + b
            if op == '-':
                return a - b
            if op == '*':
                return a * b
            if op == '/':
                return divide(a, b)
            return remainder(a, b)
        if op in COMPARISON_OPS:
            self.require_numbers(op, a, b)
            if op == '<': return a < b
            if op == '>': return a > b
            if op == '<=': return a <= b
            return a >= b
        if op in EQUALITY_OPS:
            eq = self.equal_values(op, a, b)
            return eq if op == '==' else not eq
        raise UnknownOperator(f'unknown binary operator {op}', op)

    def equal_values(self, op: str, a: Any, b: Any) -> bool:
        # Only Number/Number and Boolean/Boolean are comparable
        if is_number(a) and is_number(b):
            return a == b
        if is_boolean(a) and is_boolean(b):
            return a == b
        raise TypeMismatch(f'cannot compare {type_name(a)} and {type_name(b)} with {op}', op)


def divide(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor gives a signed infinity or NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def remainder(a: float, b: float) -> float:
    """Truncated remainder carrying the sign of the dividend."""
    if b == 0.0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def interpret(program: Program, output: Optional[Callable[[str], Any]] = None) -> Environment:
    """Run `program` on a fresh interpreter and return the final global environment."""
    return Interpreter(output=output).run(program)
