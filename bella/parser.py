"""Parser for the Bella language.

The source text is fed into a Lark LALR parser configured with the
grammar below, and the resulting parse tree is transformed into the
frozen AST defined in `bella.ast` by `ASTTransformer`.

Statements need no terminator: newlines are plain whitespace and `;` is
an optional separator. Calls are written `name(arg, ...)`.

The `parse_program` function is the public entry point and returns a
`Program` AST node representing the entire source file.
"""

from __future__ import annotations

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from .ast import (
    Program, Block, VariableDeclaration, FunctionDeclaration, Assignment,
    PrintStatement, WhileStatement, Numeral, BooleanLiteral, Identifier,
    UnaryExpression, BinaryExpression, CallExpression, ConditionalExpression,
    ArrayLiteral, SubscriptExpression,
)
from .errors import ParseError


BELLA_GRAMMAR = r"""
    program: _item*
    _item: statement | _SEMI

    // Statements
    ?statement: let_stmt
              | func_stmt
              | assign_stmt
              | print_stmt
              | while_stmt

    let_stmt: "let" IDENT "=" expression
    func_stmt: "func" IDENT params "=" expression
    params: IDENT*
    assign_stmt: IDENT "=" expression
    print_stmt: "print" expression
    while_stmt: "while" expression block

    block: "{" _item* "}"

    // Expressions with precedence, lowest first
    ?expression: conditional
    ?conditional: logic_or
                | logic_or "?" expression ":" conditional -> ternary
    ?logic_or: logic_and
             | logic_or OR logic_and -> binary
    ?logic_and: equality
              | logic_and AND equality -> binary
    ?equality: compare
             | equality (EQ | NE) compare -> binary
    ?compare: term
            | compare (LT | GT | LE | GE) term -> binary
    ?term: factor
         | term (PLUS | MINUS) factor -> binary
    ?factor: unary
           | factor (STAR | SLASH | PERCENT) unary -> binary
    ?unary: postfix
          | (MINUS | PLUS | BANG) unary -> unary_op
    ?postfix: primary
            | postfix "[" expression "]" -> subscript
    ?primary: NUMBER -> numeral
            | "true" -> true
            | "false" -> false
            | IDENT -> identifier
            | IDENT "(" [arg_list] ")" -> call
            | "[" [arg_list] "]" -> array
            | "(" expression ")"
    arg_list: expression ("," expression)*

    // Tokens
    OR: "||"
    AND: "&&"
    EQ: "=="
    NE: "!="
    LE: "<="
    GE: ">="
    LT: "<"
    GT: ">"
    PLUS: "+"
    MINUS: "-"
    STAR: "*"
    SLASH: "/"
    PERCENT: "%"
    BANG: "!"
    _SEMI: ";"

    IDENT: /[A-Za-z_][A-Za-z0-9_]*/
    NUMBER: /\d+(\.\d+)?([eE][+-]?\d+)?/

    %import common.WS
    %ignore WS

    // Comments
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT
"""


BELLA_PARSER = Lark(
    BELLA_GRAMMAR,
    start='program',
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=False,
)


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def program(self, items):
        return Program(Block(tuple(items)))

    def block(self, items):
        return Block(tuple(items))

    # Statements
    def let_stmt(self, items):
        return VariableDeclaration(str(items[0]), items[1])

    def func_stmt(self, items):
        name, params, body = items
        return FunctionDeclaration(str(name), params, body)

    def params(self, items):
        return tuple(str(item) for item in items)

    def assign_stmt(self, items):
        return Assignment(str(items[0]), items[1])

    def print_stmt(self, items):
        return PrintStatement(items[0])

    def while_stmt(self, items):
        return WhileStatement(items[0], items[1])

    # Expressions
    def ternary(self, items):
        test, consequent, alternate = items
        return ConditionalExpression(test, consequent, alternate)

    def binary(self, items):
        left, op, right = items
        return BinaryExpression(str(op), left, right)

    def unary_op(self, items):
        op, operand = items
        return UnaryExpression(str(op), operand)

    def subscript(self, items):
        return SubscriptExpression(items[0], items[1])

    def numeral(self, items):
        return Numeral(float(items[0]))

    def true(self, items):
        return BooleanLiteral(True)

    def false(self, items):
        return BooleanLiteral(False)

    def identifier(self, items):
        return Identifier(str(items[0]))

    def call(self, items):
        args = items[1] if len(items) > 1 else ()
        return CallExpression(str(items[0]), tuple(args))

    def array(self, items):
        elements = items[0] if items else ()
        return ArrayLiteral(tuple(elements))

    def arg_list(self, items):
        return list(items)


def parse_program(source: str) -> Program:
    """Parse Bella source code into an AST Program.

    Syntax errors are raised as `ParseError` with the offending position.
    """
    try:
        tree = BELLA_PARSER.parse(source)
    except UnexpectedInput as e:
        raise ParseError(f"syntax error at {e.line}:{e.column}: {e}", e.line, e.column) from e
    return ASTTransformer().transform(tree)
