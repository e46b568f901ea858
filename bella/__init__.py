# Bella language package
# This package provides a parser and a tree-walking interpreter for Bella.
from .interpreter import Interpreter, interpret
from .parser import parse_program
from .errors import (
    BellaError, DuplicateDeclaration, UndeclaredIdentifier, TypeMismatch,
    ArityMismatch, NotCallable, IndexOutOfRange, UnknownOperator, ParseError,
)


def run_program(source: str, debug_level: int = 0):
    """Convenience function to parse and run a Bella program from source string."""
    return Interpreter(debug_level=debug_level).run(parse_program(source))


__all__ = [
    'run_program',
    'parse_program',
    'interpret',
    'Interpreter',
    'BellaError',
    'DuplicateDeclaration',
    'UndeclaredIdentifier',
    'TypeMismatch',
    'ArityMismatch',
    'NotCallable',
    'IndexOutOfRange',
    'UnknownOperator',
    'ParseError',
]
