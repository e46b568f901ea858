from typing import Optional


class BellaError(Exception):
    """Exception type used to propagate Bella runtime errors.

    Every runtime failure aborts the current run. `name` carries the
    offending identifier or operator token when there is one.
    """
    kind = 'BellaError'

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(f"{self.kind}: {message}")
        self.message = message
        self.name = name


class DuplicateDeclaration(BellaError):
    kind = 'DuplicateDeclaration'


class UndeclaredIdentifier(BellaError):
    kind = 'UndeclaredIdentifier'


class TypeMismatch(BellaError):
    kind = 'TypeMismatch'


class ArityMismatch(BellaError):
    kind = 'ArityMismatch'


class NotCallable(BellaError):
    kind = 'NotCallable'


class IndexOutOfRange(BellaError):
    kind = 'IndexOutOfRange'


class UnknownOperator(BellaError):
    kind = 'UnknownOperator'


class ParseError(Exception):
    """Raised by the parser when source text does not match the grammar."""
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column
