from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Sequence

from bella.ast import Expression
from bella.errors import DuplicateDeclaration, NotCallable, TypeMismatch, UndeclaredIdentifier
from bella.types import FunctionVal

Frame = Dict[str, Any]


class Environment:
    """The global namespace of one run plus its stack of call frames.

    Variables and functions share `values`. Each outstanding call owns one
    frame on `frames`; lookups only ever see the top frame and the globals.
    """
    def __init__(self):
        self.values: Dict[str, Any] = {}
        self.frames: List[Frame] = []

    @property
    def current_frame(self) -> Frame:
        return self.frames[-1] if self.frames else {}

    def is_declared(self, name: str) -> bool:
        return name in self.values

    def declare_variable(self, name: str, value: Any):
        if name in self.values:
            raise DuplicateDeclaration(f'{name} already declared', name)
        self.values[name] = value

    def declare_function(self, name: str, params: Sequence[str], body: Expression) -> FunctionVal:
        if name in self.values:
            raise DuplicateDeclaration(f'{name} already declared', name)
        seen = set()
        for param in params:
            if param in seen:
                raise DuplicateDeclaration(f'parameter {param} repeated in function {name}', param)
            seen.add(param)
        func = FunctionVal(name, tuple(params), body)
        self.values[name] = func
        return func

    def assign(self, name: str, value: Any):
        if name not in self.values:
            raise UndeclaredIdentifier(f'variable {name} not declared', name)
        if isinstance(self.values[name], FunctionVal):
            raise TypeMismatch(f'cannot assign to function {name}', name)
        self.values[name] = value

    def get(self, name: str) -> Any:
        frame = self.current_frame
        if name in frame:
            return frame[name]
        if name not in self.values:
            raise UndeclaredIdentifier(f'variable {name} not declared', name)
        value = self.values[name]
        if isinstance(value, FunctionVal):
            raise TypeMismatch(f'function {name} cannot be used as a value', name)
        return value

    def get_function(self, name: str) -> FunctionVal:
        func = self.values.get(name)
        if not isinstance(func, FunctionVal):
            raise NotCallable(f'{name} is not a function', name)
        return func

    @contextmanager
    def call_frame(self, func: FunctionVal, args: Sequence[Any]) -> Iterator[Frame]:
        """Bind `func`'s parameters to `args` for the duration of the block."""
        frame: Frame = dict(zip(func.params, args))
        self.frames.append(frame)
        try:
            yield frame
        finally:
            self.frames.pop()
