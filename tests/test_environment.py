import pytest

from bella.ast import Identifier
from bella.environment import Environment
from bella.errors import DuplicateDeclaration, NotCallable, TypeMismatch, UndeclaredIdentifier
from bella.types import FunctionVal


def test_declare_and_get():
    env = Environment()
    env.declare_variable('x', 1.0)
    assert env.get('x') == 1.0
    assert env.is_declared('x')
    assert not env.is_declared('y')


def test_variables_and_functions_share_names():
    env = Environment()
    env.declare_function('f', ('a',), Identifier('a'))
    with pytest.raises(DuplicateDeclaration):
        env.declare_variable('f', 1.0)
    with pytest.raises(DuplicateDeclaration):
        env.declare_function('f', (), Identifier('a'))


def test_repeated_parameter_is_rejected():
    env = Environment()
    with pytest.raises(DuplicateDeclaration) as excinfo:
        env.declare_function('f', ('a', 'a'), Identifier('a'))
    assert excinfo.value.name == 'a'
    assert not env.is_declared('f')


def test_assign():
    env = Environment()
    with pytest.raises(UndeclaredIdentifier):
        env.assign('x', 2.0)
    env.declare_variable('x', 1.0)
    env.assign('x', 2.0)
    assert env.get('x') == 2.0
    env.declare_function('f', (), Identifier('x'))
    with pytest.raises(TypeMismatch):
        env.assign('f', 2.0)


def test_get_function():
    env = Environment()
    func = env.declare_function('f', ('a', 'b'), Identifier('a'))
    assert env.get_function('f') is func
    assert func == FunctionVal('f', ('a', 'b'), Identifier('a'))
    assert func.arity == 2
    env.declare_variable('x', 1.0)
    with pytest.raises(NotCallable):
        env.get_function('x')
    with pytest.raises(NotCallable):
        env.get_function('missing')
    with pytest.raises(TypeMismatch):
        env.get('f')


def test_call_frame_shadows_globals():
    env = Environment()
    env.declare_variable('n', 100.0)
    func = env.declare_function('f', ('n',), Identifier('n'))
    with env.call_frame(func, [1.0]):
        assert env.get('n') == 1.0
        with env.call_frame(func, [2.0]):
            assert env.get('n') == 2.0
        assert env.get('n') == 1.0
    assert env.get('n') == 100.0
    assert env.frames == []


def test_only_top_frame_is_visible():
    env = Environment()
    outer = env.declare_function('outer', ('a',), Identifier('a'))
    inner = env.declare_function('inner', ('b',), Identifier('b'))
    with env.call_frame(outer, [1.0]):
        with env.call_frame(inner, [2.0]):
            with pytest.raises(UndeclaredIdentifier):
                env.get('a')


def test_call_frame_popped_on_error():
    env = Environment()
    func = env.declare_function('f', ('n',), Identifier('n'))
    with pytest.raises(RuntimeError):
        with env.call_frame(func, [1.0]):
            raise RuntimeError('boom')
    assert env.frames == []
