from pathlib import Path

import pytest

from bella.errors import UndeclaredIdentifier
from bella.interpreter import Interpreter
from bella.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_8_fails_fast(capsys):
    """Output printed before the failure stays; nothing after it runs."""
    with open(EXAMPLES / 'program_8.bella', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    with pytest.raises(UndeclaredIdentifier) as excinfo:
        interp.run(ast)
    assert excinfo.value.name == 'y'
    out = capsys.readouterr().out.strip()
    assert out == '1'
