from pathlib import Path

from bella.interpreter import Interpreter
from bella.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_nested_arrays(capsys):
    with open(EXAMPLES / 'program_6.bella', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    env = interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['[2, 3]', '[1, [2, 3], true]', '5', '[]']
    # Subscripting a nested array shares it rather than copying it
    assert env.values['b'] is env.values['a'].items[1]
