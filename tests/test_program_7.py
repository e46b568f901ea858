from pathlib import Path

from bella.interpreter import Interpreter
from bella.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_7_short_circuit(capsys):
    with open(EXAMPLES / 'program_7.bella', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['false', 'true', '8', '1']
