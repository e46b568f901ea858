from pathlib import Path

from bella.interpreter import Interpreter
from bella.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_while_loop(capsys):
    with open(EXAMPLES / 'program_3.bella', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    env = interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['0', '1', '2']
    assert env.values['i'] == 3.0
