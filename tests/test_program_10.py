from pathlib import Path

from bella.interpreter import Interpreter
from bella.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_10_multiplication_table(capsys):
    with open(EXAMPLES / 'program_10.bella', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    expected = [
        '[1, 1, 1]', '[1, 2, 2]', '[1, 3, 3]',
        '[2, 1, 2]', '[2, 2, 4]', '[2, 3, 6]',
        '[3, 1, 3]', '[3, 2, 6]', '[3, 3, 9]',
    ]
    assert out_lines == expected
