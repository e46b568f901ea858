"""CLI entry point for the Bella interpreter.

Usage:
    python -m bella [-v|-vv|-vvv] [--recursion-limit N] <program_file>
    python -m bella [-v...] --emit-ast <program_file>
    python -m bella [-v...] --ast <ast_json_file>

Options:
  -v                 Increase debug verbosity (can be repeated)
  --recursion-limit  Raise the host recursion limit for deeply recursive programs
  --emit-ast         Parse the given .bella file and emit an AST JSON file
  --ast              Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .ast import Program
from .ast_json import ast_to_obj, ast_from_obj
from .errors import BellaError, ParseError
from .interpreter import Interpreter
from .parser import parse_program


def read_file(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def parse_file(path: Path) -> Program:
    try:
        return parse_program(read_file(path))
    except ParseError as e:
        print(f"Syntax error: {e}", file=sys.stderr)
        sys.exit(1)


def execute(program: Program, debug_level: int):
    interpreter = Interpreter(debug_level=debug_level)
    try:
        interpreter.run(program)
    except BellaError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
    except RecursionError:
        print("Fatal error: maximum recursion depth exceeded", file=sys.stderr)
        sys.exit(2)


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Bella language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--recursion-limit', type=int, metavar='N', help='set the host recursion limit')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='BELLA_FILE', help='emit AST JSON for the given .bella file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Bella program file (.bella) to execute')
    args = parser.parse_args(argv)

    if args.recursion_limit:
        sys.setrecursionlimit(args.recursion_limit)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        obj = ast_to_obj(parse_file(program_file))
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(obj, out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        source = read_file(Path(args.ast))
        try:
            program = ast_from_obj(json.loads(source))
        except (TypeError, ValueError, KeyError) as e:
            print(f"Error: invalid AST file: {e}", file=sys.stderr)
            sys.exit(1)
        execute(program, args.v)
        return

    # Default: execute source file
    if not args.program:
        parser.error('missing program file; or use --emit-ast/--ast')
    execute(parse_file(Path(args.program)), args.v)


if __name__ == '__main__':
    main()
