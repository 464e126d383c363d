"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox [-v|-vv|-vvv|-vvvv] [script]
    python -m lox [-v...] --emit-ast <script>
    python -m lox [-v...] --ast <ast_json_file>
    python -m lox --print-ast <script>

Options:
  -v            Increase debug verbosity (can be repeated)
  --debug-file  Where debug output goes (default: debug.txt)
  --emit-ast    Parse the given script and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file
  --print-ast   Print each statement of the script in parenthesized form

Without a script the interpreter starts an interactive prompt. A script
run exits with 65 after a syntax error, 70 after a runtime error and 0
otherwise.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import program_to_obj, program_from_obj
from .ast_printer import print_stmt
from .runner import Lox, EX_DATAERR


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='lox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', default='debug.txt', help='file receiving debug output')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='SCRIPT', help='emit AST JSON for the given script')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    group.add_argument('--print-ast', metavar='SCRIPT', help='print the parsed statements of the given script')
    parser.add_argument('script', nargs='?', help='Lox script to execute')
    args = parser.parse_args(argv)

    lox = Lox(debug_level=args.v, debug_file=args.debug_file)
    try:
        return dispatch(args, lox)
    finally:
        lox.debug.close()


def dispatch(args, lox: Lox) -> int:
    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        statements = lox.parse(read_source(program_file))
        if lox.diagnostics.had_error:
            return EX_DATAERR
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return 0

    if args.print_ast:
        statements = lox.parse(read_source(Path(args.print_ast)))
        for stmt in statements:
            print(print_stmt(stmt))
        return lox.exit_code()

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        if not ast_path.exists():
            print(f"Error: file {ast_path} not found", file=sys.stderr)
            return 1
        with open(ast_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        try:
            statements = program_from_obj(data)
        except (KeyError, TypeError, ValueError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            return 1
        return lox.execute(statements)

    # Default: execute a script, or start the prompt
    if args.script:
        if not Path(args.script).exists():
            print(f"Error: file {args.script} not found", file=sys.stderr)
            return 1
        return lox.run_file(args.script)
    lox.run_prompt()
    return 0


if __name__ == '__main__':
    sys.exit(main())
