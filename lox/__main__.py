"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox [-v|-vv|-vvv] [script]
    python -m lox [-v...] --tokens <script>
    python -m lox [-v...] --print-ast <script>
    python -m lox [-v...] --emit-ast <script>
    python -m lox [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --debug-file  Where debug output goes (default: debug.txt)
  --tokens      Print the tokens of the given script, one per line
  --print-ast   Print the parsed script in parenthesized form
  --emit-ast    Parse the given script and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

With no script an interactive prompt is started. Exit codes follow
sysexits.h: 64 for usage errors, 65 when the script has a syntax error
and 70 when it failed at run time. Ctrl-C ends the interpreter with
130.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import program_from_obj, program_to_obj
from .ast_printer import AstPrinter
from .errors import ErrorReporter
from .interpreter import Interpreter, run_program
from .parser import parse_program
from .scanner import scan

EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70
EX_INTERRUPTED = 130


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(EX_USAGE)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError as e:
        print(f"Error: file {path} is not valid UTF-8: {e}", file=sys.stderr)
        sys.exit(EX_DATAERR)


def run_prompt(interpreter: Interpreter) -> None:
    print("The Lox Programming Language")
    while True:
        try:
            line = input('> ')
        except EOFError:
            print()
            break
        run_program(line, interpreter)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='lox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', default='debug.txt', help='file that receives debug output')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--tokens', metavar='LOX_FILE', help='print the tokens of the given script')
    group.add_argument('--print-ast', metavar='LOX_FILE', help='print the parsed script in parenthesized form')
    group.add_argument('--emit-ast', metavar='LOX_FILE', help='emit AST JSON for the given script')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('script', nargs='*', help='Lox script to execute')
    args = parser.parse_args(argv)

    if len(args.script) > 1:
        parser.print_usage(sys.stderr)
        sys.exit(EX_USAGE)

    reporter = ErrorReporter()

    # Token dump mode
    if args.tokens:
        for token in scan(read_source(Path(args.tokens)), reporter):
            print(token)
        if reporter.had_error:
            sys.exit(EX_DATAERR)
        return

    # Parenthesized AST mode
    if args.print_ast:
        statements = parse_program(read_source(Path(args.print_ast)), reporter)
        if reporter.had_error:
            sys.exit(EX_DATAERR)
        printer = AstPrinter()
        for stmt in statements:
            print(printer.print(stmt))
        return

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        statements = parse_program(read_source(program_file), reporter)
        if reporter.had_error:
            sys.exit(EX_DATAERR)
        obj = program_to_obj(statements)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(obj, out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    interpreter = Interpreter(reporter, debug_level=args.v, debug_file=args.debug_file)
    try:
        # Execute from AST JSON
        if args.ast:
            ast_path = Path(args.ast)
            if not ast_path.exists():
                print(f"Error: file {ast_path} not found", file=sys.stderr)
                sys.exit(EX_USAGE)
            try:
                with open(ast_path, 'r', encoding='utf-8') as f:
                    statements = program_from_obj(json.load(f))
            except (KeyError, TypeError, ValueError, RecursionError) as e:
                print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
                sys.exit(EX_DATAERR)
            interpreter.interpret(statements)
            if reporter.had_runtime_error:
                sys.exit(EX_SOFTWARE)
            return

        # Interactive prompt
        if not args.script:
            run_prompt(interpreter)
            return

        # Default: execute source file
        result = run_program(read_source(Path(args.script[0])), interpreter)
        if result.had_error:
            sys.exit(EX_DATAERR)
        if result.had_runtime_error:
            sys.exit(EX_SOFTWARE)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(EX_INTERRUPTED)
    finally:
        interpreter.close()


if __name__ == '__main__':
    main()
