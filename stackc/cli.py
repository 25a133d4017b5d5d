"""
stackc command line driver

Compiles a single declaration, tracing each phase, and prints the
instruction stream, constant pool and variable-name pool.
"""

import argparse
import sys
from typing import List, Optional

from .lexer import Lexer
from .parser import Parser
from .codegen import CodeGenerator
from .ast import ASTPrinter
from .bytecode import Bytecode
from .errors import StackcError


DEFAULT_SOURCE = "let x = 5 * 3;"


def format_listing(bytecode: Bytecode) -> str:
    """Render the final buffers in the driver's output format."""
    code, constants, variables = bytecode.to_arrays()
    lines = [
        "",
        "--Bytecode --",
        " ".join(str(op) for op in code),
        "Constants: " + " ".join(str(value) for value in constants),
        "Variables: " + " ".join(variables),
    ]
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stackc",
        description="Compile a `let NAME = EXPR;` declaration to stack bytecode.",
    )
    parser.add_argument("source", nargs="?", default=DEFAULT_SOURCE,
                        help=f"source to compile (default: {DEFAULT_SOURCE!r})")
    parser.add_argument("--ast", action="store_true",
                        help="print the syntax tree after parsing")
    parser.add_argument("--disassemble", action="store_true",
                        help="print a disassembly after the listing")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    source = args.source

    print(f"[Main] Source: {source}")

    try:
        tokens = Lexer(source, trace=True).tokenize()
        ast = Parser(tokens, trace=True).parse()
        if args.ast:
            print(ASTPrinter().print(ast))
        bytecode = CodeGenerator(trace=True).generate(ast)
    except StackcError as e:
        print(e)
        return 1

    print(format_listing(bytecode))
    if args.disassemble:
        print()
        print(bytecode.disassemble())
    return 0


if __name__ == "__main__":
    sys.exit(main())
