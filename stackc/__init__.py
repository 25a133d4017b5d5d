"""
stackc Compiler Package

A teaching compiler for a tiny declaration language.
Compiles `let NAME = EXPR;` source to stack-machine bytecode.
"""

from .tokens import Token, TokenType
from .lexer import Lexer
from .ast import *
from .parser import Parser
from .bytecode import Bytecode, Instruction, OpCode
from .codegen import CodeGenerator
from .errors import StackcError, CompileError, LimitError, SyntaxError

__version__ = "0.1.0"
__all__ = [
    "Token",
    "TokenType",
    "Lexer",
    "Parser",
    "Bytecode",
    "Instruction",
    "OpCode",
    "CodeGenerator",
    "StackcError",
    "CompileError",
    "LimitError",
    "SyntaxError",
    "compile_source",
]


def compile_source(source: str, trace: bool = False) -> Bytecode:
    """
    Compile source code to bytecode.

    Args:
        source: Source code string
        trace: Print per-phase trace lines to stdout

    Returns:
        Bytecode object

    Raises:
        StackcError: If compilation fails
    """
    lexer = Lexer(source, trace=trace)
    tokens = lexer.tokenize()

    parser = Parser(tokens, trace=trace)
    ast = parser.parse()

    codegen = CodeGenerator(trace=trace)
    bytecode = codegen.generate(ast)

    return bytecode
