"""
Shared test helpers: a minimal stack simulator and a direct AST evaluator.
"""

from typing import Dict

import pytest

from stackc.ast import ASTVisitor
from stackc.bytecode import Bytecode, OpCode


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


ARITHMETIC = {
    OpCode.ADD: lambda a, b: a + b,
    OpCode.SUB: lambda a, b: a - b,
    OpCode.MUL: lambda a, b: a * b,
    OpCode.DIV: trunc_div,
}


def simulate(bytecode: Bytecode) -> Dict[str, int]:
    """Run the positional code/constants/variables triple on a value stack."""
    stack = []
    bindings = {}
    constants = iter(bytecode.constants)
    variables = iter(bytecode.variables)

    for opcode in bytecode.code:
        if opcode == OpCode.LOAD_CONST:
            stack.append(next(constants))
        elif opcode == OpCode.STORE_VAR:
            bindings[next(variables)] = stack.pop()
        else:
            right = stack.pop()
            left = stack.pop()
            stack.append(ARITHMETIC[opcode](left, right))

    assert stack == []
    return bindings


class Evaluator(ASTVisitor):
    """Evaluates an AST directly."""

    def __init__(self):
        self.bindings = {}

    def visit_number(self, node):
        return node.value

    def visit_binary(self, node):
        left = node.left.accept(self)
        right = node.right.accept(self)
        if node.operator == '+':
            return left + right
        if node.operator == '-':
            return left - right
        if node.operator == '*':
            return left * right
        return trunc_div(left, right)

    def visit_var_decl(self, node):
        self.bindings[node.name] = node.value.accept(self)
        return self.bindings


@pytest.fixture
def run_stack():
    return simulate


@pytest.fixture
def evaluate():
    return lambda node: node.accept(Evaluator())
