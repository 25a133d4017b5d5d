"""
stackc Code Generator

Generates bytecode from an AST by post-order traversal.
"""

from typing import Optional
from .ast import ASTNode, ASTVisitor, NumberExpr, BinaryExpr, VarDeclStmt
from .bytecode import (
    Bytecode, OpCode, BINARY_OPS,
    MAX_INSTRUCTIONS, MAX_CONSTANTS, MAX_VARIABLES,
)
from .errors import CompileError


class CodeGenerator(ASTVisitor):
    """Generates bytecode from an AST."""

    def __init__(self, trace: bool = False,
                 max_instructions: Optional[int] = MAX_INSTRUCTIONS,
                 max_constants: Optional[int] = MAX_CONSTANTS,
                 max_variables: Optional[int] = MAX_VARIABLES):
        self.trace = trace
        self.max_instructions = max_instructions
        self.max_constants = max_constants
        self.max_variables = max_variables
        self.bytecode = self._new_bytecode()

    def _new_bytecode(self) -> Bytecode:
        return Bytecode(
            max_instructions=self.max_instructions,
            max_constants=self.max_constants,
            max_variables=self.max_variables,
        )

    def generate(self, node: ASTNode) -> Bytecode:
        """Generate bytecode from an AST."""
        self.bytecode = self._new_bytecode()
        node.accept(self)
        return self.bytecode

    def visit_number(self, node: NumberExpr) -> None:
        """Generate code for an integer literal."""
        self.bytecode.emit_constant(node.value)
        self._trace(f"Emit LOAD_CONST {node.value}")

    def visit_binary(self, node: BinaryExpr) -> None:
        """Generate code for binary expression."""
        node.left.accept(self)
        node.right.accept(self)

        opcode = BINARY_OPS.get(node.operator)
        if opcode is None:
            raise CompileError(f"Unknown binary operator: {node.operator}",
                               lexeme=node.operator)

        self.bytecode.emit(opcode)
        self._trace(f"Emit {opcode.name}")

    def visit_var_decl(self, node: VarDeclStmt) -> None:
        """Generate code for variable declaration."""
        node.value.accept(self)
        self.bytecode.emit_store(node.name)
        self._trace(f"Emit {OpCode.STORE_VAR.name} {node.name}")

    def _trace(self, message: str) -> None:
        if self.trace:
            print(f"[Bytecode] {message}")
