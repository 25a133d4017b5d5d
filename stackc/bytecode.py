"""
stackc Bytecode Format

Defines stack-machine opcodes and the compiled bytecode container.
"""

from enum import IntEnum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

import numpy as np

from .errors import LimitError


MAX_INSTRUCTIONS = 128
MAX_CONSTANTS = 128
MAX_VARIABLES = 128

CONSTANT_DTYPE = np.int32


class OpCode(IntEnum):
    """Stack machine opcodes."""

    LOAD_CONST = 0       # operand: next constant pool entry
    ADD = 1
    SUB = 2
    MUL = 3
    DIV = 4
    STORE_VAR = 5        # operand: next variable pool entry


# Arithmetic operator to opcode
BINARY_OPS = {
    '+': OpCode.ADD,
    '-': OpCode.SUB,
    '*': OpCode.MUL,
    '/': OpCode.DIV,
}


@dataclass
class Instruction:
    """An opcode together with the pool entry it consumes."""

    opcode: OpCode
    operand: Union[int, str, None] = None

    def __str__(self) -> str:
        if self.operand is None:
            return self.opcode.name
        return f"{self.opcode.name} {self.operand}"


@dataclass
class Bytecode:
    """Container for compiled bytecode.

    Instructions are kept with their operands inline; the positional
    code/constants/variables triple is derived from them on demand.
    """

    instructions: List[Instruction] = field(default_factory=list)
    max_instructions: Optional[int] = MAX_INSTRUCTIONS
    max_constants: Optional[int] = MAX_CONSTANTS
    max_variables: Optional[int] = MAX_VARIABLES

    @property
    def code(self) -> List[OpCode]:
        """The opcode stream."""
        return [ins.opcode for ins in self.instructions]

    @property
    def constants(self) -> List[int]:
        """Constant pool, in LOAD_CONST order."""
        return [ins.operand for ins in self.instructions
                if ins.opcode == OpCode.LOAD_CONST]

    @property
    def variables(self) -> List[str]:
        """Variable-name pool, in STORE_VAR order."""
        return [ins.operand for ins in self.instructions
                if ins.opcode == OpCode.STORE_VAR]

    def emit(self, opcode: OpCode, operand: Union[int, str, None] = None) -> int:
        """Append an instruction, returning its offset."""
        if self.max_instructions is not None and len(self.instructions) >= self.max_instructions:
            raise LimitError(f"Too many instructions (limit {self.max_instructions})")

        offset = len(self.instructions)
        self.instructions.append(Instruction(opcode, operand))
        return offset

    def emit_constant(self, value: int) -> int:
        """Emit LOAD_CONST for value, returning its constant pool index."""
        info = np.iinfo(CONSTANT_DTYPE)
        if not info.min <= value <= info.max:
            raise LimitError(f"Constant out of range: {value}", lexeme=str(value))

        index = len(self.constants)
        if self.max_constants is not None and index >= self.max_constants:
            raise LimitError(f"Too many constants (limit {self.max_constants})")

        self.emit(OpCode.LOAD_CONST, value)
        return index

    def emit_store(self, name: str) -> int:
        """Emit STORE_VAR for name, returning its variable pool index."""
        index = len(self.variables)
        if self.max_variables is not None and index >= self.max_variables:
            raise LimitError(f"Too many variables (limit {self.max_variables})",
                             lexeme=name)

        self.emit(OpCode.STORE_VAR, name)
        return index

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray, List[str]]:
        """Pack the opcode stream and constant pool into flat arrays."""
        code = np.array([int(op) for op in self.code], dtype=np.uint8)
        constants = np.array(self.constants, dtype=CONSTANT_DTYPE)
        return code, constants, self.variables

    def disassemble(self) -> str:
        """Disassemble bytecode to human-readable format."""
        lines = []
        lines.append("=== stackc Bytecode ===")
        lines.append("")

        lines.append("Constants:")
        for i, value in enumerate(self.constants):
            lines.append(f"  [{i:4d}] {value}")
        lines.append("")

        lines.append("Variables:")
        for i, name in enumerate(self.variables):
            lines.append(f"  [{i:4d}] {name}")
        lines.append("")

        lines.append("Code:")
        const_index = 0
        var_index = 0
        for offset, ins in enumerate(self.instructions):
            name = ins.opcode.name
            if ins.opcode == OpCode.LOAD_CONST:
                lines.append(f"  {offset:04x}: {name:16s} {const_index} ; {ins.operand}")
                const_index += 1
            elif ins.opcode == OpCode.STORE_VAR:
                lines.append(f"  {offset:04x}: {name:16s} {var_index} ; {ins.operand}")
                var_index += 1
            else:
                lines.append(f"  {offset:04x}: {name}")

        return "\n".join(lines)
