"""
stackc Compiler Errors

Defines exception classes for compilation errors.
"""

from typing import Optional


class StackcError(Exception):
    """Base exception for all stackc errors."""

    def __init__(self, message: str, phase: Optional[str] = None,
                 lexeme: Optional[str] = None):
        self.message = message
        self.phase = phase
        self.lexeme = lexeme
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with the reporting phase."""
        if self.phase:
            return f"[{self.phase}] {self.message}"
        return self.message


class SyntaxError(StackcError):
    """Raised for syntax errors during parsing."""

    def __init__(self, message: str, phase: Optional[str] = "Parser",
                 lexeme: Optional[str] = None):
        super().__init__(message, phase, lexeme)


class CompileError(StackcError):
    """Raised for errors while lowering to bytecode."""

    def __init__(self, message: str, phase: Optional[str] = "Bytecode",
                 lexeme: Optional[str] = None):
        super().__init__(message, phase, lexeme)


class LimitError(CompileError):
    """Raised when a fixed capacity or value range is exceeded."""
    pass
