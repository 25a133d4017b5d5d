"""
stackc Abstract Syntax Tree

Defines AST node classes for declarations and arithmetic expressions.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


# =============================================================================
# Base Classes
# =============================================================================

class ASTNode(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def accept(self, visitor: 'ASTVisitor') -> Any:
        """Accept a visitor for traversal."""
        pass


class Expression(ASTNode):
    """Base class for expression nodes."""
    pass


class Statement(ASTNode):
    """Base class for statement nodes."""
    pass


# =============================================================================
# Expressions
# =============================================================================

@dataclass
class NumberExpr(Expression):
    """Integer literal."""
    value: int

    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_number(self)


@dataclass
class BinaryExpr(Expression):
    """Arithmetic combination of two operands (+, -, *, /)."""
    left: Expression
    operator: str
    right: Expression

    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_binary(self)


# =============================================================================
# Statements
# =============================================================================

@dataclass
class VarDeclStmt(Statement):
    """Variable declaration: let NAME = EXPR;"""
    name: str
    value: Expression

    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_var_decl(self)


# =============================================================================
# Visitor
# =============================================================================

class ASTVisitor(ABC):
    """Base visitor; every node kind must be handled."""

    @abstractmethod
    def visit_number(self, node: NumberExpr) -> Any:
        pass

    @abstractmethod
    def visit_binary(self, node: BinaryExpr) -> Any:
        pass

    @abstractmethod
    def visit_var_decl(self, node: VarDeclStmt) -> Any:
        pass


# =============================================================================
# AST Printer (for debugging)
# =============================================================================

class ASTPrinter(ASTVisitor):
    """Prints AST for debugging."""

    def __init__(self):
        self.indent = 0

    def print(self, node: ASTNode) -> str:
        return node.accept(self)

    def _indent(self) -> str:
        return "  " * self.indent

    def visit_number(self, node: NumberExpr) -> str:
        return f"{self._indent()}Number({node.value})"

    def visit_binary(self, node: BinaryExpr) -> str:
        self.indent += 1
        left = node.left.accept(self)
        right = node.right.accept(self)
        self.indent -= 1
        return f"{self._indent()}Binary({node.operator})\n{left}\n{right}"

    def visit_var_decl(self, node: VarDeclStmt) -> str:
        self.indent += 1
        value = node.value.accept(self)
        self.indent -= 1
        return f"{self._indent()}VarDecl({node.name})\n{value}"
