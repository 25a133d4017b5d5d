"""
stackc Parser

Recursive descent parser that produces an AST from tokens.

Grammar:
    VarDecl    := 'let' IDENTIFIER '=' Expression ';'
    Expression := Term (('+'|'-') Term)*
    Term       := Primary (('*'|'/') Primary)*
    Primary    := NUMBER
"""

from typing import List
from .tokens import Token, TokenType
from .ast import Expression, NumberExpr, BinaryExpr, VarDeclStmt
from .errors import SyntaxError


class Parser:
    """Recursive descent parser for a single variable declaration."""

    def __init__(self, tokens: List[Token], trace: bool = False):
        """
        Initialize the parser.

        Args:
            tokens: List of tokens from the lexer, terminated by EOF
            trace: Print a trace line for every reduction
        """
        self.tokens = tokens
        self.trace = trace
        self.current = 0

    def parse(self) -> VarDeclStmt:
        """
        Parse the token stream into an AST.

        Returns:
            VarDeclStmt AST node
        """
        stmt = self.var_declaration()
        self.consume(TokenType.EOF, "Expected end of input after declaration")
        return stmt

    # =========================================================================
    # Declarations
    # =========================================================================

    def var_declaration(self) -> VarDeclStmt:
        """Parse a variable declaration."""
        if self.check(TokenType.FUNCTION) or self.check(TokenType.RETURN):
            token = self.peek()
            raise SyntaxError(f"Unsupported keyword: {token.lexeme}", lexeme=token.lexeme)

        self.consume(TokenType.LET, "Expected 'let'")
        name = self.consume(TokenType.IDENTIFIER, "Expected variable name")
        self.consume(TokenType.EQUAL, "Expected '=' after variable name")
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expected ';' after variable declaration")

        self._trace(f"Parsed variable declaration: {name.lexeme}")
        return VarDeclStmt(name.lexeme, value)

    # =========================================================================
    # Expressions
    # =========================================================================

    def expression(self) -> Expression:
        """Parse addition/subtraction."""
        expr = self.term()

        while self.match(TokenType.PLUS, TokenType.MINUS):
            operator = self.previous().lexeme
            right = self.term()
            expr = BinaryExpr(expr, operator, right)
            self._trace(f"Parsed expression ({operator})")

        return expr

    def term(self) -> Expression:
        """Parse multiplication/division."""
        expr = self.primary()

        while self.match(TokenType.STAR, TokenType.SLASH):
            operator = self.previous().lexeme
            right = self.primary()
            expr = BinaryExpr(expr, operator, right)
            self._trace(f"Parsed term expression ({operator})")

        return expr

    def primary(self) -> Expression:
        """Parse an integer literal."""
        if self.match(TokenType.NUMBER):
            value = int(self.previous().lexeme)
            self._trace(f"Parsed number: {value}")
            return NumberExpr(value)

        token = self.peek()
        raise SyntaxError(f"Unexpected token: {token.lexeme}", lexeme=token.lexeme)

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types and advance."""
        for type in types:
            if self.check(type):
                self.advance()
                return True
        return False

    def check(self, type: TokenType) -> bool:
        """Check if current token is of given type."""
        return self.peek().type == type

    def advance(self) -> Token:
        """Consume and return the current token."""
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self.peek().type == TokenType.EOF

    def peek(self) -> Token:
        """Return the current token."""
        return self.tokens[self.current]

    def previous(self) -> Token:
        """Return the previous token."""
        return self.tokens[self.current - 1]

    def consume(self, type: TokenType, message: str) -> Token:
        """Consume a token of the expected type or raise an error."""
        if self.check(type):
            return self.advance()

        token = self.peek()
        got = token.lexeme if token.type != TokenType.EOF else "end of input"
        raise SyntaxError(f"{message}, got '{got}'", lexeme=token.lexeme)

    def _trace(self, message: str) -> None:
        if self.trace:
            print(f"[Parser] {message}")
