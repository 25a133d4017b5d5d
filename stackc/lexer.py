"""
stackc Lexer

Tokenizes source code into a stream of tokens.
"""

from typing import List, Optional
from .tokens import Token, TokenType, KEYWORDS, PUNCTUATORS
from .errors import LimitError


MAX_TOKENS = 256
MAX_LEXEME_LENGTH = 63

WHITESPACE = ' \t\n\r\v\f'


def is_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def is_digit(c: str) -> bool:
    return c in '0123456789'


class Lexer:
    """Lexical analyzer for stackc source code."""

    def __init__(self, source: str, trace: bool = False,
                 max_tokens: Optional[int] = MAX_TOKENS,
                 max_lexeme_length: Optional[int] = MAX_LEXEME_LENGTH):
        """
        Initialize the lexer.

        Args:
            source: Source code to tokenize
            trace: Print a trace line for every token produced
            max_tokens: Token capacity including EOF (None for unbounded)
            max_lexeme_length: Longest accepted lexeme (None for unbounded)
        """
        self.source = source
        self.trace = trace
        self.max_tokens = max_tokens
        self.max_lexeme_length = max_lexeme_length
        self.tokens: List[Token] = []
        self.start = 0      # Start of current token
        self.current = 0    # Current position

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, always terminated by an EOF token
        """
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.start = self.current
        self.add_token(TokenType.EOF)
        return self.tokens

    def scan_token(self) -> None:
        """Scan the next token."""
        c = self.advance()

        if c in WHITESPACE:
            return

        if is_letter(c):
            self.identifier()
        elif is_digit(c):
            self.number()
        else:
            self.add_token(PUNCTUATORS.get(c, TokenType.UNKNOWN))

    def advance(self) -> str:
        """Consume and return the current character."""
        c = self.source[self.current]
        self.current += 1
        return c

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def is_at_end(self) -> bool:
        """Check if we've reached the end of the source."""
        return self.current >= len(self.source)

    def add_token(self, type: TokenType) -> None:
        """Add a token to the token list."""
        lexeme = self.source[self.start:self.current]

        if self.max_lexeme_length is not None and len(lexeme) > self.max_lexeme_length:
            raise LimitError(
                f"Lexeme exceeds {self.max_lexeme_length} characters: {lexeme[:16]}...",
                phase="Lexer", lexeme=lexeme)
        if self.max_tokens is not None and len(self.tokens) >= self.max_tokens:
            raise LimitError(f"Too many tokens (limit {self.max_tokens})",
                             phase="Lexer", lexeme=lexeme)

        self.tokens.append(Token(type, lexeme))

        if self.trace:
            print(f"[Lexer] Token: {type.name:<12} Lexeme: '{lexeme}'")

    def number(self) -> None:
        """Scan an integer literal."""
        while is_digit(self.peek()):
            self.advance()

        self.add_token(TokenType.NUMBER)

    def identifier(self) -> None:
        """Scan an identifier or keyword."""
        while is_letter(self.peek()) or is_digit(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))
