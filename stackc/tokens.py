"""
stackc Token Definitions

Defines the token kinds and the Token class for lexical analysis.
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    """All token kinds recognized by the scanner."""

    # Keywords
    LET = auto()
    FUNCTION = auto()
    RETURN = auto()

    # Literals
    IDENTIFIER = auto()
    NUMBER = auto()

    # Operators
    EQUAL = auto()         # =
    PLUS = auto()          # +
    MINUS = auto()         # -
    STAR = auto()          # *
    SLASH = auto()         # /

    # Delimiters
    LPAREN = auto()        # (
    RPAREN = auto()        # )
    LBRACE = auto()        # {
    RBRACE = auto()        # }
    COLON = auto()         # :
    SEMICOLON = auto()     # ;

    # Special
    EOF = auto()
    UNKNOWN = auto()


# Keyword mapping
KEYWORDS = {
    'let': TokenType.LET,
    'function': TokenType.FUNCTION,
    'return': TokenType.RETURN,
}

# Single-character punctuators
PUNCTUATORS = {
    '=': TokenType.EQUAL,
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.STAR,
    '/': TokenType.SLASH,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    ':': TokenType.COLON,
    ';': TokenType.SEMICOLON,
}


@dataclass
class Token:
    """Represents a single token from the source code."""

    type: TokenType
    lexeme: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r})"
