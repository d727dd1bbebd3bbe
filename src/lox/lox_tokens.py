"""
Token model for the Lox scanner and parser.

This module holds the vocabulary shared by both front-end passes:

Classes:
    TokenType: Closed enumeration of every lexical category.
    Token: Immutable record of one scanned lexeme.

Tables:
    keywords: Reserved words mapped to their token type (exact, case-sensitive).
    single_char_tokens: Punctuation that always forms a one-character token.
    two_char_tokens: Operators that may absorb a following `=`.

Example:
    >>> Token(TokenType.NUMBER, "2", 2.0, 1)
    Token(NUMBER, '2', 2.0, line=1)

Exports:
    - TokenType
    - Token
    - keywords
    - single_char_tokens
    - two_char_tokens
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Single-character tokens.
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens.
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals.
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords.
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


keywords: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

single_char_tokens: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# first char -> (kind alone, kind when followed by "=")
two_char_tokens: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


@dataclass(frozen=True)
class Token:
    """Represents a single lexical token in a Lox source text.

    Attributes:
        type (TokenType): The lexical category of the token.
        lexeme (str): The exact source substring that was matched.
        literal (float | str | None): Decoded value for NUMBER and STRING tokens, else None.
        line (int): The 1-based line number where the token ends.
    """

    type: TokenType
    lexeme: str
    literal: float | str | None = None
    line: int = 1

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line={self.line})"

    def __str__(self) -> str:
        literal = "null" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"


__all__ = [
    "Token",
    "TokenType",
    "keywords",
    "single_char_tokens",
    "two_char_tokens",
]
