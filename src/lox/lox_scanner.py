"""
Lexical scanner for the Lox scripting language.

Converts a complete source string into a flat list of `Token` objects in a
single left-to-right pass, always consuming the longest valid lexeme.

Classes:
    Scanner: Owns one source string and the cursor state for one scan.

Functions:
    scan(source, reporter=None): Scan a source string with a fresh Scanner.

Features:
    - Skips whitespace and `//` line comments
    - Folds `!=`, `==`, `<=`, `>=` into single tokens
    - Decodes NUMBER literals to float and STRING literals without quotes
    - Looks identifiers up in the keyword table

Errors:
    Unexpected characters and unterminated strings are reported to the
    `ErrorReporter` and produce no token; scanning continues afterwards, so
    one pass surfaces every lexical problem in the text.

Example:
    >>> [t.type.name for t in scan("1 != 2")]
    ['NUMBER', 'BANG_EQUAL', 'NUMBER', 'EOF']
"""

from lox.lox_errors import ErrorReporter
from lox.lox_tokens import (
    Token,
    TokenType,
    keywords,
    single_char_tokens,
    two_char_tokens,
)

DIGITS = frozenset("0123456789")
ALPHA = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
ALPHANUMERIC = ALPHA | DIGITS
WHITESPACE = frozenset(" \r\t")


class Scanner:
    """Scanner for one Lox source string.

    Attributes:
        source (str): The text being scanned.
        reporter (ErrorReporter): Sink for lexical errors.
        tokens (list[Token]): Tokens produced so far.
        start (int): Index of the first character of the lexeme being scanned.
        current (int): Index of the next unread character.
        line (int): Current 1-based line number.
    """

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.tokens: list[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self._done = False

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source and return its tokens.

        Returns:
            list[Token]: Every token in source order, ending with exactly one EOF token.

        Raises:
            RuntimeError: If called twice on the same Scanner.
        """
        if self._done:
            raise RuntimeError("Scanner has already consumed its source")
        self._done = True

        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def match(self, expected: str) -> bool:
        """Consume the next character only if it equals `expected`."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        """Returns the next character without consuming it, or "" at end of input."""
        if self.is_at_end():
            return ""
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return ""
        return self.source[self.current + 1]

    def add_token(self, type_: TokenType, literal: float | str | None = None) -> None:
        text = self.source[self.start : self.current]
        self.tokens.append(Token(type_, text, literal, self.line))

    def scan_token(self) -> None:
        """Classify and consume one lexeme starting at `self.start`."""
        char = self.advance()

        if char in single_char_tokens:
            self.add_token(single_char_tokens[char])
        elif char in two_char_tokens:
            alone, with_equal = two_char_tokens[char]
            self.add_token(with_equal if self.match("=") else alone)
        elif char == "/":
            if self.match("/"):
                self.skip_comment()
            else:
                self.add_token(TokenType.SLASH)
        elif char in WHITESPACE:
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self.string()
        elif char in DIGITS:
            self.number()
        elif char in ALPHA:
            self.identifier()
        else:
            self.reporter.report(self.line, "Unexpected character.")

    def skip_comment(self) -> None:
        """Advances up to, but not past, the newline ending a `//` comment."""
        while self.peek() != "\n" and not self.is_at_end():
            self.advance()

    def string(self) -> None:
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.is_at_end():
            self.reporter.report(self.line, "Unterminated string.")
            return

        # closing quote
        self.advance()
        self.add_token(TokenType.STRING, self.source[self.start + 1 : self.current - 1])

    def number(self) -> None:
        while self.peek() in DIGITS:
            self.advance()

        # A "." only belongs to the number when a digit follows it.
        if self.peek() == "." and self.peek_next() in DIGITS:
            self.advance()
            while self.peek() in DIGITS:
                self.advance()

        self.add_token(TokenType.NUMBER, float(self.source[self.start : self.current]))

    def identifier(self) -> None:
        while self.peek() in ALPHANUMERIC:
            self.advance()

        text = self.source[self.start : self.current]
        self.add_token(keywords.get(text, TokenType.IDENTIFIER))


def scan(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Scan `source` with a fresh Scanner and return its token list.

    Args:
        source (str): Complete Lox source text.
        reporter (ErrorReporter | None): Sink for lexical errors. A private one is used if omitted.

    Returns:
        list[Token]: Tokens in order, terminated by a single EOF token.
    """
    return Scanner(source, reporter).scan_tokens()


__all__ = ["Scanner", "scan"]
