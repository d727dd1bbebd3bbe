"""
Lox Expression Parser

Parses a scanned Lox token list into an expression syntax tree.

The parser is a plain recursive-descent parser. Each grammar rule below is one
method, and precedence is encoded in the order the methods call each other:

    expression  → equality
    equality    → comparison ( ( "!=" | "==" ) comparison )*
    comparison  → term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        → factor ( ( "-" | "+" ) factor )*
    factor      → unary ( ( "/" | "*" ) unary )*
    unary       → ( "!" | "-" ) unary | primary
    primary     → NUMBER | STRING | "true" | "false" | "nil"
                | IDENTIFIER | "(" expression ")"

Binary levels fold left, so `1 - 2 - 3` groups as `(1 - 2) - 3`.

Parser Behavior
---------------
- Looks at most one token ahead and never backtracks.
- Never mutates the token list it is given.
- On a syntax error, reports exactly one diagnostic through the
  `ErrorReporter` and abandons the expression. `parse()` turns that into a
  failed `ParseResult` instead of letting the error escape.

Entry Points
------------
- `Parser(tokens).parse()`: Parse the whole token list as one expression.
- `parse(tokens, reporter=None)`: Convenience wrapper around the above.

Raises
------
ValueError
    If the token list is empty or does not end with an EOF token.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lox.lox_ast import Binary, Expr, Grouping, Literal, Unary, Variable
from lox.lox_errors import Diagnostic, ErrorReporter, ParseError
from lox.lox_tokens import Token, TokenType

EQUALITY_OPS = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
COMPARISON_OPS = (
    TokenType.GREATER,
    TokenType.GREATER_EQUAL,
    TokenType.LESS,
    TokenType.LESS_EQUAL,
)
TERM_OPS = (TokenType.MINUS, TokenType.PLUS)
FACTOR_OPS = (TokenType.SLASH, TokenType.STAR)
UNARY_OPS = (TokenType.BANG, TokenType.MINUS)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one top-level parse.

    Attributes:
        expression (Expr | None): The syntax tree, or None when parsing failed.
        diagnostics (list[Diagnostic]): Syntax errors reported during this parse.
    """

    expression: Expr | None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.expression is not None and not self.diagnostics


class Parser:
    """
    Lox Parser Class

    Attributes
    ----------
    tokens : list[Token]
        The scanned token list, terminated by EOF.
    reporter : ErrorReporter
        Sink for syntax errors.
    current : int
        Index of the next token to consume.
    """

    def __init__(self, tokens: list[Token], reporter: ErrorReporter | None = None) -> None:
        if not tokens or tokens[-1].type is not TokenType.EOF:
            raise ValueError("Token list must end with an EOF token")
        self.tokens: list[Token] = tokens
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.current: int = 0
        self._done = False

    def parse(self) -> ParseResult:
        """Parse the token list as a single expression.

        Returns:
            ParseResult: The tree on success, or None plus the reported diagnostics.

        Raises:
            RuntimeError: If called twice on the same Parser.
        """
        if self._done:
            raise RuntimeError("Parser has already consumed its tokens")
        self._done = True

        first_diagnostic = len(self.reporter.diagnostics)
        try:
            expr = self.expression()
            if not self.is_at_end():
                raise self.error(self.peek(), "Expect end of expression.")
        except ParseError:
            return ParseResult(None, self.reporter.diagnostics[first_diagnostic:])
        except RecursionError:
            self.error(self.peek(), "Expression nesting too deep.")
            return ParseResult(None, self.reporter.diagnostics[first_diagnostic:])
        return ParseResult(expr)

    # Grammar rules

    def expression(self) -> Expr:
        return self.equality()

    def equality(self) -> Expr:
        expr = self.comparison()
        while self.match(*EQUALITY_OPS):
            operator = self.previous()
            right = self.comparison()
            expr = Binary(expr, operator, right)
        return expr

    def comparison(self) -> Expr:
        expr = self.term()
        while self.match(*COMPARISON_OPS):
            operator = self.previous()
            right = self.term()
            expr = Binary(expr, operator, right)
        return expr

    def term(self) -> Expr:
        expr = self.factor()
        while self.match(*TERM_OPS):
            operator = self.previous()
            right = self.factor()
            expr = Binary(expr, operator, right)
        return expr

    def factor(self) -> Expr:
        expr = self.unary()
        while self.match(*FACTOR_OPS):
            operator = self.previous()
            right = self.unary()
            expr = Binary(expr, operator, right)
        return expr

    def unary(self) -> Expr:
        if self.match(*UNARY_OPS):
            operator = self.previous()
            right = self.unary()
            return Unary(operator, right)
        return self.primary()

    def primary(self) -> Expr:
        if self.match(TokenType.FALSE):
            return Literal(False, self.previous().line)
        if self.match(TokenType.TRUE):
            return Literal(True, self.previous().line)
        if self.match(TokenType.NIL):
            return Literal(None, self.previous().line)

        if self.match(TokenType.NUMBER, TokenType.STRING):
            tok = self.previous()
            return Literal(tok.literal, tok.line)

        if self.match(TokenType.IDENTIFIER):
            return Variable(self.previous())

        if self.match(TokenType.LEFT_PAREN):
            line = self.previous().line
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr, line)

        raise self.error(self.peek(), "Expect expression.")

    # Token primitives

    def match(self, *types: TokenType) -> bool:
        for type_ in types:
            if self.check(type_):
                self.advance()
                return True
        return False

    def consume(self, type_: TokenType, message: str) -> Token:
        if self.check(type_):
            return self.advance()
        raise self.error(self.peek(), message)

    def check(self, type_: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type is type_

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().type is TokenType.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def error(self, token: Token, message: str) -> ParseError:
        """Report a syntax error at `token` and return the exception to raise."""
        where = " at end" if token.type is TokenType.EOF else f" at '{token.lexeme}'"
        self.reporter.report(token.line, message, where)
        return ParseError(message)


def parse(tokens: list[Token], reporter: ErrorReporter | None = None) -> ParseResult:
    """Parse `tokens` into an expression tree with a fresh Parser."""
    return Parser(tokens, reporter).parse()


__all__ = ["ParseResult", "Parser", "parse"]
