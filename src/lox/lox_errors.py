"""
Diagnostic plumbing shared by the Lox scanner and parser.

Both front-end passes report malformed input through an `ErrorReporter`
instead of printing or aborting. The reporter records every diagnostic in
order so that a driver can decide how to present them and which exit status
to use.

Classes:
    Diagnostic: One reported problem (line, message, location hint).
    ErrorReporter: Append-only sink implementing `report(line, message)`.
    LoxSyntaxError: Raised by strict callers when any diagnostic was recorded.
    ParseError: Internal signal used by the parser to abandon a production.

Example:
    >>> reporter = ErrorReporter()
    >>> reporter.report(3, "Unexpected character.")
    >>> str(reporter.diagnostics[0])
    '[line 3] Error: Unexpected character.'
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single lexical or syntax error.

    Attributes:
        line (int): 1-based source line of the problem.
        message (str): Human readable description.
        where (str): Location hint such as `" at end"` or `" at ')'"`, empty for scanner errors.
    """

    line: int
    message: str
    where: str = ""

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class LoxSyntaxError(SyntaxError):
    """Raised when a source text produced one or more diagnostics.

    Attributes:
        diagnostics (list[Diagnostic]): Every problem reported, in order.
    """

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = list(diagnostics)
        super().__init__("\n".join(str(d) for d in self.diagnostics))


class ParseError(SyntaxError):
    """Unwinds the parser out of a production that cannot be completed."""


class ErrorReporter:
    """Collects diagnostics emitted by the scanner and parser.

    The reporter never alters control flow; it only records. `had_error`
    stays set until `reset()` is called.
    """

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []
        self.had_error = False

    def report(self, line: int, message: str, where: str = "") -> None:
        self.diagnostics.append(Diagnostic(line, message, where))
        self.had_error = True

    def reset(self) -> None:
        self.diagnostics = []
        self.had_error = False

    def raise_if_errors(self) -> None:
        """Raise `LoxSyntaxError` if anything has been reported.

        Raises:
            LoxSyntaxError: When at least one diagnostic is recorded.
        """
        if self.had_error:
            raise LoxSyntaxError(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)


__all__ = ["Diagnostic", "ErrorReporter", "LoxSyntaxError", "ParseError"]
