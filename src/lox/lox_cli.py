"""
Lox CLI Entrypoint.

Runs the Lox front end on a file or an inline string and prints what it
produced: the parenthesized AST by default, the token list with `--tokens`,
or the AST as JSON with `--json`.

Example usage:
    lox expr.lox
    lox -s "1 + 2 * 3"
    lox -s "(1 + 2" --strict
    lox --tokens expr.lox
    lox --repl

Exit status:
    0 on success, 65 when any lexical or syntax error was reported.

Functions:
    run_source(source: str, reporter: ErrorReporter) -> tuple[list[Token], ParseResult]:
        Scan and parse one source text.

    run_lox(source: str, is_string: bool = False, show_tokens: bool = False,
            as_json: bool = False, strict: bool = False) -> int:
        Full pipeline for one input, including output and diagnostics.

    main() -> None:
        Parses CLI arguments and invokes the appropriate action.
"""

import argparse
import json
import sys

from lox.lox_errors import ErrorReporter
from lox.lox_parser import ParseResult, Parser
from lox.lox_printer import to_sexpr
from lox.lox_scanner import Scanner
from lox.lox_tokens import Token

EXIT_DATA_ERROR = 65


def run_source(source: str, reporter: ErrorReporter) -> tuple[list[Token], ParseResult]:
    """Scan and parse `source`, sending every diagnostic to `reporter`."""
    tokens = Scanner(source, reporter).scan_tokens()
    result = Parser(tokens, reporter).parse()
    return tokens, result


def render(
    tokens: list[Token], result: ParseResult, show_tokens: bool, as_json: bool
) -> None:
    """Print the token list or the tree, whichever the flags ask for."""
    if show_tokens:
        for tok in tokens:
            print(tok)
    elif result.expression is not None:
        if as_json:
            print(json.dumps(result.expression.to_dict(), indent=2))
        else:
            print(to_sexpr(result.expression))


def print_diagnostics(reporter: ErrorReporter) -> None:
    for diagnostic in reporter.diagnostics:
        print(diagnostic, file=sys.stderr)


def run_lox(
    source: str,
    is_string: bool = False,
    show_tokens: bool = False,
    as_json: bool = False,
    strict: bool = False,
) -> int:
    """
    Run the Lox front end on one input and print the result.

    Args:
        source (str): Lox source text, or a path to a `.lox` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path. Defaults to False.
        show_tokens (bool): Print the scanned tokens instead of the tree. Defaults to False.
        as_json (bool): Print the tree as JSON. Defaults to False.
        strict (bool): Raise `LoxSyntaxError` instead of returning an error status. Defaults to False.

    Returns:
        int: 0 on success, 65 if any diagnostic was reported.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.lox'.
        LoxSyntaxError: In strict mode, when any diagnostic was reported.
    """
    if not is_string and not source.endswith(".lox"):
        raise ValueError("Only .lox files are supported.")
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    reporter = ErrorReporter()
    tokens, result = run_source(source, reporter)

    if strict:
        reporter.raise_if_errors()

    render(tokens, result, show_tokens, as_json)
    print_diagnostics(reporter)
    return EXIT_DATA_ERROR if reporter.had_error else 0


def main() -> None:
    """
    Entry point for the Lox CLI.

    Launches the REPL if no arguments are passed or `--repl` is given,
    otherwise runs the front end once and exits with its status.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `--tokens`: Print the token list.
        - `--json`: Print the tree as JSON.
        - `--strict`: Raise on the first reported error set.
        - `--repl`: Launch the interactive prompt.
    """
    if len(sys.argv) == 1:
        from lox.lox_repl import start_repl

        start_repl()
        return
    parser = argparse.ArgumentParser(prog="lox")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="Print scanned tokens instead of the AST"
    )
    parser.add_argument("--json", action="store_true", help="Print the AST as JSON")
    parser.add_argument(
        "--strict", action="store_true", help="Raise instead of exiting with status 65"
    )
    parser.add_argument("--repl", action="store_true", help="Launch interactive REPL")

    args = parser.parse_args()

    if args.repl or args.source is None:
        from lox.lox_repl import start_repl

        start_repl(show_tokens=args.tokens, as_json=args.json)
        return

    status = run_lox(
        source=args.source,
        is_string=args.string,
        show_tokens=args.tokens,
        as_json=args.json,
        strict=args.strict,
    )
    if status:
        sys.exit(status)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
