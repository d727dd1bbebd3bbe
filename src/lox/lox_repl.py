"""
Interactive prompt for the Lox front end.

Each line typed at the prompt is scanned and parsed as its own source text;
errors are printed and the session continues. Lines starting with `:` toggle
output modes:

    :tokens   show the token list instead of the tree
    :json     show the tree as JSON
"""

import sys

from lox.lox_cli import print_diagnostics, render, run_source
from lox.lox_errors import ErrorReporter


def start_repl(show_tokens: bool = False, as_json: bool = False) -> None:
    print("Lox REPL. Type 'exit' or 'quit' to leave.")
    reporter = ErrorReporter()

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print("\nExiting Lox REPL.")
            return

        src = line.strip()
        if src in ("exit", "quit"):
            print("Exiting Lox REPL.")
            return
        if not src:
            continue
        if src == ":tokens":
            show_tokens = not show_tokens
            print(f"[mode] >>> Token output {'ON' if show_tokens else 'OFF'}")
            continue
        if src == ":json":
            as_json = not as_json
            print(f"[mode] >>> JSON output {'ON' if as_json else 'OFF'}")
            continue

        reporter.reset()
        tokens, result = run_source(line, reporter)
        render(tokens, result, show_tokens, as_json)
        if reporter.had_error:
            print("[error] >>>", file=sys.stderr)
            print_diagnostics(reporter)
