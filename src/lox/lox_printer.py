"""
Renders Lox expression trees as parenthesized prefix text.

Every non-leaf node is written as `(name operand...)` so the grouping the
parser chose is explicit:

    1 + 2 * 3    ->  (+ 1.0 (* 2.0 3.0))
    (1 + 2)      ->  (group (+ 1.0 2.0))
    -x           ->  (- x)

Used by the CLI and REPL for default output and by tests to compare tree
shapes without spelling out nodes.

Raises:
    - `NotImplementedError`: If a node kind has no corresponding printer.
"""

from lox.lox_ast import Binary, Expr, Grouping, Literal, Unary, Variable


class AstPrinter:
    """Converts an `Expr` tree into its parenthesized text form."""

    def print(self, expr: Expr) -> str:
        return self._visit(expr)

    def _visit(self, expr: Expr) -> str:
        method = getattr(self, f"print_{expr.kind}", None)
        if method is None:
            raise NotImplementedError(f"No printer for node kind: {expr.kind}")
        result: str = method(expr)
        return result

    def print_literal(self, expr: Literal) -> str:
        value = expr.value
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def print_grouping(self, expr: Grouping) -> str:
        return self.parenthesize("group", expr.expression)

    def print_unary(self, expr: Unary) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def print_binary(self, expr: Binary) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def print_variable(self, expr: Variable) -> str:
        return expr.name.lexeme

    def parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = " ".join(self._visit(e) for e in exprs)
        return f"({name} {parts})"


def to_sexpr(expr: Expr) -> str:
    return AstPrinter().print(expr)


__all__ = ["AstPrinter", "to_sexpr"]
