"""
Expression syntax tree for the Lox front end.

Classes:
    Expr:
        Base class of every expression node. Nodes are frozen, so a tree can
        be shared read-only with later stages but never edited in place.

    Literal, Grouping, Unary, Binary, Variable:
        The closed set of expression variants produced by the parser.

    ExprDict:
        TypedDict shape returned by `Expr.to_dict()` for JSON output,
        debugging, and test assertions.

Each node tracks:
    kind (str): Variant name used in serialized output ("literal", "binary", ...).
    line (int): Source line of the token that introduced the node.

Grouping is kept as its own node so that `(1 + 2)` stays distinguishable from
`1 + 2` after parsing.

Example:
    node = Binary(Literal(1.0), Token(TokenType.PLUS, "+", None, 1), Literal(2.0))
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypedDict

from lox.lox_tokens import Token


class ExprDict(TypedDict, total=False):
    """
    Serialized form of an `Expr`.

    Fields:
        kind (str): Node variant name.
        line (int): Source line of the node.
        value (Any): Constant of a literal node.
        operator (str): Operator lexeme of unary and binary nodes.
        name (str): Identifier of a variable node.
        left (ExprDict): Left operand of a binary node.
        right (ExprDict): Right operand of a unary or binary node.
        expression (ExprDict): Inner expression of a grouping node.
    """

    kind: str
    line: int
    value: Any
    operator: str
    name: str
    left: "ExprDict"
    right: "ExprDict"
    expression: "ExprDict"


@dataclass(frozen=True)
class Expr(ABC):
    """Abstract base of every expression node.

    Equality is structural. Operator and name tokens compare with their line,
    since the token is part of the node. The standalone line kept by
    `Literal` and `Grouping` does not take part in equality.
    """

    kind: ClassVar[str] = "expr"

    @property
    @abstractmethod
    def line(self) -> int: ...

    @abstractmethod
    def to_dict(self) -> ExprDict: ...


@dataclass(frozen=True)
class Literal(Expr):
    """A resolved constant: number, string, boolean, or nil (None)."""

    kind: ClassVar[str] = "literal"

    value: float | str | bool | None
    source_line: int = field(default=0, compare=False)

    @property
    def line(self) -> int:
        return self.source_line

    def to_dict(self) -> ExprDict:
        return {"kind": self.kind, "line": self.line, "value": self.value}


@dataclass(frozen=True)
class Grouping(Expr):
    """A parenthesized sub-expression."""

    kind: ClassVar[str] = "grouping"

    expression: Expr
    source_line: int = field(default=0, compare=False)

    @property
    def line(self) -> int:
        return self.source_line

    def to_dict(self) -> ExprDict:
        return {
            "kind": self.kind,
            "line": self.line,
            "expression": self.expression.to_dict(),
        }


@dataclass(frozen=True)
class Unary(Expr):
    """A prefix operator (`!` or `-`) applied to one operand."""

    kind: ClassVar[str] = "unary"

    operator: Token
    right: Expr

    @property
    def line(self) -> int:
        return self.operator.line

    def to_dict(self) -> ExprDict:
        return {
            "kind": self.kind,
            "line": self.line,
            "operator": self.operator.lexeme,
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class Binary(Expr):
    """A two-operand operation. The operator token keeps its source line."""

    kind: ClassVar[str] = "binary"

    left: Expr
    operator: Token
    right: Expr

    @property
    def line(self) -> int:
        return self.operator.line

    def to_dict(self) -> ExprDict:
        return {
            "kind": self.kind,
            "line": self.line,
            "operator": self.operator.lexeme,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class Variable(Expr):
    """A reference to a name. Resolution happens in later stages."""

    kind: ClassVar[str] = "variable"

    name: Token

    @property
    def line(self) -> int:
        return self.name.line

    def to_dict(self) -> ExprDict:
        return {"kind": self.kind, "line": self.line, "name": self.name.lexeme}


__all__ = ["Binary", "Expr", "ExprDict", "Grouping", "Literal", "Unary", "Variable"]
