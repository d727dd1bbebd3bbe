import dataclasses
import json

import pytest

from lox.lox_ast import Binary, Expr, Grouping, Literal, Unary, Variable
from lox.lox_tokens import Token, TokenType

PLUS = Token(TokenType.PLUS, "+", None, 1)
MINUS = Token(TokenType.MINUS, "-", None, 2)


def test_literal_equality_ignores_line() -> None:
    assert Literal(1.0, 1) == Literal(1.0, 5)
    assert Literal("a") != Literal("b")


def test_grouping_differs_from_inner_expression() -> None:
    inner = Binary(Literal(1.0), PLUS, Literal(2.0))
    assert Grouping(inner) != inner
    assert Grouping(inner) == Grouping(inner)


def test_nodes_are_frozen() -> None:
    node = Binary(Literal(1.0), PLUS, Literal(2.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.left = Literal(3.0)  # type: ignore[misc]


def test_line_comes_from_tokens() -> None:
    assert Binary(Literal(1.0), PLUS, Literal(2.0)).line == 1
    assert Unary(MINUS, Literal(1.0)).line == 2
    assert Variable(Token(TokenType.IDENTIFIER, "x", None, 7)).line == 7
    assert Grouping(Literal(None), 4).line == 4


def test_base_expr_is_abstract() -> None:
    with pytest.raises(TypeError, match="abstract"):
        Expr()  # type: ignore[abstract]


def test_equality_compares_token_lines_only() -> None:
    plus_line_3 = Token(TokenType.PLUS, "+", None, 3)
    assert Grouping(Literal(1.0, 1), 1) == Grouping(Literal(1.0, 9), 9)
    assert Binary(Literal(1.0), PLUS, Literal(2.0)) != Binary(
        Literal(1.0), plus_line_3, Literal(2.0)
    )


def test_kinds() -> None:
    assert [cls.kind for cls in (Literal, Grouping, Unary, Binary, Variable)] == [
        "literal",
        "grouping",
        "unary",
        "binary",
        "variable",
    ]


def test_to_dict_nested() -> None:
    tree = Grouping(
        Binary(
            Unary(MINUS, Literal(1.0, 2)),
            PLUS,
            Variable(Token(TokenType.IDENTIFIER, "x", None, 1)),
        ),
        1,
    )
    assert tree.to_dict() == {
        "kind": "grouping",
        "line": 1,
        "expression": {
            "kind": "binary",
            "line": 1,
            "operator": "+",
            "left": {
                "kind": "unary",
                "line": 2,
                "operator": "-",
                "right": {"kind": "literal", "line": 2, "value": 1.0},
            },
            "right": {"kind": "variable", "line": 1, "name": "x"},
        },
    }


def test_to_dict_is_json_serializable() -> None:
    node = Binary(Literal(None), PLUS, Literal(True))
    data = json.loads(json.dumps(node.to_dict()))
    assert data["left"]["value"] is None
    assert data["right"]["value"] is True
