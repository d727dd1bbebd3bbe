import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from lox import lox_cli
from lox.lox_errors import ErrorReporter, LoxSyntaxError


def test_run_source_scans_and_parses() -> None:
    reporter = ErrorReporter()
    tokens, result = lox_cli.run_source("1 + 2", reporter)
    assert len(tokens) == 4
    assert result.ok
    assert not reporter.had_error


def test_run_lox_string_prints_tree(capsys: pytest.CaptureFixture[str]) -> None:
    status = lox_cli.run_lox("1 + 2 * 3", is_string=True)
    out = capsys.readouterr().out.strip()
    assert status == 0
    assert out == "(+ 1.0 (* 2.0 3.0))"


def test_run_lox_file_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    file_path = tmp_path / "expr.lox"
    file_path.write_text("// grouping\n(1 + 2)\n", encoding="utf-8")
    status = lox_cli.run_lox(str(file_path))
    assert status == 0
    assert capsys.readouterr().out.strip() == "(group (+ 1.0 2.0))"


def test_run_lox_rejects_other_extensions(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Only .lox files"):
        lox_cli.run_lox(str(tmp_path / "expr.txt"))


def test_run_lox_tokens(capsys: pytest.CaptureFixture[str]) -> None:
    status = lox_cli.run_lox('"hi" != nil', is_string=True, show_tokens=True)
    lines = capsys.readouterr().out.splitlines()
    assert status == 0
    assert lines == [
        'STRING "hi" hi',
        "BANG_EQUAL != null",
        "NIL nil null",
        "EOF  null",
    ]


def test_run_lox_json(capsys: pytest.CaptureFixture[str]) -> None:
    status = lox_cli.run_lox("-x", is_string=True, as_json=True)
    data = json.loads(capsys.readouterr().out)
    assert status == 0
    assert data == {
        "kind": "unary",
        "line": 1,
        "operator": "-",
        "right": {"kind": "variable", "line": 1, "name": "x"},
    }


def test_run_lox_reports_errors(capsys: pytest.CaptureFixture[str]) -> None:
    status = lox_cli.run_lox("(1 + 2", is_string=True)
    captured = capsys.readouterr()
    assert status == 65
    assert captured.out == ""
    assert captured.err.strip() == "[line 1] Error at end: Expect ')' after expression."


def test_run_lox_reports_every_lexical_error(
    capsys: pytest.CaptureFixture[str],
) -> None:
    status = lox_cli.run_lox('1 + @2\n"open', is_string=True)
    captured = capsys.readouterr()
    assert status == 65
    assert captured.out.strip() == "(+ 1.0 2.0)"
    assert captured.err.splitlines() == [
        "[line 1] Error: Unexpected character.",
        "[line 2] Error: Unterminated string.",
    ]


def test_run_lox_strict_raises() -> None:
    with pytest.raises(LoxSyntaxError, match="Expect expression"):
        lox_cli.run_lox("1 +", is_string=True, strict=True)


def test_main_runs_string(capsys: pytest.CaptureFixture[str]) -> None:
    with patch.object(sys, "argv", ["lox", "-s", "nil == false"]):
        lox_cli.main()
    assert capsys.readouterr().out.strip() == "(== nil false)"


def test_main_exits_with_data_error(capsys: pytest.CaptureFixture[str]) -> None:
    with patch.object(sys, "argv", ["lox", "-s", ")"]):
        with pytest.raises(SystemExit) as excinfo:
            lox_cli.main()
    assert excinfo.value.code == 65
    assert "Expect expression." in capsys.readouterr().err


def test_main_without_args_starts_repl(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, bool]] = []
    monkeypatch.setattr(
        "lox.lox_repl.start_repl", lambda **kwargs: calls.append(kwargs)
    )
    with patch.object(sys, "argv", ["lox"]):
        lox_cli.main()
    assert calls == [{}]


def test_main_repl_flag_passes_modes(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, bool]] = []
    monkeypatch.setattr(
        "lox.lox_repl.start_repl", lambda **kwargs: calls.append(kwargs)
    )
    with patch.object(sys, "argv", ["lox", "--repl", "--json"]):
        lox_cli.main()
    assert calls == [{"show_tokens": False, "as_json": True}]


def test_run_lox_deep_nesting_reports_instead_of_crashing(
    capsys: pytest.CaptureFixture[str],
) -> None:
    status = lox_cli.run_lox("(" * 500 + "1" + ")" * 500, is_string=True)
    captured = capsys.readouterr()
    assert status == 65
    assert captured.out == ""
    assert "Expression nesting too deep." in captured.err
