"""Regression tests for the optional Rich UI dependency.

Result lines, help and version must keep working when Rich is missing;
the console proxies fall back to plain ``print``.
"""

from __future__ import annotations

import sys

import pytest

from snippet_kit.cli import exit_codes
from snippet_kit.cli.app import main
from snippet_kit.cli.console import console, get_rich_console, output
from snippet_kit.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_get_rich_console_raises_typed_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError) as exc_info:
        get_rich_console()
    assert "pip install rich" in str(exc_info.value)


def test_demo_output_identical_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert main(["demo"]) == exit_codes.SUCCESS
    with_rich = capsys.readouterr().out

    _hide_rich(monkeypatch)
    assert main(["demo"]) == exit_codes.SUCCESS
    without_rich = capsys.readouterr().out

    assert without_rich == with_rich


def test_output_line_is_not_markup_parsed(capsys: pytest.CaptureFixture[str]) -> None:
    output.line("[bold]literal[/bold] :smile:")
    assert capsys.readouterr().out == "[bold]literal[/bold] :smile:\n"


def test_console_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    console.print("plain message")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "plain message\n"
