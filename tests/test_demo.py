"""Tests for the reference program (cli/demo.py).

The demo's stdout is the library's observable contract: one line per
top-level call, in call order.
"""

from __future__ import annotations

import pytest

from snippet_kit.cli import exit_codes
from snippet_kit.cli.app import main
from snippet_kit.cli.demo import demo_lines, run_demo

EXPECTED_LINES: list[str] = [
    "hello",
    "HELLO",
    "[Book(title='Book A', rating=4.5), Book(title='Book C', rating=5.0)]",
    "['a', 'b', 'c']",
    "[1, 2, 3, 4, 5]",
    "Make: Toyota, Year: 2020",
    "Model: Corolla",
    "5",
    "20",
    "Product(name='Bag', price=50)",
    "Weekday",
    "Weekend",
]


class TestDemoLines:
    def test_lines_match_reference(self) -> None:
        assert demo_lines() == EXPECTED_LINES

    def test_car_lines_are_consecutive(self) -> None:
        lines = demo_lines()
        i = lines.index("Make: Toyota, Year: 2020")
        assert lines[i + 1] == "Model: Corolla"


class TestRunDemo:
    def test_prints_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = run_demo()
        assert code == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert captured.out.splitlines() == EXPECTED_LINES

    def test_via_cli(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["demo"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines() == EXPECTED_LINES
