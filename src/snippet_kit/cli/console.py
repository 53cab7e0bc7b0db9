"""CLI console helpers with optional Rich support.

Two proxies are exposed:

* :data:`console` — Rich-markup status and error messages on stderr.
* :data:`output` — plain result lines on stdout, never reformatted.

Rich is imported lazily so ``--help`` and ``--version`` keep working
when it is not installed; both proxies fall back to ``print``.
"""

from __future__ import annotations

import sys
from typing import Any

from snippet_kit.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


class _OutputProxy:
	"""Writes result lines to stdout exactly as given."""

	def line(self, text: str) -> None:
		"""Emit *text* as one stdout line, with no markup, highlighting or wrapping."""
		try:
			rich_console = get_rich_console(stderr=False)
		except EnvironmentError:
			print(text)
			return
		rich_console.print(
			text,
			markup=False,
			highlight=False,
			emoji=False,
			soft_wrap=True,
		)


console = _ConsoleProxy()
output = _OutputProxy()
