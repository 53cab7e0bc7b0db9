"""CLI application entry point and command routing for snippet-kit.

This module is the **sole error boundary** for the entire application.
It catches :class:`~snippet_kit.exceptions.SnippetKitError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to ``core``.
* Result lines go to stdout; status and errors go to the stderr console.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from snippet_kit.cli import exit_codes
from snippet_kit.cli.console import console
from snippet_kit.exceptions import InvalidDayError, SnippetKitError
from snippet_kit.utils.logging_setup import configure_logging
from snippet_kit.version import __version__

logger = logging.getLogger(__name__)

TARGETS: tuple[str, ...] = ("demo", "days", "day")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Supported invocations:
    * ``snippet-kit demo``        — run the reference program
    * ``snippet-kit days``        — classify every day of the week
    * ``snippet-kit day <name>``  — classify one day
    * ``snippet-kit --version``
    """
    parser = argparse.ArgumentParser(
        prog="snippet-kit",
        description="Small pure utility operations and their reference demo.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit log records as JSON lines.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Command to run: demo, days, or day.",
    )
    parser.add_argument(
        "argument",
        nargs="?",
        default=None,
        help="Day name for the 'day' command.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_demo() -> int:
    from snippet_kit.cli.demo import run_demo

    return run_demo()


def _handle_days() -> int:
    from snippet_kit.cli.days import run_days_table

    return run_days_table()


def _handle_day(name: str | None) -> int:
    from snippet_kit.cli.days import run_day

    if name is None:
        raise InvalidDayError(
            "No day name given.",
            hint="Usage: snippet-kit day <name>, e.g. snippet-kit day sunday",
        )
    return run_day(name)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the snippet-kit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, log_json=args.log_json)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    target: str = args.target.lower()
    logger.debug("dispatching target=%s", target)

    if target == "demo":
        return _handle_demo()
    if target == "days":
        return _handle_days()
    if target == "day":
        return _handle_day(args.argument)

    raise SnippetKitError(
        f"Unknown command: {args.target!r}",
        hint=f"Use one of: {', '.join(TARGETS)}.",
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a
    raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SnippetKitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
