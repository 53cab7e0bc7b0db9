"""Allow ``python -m snippet_kit`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m snippet_kit`` behaves identically to the ``snippet-kit``
console script.
"""

from __future__ import annotations

from snippet_kit.cli.app import cli

if __name__ == "__main__":
    cli()
