"""snippet-kit — small, pure utility operations with a demo CLI.

Built as a strict layered package: pure ``core``, Rich-backed ``cli``.
"""

from snippet_kit.version import __version__

__all__: list[str] = ["__version__"]
