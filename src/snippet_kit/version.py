"""Single source of truth for the snippet-kit version."""

from __future__ import annotations

__version__: str = "0.1.0"
