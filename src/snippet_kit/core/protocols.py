"""Protocols (structural interfaces) consumed by the core layer.

Core operations accept any object with the right attributes, not only
the concrete models in :mod:`snippet_kit.core.models`.
"""

from __future__ import annotations

from typing import Protocol


class Rated(Protocol):
    """Anything carrying a numeric ``rating``."""

    @property
    def rating(self) -> float: ...


class Priced(Protocol):
    """Anything carrying a numeric ``price``."""

    @property
    def price(self) -> float: ...


class Describable(Protocol):
    """Contract shared by :class:`Vehicle` and :class:`Car`.

    Both satisfy it structurally, which is what lets a car stand in
    wherever a vehicle's info line is expected.
    """

    def get_info(self) -> str:
        """Return a single human-readable display line."""
        ...
