"""Shared pytest fixtures and configuration for the snippet-kit test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
* ``main()`` reconfigures root logging; the autouse fixture undoes it.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root and package logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package = logging.getLogger("snippet_kit")
    package_level = package.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package.setLevel(package_level)
