"""Custom exception hierarchy for snippet-kit.

Every error the library raises on purpose inherits from
:class:`SnippetKitError`, so the CLI error boundary can render a clean
message without leaking a stack trace.

Hierarchy
---------
SnippetKitError
├── EmptyInputError
├── UnsupportedValueError
├── InvalidDayError
└── EnvironmentError
"""

from __future__ import annotations


class SnippetKitError(Exception):
    """Base exception for all snippet-kit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class EmptyInputError(SnippetKitError):
    """Raised when an operation needs at least one element and got none."""


class UnsupportedValueError(SnippetKitError):
    """Raised when a raw value is neither text nor a number."""


class InvalidDayError(SnippetKitError):
    """Raised when a day name does not match any :class:`Day` member."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(SnippetKitError):
    """Raised when an optional runtime dependency is not available."""
