"""Case conversion and text-or-number dispatch.

Both operations are pure and total over their declared input types.
The only failure mode lives at the boundary, in :func:`as_value`, where
an arbitrary Python object is turned into a :data:`Value` variant.
"""

from __future__ import annotations

import logging

from snippet_kit.core.models import CaseOption, NumberValue, TextValue, Value
from snippet_kit.exceptions import UnsupportedValueError

logger = logging.getLogger(__name__)

DEFAULT_CASE: CaseOption = CaseOption.UPPER
"""Case applied by :func:`format_string` when none is given."""


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------

def format_string(text: str, case: CaseOption = DEFAULT_CASE) -> str:
    """Return *text* converted to the requested letter case."""
    if case is CaseOption.LOWER:
        return text.lower()
    return text.upper()


# ---------------------------------------------------------------------------
# Text-or-number dispatch
# ---------------------------------------------------------------------------

def as_value(raw: object) -> Value:
    """Wrap a raw ``str``, ``int`` or ``float`` in its :data:`Value` variant.

    ``bool`` is rejected even though it subclasses ``int``.

    Raises
    ------
    UnsupportedValueError
        When *raw* is neither text nor a number.
    """
    if isinstance(raw, str):
        return TextValue(raw)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return NumberValue(raw)
    raise UnsupportedValueError(
        f"Expected text or a number, got {type(raw).__name__}",
        hint="Pass a str, int or float.",
    )


def process_value(value: Value) -> int | float:
    """Measure text or double a number.

    * :class:`TextValue` → number of characters.
    * :class:`NumberValue` → the number times two, keeping its type
      (``int`` stays ``int``, ``float`` stays ``float``) and its sign.
    """
    match value:
        case TextValue(text=text):
            result: int | float = len(text)
        case NumberValue(number=number):
            result = number * 2
        case _:
            raise UnsupportedValueError(
                f"Expected TextValue or NumberValue, got {type(value).__name__}",
                hint="Wrap raw input with as_value() first.",
            )
    logger.debug("processed %s -> %r", type(value).__name__, result)
    return result
