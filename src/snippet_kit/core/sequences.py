"""Pure sequence operations: filter, concatenate, maximum-by-price.

Every function here returns a **new** list or an existing element and
never mutates its input.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from snippet_kit.core.protocols import Priced, Rated
from snippet_kit.exceptions import EmptyInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound=Rated)
P = TypeVar("P", bound=Priced)

MIN_RATING: float = 4
"""Default lowest rating kept by :func:`filter_by_rating` (inclusive)."""


# ---------------------------------------------------------------------------
# Filter
# ---------------------------------------------------------------------------

def filter_by_rating(
    items: Sequence[R],
    *,
    threshold: float = MIN_RATING,
) -> list[R]:
    """Keep the items rated at least *threshold*, in their original order."""
    kept = [item for item in items if item.rating >= threshold]
    logger.debug(
        "filter_by_rating kept %d of %d (threshold=%s)",
        len(kept), len(items), threshold,
    )
    return kept


# ---------------------------------------------------------------------------
# Concatenate
# ---------------------------------------------------------------------------

def concatenate_arrays(*arrays: Sequence[T]) -> list[T]:
    """Join *arrays* end to end; no arguments gives an empty list."""
    result: list[T] = []
    for array in arrays:
        result.extend(array)
    return result


# ---------------------------------------------------------------------------
# Maximum by price
# ---------------------------------------------------------------------------

def get_most_expensive_product(products: Sequence[P]) -> P:
    """Return the highest-priced product.

    Scans left to right and only replaces the current best on a
    strictly greater price, so among equal maxima the earliest wins.

    Raises
    ------
    EmptyInputError
        When *products* is empty.
    """
    if not products:
        raise EmptyInputError(
            "Cannot pick the most expensive product from an empty list.",
            hint="Pass at least one product.",
        )
    best = products[0]
    for product in products[1:]:
        if product.price > best.price:
            best = product
    return best
