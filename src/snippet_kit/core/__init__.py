"""Core layer — pure value objects and operations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from snippet_kit.core.days import WEEKDAY, WEEKEND, WEEKEND_DAYS, get_day_type
from snippet_kit.core.models import (
    Book,
    Car,
    CaseOption,
    Day,
    NumberValue,
    Product,
    TextValue,
    Value,
    Vehicle,
)
from snippet_kit.core.protocols import Describable, Priced, Rated
from snippet_kit.core.sequences import (
    MIN_RATING,
    concatenate_arrays,
    filter_by_rating,
    get_most_expensive_product,
)
from snippet_kit.core.text import DEFAULT_CASE, as_value, format_string, process_value

__all__: list[str] = [
    "DEFAULT_CASE",
    "MIN_RATING",
    "WEEKDAY",
    "WEEKEND",
    "WEEKEND_DAYS",
    "Book",
    "Car",
    "CaseOption",
    "Day",
    "Describable",
    "NumberValue",
    "Priced",
    "Product",
    "Rated",
    "TextValue",
    "Value",
    "Vehicle",
    "as_value",
    "concatenate_arrays",
    "filter_by_rating",
    "format_string",
    "get_day_type",
    "get_most_expensive_product",
    "process_value",
]
