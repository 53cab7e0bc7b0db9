"""``snippet-kit demo`` — the reference program.

Calls every core operation on fixed sample data and writes one stdout
line per top-level call, in call order.  The lines are the library's
observable contract, so the sample data and the order below are fixed.
"""

from __future__ import annotations

from snippet_kit.cli import exit_codes
from snippet_kit.cli.console import output
from snippet_kit.core.days import get_day_type
from snippet_kit.core.models import (
    Book,
    Car,
    CaseOption,
    Day,
    NumberValue,
    Product,
    TextValue,
)
from snippet_kit.core.sequences import (
    concatenate_arrays,
    filter_by_rating,
    get_most_expensive_product,
)
from snippet_kit.core.text import format_string, process_value


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

BOOKS: tuple[Book, ...] = (
    Book(title="Book A", rating=4.5),
    Book(title="Book B", rating=3.2),
    Book(title="Book C", rating=5.0),
)

PRODUCTS: tuple[Product, ...] = (
    Product(name="Pen", price=10),
    Product(name="Notebook", price=25),
    Product(name="Bag", price=50),
)


# ---------------------------------------------------------------------------
# Line producer
# ---------------------------------------------------------------------------

def demo_lines() -> list[str]:
    """Return the reference output lines without printing them."""
    car = Car.create("Toyota", 2020, "Corolla")
    return [
        format_string("hello", CaseOption.LOWER),
        format_string("hello", CaseOption.UPPER),
        repr(filter_by_rating(BOOKS)),
        repr(concatenate_arrays(["a", "b"], ["c"])),
        repr(concatenate_arrays([1, 2], [3, 4], [5])),
        car.get_info(),
        car.get_model(),
        str(process_value(TextValue("hello"))),
        str(process_value(NumberValue(10))),
        repr(get_most_expensive_product(PRODUCTS)),
        get_day_type(Day.MONDAY),
        get_day_type(Day.SUNDAY),
    ]


def run_demo() -> int:
    """Print the reference output lines to stdout."""
    for line in demo_lines():
        output.line(line)
    return exit_codes.SUCCESS
