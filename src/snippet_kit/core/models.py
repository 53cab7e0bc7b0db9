"""Domain models for snippet-kit.

All records are **frozen** dataclasses — immutable value objects with
no behaviour beyond data access and the display lines they produce.
They carry zero I/O and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from snippet_kit.exceptions import InvalidDayError


# ---------------------------------------------------------------------------
# Rated / priced records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Book:
    """A titled record carrying a numeric rating."""

    title: str
    rating: float


@dataclass(frozen=True, slots=True)
class Product:
    """A named record carrying a numeric price."""

    name: str
    price: float


# ---------------------------------------------------------------------------
# Vehicles
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Vehicle:
    """A vehicle identified by its make and model year."""

    make: str
    year: int

    def get_info(self) -> str:
        """Return the ``Make: <make>, Year: <year>`` display line."""
        return f"Make: {self.make}, Year: {self.year}"


@dataclass(frozen=True, slots=True)
class Car:
    """A :class:`Vehicle` plus a model name.

    The car embeds its vehicle rather than subclassing it.  Every
    vehicle operation is delegated explicitly, so a car handed to code
    expecting a vehicle reports exactly what the vehicle would.
    """

    vehicle: Vehicle
    model: str

    @classmethod
    def create(cls, make: str, year: int, model: str) -> Car:
        """Build the embedded :class:`Vehicle` and the car in one call."""
        return cls(vehicle=Vehicle(make=make, year=year), model=model)

    @property
    def make(self) -> str:
        return self.vehicle.make

    @property
    def year(self) -> int:
        return self.vehicle.year

    def get_info(self) -> str:
        """Return the embedded vehicle's display line, unchanged."""
        return self.vehicle.get_info()

    def get_model(self) -> str:
        """Return the ``Model: <model>`` display line."""
        return f"Model: {self.model}"


# ---------------------------------------------------------------------------
# Case option
# ---------------------------------------------------------------------------

class CaseOption(Enum):
    """Target letter case for :func:`~snippet_kit.core.text.format_string`."""

    UPPER = "upper"
    LOWER = "lower"

    @classmethod
    def from_flag(cls, to_upper: bool | None = None) -> CaseOption:
        """Map an optional ``to_upper`` flag onto a case option.

        Only an explicit ``False`` selects :attr:`LOWER`; ``True`` and an
        absent flag (``None``) both select :attr:`UPPER`.
        """
        if to_upper is False:
            return cls.LOWER
        return cls.UPPER


# ---------------------------------------------------------------------------
# Text-or-number sum type
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TextValue:
    """Textual variant of :data:`Value`."""

    text: str


@dataclass(frozen=True, slots=True)
class NumberValue:
    """Numeric variant of :data:`Value`."""

    number: int | float


Value = TextValue | NumberValue
"""Closed sum type: exactly one of the two variants at a time."""


# ---------------------------------------------------------------------------
# Days of the week
# ---------------------------------------------------------------------------

class Day(Enum):
    """The seven days of the week, Monday first."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def parse(cls, name: str) -> Day:
        """Look up a day by name, ignoring case and surrounding whitespace."""
        wanted = name.strip().upper()
        try:
            return cls[wanted]
        except KeyError:
            valid = ", ".join(day.value for day in cls)
            raise InvalidDayError(
                f"Unknown day: {name!r}",
                hint=f"Use one of: {valid}.",
            ) from None
