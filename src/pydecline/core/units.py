"""Time units and unit-tagged scalars.

Every time-dependent scalar carries the unit it is expressed in. Unit lengths
are measured in average days, where an average year is 365.25 days, so that
conversions work even between units with different year lengths (e.g. a
365-day year used by some economics software).

Conversions:
    Duration:       value * source.length / target.length
    ProductionRate: value * target.length / source.length

Example:
    >>> Duration.from_years(2).days
    730.5
    >>> ProductionRate(365.25, YEARS).to_unit(DAYS).value
    1.0
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class TimeUnit:
    """A unit of time defined by its length in average days.

    Attributes:
        name: Human readable unit name, used in error messages
        length: Length of one unit in average days (must be positive)
    """
    name: str
    length: float

    def __post_init__(self) -> None:
        if not (np.isfinite(self.length) and self.length > 0):
            raise ValueError(f"Time unit length must be positive and finite, got {self.length}")

    def __str__(self) -> str:
        return self.name


DAYS = TimeUnit("days", 1.0)
YEARS = TimeUnit("years", 365.25)


@dataclass(frozen=True)
class Duration:
    """A span of time in a specific unit.

    The value may be a float or a numpy array; segment evaluators accept both.

    Attributes:
        value: Amount of time
        unit: Unit the value is expressed in
    """
    value: float | np.ndarray
    unit: TimeUnit

    @classmethod
    def from_days(cls, days: float | np.ndarray) -> "Duration":
        return cls(days, DAYS)

    @classmethod
    def from_years(cls, years: float | np.ndarray) -> "Duration":
        return cls(years, YEARS)

    @property
    def length(self) -> float:
        """Length of this duration's unit in average days."""
        return self.unit.length

    @property
    def days(self) -> float | np.ndarray:
        return self.to_unit(DAYS).value

    @property
    def years(self) -> float | np.ndarray:
        return self.to_unit(YEARS).value

    def to_unit(self, unit: TimeUnit) -> "Duration":
        """Convert to another time unit.

        Args:
            unit: Target time unit

        Returns:
            Equivalent Duration expressed in ``unit``
        """
        if unit == self.unit:
            return self
        return Duration((self.value * self.unit.length) / unit.length, unit)


@dataclass(frozen=True)
class ProductionRate:
    """A production rate in volume per time unit.

    No sign constraint is enforced here; consumers validate in context.

    Attributes:
        value: Volume produced per ``unit``
        unit: Time unit of the denominator
    """
    value: float | np.ndarray
    unit: TimeUnit

    def to_unit(self, unit: TimeUnit) -> "ProductionRate":
        """Convert to a rate per another time unit.

        A rate per year becomes a rate per day by dividing by 365.25.
        """
        if unit == self.unit:
            return self
        return ProductionRate((self.value * unit.length) / self.unit.length, unit)
