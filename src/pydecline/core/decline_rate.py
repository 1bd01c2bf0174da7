"""Decline rate representations and conversions.

Three standard ways of quoting how fast production declines over one time unit:

    Nominal (a):            instantaneous rate, d ln(q) / dt at t=0
    Tangent effective (De): 1 - exp(-a)
    Secant effective (Ds):  1 - (1 + b*a)^(-1/b)

where b is the Arps exponent. With b = 0 the secant effective formula
degenerates to the tangent effective one, so every b = 0 path is routed through
the tangent formula instead of dividing by zero.

Effective rates of 100% or more have no finite nominal equivalent and raise
DeclineRateTooHighError when converted.

References:
    SPEE Monograph 4. "Estimating Ultimate Recovery of Developed Wells in
    Low-Permeability Reservoirs".
"""

from dataclasses import dataclass

import numpy as np
from scipy import special

from ..validation.errors import DeclineRateTooHighError
from .units import TimeUnit


@dataclass(frozen=True)
class NominalDeclineRate:
    """Nominal (instantaneous) decline rate as a fraction per time unit.

    Negative values describe inclines.

    Attributes:
        value: Fraction per ``unit``
        unit: Time unit the rate is quoted over
    """
    value: float
    unit: TimeUnit

    def to_tangent_effective(self) -> "TangentEffectiveDeclineRate":
        with np.errstate(all="ignore"):
            tangent_effective = -np.expm1(-np.float64(self.value))
        return TangentEffectiveDeclineRate(float(tangent_effective), self.unit)

    def to_secant_effective(self, exponent: float) -> "SecantEffectiveDeclineRate":
        """Convert to a secant effective decline rate for Arps exponent ``exponent``."""
        if exponent == 0:
            # Exponential: secant and tangent effective coincide.
            tangent_effective = self.to_tangent_effective()
            return SecantEffectiveDeclineRate(tangent_effective.value, self.unit)

        b = np.float64(exponent)
        with np.errstate(all="ignore"):
            secant_effective = -special.powm1(1.0 + self.value * b, -1.0 / b)
        return SecantEffectiveDeclineRate(float(secant_effective), self.unit)

    def to_unit(self, unit: TimeUnit) -> "NominalDeclineRate":
        """Re-express the rate per another time unit (scales linearly)."""
        if unit == self.unit:
            return self
        return NominalDeclineRate((self.value * unit.length) / self.unit.length, unit)


@dataclass(frozen=True)
class SecantEffectiveDeclineRate:
    """Secant effective decline rate as a fraction per time unit.

    The Arps exponent is not stored; it must be supplied at conversion time.
    """
    value: float
    unit: TimeUnit

    def _to_nominal(self, exponent: float) -> NominalDeclineRate:
        if self.value >= 1:
            raise DeclineRateTooHighError()

        b = np.float64(exponent)
        with np.errstate(all="ignore"):
            nominal = special.powm1(1.0 - np.float64(self.value), -b) / b
        return NominalDeclineRate(float(nominal), self.unit)

    def to_nominal(self, exponent: float) -> NominalDeclineRate:
        """Convert to a nominal decline rate.

        Raises:
            DeclineRateTooHighError: If the secant effective rate is 1 or more
        """
        if exponent == 0:
            return TangentEffectiveDeclineRate(self.value, self.unit).to_nominal()
        return self._to_nominal(exponent)

    def to_tangent_effective(self, exponent: float) -> "TangentEffectiveDeclineRate":
        if exponent == 0:
            return TangentEffectiveDeclineRate(self.value, self.unit)
        return self._to_nominal(exponent).to_tangent_effective()

    def to_unit(self, unit: TimeUnit, exponent: float) -> "SecantEffectiveDeclineRate":
        """Re-express the rate per another time unit.

        Effective rates do not scale linearly, so the conversion goes through
        the nominal rate.
        """
        if unit == self.unit:
            return self
        return self.to_nominal(exponent).to_unit(unit).to_secant_effective(exponent)


@dataclass(frozen=True)
class TangentEffectiveDeclineRate:
    """Tangent effective decline rate as a fraction per time unit."""
    value: float
    unit: TimeUnit

    def to_nominal(self) -> NominalDeclineRate:
        """Convert to a nominal decline rate.

        Raises:
            DeclineRateTooHighError: If the tangent effective rate is 1 or more
        """
        if self.value >= 1:
            raise DeclineRateTooHighError()

        with np.errstate(all="ignore"):
            nominal = -np.log1p(-np.float64(self.value))
        return NominalDeclineRate(float(nominal), self.unit)

    def to_secant_effective(self, exponent: float) -> SecantEffectiveDeclineRate:
        if exponent == 0:
            return SecantEffectiveDeclineRate(self.value, self.unit)
        return self.to_nominal().to_secant_effective(exponent)

    def to_unit(self, unit: TimeUnit) -> "TangentEffectiveDeclineRate":
        if unit == self.unit:
            return self
        return self.to_nominal().to_unit(unit).to_tangent_effective()
