"""Hyperbolic decline segment (general Arps equation).

    q(t)  = qi / (1 + b * Di * t)^(1/b)
    Np(t) = qi / ((1 - b) * Di) * [1 - (1 + b*Di*t)^(1 - 1/b)]
    D(t)  = Di / (1 + b * Di * t)

Where:
    qi = Initial production rate
    Di = Initial nominal decline rate
    b  = Hyperbolic exponent

Exponents of 0 and 1 are the exponential and harmonic limits. The general
formulas are badly conditioned near them, so those cases are rejected here in
favour of ExponentialSegment and HarmonicSegment.

The exponent must share the sign of the decline rate: declines use b > 0,
inclines use b < 0. For 0 < b < 1 with Di > 0, cumulative volume approaches
qi / ((1 - b) * Di) as t goes to infinity, so larger volumes cannot be reached.

References:
    Arps, J.J. (1945). "Analysis of Decline Curves". Trans. AIME, 160, 228-247.
"""

from dataclasses import dataclass
import logging
from typing import ClassVar

import numpy as np
from scipy import special

from ..config import DEFAULT_CONFIG, DeclineConfig
from ..core.decline_rate import NominalDeclineRate
from ..core.units import Duration, ProductionRate
from ..validation.checks import (
    SignCheck,
    approx_gte,
    is_effectively_zero,
    validate_decline_rate_sign,
    validate_duration,
    validate_finite,
    validate_incremental_volume,
    validate_non_zero_decline_rate,
    validate_non_zero_positive_rate,
    validate_same_unit,
)
from ..validation.errors import (
    CannotSolveDeclineError,
    DeclineRateWrongSignError,
    ExponentTooLargeError,
    InvalidInputError,
)
from .base import DeclineSegment
from .kinds import SegmentKind

logger = logging.getLogger(__name__)


def validate_hyperbolic_exponent(
    exponent: float,
    initial_decline_rate: float,
    config: DeclineConfig = DEFAULT_CONFIG,
) -> None:
    """Validate a hyperbolic exponent against the initial decline rate.

    Raises:
        InvalidInputError: If the exponent is not finite or is approximately 0 or 1
        ExponentTooLargeError: If abs(exponent) exceeds ``config.max_exponent``
        DeclineRateWrongSignError: If the exponent and decline rate differ in sign
    """
    validate_finite(exponent, "exponent")
    if is_effectively_zero(exponent, config.epsilon):
        raise InvalidInputError(
            "exponent was approximately zero, so an exponential should be used instead"
        )
    if is_effectively_zero(exponent - 1.0, config.epsilon):
        raise InvalidInputError(
            "exponent was approximately one, so a harmonic should be used instead"
        )
    if abs(exponent) > config.max_exponent:
        raise ExponentTooLargeError()
    if np.signbit(exponent) != np.signbit(initial_decline_rate):
        raise DeclineRateWrongSignError()


@dataclass(frozen=True)
class HyperbolicSegment(DeclineSegment):
    """Hyperbolic decline segment.

    Attributes:
        initial_rate: Rate at the segment start
        initial_decline_rate: Nominal decline rate at the segment start
        exponent: Arps b-factor (not 0 or 1, same sign as the decline rate)
        incremental_duration: Length of the segment
    """
    initial_rate: ProductionRate
    initial_decline_rate: NominalDeclineRate
    exponent: float
    incremental_duration: Duration

    kind: ClassVar[SegmentKind] = SegmentKind.HYPERBOLIC

    @classmethod
    def from_incremental_duration(
        cls,
        initial_rate: ProductionRate,
        initial_decline_rate: NominalDeclineRate,
        exponent: float,
        incremental_duration: Duration,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "HyperbolicSegment":
        validate_same_unit(
            initial_rate.unit,
            initial_decline_rate=initial_decline_rate,
            duration=incremental_duration,
        )
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(initial_decline_rate.value, "initial decline rate", config)
        validate_duration(incremental_duration, config)
        validate_hyperbolic_exponent(exponent, initial_decline_rate.value, config)

        return cls(initial_rate, initial_decline_rate, exponent, incremental_duration)

    @classmethod
    def from_incremental_volume(
        cls,
        initial_rate: ProductionRate,
        initial_decline_rate: NominalDeclineRate,
        exponent: float,
        incremental_volume: float,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "HyperbolicSegment":
        """Solve for the duration needed to produce ``incremental_volume``.

            t = ([1 - V*Di*(1-b)/qi]^(-b/(1-b)) - 1) / (b * Di)

        Raises:
            CannotSolveDeclineError: If 0 < b < 1, Di > 0 and the volume is at
                or above the asymptotic maximum
        """
        validate_same_unit(initial_rate.unit, initial_decline_rate=initial_decline_rate)
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(initial_decline_rate.value, "initial decline rate", config)
        validate_incremental_volume(incremental_volume)
        validate_hyperbolic_exponent(exponent, initial_decline_rate.value, config)

        di = np.float64(initial_decline_rate.value)
        b = np.float64(exponent)
        one_minus_b = 1.0 - b

        # Other exponent ranges and inclines have no volume limit.
        if di > 0 and 0 < b < 1:
            max_volume = initial_rate.value / (one_minus_b * di)
            if approx_gte(incremental_volume, max_volume, config.epsilon):
                raise CannotSolveDeclineError()

        with np.errstate(all="ignore"):
            base = 1.0 - (incremental_volume * di * one_minus_b) / initial_rate.value
            duration = special.powm1(base, -b / one_minus_b) / (b * di)
        incremental_duration = Duration(float(duration), initial_rate.unit)
        validate_duration(incremental_duration, config)

        logger.debug(f"Solved hyperbolic duration {incremental_duration.value} from volume {incremental_volume}")
        return cls(initial_rate, initial_decline_rate, exponent, incremental_duration)

    @classmethod
    def from_final_decline_rate(
        cls,
        initial_rate: ProductionRate,
        initial_decline_rate: NominalDeclineRate,
        exponent: float,
        final_decline_rate: NominalDeclineRate,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "HyperbolicSegment":
        """Solve for the duration at which the decline rate reaches ``final_decline_rate``.

            t = (Di / Df - 1) / (b * Di)

        With b > 0 the decline rate can only fall; with b < 0 (inclines) it
        can only rise toward zero.

        Raises:
            CannotSolveDeclineError: If the decline rates differ in sign or the
                final decline rate moves the wrong way
        """
        validate_same_unit(
            initial_rate.unit,
            initial_decline_rate=initial_decline_rate,
            final_decline_rate=final_decline_rate,
        )
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(initial_decline_rate.value, "initial decline rate", config)
        validate_non_zero_decline_rate(final_decline_rate.value, "final decline rate", config)
        validate_hyperbolic_exponent(exponent, initial_decline_rate.value, config)

        di = initial_decline_rate.value
        df = final_decline_rate.value

        if np.signbit(di) != np.signbit(df):
            raise CannotSolveDeclineError()

        if di == df:
            logger.debug("Initial and final decline rates are equal; hyperbolic segment has zero duration")
            return cls(initial_rate, initial_decline_rate, exponent, Duration(0.0, initial_rate.unit))

        if exponent > 0:
            if df > di:
                raise CannotSolveDeclineError()
        elif df < di:
            raise CannotSolveDeclineError()

        with np.errstate(all="ignore"):
            duration = (np.float64(di) / df - 1.0) / (exponent * di)
        incremental_duration = Duration(float(duration), initial_rate.unit)
        validate_duration(incremental_duration, config)

        return cls(initial_rate, initial_decline_rate, exponent, incremental_duration)

    @classmethod
    def from_final_rate(
        cls,
        initial_rate: ProductionRate,
        initial_decline_rate: NominalDeclineRate,
        exponent: float,
        final_rate: ProductionRate,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "HyperbolicSegment":
        """Solve for the duration at which the rate reaches ``final_rate``.

            t = ((qi / qf)^b - 1) / (b * Di)
        """
        validate_same_unit(
            initial_rate.unit, initial_decline_rate=initial_decline_rate, final_rate=final_rate
        )
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(initial_decline_rate.value, "initial decline rate", config)
        validate_non_zero_positive_rate(final_rate.value, "final rate", config)
        validate_hyperbolic_exponent(exponent, initial_decline_rate.value, config)

        sign_check = validate_decline_rate_sign(
            initial_decline_rate.value, initial_rate.value, final_rate.value
        )
        if sign_check is SignCheck.ZERO_DURATION:
            logger.debug("Initial and final rates are equal; hyperbolic segment has zero duration")
            return cls(initial_rate, initial_decline_rate, exponent, Duration(0.0, initial_rate.unit))

        b = np.float64(exponent)
        with np.errstate(all="ignore"):
            ratio = np.float64(initial_rate.value) / final_rate.value
            duration = special.powm1(ratio, b) / (b * initial_decline_rate.value)
        incremental_duration = Duration(float(duration), initial_rate.unit)
        validate_duration(incremental_duration, config)

        return cls(initial_rate, initial_decline_rate, exponent, incremental_duration)

    def decline_rate_at_time(self, time: Duration) -> NominalDeclineRate:
        """Instantaneous nominal decline rate at ``time`` (clamped to the segment)."""
        di = self.initial_decline_rate.value
        with np.errstate(all="ignore"):
            return NominalDeclineRate(di / (1.0 + self.exponent * di * self._clamp(time)), self.unit)

    def final_decline_rate(self) -> NominalDeclineRate:
        return self.decline_rate_at_time(self.incremental_duration)

    def _rate(self, t):
        b = self.exponent
        base = 1.0 + b * self.initial_decline_rate.value * t
        return self.initial_rate.value / np.power(base, 1.0 / b)

    def _incremental_volume(self, t):
        b = self.exponent
        di = self.initial_decline_rate.value

        # qi / (Di * (1 - b))
        factor = np.float64(self.initial_rate.value) / (di - di * b)
        base = 1.0 + b * di * t
        return -factor * special.powm1(base, 1.0 - 1.0 / b)
