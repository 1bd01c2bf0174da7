"""Exponential decline segment (Arps, b = 0).

    q(t)  = qi * exp(-D * t)
    Np(t) = qi / D * (1 - exp(-D * t))

For a positive decline rate the cumulative volume approaches qi / D as t goes
to infinity, so larger volumes cannot be reached. Inclines (D < 0) have no
volume limit.
"""

from dataclasses import dataclass
import logging
from typing import ClassVar

import numpy as np

from ..config import DEFAULT_CONFIG, DeclineConfig
from ..core.decline_rate import NominalDeclineRate
from ..core.units import Duration, ProductionRate
from ..validation.checks import (
    SignCheck,
    approx_gte,
    validate_decline_rate_sign,
    validate_duration,
    validate_incremental_volume,
    validate_non_zero_decline_rate,
    validate_non_zero_positive_rate,
    validate_same_unit,
)
from ..validation.errors import CannotSolveDeclineError
from .base import DeclineSegment, constant_like
from .kinds import SegmentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExponentialSegment(DeclineSegment):
    """Constant nominal decline rate segment.

    Attributes:
        initial_rate: Rate at the segment start
        decline_rate: Nominal decline rate (constant over the segment)
        incremental_duration: Length of the segment
    """
    initial_rate: ProductionRate
    decline_rate: NominalDeclineRate
    incremental_duration: Duration

    kind: ClassVar[SegmentKind] = SegmentKind.EXPONENTIAL

    @classmethod
    def from_incremental_duration(
        cls,
        initial_rate: ProductionRate,
        decline_rate: NominalDeclineRate,
        incremental_duration: Duration,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "ExponentialSegment":
        validate_same_unit(
            initial_rate.unit, decline_rate=decline_rate, duration=incremental_duration
        )
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(decline_rate.value, "decline rate", config)
        validate_duration(incremental_duration, config)

        return cls(initial_rate, decline_rate, incremental_duration)

    @classmethod
    def from_incremental_volume(
        cls,
        initial_rate: ProductionRate,
        decline_rate: NominalDeclineRate,
        incremental_volume: float,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "ExponentialSegment":
        """Solve for the duration needed to produce ``incremental_volume``.

            t = -ln(1 - V * D / qi) / D

        Raises:
            CannotSolveDeclineError: If the volume is at or above qi / D
        """
        validate_same_unit(initial_rate.unit, decline_rate=decline_rate)
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(decline_rate.value, "decline rate", config)
        validate_incremental_volume(incremental_volume)

        d = np.float64(decline_rate.value)
        if d > 0:
            max_volume = initial_rate.value / d
            if approx_gte(incremental_volume, max_volume, config.epsilon):
                raise CannotSolveDeclineError()

        with np.errstate(all="ignore"):
            duration = -np.log1p((-incremental_volume * d) / initial_rate.value) / d
        incremental_duration = Duration(float(duration), initial_rate.unit)
        validate_duration(incremental_duration, config)

        logger.debug(f"Solved exponential duration {incremental_duration.value} from volume {incremental_volume}")
        return cls(initial_rate, decline_rate, incremental_duration)

    @classmethod
    def from_final_rate(
        cls,
        initial_rate: ProductionRate,
        decline_rate: NominalDeclineRate,
        final_rate: ProductionRate,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "ExponentialSegment":
        """Solve for the duration at which the rate reaches ``final_rate``.

            t = ln(qi / qf) / D
        """
        validate_same_unit(initial_rate.unit, decline_rate=decline_rate, final_rate=final_rate)
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(decline_rate.value, "decline rate", config)
        validate_non_zero_positive_rate(final_rate.value, "final rate", config)

        sign_check = validate_decline_rate_sign(decline_rate.value, initial_rate.value, final_rate.value)
        if sign_check is SignCheck.ZERO_DURATION:
            logger.debug("Initial and final rates are equal; exponential segment has zero duration")
            return cls(initial_rate, decline_rate, Duration(0.0, initial_rate.unit))

        with np.errstate(all="ignore"):
            duration = np.log(np.float64(initial_rate.value) / final_rate.value) / decline_rate.value
        incremental_duration = Duration(float(duration), initial_rate.unit)
        validate_duration(incremental_duration, config)

        return cls(initial_rate, decline_rate, incremental_duration)

    def decline_rate_at_time(self, time: Duration) -> NominalDeclineRate:
        """Instantaneous nominal decline rate, constant for an exponential."""
        return NominalDeclineRate(constant_like(self.decline_rate.value, time.value), self.unit)

    def final_decline_rate(self) -> NominalDeclineRate:
        return self.decline_rate

    def _rate(self, t):
        return self.initial_rate.value * np.exp(-self.decline_rate.value * t)

    def _incremental_volume(self, t):
        d = self.decline_rate.value
        return (-np.expm1(-d * t) * self.initial_rate.value) / d
