"""Linear decline segment.

The rate falls (or rises, for negative decline rates) by a constant amount per
unit time:

    q(t)  = qi * (1 - D * t)
    Np(t) = qi * t - D * qi * t^2 / 2

A linear decline eventually drives the rate through zero, so every constructor
keeps the solved window on the physical side of that crossing.
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
    is_effectively_zero,
    validate_decline_rate_sign,
    validate_duration,
    validate_incremental_volume,
    validate_non_zero_decline_rate,
    validate_non_zero_positive_rate,
    validate_same_unit,
)
from ..validation.errors import CannotSolveDeclineError
from .base import DeclineSegment
from .kinds import SegmentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearSegment(DeclineSegment):
    """Linear decline segment.

    Attributes:
        initial_rate: Rate at the segment start
        decline_rate: Fraction of the initial rate lost per time unit
        incremental_duration: Length of the segment
    """
    initial_rate: ProductionRate
    decline_rate: NominalDeclineRate
    incremental_duration: Duration

    kind: ClassVar[SegmentKind] = SegmentKind.LINEAR

    @classmethod
    def from_incremental_duration(
        cls,
        initial_rate: ProductionRate,
        decline_rate: NominalDeclineRate,
        incremental_duration: Duration,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "LinearSegment":
        """Create a segment with a known duration.

        Raises:
            InvalidInputError: If the rate would reach zero or go negative
                before the end of the segment
        """
        validate_same_unit(
            initial_rate.unit, decline_rate=decline_rate, duration=incremental_duration
        )
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(decline_rate.value, "decline rate", config)
        validate_duration(incremental_duration, config)

        segment = cls(initial_rate, decline_rate, incremental_duration)

        with np.errstate(all="ignore"):
            final_rate = segment._rate(incremental_duration.value)
        validate_non_zero_positive_rate(final_rate, "final rate", config)

        return segment

    @classmethod
    def from_incremental_volume(
        cls,
        initial_rate: ProductionRate,
        decline_rate: NominalDeclineRate,
        incremental_volume: float,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "LinearSegment":
        """Solve for the duration needed to produce ``incremental_volume``.

        The volume relation is a quadratic in t. Of its two roots only the
        earlier one is physical; the later one lies past the point where the
        rate crosses zero and the produced volume starts shrinking again.

        Raises:
            CannotSolveDeclineError: If the volume is never reached before the
                rate hits zero
        """
        validate_same_unit(initial_rate.unit, decline_rate=decline_rate)
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(decline_rate.value, "decline rate", config)
        validate_incremental_volume(incremental_volume)

        if is_effectively_zero(incremental_volume, config.epsilon):
            return cls(initial_rate, decline_rate, Duration(0.0, initial_rate.unit))

        qi = np.float64(initial_rate.value)
        with np.errstate(all="ignore"):
            discriminant = qi * qi - 2.0 * decline_rate.value * qi * incremental_volume
            if discriminant < 0:
                raise CannotSolveDeclineError()

            # Earlier root of -D*qi/2 * t^2 + qi * t - V = 0, written without
            # the cancellation in (-qi + sqrt(disc)) / (-D * qi).
            duration = 2.0 * incremental_volume / (qi + np.sqrt(discriminant))

        incremental_duration = Duration(float(duration), initial_rate.unit)
        validate_duration(incremental_duration, config)

        logger.debug(f"Solved linear duration {incremental_duration.value} from volume {incremental_volume}")
        return cls(initial_rate, decline_rate, incremental_duration)

    @classmethod
    def from_final_rate(
        cls,
        initial_rate: ProductionRate,
        decline_rate: NominalDeclineRate,
        final_rate: ProductionRate,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "LinearSegment":
        validate_same_unit(initial_rate.unit, decline_rate=decline_rate, final_rate=final_rate)
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(decline_rate.value, "decline rate", config)
        validate_non_zero_positive_rate(final_rate.value, "final rate", config)

        sign_check = validate_decline_rate_sign(decline_rate.value, initial_rate.value, final_rate.value)
        if sign_check is SignCheck.ZERO_DURATION:
            logger.debug("Initial and final rates are equal; linear segment has zero duration")
            return cls(initial_rate, decline_rate, Duration(0.0, initial_rate.unit))

        with np.errstate(all="ignore"):
            duration = (np.float64(initial_rate.value) - final_rate.value) / (
                initial_rate.value * decline_rate.value
            )
        incremental_duration = Duration(float(duration), initial_rate.unit)
        validate_duration(incremental_duration, config)

        return cls(initial_rate, decline_rate, incremental_duration)

    def _rate(self, t):
        qi = self.initial_rate.value
        return qi - qi * self.decline_rate.value * t

    def _incremental_volume(self, t):
        qi = self.initial_rate.value
        return qi * t - 0.5 * self.decline_rate.value * qi * np.square(t)
