"""Harmonic decline segment (Arps, b = 1).

    q(t)  = qi / (1 + Di * t)
    Np(t) = qi / Di * ln(1 + Di * t)
    D(t)  = Di / (1 + Di * t)

Cumulative volume is unbounded for declines. Inclines (Di < 0) blow up at
t = -1/Di, where the rate and volume diverge; durations at or past that point
are rejected as too long.
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
from ..validation.errors import CannotSolveDeclineError, DurationTooLongError
from .base import DeclineSegment
from .kinds import SegmentKind

logger = logging.getLogger(__name__)


def _validate_before_singularity(
    initial_decline_rate: float,
    incremental_duration: Duration,
    config: DeclineConfig,
) -> None:
    """Reject incline durations that reach the t = -1/Di singularity."""
    if initial_decline_rate < 0:
        singularity = -1.0 / initial_decline_rate
        if approx_gte(incremental_duration.value, singularity, config.epsilon):
            raise DurationTooLongError()


@dataclass(frozen=True)
class HarmonicSegment(DeclineSegment):
    """Harmonic decline segment.

    Attributes:
        initial_rate: Rate at the segment start
        initial_decline_rate: Nominal decline rate at the segment start
        incremental_duration: Length of the segment
    """
    initial_rate: ProductionRate
    initial_decline_rate: NominalDeclineRate
    incremental_duration: Duration

    kind: ClassVar[SegmentKind] = SegmentKind.HARMONIC

    @classmethod
    def from_incremental_duration(
        cls,
        initial_rate: ProductionRate,
        initial_decline_rate: NominalDeclineRate,
        incremental_duration: Duration,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "HarmonicSegment":
        validate_same_unit(
            initial_rate.unit,
            initial_decline_rate=initial_decline_rate,
            duration=incremental_duration,
        )
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(initial_decline_rate.value, "initial decline rate", config)
        validate_duration(incremental_duration, config)
        _validate_before_singularity(initial_decline_rate.value, incremental_duration, config)

        return cls(initial_rate, initial_decline_rate, incremental_duration)

    @classmethod
    def from_incremental_volume(
        cls,
        initial_rate: ProductionRate,
        initial_decline_rate: NominalDeclineRate,
        incremental_volume: float,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "HarmonicSegment":
        """Solve for the duration needed to produce ``incremental_volume``.

            t = (exp(V * Di / qi) - 1) / Di
        """
        validate_same_unit(initial_rate.unit, initial_decline_rate=initial_decline_rate)
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(initial_decline_rate.value, "initial decline rate", config)
        validate_incremental_volume(incremental_volume)

        di = np.float64(initial_decline_rate.value)
        with np.errstate(all="ignore"):
            duration = np.expm1((incremental_volume * di) / initial_rate.value) / di
        incremental_duration = Duration(float(duration), initial_rate.unit)
        validate_duration(incremental_duration, config)
        _validate_before_singularity(di, incremental_duration, config)

        logger.debug(f"Solved harmonic duration {incremental_duration.value} from volume {incremental_volume}")
        return cls(initial_rate, initial_decline_rate, incremental_duration)

    @classmethod
    def from_final_decline_rate(
        cls,
        initial_rate: ProductionRate,
        initial_decline_rate: NominalDeclineRate,
        final_decline_rate: NominalDeclineRate,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "HarmonicSegment":
        """Solve for the duration at which the decline rate reaches ``final_decline_rate``.

            t = 1/Df - 1/Di

        The decline rate only ever decreases: declines relax toward zero and
        inclines grow steeper toward the singularity.

        Raises:
            CannotSolveDeclineError: If the signs differ or the final decline
                rate is greater than the initial one
        """
        validate_same_unit(
            initial_rate.unit,
            initial_decline_rate=initial_decline_rate,
            final_decline_rate=final_decline_rate,
        )
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(initial_decline_rate.value, "initial decline rate", config)
        validate_non_zero_decline_rate(final_decline_rate.value, "final decline rate", config)

        di = initial_decline_rate.value
        df = final_decline_rate.value

        if np.signbit(di) != np.signbit(df):
            raise CannotSolveDeclineError()

        if di == df:
            logger.debug("Initial and final decline rates are equal; harmonic segment has zero duration")
            return cls(initial_rate, initial_decline_rate, Duration(0.0, initial_rate.unit))

        if df > di:
            raise CannotSolveDeclineError()

        with np.errstate(all="ignore"):
            duration = 1.0 / np.float64(df) - 1.0 / np.float64(di)
        incremental_duration = Duration(float(duration), initial_rate.unit)
        validate_duration(incremental_duration, config)
        _validate_before_singularity(di, incremental_duration, config)

        return cls(initial_rate, initial_decline_rate, incremental_duration)

    @classmethod
    def from_final_rate(
        cls,
        initial_rate: ProductionRate,
        initial_decline_rate: NominalDeclineRate,
        final_rate: ProductionRate,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "HarmonicSegment":
        """Solve for the duration at which the rate reaches ``final_rate``.

            t = (qi - qf) / (Di * qf)
        """
        validate_same_unit(
            initial_rate.unit, initial_decline_rate=initial_decline_rate, final_rate=final_rate
        )
        validate_non_zero_positive_rate(initial_rate.value, "initial rate", config)
        validate_non_zero_decline_rate(initial_decline_rate.value, "initial decline rate", config)
        validate_non_zero_positive_rate(final_rate.value, "final rate", config)

        sign_check = validate_decline_rate_sign(
            initial_decline_rate.value, initial_rate.value, final_rate.value
        )
        if sign_check is SignCheck.ZERO_DURATION:
            logger.debug("Initial and final rates are equal; harmonic segment has zero duration")
            return cls(initial_rate, initial_decline_rate, Duration(0.0, initial_rate.unit))

        with np.errstate(all="ignore"):
            duration = (np.float64(initial_rate.value) - final_rate.value) / (
                initial_decline_rate.value * final_rate.value
            )
        incremental_duration = Duration(float(duration), initial_rate.unit)
        validate_duration(incremental_duration, config)
        _validate_before_singularity(initial_decline_rate.value, incremental_duration, config)

        return cls(initial_rate, initial_decline_rate, incremental_duration)

    def decline_rate_at_time(self, time: Duration) -> NominalDeclineRate:
        """Instantaneous nominal decline rate at ``time`` (clamped to the segment)."""
        di = self.initial_decline_rate.value
        with np.errstate(all="ignore"):
            return NominalDeclineRate(di / (1.0 + di * self._clamp(time)), self.unit)

    def final_decline_rate(self) -> NominalDeclineRate:
        return self.decline_rate_at_time(self.incremental_duration)

    def _rate(self, t):
        return self.initial_rate.value / (1.0 + self.initial_decline_rate.value * t)

    def _incremental_volume(self, t):
        di = self.initial_decline_rate.value
        return (self.initial_rate.value * np.log1p(t * di)) / di
