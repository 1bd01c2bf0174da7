"""Flat segment: a constant production rate."""

from dataclasses import dataclass
import logging
from typing import ClassVar

from ..config import DEFAULT_CONFIG, DeclineConfig
from ..core.units import Duration, ProductionRate
from ..validation.checks import (
    is_effectively_zero,
    validate_duration,
    validate_incremental_volume,
    validate_positive,
    validate_same_unit,
)
from ..validation.errors import CannotSolveDeclineError
from .base import DeclineSegment, constant_like
from .kinds import SegmentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlatSegment(DeclineSegment):
    """Constant rate segment.

        q(t)  = q
        Np(t) = q * t

    A zero rate is allowed, which makes the segment equivalent to a delay.

    Attributes:
        rate: Constant production rate
        incremental_duration: Length of the segment
    """
    rate: ProductionRate
    incremental_duration: Duration

    kind: ClassVar[SegmentKind] = SegmentKind.FLAT

    @classmethod
    def from_incremental_duration(
        cls,
        rate: ProductionRate,
        incremental_duration: Duration,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "FlatSegment":
        validate_same_unit(rate.unit, duration=incremental_duration)
        validate_positive(rate.value, "rate")
        validate_duration(incremental_duration, config)

        return cls(rate, incremental_duration)

    @classmethod
    def from_incremental_volume(
        cls,
        rate: ProductionRate,
        incremental_volume: float,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "FlatSegment":
        """Solve for the duration needed to produce ``incremental_volume``.

        Raises:
            CannotSolveDeclineError: If the rate is zero but the volume is not
        """
        validate_positive(rate.value, "rate")
        validate_incremental_volume(incremental_volume)

        if is_effectively_zero(incremental_volume, config.epsilon):
            return cls(rate, Duration(0.0, rate.unit))

        if is_effectively_zero(rate.value, config.epsilon):
            raise CannotSolveDeclineError()

        incremental_duration = Duration(float(incremental_volume / rate.value), rate.unit)
        validate_duration(incremental_duration, config)

        logger.debug(f"Solved flat duration {incremental_duration.value} from volume {incremental_volume}")
        return cls(rate, incremental_duration)

    @classmethod
    def from_final_rate(
        cls,
        rate: ProductionRate,
        final_rate: ProductionRate,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "FlatSegment":
        """Create a zero-duration segment ending at ``final_rate``.

        A flat rate never changes, so the only reachable final rate is the
        rate itself.

        Raises:
            CannotSolveDeclineError: If the final rate differs from the rate
        """
        validate_same_unit(rate.unit, final_rate=final_rate)
        validate_positive(rate.value, "rate")
        validate_positive(final_rate.value, "final rate")

        if rate.value != final_rate.value:
            raise CannotSolveDeclineError()

        logger.debug("Initial and final rates are equal; flat segment has zero duration")
        return cls(rate, Duration(0.0, rate.unit))

    def _rate(self, t):
        return constant_like(self.rate.value, t)

    def _incremental_volume(self, t):
        return self.rate.value * t
