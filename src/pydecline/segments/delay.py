"""Delay segment: a quiescent period with no production."""

from dataclasses import dataclass
from typing import ClassVar

from ..config import DEFAULT_CONFIG, DeclineConfig
from ..core.units import Duration, ProductionRate
from ..validation.checks import validate_duration
from .base import DeclineSegment, constant_like
from .kinds import SegmentKind


@dataclass(frozen=True)
class DelaySegment(DeclineSegment):
    """Zero-rate segment used to represent shut-ins or a delayed start.

    Rate and cumulative volume are zero at every time.
    """
    incremental_duration: Duration

    kind: ClassVar[SegmentKind] = SegmentKind.DELAY

    @classmethod
    def from_incremental_duration(
        cls,
        incremental_duration: Duration,
        *,
        config: DeclineConfig = DEFAULT_CONFIG,
    ) -> "DelaySegment":
        validate_duration(incremental_duration, config)
        return cls(incremental_duration)

    @property
    def rate(self) -> ProductionRate:
        return ProductionRate(0.0, self.unit)

    def _rate(self, t):
        return constant_like(0.0, t)

    def _incremental_volume(self, t):
        return constant_like(0.0, t)
