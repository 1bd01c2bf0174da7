"""Shared evaluation contract for decline segments.

Each segment type supplies the closed-form rate and cumulative volume of its
model over ``[0, incremental_duration]``. This base class clamps requested
times to that window: past the end, the rate and volume stay at their final
values instead of extrapolating the underlying curve.

Evaluators are total functions. Overflow or invalid arithmetic produces inf or
NaN rather than raising.
"""

import numpy as np

from ..core.units import Duration, ProductionRate, TimeUnit


class DeclineSegment:
    """Base class for segment parameter objects.

    Subclasses are frozen dataclasses with an ``incremental_duration`` field
    and implement ``_rate`` and ``_incremental_volume`` for a time value (float
    or array) already expressed in the segment unit.
    """

    incremental_duration: Duration

    @property
    def unit(self) -> TimeUnit:
        """Time unit shared by every quantity of the segment."""
        return self.incremental_duration.unit

    def _rate(self, t):
        raise NotImplementedError

    def _incremental_volume(self, t):
        raise NotImplementedError

    def _clamp(self, time: Duration):
        """Express ``time`` in the segment unit, capped at the segment duration."""
        return np.minimum(time.to_unit(self.unit).value, self.incremental_duration.value)

    def rate_at_time(self, time: Duration) -> ProductionRate:
        """Calculate production rate at ``time`` from the segment start.

        Args:
            time: Elapsed time (scalar or array value, any unit)

        Returns:
            Production rate in the segment unit; ``final_rate()`` past the end
        """
        with np.errstate(all="ignore"):
            return ProductionRate(self._rate(self._clamp(time)), self.unit)

    def incremental_volume_at_time(self, time: Duration) -> float | np.ndarray:
        """Calculate cumulative volume produced from the segment start to ``time``.

        Args:
            time: Elapsed time (scalar or array value, any unit)

        Returns:
            Cumulative volume; ``incremental_volume()`` past the end
        """
        with np.errstate(all="ignore"):
            return self._incremental_volume(self._clamp(time))

    def final_rate(self) -> ProductionRate:
        return self.rate_at_time(self.incremental_duration)

    def incremental_volume(self) -> float:
        return self.incremental_volume_at_time(self.incremental_duration)


def constant_like(value: float, t):
    """Return ``value`` shaped like ``t`` (a scalar for scalar ``t``)."""
    if np.ndim(t) == 0:
        return np.float64(value)
    return np.full(np.shape(t), value, dtype=float)
