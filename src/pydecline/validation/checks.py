"""Shared validation predicates for decline segment inputs.

Every segment constructor runs its inputs through these checks before solving
anything. Each check either returns quietly or raises one of the errors in
``errors``. All approximate comparisons use the single absolute tolerance from
the active ``DeclineConfig``.
"""

from enum import Enum, auto

import numpy as np

from ..config import DEFAULT_CONFIG, EPSILON, DeclineConfig
from ..core.units import YEARS, Duration, TimeUnit
from .errors import (
    DeclineRateWrongSignError,
    DurationTooLongError,
    InvalidInputError,
)


class SignCheck(Enum):
    """Outcome of checking a decline rate against the direction of travel."""
    CONTINUE = auto()       # Solve normally
    ZERO_DURATION = auto()  # Initial and target are equal; no time elapses


def is_effectively_zero(value: float, epsilon: float = EPSILON) -> bool:
    """Return True if ``value`` is within ``epsilon`` of zero (False for NaN)."""
    return bool(abs(value) <= epsilon)


def approx_eq(a: float, b: float, epsilon: float = EPSILON) -> bool:
    return bool(abs(a - b) <= epsilon)


def approx_gte(a: float, b: float, epsilon: float = EPSILON) -> bool:
    return bool(a >= b - epsilon)


def validate_finite(value: float, name: str) -> None:
    """Validate that a value is neither NaN nor infinite.

    Raises:
        InvalidInputError: If the value is not finite
    """
    if np.isfinite(value):
        return
    if np.isnan(value):
        raise InvalidInputError(f"{name} is not-a-number, but expected a finite number")
    raise InvalidInputError(f"{name} is infinity, but expected a finite number")


def validate_positive(value: float, name: str) -> None:
    """Validate that a value is finite and not negative.

    Negative zero compares equal to zero and is accepted.
    """
    validate_finite(value, name)
    if value < 0:
        raise InvalidInputError(f"{name} is negative, but expected a positive number")


def validate_non_zero_positive_rate(
    value: float,
    name: str,
    config: DeclineConfig = DEFAULT_CONFIG,
) -> None:
    """Validate that a rate is finite, positive and not approximately zero."""
    validate_finite(value, name)
    if np.signbit(value) or is_effectively_zero(value, config.epsilon):
        raise InvalidInputError(f"{name} is negative or zero, but expected a positive number")


def validate_non_zero_decline_rate(
    value: float,
    name: str,
    config: DeclineConfig = DEFAULT_CONFIG,
) -> None:
    """Validate that a decline rate is finite and not approximately zero.

    Either sign is allowed; negative decline rates describe inclines.
    """
    validate_finite(value, name)
    if is_effectively_zero(value, config.epsilon):
        raise InvalidInputError(f"{name} is approximately zero, but expected it to be non-zero")


def validate_duration(duration: Duration, config: DeclineConfig = DEFAULT_CONFIG) -> None:
    """Validate that a duration is positive, finite and not too long.

    Raises:
        InvalidInputError: If the duration is negative or not finite
        DurationTooLongError: If the duration exceeds ``config.max_duration_years``
    """
    validate_positive(duration.value, "duration")

    if duration.to_unit(YEARS).value > config.max_duration_years:
        raise DurationTooLongError()


def validate_incremental_volume(volume: float) -> None:
    """Validate that a volume is finite and does not carry a negative sign."""
    validate_finite(volume, "incremental volume")
    if np.signbit(volume):
        raise InvalidInputError("incremental volume is negative, but expected a positive number")


def validate_same_unit(unit: TimeUnit, **quantities) -> None:
    """Validate that every named quantity is expressed in ``unit``.

    Segment inputs are never silently reinterpreted; callers convert with
    ``to_unit`` first.

    Args:
        unit: Expected time unit (the initial rate's unit)
        **quantities: Unit-tagged values keyed by their display name
    """
    for name, quantity in quantities.items():
        if quantity.unit != unit:
            raise InvalidInputError(
                f"{name.replace('_', ' ')} is in {quantity.unit}, but expected {unit} "
                f"to match the initial rate"
            )


def validate_decline_rate_sign(
    decline_rate: float,
    initial_rate: float,
    final_rate: float,
) -> SignCheck:
    """Validate that the decline rate moves the rate toward the target.

    A falling target needs a positive decline rate and a rising target needs a
    negative one (an incline).

    Returns:
        SignCheck.ZERO_DURATION if the rates are equal, otherwise SignCheck.CONTINUE

    Raises:
        DeclineRateWrongSignError: If the sign points the wrong way
    """
    if initial_rate < final_rate:
        if decline_rate > 0:
            raise DeclineRateWrongSignError()
    elif initial_rate > final_rate:
        if decline_rate < 0:
            raise DeclineRateWrongSignError()
    else:
        return SignCheck.ZERO_DURATION

    return SignCheck.CONTINUE
