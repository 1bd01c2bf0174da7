"""Input validation and error types for pydecline.

Usage:
    from pydecline.validation import (
        DeclineCurveAnalysisError,
        ErrorKind,
        validate_duration,
        validate_non_zero_positive_rate,
    )

    try:
        segment = ExponentialSegment.from_final_rate(qi, di, qf)
    except DeclineCurveAnalysisError as e:
        if e.kind is ErrorKind.DECLINE_RATE_WRONG_SIGN:
            ...
"""

from .errors import (
    ErrorKind,
    DeclineCurveAnalysisError,
    InvalidInputError,
    DeclineRateWrongSignError,
    CannotSolveDeclineError,
    DeclineRateTooHighError,
    ExponentTooLargeError,
    DurationTooLongError,
)
from .checks import (
    SignCheck,
    is_effectively_zero,
    approx_eq,
    approx_gte,
    validate_finite,
    validate_positive,
    validate_non_zero_positive_rate,
    validate_non_zero_decline_rate,
    validate_duration,
    validate_incremental_volume,
    validate_same_unit,
    validate_decline_rate_sign,
)

__all__ = [
    # Errors
    "ErrorKind",
    "DeclineCurveAnalysisError",
    "InvalidInputError",
    "DeclineRateWrongSignError",
    "CannotSolveDeclineError",
    "DeclineRateTooHighError",
    "ExponentTooLargeError",
    "DurationTooLongError",
    # Checks
    "SignCheck",
    "is_effectively_zero",
    "approx_eq",
    "approx_gte",
    "validate_finite",
    "validate_positive",
    "validate_non_zero_positive_rate",
    "validate_non_zero_decline_rate",
    "validate_duration",
    "validate_incremental_volume",
    "validate_same_unit",
    "validate_decline_rate_sign",
]
