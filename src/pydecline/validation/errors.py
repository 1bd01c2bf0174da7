"""Error types raised by decline-rate conversions and segment constructors.

The set of error kinds is closed: every failure maps to one ``ErrorKind``.
Errors compare equal when they have the same type and arguments, which keeps
test assertions simple.
"""

from enum import Enum, auto


class ErrorKind(Enum):
    """Kind of decline curve analysis failure."""
    INVALID_INPUT = auto()            # Non-finite, wrongly signed, or mismatched input
    DECLINE_RATE_WRONG_SIGN = auto()  # Sign conflicts with direction of travel or exponent
    CANNOT_SOLVE_DECLINE = auto()     # No finite solution exists
    DECLINE_RATE_TOO_HIGH = auto()    # Effective decline rate >= 1
    EXPONENT_TOO_LARGE = auto()       # Hyperbolic exponent beyond the ceiling
    DURATION_TOO_LONG = auto()        # Beyond the maximum duration or a singularity


class DeclineCurveAnalysisError(ValueError):
    """Base class for all decline curve analysis errors."""

    kind: ErrorKind
    default_message = "decline curve analysis error"

    def __init__(self, *args) -> None:
        super().__init__(*(args or (self.default_message,)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DeclineCurveAnalysisError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidInputError(DeclineCurveAnalysisError):
    """A named input is non-finite, wrongly signed, or otherwise invalid.

    Attributes:
        reason: Human readable explanation naming the offending parameter
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class DeclineRateWrongSignError(DeclineCurveAnalysisError):
    kind = ErrorKind.DECLINE_RATE_WRONG_SIGN
    default_message = "decline rate has wrong sign"


class CannotSolveDeclineError(DeclineCurveAnalysisError):
    kind = ErrorKind.CANNOT_SOLVE_DECLINE
    default_message = "cannot solve decline: no finite solution exists for the given parameters"


class DeclineRateTooHighError(DeclineCurveAnalysisError):
    kind = ErrorKind.DECLINE_RATE_TOO_HIGH
    default_message = "decline rate too high"


class ExponentTooLargeError(DeclineCurveAnalysisError):
    kind = ErrorKind.EXPONENT_TOO_LARGE
    default_message = "exponent too large"


class DurationTooLongError(DeclineCurveAnalysisError):
    kind = ErrorKind.DURATION_TOO_LONG
    default_message = "duration too long"
