"""pydecline: closed-form Arps decline curve segments.

Build a segment from any three of initial rate, decline rate, duration,
cumulative volume and final rate, then evaluate rate and volume over time.

Example:
    >>> from pydecline import (
    ...     DAYS, YEARS, Duration, ExponentialSegment, NominalDeclineRate, ProductionRate,
    ... )
    >>> segment = ExponentialSegment.from_final_rate(
    ...     ProductionRate(50.0, DAYS),
    ...     NominalDeclineRate(0.5, YEARS).to_unit(DAYS),
    ...     ProductionRate(10.0, DAYS),
    ... )
    >>> round(segment.incremental_duration.days, 4)
    1175.6944
"""

from .config import DeclineConfig, DEFAULT_CONFIG, generate_default_config
from .core import (
    TimeUnit,
    DAYS,
    YEARS,
    Duration,
    ProductionRate,
    NominalDeclineRate,
    SecantEffectiveDeclineRate,
    TangentEffectiveDeclineRate,
)
from .validation import (
    ErrorKind,
    DeclineCurveAnalysisError,
    InvalidInputError,
    DeclineRateWrongSignError,
    CannotSolveDeclineError,
    DeclineRateTooHighError,
    ExponentTooLargeError,
    DurationTooLongError,
)
from .segments import (
    SegmentKind,
    Segment,
    FlatSegment,
    DelaySegment,
    LinearSegment,
    ExponentialSegment,
    HarmonicSegment,
    HyperbolicSegment,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "DeclineConfig",
    "DEFAULT_CONFIG",
    "generate_default_config",
    # Units and rates
    "TimeUnit",
    "DAYS",
    "YEARS",
    "Duration",
    "ProductionRate",
    "NominalDeclineRate",
    "SecantEffectiveDeclineRate",
    "TangentEffectiveDeclineRate",
    # Errors
    "ErrorKind",
    "DeclineCurveAnalysisError",
    "InvalidInputError",
    "DeclineRateWrongSignError",
    "CannotSolveDeclineError",
    "DeclineRateTooHighError",
    "ExponentTooLargeError",
    "DurationTooLongError",
    # Segments
    "SegmentKind",
    "Segment",
    "FlatSegment",
    "DelaySegment",
    "LinearSegment",
    "ExponentialSegment",
    "HarmonicSegment",
    "HyperbolicSegment",
]
