"""Decline segment models.

Six independent segment types share one evaluation contract:

    FlatSegment         constant rate
    DelaySegment        zero rate, zero volume
    LinearSegment       rate falls by a constant amount per unit time
    ExponentialSegment  Arps b = 0
    HarmonicSegment     Arps b = 1
    HyperbolicSegment   Arps with any other b

Each is built once from a ``from_*`` constructor and then evaluated any number
of times. Use ``segment.kind`` to dispatch on the model.
"""

from .kinds import SegmentKind
from .base import DeclineSegment
from .flat import FlatSegment
from .delay import DelaySegment
from .linear import LinearSegment
from .exponential import ExponentialSegment
from .harmonic import HarmonicSegment
from .hyperbolic import HyperbolicSegment, validate_hyperbolic_exponent

Segment = (
    FlatSegment
    | DelaySegment
    | LinearSegment
    | ExponentialSegment
    | HarmonicSegment
    | HyperbolicSegment
)

__all__ = [
    "SegmentKind",
    "DeclineSegment",
    "Segment",
    "FlatSegment",
    "DelaySegment",
    "LinearSegment",
    "ExponentialSegment",
    "HarmonicSegment",
    "HyperbolicSegment",
    "validate_hyperbolic_exponent",
]
