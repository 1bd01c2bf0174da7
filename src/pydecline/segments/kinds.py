"""Segment type identifiers."""

from enum import Enum


class SegmentKind(str, Enum):
    """Decline model of a segment."""
    FLAT = "flat"
    DELAY = "delay"
    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    HARMONIC = "harmonic"
    HYPERBOLIC = "hyperbolic"
