"""Unit-tagged quantities and decline rate representations."""

from .units import TimeUnit, DAYS, YEARS, Duration, ProductionRate
from .decline_rate import (
    NominalDeclineRate,
    SecantEffectiveDeclineRate,
    TangentEffectiveDeclineRate,
)

__all__ = [
    "TimeUnit",
    "DAYS",
    "YEARS",
    "Duration",
    "ProductionRate",
    "NominalDeclineRate",
    "SecantEffectiveDeclineRate",
    "TangentEffectiveDeclineRate",
]
