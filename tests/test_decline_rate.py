"""Tests for decline rate representations and conversions."""

import pytest

from pydecline.core.decline_rate import (
    NominalDeclineRate,
    SecantEffectiveDeclineRate,
    TangentEffectiveDeclineRate,
)
from pydecline.core.units import DAYS, YEARS
from pydecline.validation.errors import DeclineRateTooHighError


EXPONENTS = [0.0, 0.5, 1.0, 1.5, 2.0]

# Nominal % -> (tangent effective %, secant effective % for each of EXPONENTS)
SPEE_TABLE = {
    5.0: (4.8770576, [4.8770576, 4.8185606, 4.7619047, 4.7069945, 4.653741]),
    10.0: (9.516258, [9.516258, 9.297052, 9.090909, 8.896561, 8.712907]),
    50.0: (39.346935, [39.346935, 36.0, 33.333332, 31.138792, 29.289322]),
    100.0: (63.212055, [63.212055, 55.555557, 50.0, 45.711647, 42.264973]),
    1000.0: (99.99546, [99.99546, 97.22222, 90.90909, 84.250984, 78.17821]),
    10000.0: (100.0, [100.0, 99.961555, 99.0099, 96.47346, 92.94654]),
}

NOMINAL_PERCENTS = [
    1., 2., 3., 4., 5., 6., 7., 8., 9., 10., 20., 30., 40., 50., 60., 70., 80., 90., 100.,
    200., 300., 400., 500., 600., 700., 800., 900., 1000., 2000., 3000., 4000., 5000., 6000.,
    7000., 8000., 9000., 10000.,
]


class TestSpeeConversionTable:
    """Nominal to effective conversions against published SPEE values."""

    @pytest.mark.parametrize("nominal_percent", sorted(SPEE_TABLE))
    def test_tangent_effective(self, nominal_percent):
        expected, _ = SPEE_TABLE[nominal_percent]
        nominal = NominalDeclineRate(nominal_percent / 100.0, YEARS)
        assert nominal.to_tangent_effective().value * 100 == pytest.approx(expected, rel=1e-6)

    @pytest.mark.parametrize("nominal_percent", sorted(SPEE_TABLE))
    def test_secant_effective(self, nominal_percent):
        _, expected = SPEE_TABLE[nominal_percent]
        nominal = NominalDeclineRate(nominal_percent / 100.0, YEARS)
        for exponent, expected_percent in zip(EXPONENTS, expected):
            secant = nominal.to_secant_effective(exponent)
            assert secant.value * 100 == pytest.approx(expected_percent, rel=1e-6)


class TestRoundTrips:
    """Conversions back to nominal lose precision only at extreme decline rates."""

    @pytest.mark.parametrize("nominal_percent", [p for p in NOMINAL_PERCENTS if p < 4000])
    @pytest.mark.parametrize("exponent", EXPONENTS)
    def test_round_trip(self, nominal_percent, exponent):
        tolerance = 1e-6 if nominal_percent < 3000 else 1e-3
        nominal = NominalDeclineRate(nominal_percent / 100.0, YEARS)
        tangent = nominal.to_tangent_effective()
        secant = nominal.to_secant_effective(exponent)

        assert secant.to_nominal(exponent).value == pytest.approx(nominal.value, abs=tolerance)
        assert tangent.to_nominal().value == pytest.approx(nominal.value, abs=tolerance)
        assert secant.to_tangent_effective(exponent).value == pytest.approx(
            tangent.value, abs=tolerance
        )
        assert tangent.to_secant_effective(exponent).value == pytest.approx(
            secant.value, abs=tolerance
        )

    def test_incline_round_trip(self):
        nominal = NominalDeclineRate(-0.3, YEARS)
        assert nominal.to_tangent_effective().value < 0
        assert nominal.to_tangent_effective().to_nominal().value == pytest.approx(-0.3)
        assert nominal.to_secant_effective(-0.5).to_nominal(-0.5).value == pytest.approx(-0.3)

    def test_units_preserved(self):
        nominal = NominalDeclineRate(0.1, DAYS)
        assert nominal.to_tangent_effective().unit == DAYS
        assert nominal.to_secant_effective(0.5).unit == DAYS


class TestExponentZero:
    """b = 0 routes every secant path through the tangent effective formula."""

    def test_nominal_to_secant_matches_tangent(self):
        nominal = NominalDeclineRate(0.7, YEARS)
        assert nominal.to_secant_effective(0.0).value == nominal.to_tangent_effective().value

    def test_secant_tangent_relabel(self):
        secant = SecantEffectiveDeclineRate(0.4, YEARS)
        assert secant.to_tangent_effective(0.0).value == 0.4
        assert TangentEffectiveDeclineRate(0.4, YEARS).to_secant_effective(0.0).value == 0.4

    def test_secant_to_nominal(self):
        secant = SecantEffectiveDeclineRate(0.4, YEARS)
        expected = TangentEffectiveDeclineRate(0.4, YEARS).to_nominal().value
        assert secant.to_nominal(0.0).value == expected


class TestDeclineRateTooHigh:
    """Effective rates of 100% or more have no nominal equivalent."""

    @pytest.mark.parametrize("value", [1.0, 1.5])
    def test_tangent(self, value):
        with pytest.raises(DeclineRateTooHighError):
            TangentEffectiveDeclineRate(value, YEARS).to_nominal()

    @pytest.mark.parametrize("value", [1.0, 1.5])
    @pytest.mark.parametrize("exponent", EXPONENTS)
    def test_secant(self, value, exponent):
        with pytest.raises(DeclineRateTooHighError):
            SecantEffectiveDeclineRate(value, YEARS).to_nominal(exponent)

    def test_secant_to_tangent(self):
        with pytest.raises(DeclineRateTooHighError):
            SecantEffectiveDeclineRate(1.0, YEARS).to_tangent_effective(0.5)

    def test_tangent_to_secant(self):
        with pytest.raises(DeclineRateTooHighError):
            TangentEffectiveDeclineRate(1.0, YEARS).to_secant_effective(0.5)


class TestUnitConversion:
    """Decline rate conversions between time units."""

    def test_nominal_years_to_days(self):
        nominal = NominalDeclineRate(0.5, YEARS).to_unit(DAYS)
        assert nominal.unit == DAYS
        assert nominal.value == 0.5 / 365.25

    def test_nominal_round_trip(self):
        nominal = NominalDeclineRate(0.5, YEARS)
        assert nominal.to_unit(DAYS).to_unit(YEARS).value == pytest.approx(0.5, rel=1e-15)

    def test_tangent_to_unit(self):
        tangent = TangentEffectiveDeclineRate(0.3, YEARS).to_unit(DAYS)
        # Compounding the daily rate over a year recovers the annual rate
        assert 1 - (1 - tangent.value) ** 365.25 == pytest.approx(0.3, rel=1e-10)

    def test_secant_to_unit_round_trip(self):
        secant = SecantEffectiveDeclineRate(0.3, YEARS)
        back = secant.to_unit(DAYS, 1.2).to_unit(YEARS, 1.2)
        assert back.value == pytest.approx(0.3, rel=1e-10)

    def test_secant_to_unit_matches_nominal_path(self):
        nominal = NominalDeclineRate(0.8, YEARS)
        secant = nominal.to_secant_effective(0.9).to_unit(DAYS, 0.9)
        expected = nominal.to_unit(DAYS).to_secant_effective(0.9)
        assert secant.value == pytest.approx(expected.value, rel=1e-12)
