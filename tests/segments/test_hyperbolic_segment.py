"""Tests for HyperbolicSegment."""

import numpy as np
import pytest

from pydecline import (
    DAYS,
    YEARS,
    CannotSolveDeclineError,
    DeclineConfig,
    DeclineRateWrongSignError,
    Duration,
    ExponentTooLargeError,
    HyperbolicSegment,
    InvalidInputError,
    NominalDeclineRate,
    ProductionRate,
    SegmentKind,
)
from pydecline.segments import validate_hyperbolic_exponent


INITIAL_RATE = ProductionRate(50.0, DAYS)


def per_day(annual_decline):
    return NominalDeclineRate(annual_decline, YEARS).to_unit(DAYS)


class TestHyperbolicSegment:
    """Tests for HyperbolicSegment evaluation."""

    @pytest.fixture
    def segment(self):
        return HyperbolicSegment.from_incremental_duration(
            INITIAL_RATE, per_day(0.5), 0.9, Duration.from_days(2643.3552)
        )

    def test_kind(self, segment):
        assert segment.kind is SegmentKind.HYPERBOLIC

    def test_volume_at_time(self, segment):
        assert segment.incremental_volume_at_time(Duration.from_days(2700.0)) == pytest.approx(
            54298.10011031419, rel=1e-9
        )
        assert segment.incremental_volume_at_time(Duration.from_days(1350.0)) == pytest.approx(
            37666.26214690978, rel=1e-9
        )

    def test_final_rate(self, segment):
        assert segment.final_rate().value == pytest.approx(9.999997809619451, rel=1e-9)

    def test_rate_formula(self, segment):
        di = per_day(0.5).value
        expected = 50.0 / np.power(1 + 0.9 * di * 500.0, 1 / 0.9)
        assert segment.rate_at_time(Duration.from_days(500.0)).value == pytest.approx(expected)

    def test_decline_rate_at_time(self, segment):
        di = per_day(0.5).value
        decline = segment.decline_rate_at_time(Duration.from_days(500.0))
        assert decline.value == pytest.approx(di / (1 + 0.9 * di * 500.0))

    def test_array_evaluation(self, segment):
        times = Duration.from_days(np.array([0.0, 1350.0, 2700.0]))
        volumes = segment.incremental_volume_at_time(times)
        assert volumes.shape == (3,)
        assert volumes[0] == 0.0
        assert volumes[2] == segment.incremental_volume()

    def test_incline(self):
        segment = HyperbolicSegment.from_incremental_duration(
            INITIAL_RATE, per_day(-0.005), -0.9, Duration.from_days(3650.0)
        )
        assert segment.incremental_volume_at_time(Duration.from_days(4000.0)) == pytest.approx(
            187066.8962759463, rel=1e-9
        )
        assert segment.final_rate().value == pytest.approx(52.50444884947007, rel=1e-9)

    def test_exponent_above_one(self):
        segment = HyperbolicSegment.from_incremental_duration(
            INITIAL_RATE, per_day(0.5), 1.5, Duration.from_days(3650.0)
        )
        assert 0 < segment.final_rate().value < 50.0
        assert segment.incremental_volume() > 0


class TestHyperbolicSegmentConstructors:
    """Tests for HyperbolicSegment constructors."""

    def test_from_incremental_volume(self):
        segment = HyperbolicSegment.from_incremental_volume(
            INITIAL_RATE, per_day(0.5), 0.9, 54298.0932992834
        )
        assert segment.incremental_duration.value == pytest.approx(2643.3545188968474, rel=1e-9)

    def test_from_incremental_volume_zero(self):
        segment = HyperbolicSegment.from_incremental_volume(INITIAL_RATE, per_day(0.5), 0.9, 0.0)
        assert segment.incremental_duration.value == 0.0

    def test_volume_at_limit(self):
        # qi / ((1 - b) * Di) = 100 / (0.5 * 0.1) = 2000
        with pytest.raises(CannotSolveDeclineError):
            HyperbolicSegment.from_incremental_volume(
                ProductionRate(100.0, YEARS), NominalDeclineRate(0.1, YEARS), 0.5, 2000.0
            )

    def test_volume_unbounded_above_one(self):
        segment = HyperbolicSegment.from_incremental_volume(
            INITIAL_RATE, per_day(0.5), 1.5, 100000.0
        )
        assert segment.incremental_volume() == pytest.approx(100000.0, rel=1e-9)

    def test_from_final_decline_rate(self):
        segment = HyperbolicSegment.from_final_decline_rate(
            INITIAL_RATE, per_day(0.5), 0.9, per_day(0.117461894308802)
        )
        assert segment.incremental_duration.value == pytest.approx(2643.3545188968483, rel=1e-9)
        assert segment.final_decline_rate().value == pytest.approx(
            per_day(0.117461894308802).value, rel=1e-9
        )

    def test_from_final_decline_rate_incline(self):
        # b < 0 inclines relax toward zero: -0.5 -> -0.4 per year
        segment = HyperbolicSegment.from_final_decline_rate(
            INITIAL_RATE, per_day(-0.5), -0.9, per_day(-0.4)
        )
        assert segment.incremental_duration.value > 0
        assert segment.final_decline_rate().value == pytest.approx(per_day(-0.4).value, rel=1e-9)

    def test_from_final_decline_rate_equal(self):
        segment = HyperbolicSegment.from_final_decline_rate(
            INITIAL_RATE, per_day(0.5), 0.9, per_day(0.5)
        )
        assert segment.incremental_duration.value == 0.0
        assert segment.incremental_volume() == 0.0
        assert segment.final_rate().value == INITIAL_RATE.value

    @pytest.mark.parametrize(
        "initial, final, exponent",
        [
            (0.5, 0.6, 0.9),     # Declining decline rate cannot rise
            (-0.5, -0.6, -0.9),  # Incline decline rate cannot steepen
            (0.1, -0.1, 0.9),    # Sign change
            (-0.1, 0.1, -0.9),   # Sign change
        ],
    )
    def test_from_final_decline_rate_impossible(self, initial, final, exponent):
        with pytest.raises(CannotSolveDeclineError):
            HyperbolicSegment.from_final_decline_rate(
                INITIAL_RATE, per_day(initial), exponent, per_day(final)
            )

    def test_from_final_decline_rate_exponent_sign_checked_first(self):
        with pytest.raises(DeclineRateWrongSignError):
            HyperbolicSegment.from_final_decline_rate(
                INITIAL_RATE, per_day(0.5), -0.9, per_day(0.4)
            )

    def test_from_final_rate(self):
        segment = HyperbolicSegment.from_final_rate(
            INITIAL_RATE, per_day(0.5), 0.9, ProductionRate(10.0, DAYS)
        )
        assert segment.incremental_duration.value == pytest.approx(2643.354518896851, rel=1e-9)

    def test_from_final_rate_equal_rates(self):
        segment = HyperbolicSegment.from_final_rate(INITIAL_RATE, per_day(0.5), 0.9, INITIAL_RATE)
        assert segment.incremental_duration.value == 0.0
        assert segment.incremental_volume() == 0.0
        assert segment.final_rate().value == INITIAL_RATE.value

    def test_from_final_rate_wrong_sign(self):
        with pytest.raises(DeclineRateWrongSignError):
            HyperbolicSegment.from_final_rate(
                INITIAL_RATE, per_day(0.5), 0.9, ProductionRate(60.0, DAYS)
            )


class TestHyperbolicExponent:
    """Tests for validate_hyperbolic_exponent."""

    @pytest.mark.parametrize("exponent", [0.5, 0.9, 1.5, 2.0, 100.0])
    def test_valid(self, exponent):
        validate_hyperbolic_exponent(exponent, 0.1)

    def test_negative_with_incline(self):
        validate_hyperbolic_exponent(-0.5, -0.1)

    def test_approximately_zero(self):
        with pytest.raises(InvalidInputError, match="exponential should be used instead"):
            validate_hyperbolic_exponent(1e-13, 0.1)

    def test_approximately_one(self):
        with pytest.raises(InvalidInputError, match="harmonic should be used instead"):
            validate_hyperbolic_exponent(1.0 + 1e-13, 0.1)

    def test_not_finite(self):
        with pytest.raises(InvalidInputError, match="exponent is not-a-number"):
            validate_hyperbolic_exponent(float("nan"), 0.1)

    @pytest.mark.parametrize("exponent", [100.5, -100.5])
    def test_too_large(self, exponent):
        with pytest.raises(ExponentTooLargeError):
            validate_hyperbolic_exponent(exponent, 0.1 if exponent > 0 else -0.1)

    def test_sign_mismatch(self):
        with pytest.raises(DeclineRateWrongSignError):
            validate_hyperbolic_exponent(-0.5, 0.1)
        with pytest.raises(DeclineRateWrongSignError):
            validate_hyperbolic_exponent(0.5, -0.1)

    def test_config_ceiling(self):
        with pytest.raises(ExponentTooLargeError):
            validate_hyperbolic_exponent(5.0, 0.1, DeclineConfig(max_exponent=4.0))

    def test_constructor_rejects_zero_exponent(self):
        with pytest.raises(InvalidInputError, match="exponent was approximately zero"):
            HyperbolicSegment.from_incremental_duration(
                INITIAL_RATE, per_day(0.5), 0.0, Duration.from_days(100.0)
            )
