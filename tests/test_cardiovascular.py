"""Tests for resting heart rate, sleep and HRV calculators."""

from __future__ import annotations

import pytest

from conftest import expected_minutes
from lifeimpact.calculators.cardiovascular import (
    HeartRateVariabilityCalculator,
    RestingHeartRateCalculator,
    SleepCalculator,
    hrv_optimum,
    hrv_relative_risk,
    rhr_relative_risk,
    sleep_relative_risk,
)
from lifeimpact.metrics.types import UserProfile


class TestRestingHeartRate:
    """Tests for the resting heart rate curve."""

    def test_optimum_is_neutral(self) -> None:
        """60 bpm is the neutral point."""
        assert rhr_relative_risk(60) == pytest.approx(1.0)

    def test_inside_band(self) -> None:
        """Inside the 55-65 band risk rises gently."""
        assert rhr_relative_risk(65) == pytest.approx(1.01)
        assert rhr_relative_risk(55) == pytest.approx(1.01)

    def test_band_edges_continuous(self) -> None:
        """Values just outside the band start from the edge risk."""
        assert rhr_relative_risk(70) == pytest.approx(1.02)
        assert rhr_relative_risk(70.001) == pytest.approx(1.02, abs=1e-4)
        assert rhr_relative_risk(50) == pytest.approx(1.02)
        assert rhr_relative_risk(49.999) == pytest.approx(1.02, abs=1e-4)

    def test_above_band(self) -> None:
        """Above the band risk rises steeply."""
        assert rhr_relative_risk(80) == pytest.approx(1.18)

    def test_below_band(self) -> None:
        """Very low heart rates carry extra risk."""
        assert rhr_relative_risk(40) == pytest.approx(1.10)

    def test_zero_impact_at_60(self, profile_40: UserProfile) -> None:
        """A resting heart rate of 60 scores zero."""
        result = RestingHeartRateCalculator().compute(60, profile_40)
        assert result.daily_minutes == pytest.approx(0.0)

    def test_elevated_rhr_costs_time(self, profile_40: UserProfile) -> None:
        """An elevated heart rate costs time and says so."""
        result = RestingHeartRateCalculator().compute(80, profile_40)
        assert result.daily_minutes == pytest.approx(expected_minutes(1.18, 0.04, 38))
        assert result.daily_minutes < 0
        assert "elevated" in result.recommendation


class TestSleep:
    """Tests for the U-shaped sleep curve."""

    def test_optimum_is_neutral(self) -> None:
        """7.5 hours is the neutral point."""
        assert sleep_relative_risk(7.5) == pytest.approx(1.0)

    def test_optimal_band_edges(self) -> None:
        """The 7-8 hour band edges carry a small penalty."""
        assert sleep_relative_risk(7.0) == pytest.approx(1.02)
        assert sleep_relative_risk(8.0) == pytest.approx(1.02)

    def test_short_sleep(self) -> None:
        """Short sleep raises risk."""
        assert sleep_relative_risk(6.5) == pytest.approx(1.03)
        assert sleep_relative_risk(5.0) == pytest.approx(1.08)

    def test_long_sleep(self) -> None:
        """Long sleep raises risk."""
        assert sleep_relative_risk(8.5) == pytest.approx(1.04)
        assert sleep_relative_risk(10.0) == pytest.approx(1.10)

    def test_zero_impact_at_7_5(self, profile_40: UserProfile) -> None:
        """Sleeping 7.5 hours scores zero."""
        result = SleepCalculator().compute(7.5, profile_40)
        assert result.daily_minutes == pytest.approx(0.0)

    def test_out_of_range_clamped(self, profile_40: UserProfile) -> None:
        """Sleep is clamped to 3-12 hours."""
        low = SleepCalculator().compute(0, profile_40)
        assert low.relative_risk == pytest.approx(sleep_relative_risk(3.0))
        high = SleepCalculator().compute(20, profile_40)
        assert high.relative_risk == pytest.approx(sleep_relative_risk(12.0))


class TestHeartRateVariability:
    """Tests for age-adjusted HRV."""

    def test_optimum_by_age(self) -> None:
        """The HRV optimum falls with age."""
        assert hrv_optimum(20) == pytest.approx(50.0)
        assert hrv_optimum(45) == pytest.approx(30.0)

    def test_optimum_floor(self) -> None:
        """The HRV optimum never drops below 15 ms."""
        assert hrv_optimum(80) == pytest.approx(15.0)

    def test_neutral_band(self) -> None:
        """Within 15% of the optimum HRV is neutral."""
        optimum = hrv_optimum(40)
        assert hrv_relative_risk(optimum, 40) == pytest.approx(1.0)
        assert hrv_relative_risk(optimum * 0.85, 40) == pytest.approx(1.0)
        assert hrv_relative_risk(optimum * 1.15, 40) == pytest.approx(1.0)

    def test_low_hrv(self) -> None:
        """Ratio 0.5 is 0.3 below the band: +15%."""
        assert hrv_relative_risk(25.0, 20) == pytest.approx(1.15)

    def test_high_hrv_capped(self) -> None:
        """Ratio 1.5 gives -6%; ratios above 2.0 stop improving."""
        assert hrv_relative_risk(75.0, 20) == pytest.approx(0.94)
        assert hrv_relative_risk(100.0, 20) == pytest.approx(0.84)
        assert hrv_relative_risk(150.0, 20) == pytest.approx(0.84)

    def test_baseline_is_age_optimum(self, profile_40: UserProfile) -> None:
        """The reported baseline is the age optimum."""
        result = HeartRateVariabilityCalculator().compute(40, profile_40)
        assert result.baseline_value == pytest.approx(hrv_optimum(40))

    def test_default_age_35(self, anonymous_profile: UserProfile) -> None:
        """Without an age HRV assumes 35 for both the optimum and remaining years."""
        result = HeartRateVariabilityCalculator().compute(10, anonymous_profile)
        rr = hrv_relative_risk(10, 35)
        assert result.baseline_value == pytest.approx(hrv_optimum(35))
        assert result.daily_minutes == pytest.approx(expected_minutes(rr, 0.04, 43))
