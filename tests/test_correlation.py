"""Tests for Pearson correlation and factor ranking.

Covers:
- correlate: range, perfect linear relationships, degenerate input, symmetry
- rank_factors: fixed row count, ordering by magnitude, stable ties
- factor_points and strongest_factor
"""

from __future__ import annotations

import pytest

from gym_progress.analysis import (
    PREDICTORS,
    CorrelationStrength,
    FactorCorrelation,
    correlate,
    factor_points,
    rank_factors,
    strongest_factor,
)
from gym_progress.sample import load_sample_store
from gym_progress.schemas import Observation, OutcomeMetric, WorkoutType


def _obs(
    obs_id: int,
    hours: float,
    diet: float,
    sleep: float,
    gain: float = 0.0,
    loss: float = 0.0,
    workout_type: WorkoutType = WorkoutType.STRENGTH,
) -> Observation:
    return Observation(
        id=obs_id,
        hours_per_week=hours,
        diet_quality=diet,
        sleep_hours=sleep,
        workout_type=workout_type,
        muscle_gain=gain,
        fat_loss=loss,
    )


# =============================================================================
# correlate
# =============================================================================


class TestCorrelate:
    """Tests for the raw-sum Pearson coefficient."""

    def test_perfect_positive(self) -> None:
        # y = 2x + 1
        assert correlate([1, 2, 3, 4], [3, 5, 7, 9]) == 1.0

    def test_perfect_negative(self) -> None:
        # y = -2x
        assert correlate([1, 2, 3, 4], [-2, -4, -6, -8]) == -1.0

    def test_partial_correlation(self) -> None:
        assert correlate([1, 2, 3, 4], [1, 2, 4, 3]) == pytest.approx(0.8)

    def test_uncorrelated(self) -> None:
        assert correlate([2, 1, 1, 2], [1, 2, 3, 4]) == 0.0

    @pytest.mark.parametrize(
        ("xs", "ys"),
        [
            ([], []),
            ([3.0], [7.0]),
            ([5, 5, 5], [1, 2, 3]),
            ([1, 2, 3], [4, 4, 4]),
            ([0.1, 0.1, 0.1], [0.3, 0.9, 0.2]),
        ],
    )
    def test_degenerate_input_is_zero(self, xs: list[float], ys: list[float]) -> None:
        assert correlate(xs, ys) == 0.0

    def test_constant_series_zero_either_side(self) -> None:
        ys = [2.5, 0.8, 3.2, 1.9]
        assert correlate([7, 7, 7, 7], ys) == 0.0
        assert correlate(ys, [7, 7, 7, 7]) == 0.0

    def test_symmetric(self) -> None:
        xs = [5.0, 3.0, 6.0, 4.0, 7.0, 2.0]
        ys = [2.5, 0.8, 3.2, 1.9, 4.1, 0.3]
        assert correlate(xs, ys) == correlate(ys, xs)

    def test_within_unit_interval(self) -> None:
        xs = [0.1 * i for i in range(1, 30)]
        ys = [3 * x + 0.7 for x in xs]
        r = correlate(xs, ys)
        assert -1.0 <= r <= 1.0
        assert r == pytest.approx(1.0)

    def test_decimal_linear_data_within_rounding_of_one(self) -> None:
        r = correlate([1, 2, 3], [-0.1, -0.2, -0.3])
        assert r == pytest.approx(-1.0, abs=1e-12)
        assert r >= -1.0

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="same length"):
            correlate([1, 2, 3], [1, 2])


# =============================================================================
# rank_factors
# =============================================================================


class TestRankFactors:
    """Tests for ranking predictors by absolute correlation."""

    def test_empty_observations(self) -> None:
        ranked = rank_factors([], OutcomeMetric.MUSCLE_GAIN)
        assert [c.factor_name for c in ranked] == ["Hours/Week", "Diet Quality", "Sleep Hours"]
        assert all(c.coefficient == 0.0 for c in ranked)

    def test_single_observation(self) -> None:
        ranked = rank_factors([_obs(1, 5, 7, 7, gain=2.5)], OutcomeMetric.MUSCLE_GAIN)
        assert len(ranked) == len(PREDICTORS)
        assert all(c.coefficient == 0.0 for c in ranked)

    def test_sorted_by_magnitude(self) -> None:
        observations = [
            _obs(1, hours=2, diet=1, sleep=1, gain=1),
            _obs(2, hours=1, diet=2, sleep=2, gain=2),
            _obs(3, hours=1, diet=4, sleep=3, gain=3),
            _obs(4, hours=2, diet=3, sleep=4, gain=4),
        ]
        ranked = rank_factors(observations, OutcomeMetric.MUSCLE_GAIN)
        assert [c.factor_name for c in ranked] == ["Sleep Hours", "Diet Quality", "Hours/Week"]
        assert ranked[0].coefficient == 1.0
        assert ranked[1].coefficient == pytest.approx(0.8)
        assert ranked[2].coefficient == 0.0

    def test_negative_ranks_by_absolute_value(self) -> None:
        observations = [
            _obs(1, hours=1, diet=5, sleep=3, loss=3),
            _obs(2, hours=2, diet=5, sleep=1, loss=2),
            _obs(3, hours=3, diet=5, sleep=2, loss=1),
        ]
        ranked = rank_factors(observations, OutcomeMetric.FAT_LOSS)
        assert ranked[0].factor_name == "Hours/Week"
        assert ranked[0].coefficient == -1.0
        assert ranked[-1].factor_name == "Diet Quality"

    def test_ties_keep_declaration_order(self) -> None:
        observations = [
            _obs(1, hours=1, diet=1, sleep=3, gain=1),
            _obs(2, hours=2, diet=2, sleep=2, gain=2),
            _obs(3, hours=3, diet=3, sleep=1, gain=3),
        ]
        ranked = rank_factors(observations, OutcomeMetric.MUSCLE_GAIN)
        assert [c.factor_name for c in ranked] == ["Hours/Week", "Diet Quality", "Sleep Hours"]
        assert [c.coefficient for c in ranked] == [1.0, 1.0, -1.0]

    def test_categories(self) -> None:
        ranked = rank_factors([], OutcomeMetric.FAT_LOSS)
        assert {c.factor_name: c.category for c in ranked} == {
            "Hours/Week": "Volume",
            "Diet Quality": "Nutrition",
            "Sleep Hours": "Recovery",
        }

    def test_metric_selects_outcome_column(self) -> None:
        observations = [
            _obs(1, hours=1, diet=5, sleep=5, gain=1, loss=3),
            _obs(2, hours=2, diet=5, sleep=5, gain=2, loss=2),
            _obs(3, hours=3, diet=5, sleep=5, gain=3, loss=1),
        ]
        gain = rank_factors(observations, OutcomeMetric.MUSCLE_GAIN)
        loss = rank_factors(observations, OutcomeMetric.FAT_LOSS)
        assert gain[0].coefficient == 1.0
        assert loss[0].coefficient == -1.0

    def test_order_independent(self) -> None:
        observations = load_sample_store().list()
        forward = rank_factors(observations, OutcomeMetric.MUSCLE_GAIN)
        backward = rank_factors(list(reversed(observations)), OutcomeMetric.MUSCLE_GAIN)
        assert [c.factor_name for c in forward] == [c.factor_name for c in backward]
        for a, b in zip(forward, backward, strict=True):
            assert a.coefficient == pytest.approx(b.coefficient)

    def test_three_row_example(self) -> None:
        observations = [
            _obs(1, hours=5, diet=7, sleep=7, gain=2.5),
            _obs(2, hours=3, diet=5, sleep=6, gain=0.8),
            _obs(3, hours=6, diet=8, sleep=8, gain=3.2),
        ]
        ranked = rank_factors(observations, OutcomeMetric.MUSCLE_GAIN)
        by_name = {c.factor_name: c.coefficient for c in ranked}
        assert by_name["Hours/Week"] > 0.9
        assert by_name["Diet Quality"] > 0.9
        assert by_name["Sleep Hours"] > 0.9
        # hours and diet move identically; sleep is slightly weaker
        assert ranked[-1].factor_name == "Sleep Hours"
        magnitudes = [abs(c.coefficient) for c in ranked]
        assert magnitudes == sorted(magnitudes, reverse=True)

    def test_sample_data_sorted_for_both_metrics(self) -> None:
        observations = load_sample_store().list()
        for metric in OutcomeMetric:
            ranked = rank_factors(observations, metric)
            magnitudes = [abs(c.coefficient) for c in ranked]
            assert magnitudes == sorted(magnitudes, reverse=True)
            assert all(-1.0 <= c.coefficient <= 1.0 for c in ranked)


class TestStrongestFactor:
    """Tests for strongest_factor."""

    def test_is_first_ranked(self) -> None:
        observations = load_sample_store().list()
        assert strongest_factor(observations, OutcomeMetric.MUSCLE_GAIN) == rank_factors(
            observations, OutcomeMetric.MUSCLE_GAIN
        )[0]

    def test_empty_defaults_to_first_predictor(self) -> None:
        assert strongest_factor([], OutcomeMetric.FAT_LOSS).factor_name == "Hours/Week"


class TestFactorPoints:
    """Tests for scatter point extraction."""

    def test_pairs_predictor_with_metric(self) -> None:
        observations = [_obs(1, 5, 7, 7, gain=2.5, loss=1.2), _obs(2, 3, 5, 6, gain=0.8, loss=2.8)]
        assert factor_points(observations, "diet_quality", OutcomeMetric.MUSCLE_GAIN) == [
            (7, 2.5),
            (5, 0.8),
        ]
        assert factor_points(observations, "sleep_hours", OutcomeMetric.FAT_LOSS) == [
            (7, 1.2),
            (6, 2.8),
        ]


class TestFactorCorrelation:
    """Tests for FactorCorrelation helpers."""

    @pytest.mark.parametrize(
        ("coefficient", "strength"),
        [
            (0.95, CorrelationStrength.STRONG),
            (-0.71, CorrelationStrength.STRONG),
            (0.7, CorrelationStrength.MODERATE),
            (-0.5, CorrelationStrength.MODERATE),
            (0.4, CorrelationStrength.WEAK),
            (0.0, CorrelationStrength.WEAK),
        ],
    )
    def test_strength_buckets(self, coefficient: float, strength: CorrelationStrength) -> None:
        corr = FactorCorrelation(factor_name="x", coefficient=coefficient, category="Volume")
        assert corr.strength is strength

    def test_strength_colors(self) -> None:
        assert CorrelationStrength.STRONG.color == "#10b981"
        assert CorrelationStrength.MODERATE.color == "#f59e0b"
        assert CorrelationStrength.WEAK.color == "#ef4444"

    def test_percent(self) -> None:
        assert FactorCorrelation("Diet Quality", 0.874, "Nutrition").percent == 87
        assert FactorCorrelation("Sleep Hours", -0.5, "Recovery").percent == -50

    @pytest.mark.parametrize(
        ("coefficient", "percent"),
        [(0.125, 13), (-0.125, -13), (0.375, 38), (-0.004, 0), (1.0, 100), (-1.0, -100)],
    )
    def test_percent_rounds_halves_away_from_zero(self, coefficient: float, percent: int) -> None:
        assert FactorCorrelation("x", coefficient, "Volume").percent == percent
