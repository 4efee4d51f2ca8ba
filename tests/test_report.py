"""Tests for the combined analysis report."""

from __future__ import annotations

from gym_progress.analysis import analyze, rank_factors, summarize_by_category
from gym_progress.sample import load_sample_store
from gym_progress.schemas import OutcomeMetric, WorkoutType


class TestAnalyze:
    """Test analyze()."""

    def test_matches_individual_functions(self) -> None:
        observations = load_sample_store().snapshot()
        report = analyze(observations, OutcomeMetric.MUSCLE_GAIN)
        assert report.metric is OutcomeMetric.MUSCLE_GAIN
        assert report.sample_size == 10
        assert report.correlations == rank_factors(observations, OutcomeMetric.MUSCLE_GAIN)
        assert report.summaries == summarize_by_category(observations)
        assert report.strongest_factor == report.correlations[0]

    def test_best_category_follows_metric(self) -> None:
        observations = load_sample_store().snapshot()
        gain = analyze(observations, OutcomeMetric.MUSCLE_GAIN)
        loss = analyze(observations, OutcomeMetric.FAT_LOSS)
        assert gain.best_category is not None
        assert gain.best_category.category is WorkoutType.STRENGTH
        assert loss.best_category is not None
        assert loss.best_category.category is WorkoutType.CARDIO

    def test_empty(self) -> None:
        report = analyze([], OutcomeMetric.FAT_LOSS)
        assert report.sample_size == 0
        assert len(report.correlations) == 3
        assert len(report.summaries) == 3
        assert report.strongest_factor is not None
        assert report.strongest_factor.coefficient == 0.0

    def test_accepts_generator(self) -> None:
        store = load_sample_store()
        report = analyze((obs for obs in store.list()), OutcomeMetric.MUSCLE_GAIN)
        assert report.sample_size == len(store)

    def test_recomputed_after_mutation(self) -> None:
        store = load_sample_store()
        before = analyze(store.snapshot(), OutcomeMetric.MUSCLE_GAIN)
        for obs in store.list():
            if obs.workout_type is WorkoutType.STRENGTH:
                store.remove(obs.id)
        after = analyze(store.snapshot(), OutcomeMetric.MUSCLE_GAIN)
        assert after.sample_size == before.sample_size - 4
        assert after.summaries[0].sample_count == 0
        assert after.best_category is not None
        assert after.best_category.category is WorkoutType.MIXED
