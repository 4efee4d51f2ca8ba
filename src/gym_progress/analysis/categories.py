"""Mean outcomes per workout type."""

from __future__ import annotations

import statistics
from typing import TYPE_CHECKING

from gym_progress.analysis.models import CategorySummary
from gym_progress.schemas import WorkoutType

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from gym_progress.schemas import Observation, OutcomeMetric


def summarize_by_category(observations: Iterable[Observation]) -> list[CategorySummary]:
    """Average muscle gain and fat loss for each workout type.

    Every ``WorkoutType`` gets a row, in declaration order. A type with no
    observations reports means of 0 and a count of 0.
    """
    by_type: dict[WorkoutType, list[Observation]] = {wt: [] for wt in WorkoutType}
    for obs in observations:
        by_type[obs.workout_type].append(obs)

    summaries: list[CategorySummary] = []
    for workout_type, matching in by_type.items():
        if not matching:
            summaries.append(CategorySummary(workout_type, 0.0, 0.0, 0))
            continue
        summaries.append(
            CategorySummary(
                category=workout_type,
                mean_muscle_gain=statistics.fmean(o.muscle_gain for o in matching),
                mean_fat_loss=statistics.fmean(o.fat_loss for o in matching),
                sample_count=len(matching),
            )
        )
    return summaries


def best_category(
    summaries: Sequence[CategorySummary],
    metric: OutcomeMetric,
) -> CategorySummary | None:
    """Category with the highest mean ``metric``; the earliest one wins ties."""
    best: CategorySummary | None = None
    for summary in summaries:
        if best is None or summary.mean_for(metric) > best.mean_for(metric):
            best = summary
    return best
