"""Combine factor ranking and category summaries into one report."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from gym_progress.analysis.categories import best_category, summarize_by_category
from gym_progress.analysis.correlation import rank_factors
from gym_progress.analysis.models import AnalysisReport

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gym_progress.schemas import Observation, OutcomeMetric


def analyze(observations: Iterable[Observation], metric: OutcomeMetric) -> AnalysisReport:
    """Run the full analysis for ``metric`` over a snapshot of observations.

    Recomputed from scratch on every call; nothing is cached.
    """
    rows = tuple(observations)
    correlations = rank_factors(rows, metric)
    summaries = summarize_by_category(rows)
    report = AnalysisReport(
        metric=metric,
        sample_size=len(rows),
        correlations=correlations,
        summaries=summaries,
        strongest_factor=correlations[0],
        best_category=best_category(summaries, metric),
    )
    logger.debug(
        "Analysis for {}: strongest={}, best={}",
        metric.value,
        correlations[0].factor_name,
        report.best_category.category if report.best_category else None,
    )
    return report
