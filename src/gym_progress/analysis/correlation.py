"""Pearson correlation between lifestyle factors and an outcome metric.

Formula (raw-sum form)::

    r = (n·Σxy − Σx·Σy) / sqrt[(n·Σx² − (Σx)²)·(n·Σy² − (Σy)²)]

A series with no variance (including n < 2) has no defined r; it is reported
as exactly 0 so rankings and charts always get a real number.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from loguru import logger

from gym_progress.analysis.models import PREDICTORS, FactorCorrelation

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from gym_progress.schemas import Observation, OutcomeMetric


def correlate(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Compute Pearson's r for two equal-length series.

    Args:
        xs: Predictor values.
        ys: Outcome values, paired with ``xs`` by position.

    Returns:
        r in [-1, 1], or exactly 0.0 when either series is constant or
        fewer than two pairs are given. Arithmetic is binary floating point,
        so data lying on a line can give an r that differs from +1 or -1 in
        the last few digits, e.g. with decimal inputs like 0.1.

    Raises:
        ValueError: The series differ in length.
    """
    if len(xs) != len(ys):
        msg = f"Series must be the same length (got {len(xs)} and {len(ys)})"
        raise ValueError(msg)

    n = len(xs)
    if n < 2 or len(set(xs)) < 2 or len(set(ys)) < 2:
        return 0.0

    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys, strict=True))
    sum_x2 = sum(x * x for x in xs)
    sum_y2 = sum(y * y for y in ys)

    numerator = n * sum_xy - sum_x * sum_y
    variance_product = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if variance_product <= 0:
        return 0.0

    r = numerator / math.sqrt(variance_product)
    return max(-1.0, min(1.0, r))


def factor_points(
    observations: Iterable[Observation],
    attribute: str,
    metric: OutcomeMetric,
) -> list[tuple[float, float]]:
    """Pair a predictor with the outcome metric, one point per observation."""
    return [(obs.value_of(attribute), obs.value_of(metric.value)) for obs in observations]


def rank_factors(
    observations: Iterable[Observation],
    metric: OutcomeMetric,
) -> list[FactorCorrelation]:
    """Correlate every predictor with ``metric`` and rank by strength.

    Sorted by descending ``abs(coefficient)``; equal magnitudes keep the
    ``PREDICTORS`` order. Always returns one row per predictor.
    """
    rows = list(observations)
    outcome = [row.value_of(metric.value) for row in rows]

    correlations = [
        FactorCorrelation(
            factor_name=predictor.label,
            coefficient=correlate([row.value_of(predictor.attribute) for row in rows], outcome),
            category=predictor.category,
        )
        for predictor in PREDICTORS
    ]
    ranked = sorted(correlations, key=lambda c: abs(c.coefficient), reverse=True)
    logger.debug(
        "Ranked factors for {} over {} observations: {}",
        metric.value,
        len(rows),
        ", ".join(f"{c.factor_name}={c.coefficient:.3f}" for c in ranked),
    )
    return ranked


def strongest_factor(
    observations: Iterable[Observation],
    metric: OutcomeMetric,
) -> FactorCorrelation:
    """The factor with the largest absolute correlation to ``metric``."""
    return rank_factors(observations, metric)[0]
