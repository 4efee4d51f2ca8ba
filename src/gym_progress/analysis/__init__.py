"""Statistics over a snapshot of recorded observations.

This is the domain logic layer: pure functions that take observations and
return dataclasses that renderers and the CLI consume directly.

Dependency rule: analysis/ imports from ``schemas`` only. It never touches
the store, files, or HTML.

Modules:
  - correlation: correlate, rank_factors, strongest_factor, factor_points
  - categories: summarize_by_category, best_category
  - report: analyze (ranking + summaries + insights in one call)
  - models: Predictor, PREDICTORS, FactorCorrelation, CategorySummary,
            CorrelationStrength, AnalysisReport

Adding a predictor
------------------
1. Add the field to ``schemas.ObservationFields``.
2. Append a ``Predictor`` to ``models.PREDICTORS``. Its position is the
   tie-break order for ``rank_factors``.
3. Add the column to ``export.CSV_COLUMNS`` and the dataset table template.
"""

from gym_progress.analysis.categories import best_category, summarize_by_category
from gym_progress.analysis.correlation import (
    correlate,
    factor_points,
    rank_factors,
    strongest_factor,
)
from gym_progress.analysis.models import (
    PREDICTORS,
    AnalysisReport,
    CategorySummary,
    CorrelationStrength,
    FactorCorrelation,
    Predictor,
)
from gym_progress.analysis.report import analyze

__all__ = [
    "PREDICTORS",
    "AnalysisReport",
    "CategorySummary",
    "CorrelationStrength",
    "FactorCorrelation",
    "Predictor",
    "analyze",
    "best_category",
    "correlate",
    "factor_points",
    "rank_factors",
    "strongest_factor",
    "summarize_by_category",
]
