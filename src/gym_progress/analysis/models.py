"""Analysis result types and the fixed predictor set."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum

from gym_progress.schemas import OutcomeMetric, WorkoutType

# |r| thresholds for the strength buckets
STRONG_THRESHOLD = 0.7
MODERATE_THRESHOLD = 0.4


class CorrelationStrength(StrEnum):
    """Coarse bucket for the magnitude of a correlation coefficient."""

    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"

    @classmethod
    def from_coefficient(cls, coefficient: float) -> CorrelationStrength:
        magnitude = abs(coefficient)
        if magnitude > STRONG_THRESHOLD:
            return cls.STRONG
        if magnitude > MODERATE_THRESHOLD:
            return cls.MODERATE
        return cls.WEAK

    @property
    def color(self) -> str:
        """Chart color for this bucket."""
        return _STRENGTH_COLORS[self]


_STRENGTH_COLORS = {
    CorrelationStrength.STRONG: "#10b981",
    CorrelationStrength.MODERATE: "#f59e0b",
    CorrelationStrength.WEAK: "#ef4444",
}


@dataclass(frozen=True)
class Predictor:
    """A lifestyle factor tested against the outcome metric."""

    attribute: str
    label: str
    category: str


#: Fixed predictor set. Order breaks ranking ties.
PREDICTORS: tuple[Predictor, ...] = (
    Predictor(attribute="hours_per_week", label="Hours/Week", category="Volume"),
    Predictor(attribute="diet_quality", label="Diet Quality", category="Nutrition"),
    Predictor(attribute="sleep_hours", label="Sleep Hours", category="Recovery"),
)


@dataclass(frozen=True)
class FactorCorrelation:
    """Pearson correlation between one predictor and the outcome metric."""

    factor_name: str
    coefficient: float
    category: str

    @property
    def strength(self) -> CorrelationStrength:
        return CorrelationStrength.from_coefficient(self.coefficient)

    @property
    def percent(self) -> int:
        """Coefficient as a whole-number percentage (e.g. 0.87 -> 87).

        Halves round away from zero (0.125 -> 13, -0.125 -> -13).
        """
        magnitude = math.floor(abs(self.coefficient) * 100 + 0.5)
        return -magnitude if self.coefficient < 0 else magnitude


@dataclass(frozen=True)
class CategorySummary:
    """Mean outcomes for one workout type."""

    category: WorkoutType
    mean_muscle_gain: float
    mean_fat_loss: float
    sample_count: int

    def mean_for(self, metric: OutcomeMetric) -> float:
        """Mean of ``metric`` across this category's observations."""
        if metric is OutcomeMetric.MUSCLE_GAIN:
            return self.mean_muscle_gain
        return self.mean_fat_loss


@dataclass
class AnalysisReport:
    """Everything the presentation layer shows for one outcome metric."""

    metric: OutcomeMetric
    sample_size: int
    correlations: list[FactorCorrelation] = field(default_factory=list)
    summaries: list[CategorySummary] = field(default_factory=list)
    strongest_factor: FactorCorrelation | None = None
    best_category: CategorySummary | None = None
