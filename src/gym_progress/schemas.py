"""
Domain models for gym progress analysis.

Pydantic models for the observations a user records after a training block.
The store and the CLI validate caller input into these; the analysis layer
reads them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Fixed enumerations
# =============================================================================


class WorkoutType(StrEnum):
    """Workout category. Declaration order is the order of every summary."""

    STRENGTH = "Strength"
    CARDIO = "Cardio"
    MIXED = "Mixed"


class OutcomeMetric(StrEnum):
    """Outcome column used as the dependent variable of an analysis."""

    MUSCLE_GAIN = "muscle_gain"
    FAT_LOSS = "fat_loss"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "Muscle Gain"."""
        return self.value.replace("_", " ").title()


# =============================================================================
# Observations
# =============================================================================


class ObservationFields(BaseModel):
    """Caller-supplied values for a new observation.

    No range checks: the analysis is a descriptive statistic over whatever
    numbers are recorded. ``workout_type`` must be a known ``WorkoutType``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hours_per_week: float = Field(..., description="Training volume (hours/week)")
    diet_quality: float = Field(..., description="Diet quality, nominally 1-10")
    sleep_hours: float = Field(..., description="Average nightly sleep")
    workout_type: WorkoutType
    muscle_gain: float = Field(..., description="Muscle gained (lbs)")
    fat_loss: float = Field(..., description="Fat lost (lbs)")
    id: int | None = Field(default=None, description="Explicit id, assigned by the store if None")

    def value_of(self, attribute: str) -> Any:
        """Look up a field by attribute name."""
        return getattr(self, attribute)


class Observation(ObservationFields):
    """A stored observation. Immutable; edit by remove + add."""

    id: int = Field(..., description="Unique within the store")


# =============================================================================
# Advisory input ranges
# =============================================================================

#: Ranges the entry form suggests. Informational only, never enforced.
ADVISORY_RANGES: dict[str, tuple[float, float]] = {
    "hours_per_week": (0.0, 20.0),
    "diet_quality": (1.0, 10.0),
    "sleep_hours": (0.0, 12.0),
}


def advisory_warnings(fields: ObservationFields) -> list[str]:
    """List the fields of ``fields`` that fall outside ``ADVISORY_RANGES``."""
    warnings: list[str] = []
    for attribute, (low, high) in ADVISORY_RANGES.items():
        value = fields.value_of(attribute)
        if not low <= value <= high:
            warnings.append(f"{attribute}={value:g} outside suggested range {low:g}-{high:g}")
    return warnings
