"""Seed dataset shown on first launch."""

from __future__ import annotations

from gym_progress.schemas import ObservationFields, WorkoutType
from gym_progress.store import ObservationStore

# (hours/week, diet, sleep, type, muscle gain, fat loss)
_SAMPLE_ROWS: list[tuple[float, float, float, WorkoutType, float, float]] = [
    (5, 7, 7, WorkoutType.STRENGTH, 2.5, 1.2),
    (3, 5, 6, WorkoutType.CARDIO, 0.8, 2.8),
    (6, 8, 8, WorkoutType.STRENGTH, 3.2, 1.8),
    (4, 6, 7, WorkoutType.MIXED, 1.9, 2.1),
    (7, 9, 8, WorkoutType.STRENGTH, 4.1, 2.3),
    (2, 4, 5, WorkoutType.CARDIO, 0.3, 1.5),
    (5, 7, 6, WorkoutType.MIXED, 2.2, 2.0),
    (4, 8, 9, WorkoutType.STRENGTH, 2.8, 1.4),
    (6, 6, 7, WorkoutType.CARDIO, 1.5, 3.2),
    (5, 9, 8, WorkoutType.MIXED, 2.9, 2.4),
]

SAMPLE_OBSERVATIONS: list[ObservationFields] = [
    ObservationFields(
        id=i,
        hours_per_week=hours,
        diet_quality=diet,
        sleep_hours=sleep,
        workout_type=workout_type,
        muscle_gain=gain,
        fat_loss=loss,
    )
    for i, (hours, diet, sleep, workout_type, gain, loss) in enumerate(_SAMPLE_ROWS, start=1)
]


def load_sample_store() -> ObservationStore:
    """A fresh store holding the ten sample observations."""
    return ObservationStore.from_entries(SAMPLE_OBSERVATIONS)
