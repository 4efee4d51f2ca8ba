"""Dataset table: every recorded observation in store order."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gym_progress.export import format_value
from gym_progress.renderers import render_template

if TYPE_CHECKING:
    from gym_progress.schemas import Observation


def build_dataset_table_html(observations: list[Observation]) -> str:
    """Build the dataset table HTML."""
    rows = [
        {
            "id": obs.id,
            "hours": format_value(obs.hours_per_week),
            "diet": format_value(obs.diet_quality),
            "sleep": format_value(obs.sleep_hours),
            "type": obs.workout_type.value,
            "muscle_gain": format_value(obs.muscle_gain),
            "fat_loss": format_value(obs.fat_loss),
        }
        for obs in observations
    ]
    return render_template("dataset_table.html.j2", rows=rows, count=len(rows))
