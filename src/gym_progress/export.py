"""CSV export of recorded observations.

Output is a header row plus one line per observation, comma-joined with no
quoting. Every value is a number or a ``WorkoutType`` name, so no field can
contain a comma. Export only; nothing reads this format back in.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from gym_progress.schemas import Observation

#: (attribute, column heading) in export order
CSV_COLUMNS: tuple[tuple[str, str], ...] = (
    ("hours_per_week", "Hours/Week"),
    ("diet_quality", "Diet Quality"),
    ("sleep_hours", "Sleep Hours"),
    ("workout_type", "Workout Type"),
    ("muscle_gain", "Muscle Gain (lbs)"),
    ("fat_loss", "Fat Loss (lbs)"),
)

CSV_HEADER = ",".join(heading for _, heading in CSV_COLUMNS)


def format_value(value: object) -> str:
    """Format one field; floats are written the way JavaScript prints numbers.

    Integral values drop the ``.0`` (``5.0`` -> ``5``), other values use the
    shortest round-trip digits, and exponent notation is used only below
    1e-6 or from 1e21 up (``1e-7``, ``1e+21``).
    """
    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    # value == 0.digits * 10**n
    n = int(exponent) + k
    prefix = "-" if sign else ""

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * -n + digits
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{prefix}{mantissa}e{n - 1:+d}"


def observation_to_row(observation: Observation) -> str:
    """Render a single observation as one CSV line (no newline)."""
    return ",".join(format_value(observation.value_of(attr)) for attr, _ in CSV_COLUMNS)


def observations_to_csv(observations: Iterable[Observation]) -> str:
    """Render observations as CSV text, lines joined by ``\\n``.

    Args:
        observations: Records in the order they should appear.

    Returns:
        Header line followed by one line per observation, no trailing newline.
    """
    lines = [CSV_HEADER]
    lines.extend(observation_to_row(obs) for obs in observations)
    return "\n".join(lines)


def write_csv(observations: Iterable[Observation], path: Path) -> Path:
    """Write the CSV export to ``path``, creating parent directories.

    Returns:
        The path written.
    """
    text = observations_to_csv(observations)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        f.write(text)
    logger.info("Exported {} observations to {}", text.count("\n"), path)
    return path
