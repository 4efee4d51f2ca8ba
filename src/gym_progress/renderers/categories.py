"""Workout type comparison chart: mean muscle gain and fat loss per type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gym_progress.renderers import axis_range, render_template

if TYPE_CHECKING:
    from gym_progress.analysis import CategorySummary

MUSCLE_COLOR = "#10b981"
FAT_COLOR = "#f59e0b"


def build_category_comparison_html(summaries: list[CategorySummary]) -> str:
    """Build grouped bars (muscle gain, fat loss) for each workout type.

    Bars grow up or down from a zero line, so negative means (fat gained
    rather than lost) still show.

    Args:
        summaries: One row per workout type (from ``summarize_by_category``).

    Returns:
        Rendered HTML string with inline SVG chart.
    """
    svg_width = 480
    svg_height = 260
    margin_left = 40
    margin_top = 15
    margin_bottom = 30
    plot_width = svg_width - margin_left - 10
    plot_height = svg_height - margin_top - margin_bottom
    plot_bottom = margin_top + plot_height

    means = [m for s in summaries for m in (s.mean_muscle_gain, s.mean_fat_loss)]
    y_min, y_max = axis_range(means, headroom=1.1)

    def y_for(value: float) -> float:
        return plot_bottom - (value - y_min) / (y_max - y_min) * plot_height

    zero_y = y_for(0.0)

    slot = plot_width / max(len(summaries), 1)
    bar_width = slot * 0.3

    groups: list[dict[str, Any]] = []
    for i, summary in enumerate(summaries):
        left = margin_left + i * slot + slot * 0.2
        groups.append(
            {
                "label": summary.category.value,
                "label_x": round(margin_left + i * slot + slot / 2, 1),
                "count": summary.sample_count,
                "bars": [
                    {
                        "x": round(left + j * bar_width, 1),
                        "y": round(min(y_for(value), zero_y), 1),
                        "width": round(bar_width, 1),
                        "height": round(abs(y_for(value) - zero_y), 1),
                        "color": color,
                        "title": f"{name}: {value:.2f} lbs",
                    }
                    for j, (name, value, color) in enumerate(
                        (
                            ("Avg Muscle Gain", summary.mean_muscle_gain, MUSCLE_COLOR),
                            ("Avg Fat Loss", summary.mean_fat_loss, FAT_COLOR),
                        )
                    )
                ],
            }
        )

    if y_min < 0:
        tick_values = [y_min, y_min / 2, 0.0, y_max / 2, y_max]
    else:
        tick_values = [y_max * i / 4 for i in range(5)]
    y_ticks = [{"y": round(y_for(v), 1), "label": f"{v:g}"} for v in tick_values]

    return render_template(
        "categories.html.j2",
        svg_width=svg_width,
        svg_height=svg_height,
        margin_left=margin_left,
        plot_right=svg_width - 10,
        plot_bottom=plot_bottom,
        groups=groups,
        y_ticks=y_ticks,
        label_y=svg_height - 8,
        muscle_color=MUSCLE_COLOR,
        fat_color=FAT_COLOR,
    )
