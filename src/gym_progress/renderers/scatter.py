"""Scatter plot of one predictor against the outcome metric."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gym_progress.renderers import axis_range, render_template
from gym_progress.renderers.categories import FAT_COLOR, MUSCLE_COLOR
from gym_progress.schemas import OutcomeMetric

if TYPE_CHECKING:
    from gym_progress.analysis import Predictor


def build_scatter_html(
    points: list[tuple[float, float]],
    predictor: Predictor,
    metric: OutcomeMetric,
) -> str:
    """Build an SVG scatter of ``predictor`` (x) vs ``metric`` (y).

    Args:
        points: (x, y) pairs from ``factor_points``.
        predictor: The predictor on the x axis.
        metric: The outcome on the y axis.

    Returns:
        Rendered HTML string with inline SVG chart.
    """
    svg_width = 480
    svg_height = 280
    margin_left = 40
    margin_top = 15
    margin_right = 15
    margin_bottom = 35
    plot_right = svg_width - margin_right
    plot_bottom = svg_height - margin_bottom

    x_min, x_max = axis_range(x for x, _ in points)
    y_min, y_max = axis_range((y for _, y in points), headroom=1.1)

    def x_for(value: float) -> float:
        return margin_left + (value - x_min) / (x_max - x_min) * (plot_right - margin_left)

    def y_for(value: float) -> float:
        return plot_bottom - (value - y_min) / (y_max - y_min) * (plot_bottom - margin_top)

    dots = [{"cx": round(x_for(x), 1), "cy": round(y_for(y), 1), "x": x, "y": y} for x, y in points]

    return render_template(
        "scatter.html.j2",
        x_label=predictor.label,
        y_label=metric.label,
        svg_width=svg_width,
        svg_height=svg_height,
        margin_left=margin_left,
        margin_top=margin_top,
        plot_right=plot_right,
        plot_bottom=plot_bottom,
        dots=dots,
        color=MUSCLE_COLOR if metric is OutcomeMetric.MUSCLE_GAIN else FAT_COLOR,
        x_min=f"{x_min:g}",
        x_max=f"{x_max:g}",
        y_min=f"{y_min:g}",
        y_max=f"{y_max:g}",
    )
