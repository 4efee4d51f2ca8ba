"""Factor correlation chart and key-insights panel.

The chart is an inline SVG with one vertical bar per factor, drawn up or down
from a zero line and coloured by ``CorrelationStrength``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gym_progress.renderers import render_template

if TYPE_CHECKING:
    from gym_progress.analysis import AnalysisReport, FactorCorrelation
    from gym_progress.schemas import OutcomeMetric


def build_correlation_chart_html(
    correlations: list[FactorCorrelation],
    metric: OutcomeMetric,
) -> str:
    """Build the factor correlation bar chart plus a card per factor.

    Args:
        correlations: Ranked factor correlations (from ``rank_factors``).
        metric: Outcome metric the correlations were computed against.

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
    zero_y = margin_top + plot_height / 2

    def y_for(r: float) -> float:
        """Convert a coefficient in [-1, 1] to an SVG y coordinate."""
        return zero_y - r * plot_height / 2

    slot = plot_width / max(len(correlations), 1)
    bar_width = slot * 0.6

    bars: list[dict[str, Any]] = []
    for i, corr in enumerate(correlations):
        top = min(y_for(corr.coefficient), zero_y)
        bars.append(
            {
                "x": round(margin_left + i * slot + (slot - bar_width) / 2, 1),
                "y": round(top, 1),
                "width": round(bar_width, 1),
                "height": round(abs(y_for(corr.coefficient) - zero_y), 1),
                "label_x": round(margin_left + i * slot + slot / 2, 1),
                "color": corr.strength.color,
                "factor": corr.factor_name,
            }
        )

    y_ticks = [{"y": round(y_for(v), 1), "label": f"{v:g}"} for v in (-1.0, -0.5, 0.0, 0.5, 1.0)]

    cards = [
        {
            "factor": corr.factor_name,
            "percent": corr.percent,
            "category": corr.category,
            "strength": corr.strength.value,
            "color": corr.strength.color,
        }
        for corr in correlations
    ]

    return render_template(
        "correlations.html.j2",
        metric_label=metric.label,
        svg_width=svg_width,
        svg_height=svg_height,
        margin_left=margin_left,
        plot_right=svg_width - 10,
        zero_y=round(zero_y, 1),
        bars=bars,
        y_ticks=y_ticks,
        label_y=svg_height - 8,
        cards=cards,
    )


def build_insights_html(report: AnalysisReport) -> str:
    """Build the key-insights panel: strongest factor, sample size, best workout."""
    strongest = report.strongest_factor
    best = report.best_category
    return render_template(
        "insights.html.j2",
        metric_label=report.metric.label,
        strongest_name=strongest.factor_name if strongest else None,
        strongest_percent=abs(strongest.percent) if strongest else 0,
        sample_size=report.sample_size,
        best_category=best.category.value if best else None,
        best_mean=f"{best.mean_for(report.metric):.1f}" if best else None,
    )
