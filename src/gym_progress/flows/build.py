"""
Prefect flow for building the static analysis page.

Runs the analysis over the working set and writes ``index.html`` plus the CSV
export into the site directory.

Run locally:
    python -m gym_progress.flows.build
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from prefect import flow, task

from gym_progress.analysis import PREDICTORS, AnalysisReport, analyze, factor_points
from gym_progress.config import get_settings
from gym_progress.export import observations_to_csv
from gym_progress.renderers import render_template
from gym_progress.renderers.categories import build_category_comparison_html
from gym_progress.renderers.correlations import build_correlation_chart_html, build_insights_html
from gym_progress.renderers.dataset_table import build_dataset_table_html
from gym_progress.renderers.scatter import build_scatter_html
from gym_progress.sample import load_sample_store
from gym_progress.schemas import Observation, OutcomeMetric
from gym_progress.store import ObservationStore

# Predictor plotted against the outcome in the scatter chart
SCATTER_PREDICTOR = next(p for p in PREDICTORS if p.attribute == "diet_quality")


# =============================================================================
# Tasks
# =============================================================================


@task(name="load-observations")
def load_observations(
    entries: list[dict[str, Any]] | None = None,
    include_sample: bool = True,
) -> list[Observation]:
    """Build the working set: sample data (optional) plus extra entries."""
    store = load_sample_store() if include_sample else ObservationStore()
    for entry in entries or []:
        store.add(entry)
    return store.list()


@task(name="run-analysis")
def run_analysis(observations: list[Observation], metric: OutcomeMetric) -> AnalysisReport:
    """Rank factors and summarize workout types for ``metric``."""
    return analyze(observations, metric)


@task(name="build-html")
def build_html(
    observations: list[Observation],
    report: AnalysisReport,
    csv_filename: str | None = None,
) -> str:
    """Render the full page from the observations and their analysis."""
    points = factor_points(observations, SCATTER_PREDICTOR.attribute, report.metric)
    return render_template(
        "base.html.j2",
        updated=datetime.now().strftime("%Y-%m-%d %H:%M"),
        metric_label=report.metric.label,
        csv_filename=csv_filename,
        correlations=build_correlation_chart_html(report.correlations, report.metric),
        categories=build_category_comparison_html(report.summaries),
        scatter=build_scatter_html(points, SCATTER_PREDICTOR, report.metric),
        dataset_table=build_dataset_table_html(observations),
        insights=build_insights_html(report),
    )


@task(name="write-site")
def write_site(html: str, csv_text: str, site_dir: Path, csv_filename: str) -> Path:
    """Write the page and CSV export to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    with (site_dir / csv_filename).open("w", newline="") as f:
        f.write(csv_text)
    return output_path


# =============================================================================
# Flow
# =============================================================================


@flow(name="build-site", log_prints=True)
def build_all(
    metric: str | None = None,
    entries: list[dict[str, Any]] | None = None,
    include_sample: bool = True,
    site_dir: str | None = None,
) -> dict[str, Any]:
    """
    Build the static analysis page.

    Args:
        metric: Outcome metric name (defaults to settings.default_metric).
        entries: Extra observations (field mappings) added to the working set.
        include_sample: Start from the sample dataset.
        site_dir: Output directory (defaults to settings.site_dir).
    """
    settings = get_settings()
    outcome = OutcomeMetric(metric) if metric else settings.default_metric
    output_dir = Path(site_dir) if site_dir else settings.site_dir

    print("Loading observations...")
    observations = load_observations(entries, include_sample)
    if not observations:
        print("Warning: No observations. Building an empty report.")

    print(f"Analyzing {len(observations)} observations for {outcome.label}...")
    report = run_analysis(observations, outcome)

    print("Building HTML...")
    html = build_html(observations, report, settings.export_filename)

    print("Writing site...")
    output_path = write_site(
        html, observations_to_csv(observations), output_dir, settings.export_filename
    )

    print(f"Site built: {output_path}")
    strongest = report.strongest_factor
    return {
        "pages": 1,
        "output": str(output_path),
        "observations": len(observations),
        "strongest_factor": strongest.factor_name if strongest else None,
    }


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
