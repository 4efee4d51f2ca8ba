"""
Tests for the build flow module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gym_progress.analysis import analyze
from gym_progress.export import CSV_HEADER
from gym_progress.flows import build
from gym_progress.schemas import OutcomeMetric

if TYPE_CHECKING:
    from pathlib import Path


class TestLoadObservations:
    """Test assembling the working set."""

    def test_sample_data(self) -> None:
        observations = build.load_observations.fn()
        assert len(observations) == 10

    def test_without_sample(self) -> None:
        assert build.load_observations.fn(include_sample=False) == []

    def test_extra_entries(self) -> None:
        entry = {
            "hours_per_week": 8,
            "diet_quality": 9,
            "sleep_hours": 8,
            "workout_type": "Mixed",
            "muscle_gain": 3.5,
            "fat_loss": 2.5,
        }
        observations = build.load_observations.fn([entry], include_sample=True)
        assert len(observations) == 11
        assert observations[-1].muscle_gain == 3.5
        assert observations[-1].id == 11

    def test_invalid_entry_raises(self) -> None:
        entry = {
            "hours_per_week": 8,
            "diet_quality": 9,
            "sleep_hours": 8,
            "workout_type": "Pilates",
            "muscle_gain": 3.5,
            "fat_loss": 2.5,
        }
        with pytest.raises(ValueError):
            build.load_observations.fn([entry], include_sample=False)


class TestBuildHtml:
    """Test full page rendering."""

    def test_page_contains_all_sections(self) -> None:
        observations = build.load_observations.fn()
        report = analyze(observations, OutcomeMetric.MUSCLE_GAIN)
        html = build.build_html.fn(observations, report, "gym_progress_data.csv")
        assert html.startswith("<!DOCTYPE html>")
        for heading in (
            "Factor Correlations",
            "Workout Type Comparison",
            "Diet Quality vs Muscle Gain",
            "Dataset (10 entries)",
            "Key Insights",
        ):
            assert heading in html
        assert 'href="gym_progress_data.csv"' in html
        # fragments must not be escaped
        assert "&lt;section" not in html


class TestWriteSite:
    """Test writing site output."""

    def test_writes_index_and_csv(self, tmp_path: Path) -> None:
        out = build.write_site.fn("<html></html>", CSV_HEADER, tmp_path / "site", "data.csv")
        assert out == tmp_path / "site" / "index.html"
        assert out.read_text() == "<html></html>"
        assert (tmp_path / "site" / "data.csv").read_text() == CSV_HEADER


class TestBuildAll:
    """Test the build flow end to end."""

    def test_build_all(self, tmp_path: Path) -> None:
        result = build.build_all.fn(metric="fat_loss", site_dir=str(tmp_path))
        assert result["pages"] == 1
        assert result["observations"] == 10
        assert result["strongest_factor"] in {"Hours/Week", "Diet Quality", "Sleep Hours"}

        index = tmp_path / "index.html"
        assert index.exists()
        assert "Fat Loss" in index.read_text()

        csv_lines = (tmp_path / "gym_progress_data.csv").read_text().split("\n")
        assert csv_lines[0] == CSV_HEADER
        assert len(csv_lines) == 11

    def test_build_all_empty(self, tmp_path: Path) -> None:
        result = build.build_all.fn(include_sample=False, site_dir=str(tmp_path))
        assert result["observations"] == 0
        assert (tmp_path / "gym_progress_data.csv").read_text() == CSV_HEADER
        assert "No observations recorded yet." in (tmp_path / "index.html").read_text()
