"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import sys
from pathlib import Path

from loguru import logger

from gym_progress import __version__
from gym_progress.analysis import analyze
from gym_progress.config import get_settings
from gym_progress.export import write_csv
from gym_progress.flows.build import build_all
from gym_progress.logger import setup_logger
from gym_progress.sample import load_sample_store
from gym_progress.schemas import OutcomeMetric
from gym_progress.store import ObservationStore

# Positional order of the values passed to --entry
ENTRY_FIELDS = (
    "hours_per_week",
    "diet_quality",
    "sleep_hours",
    "workout_type",
    "muscle_gain",
    "fat_loss",
)


def _add_dataset_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by commands that assemble a working set."""
    parser.add_argument(
        "--entry",
        nargs=len(ENTRY_FIELDS),
        action="append",
        default=[],
        metavar=("HOURS", "DIET", "SLEEP", "TYPE", "GAIN", "LOSS"),
        help="Add an observation (repeatable), e.g. --entry 5 7 7 Strength 2.5 1.2",
    )
    parser.add_argument(
        "--no-sample",
        action="store_true",
        help="Start from an empty dataset instead of the sample data",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gym-progress",
        description="Discover which factors drive your fitness results",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    metrics = [m.value for m in OutcomeMetric]

    analyze_parser = subparsers.add_parser("analyze", help="Rank factors for an outcome")
    analyze_parser.add_argument(
        "--metric",
        choices=metrics,
        default=None,
        help="Outcome metric (default: default_metric from settings)",
    )
    _add_dataset_arguments(analyze_parser)

    export_parser = subparsers.add_parser("export", help="Export the dataset as CSV")
    export_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="CSV file to write (default: export_filename from settings)",
    )
    _add_dataset_arguments(export_parser)

    build_parser = subparsers.add_parser("build", help="Build the static analysis site")
    build_parser.add_argument("--metric", choices=metrics, default=None)

    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def _build_store(args: argparse.Namespace) -> ObservationStore:
    """Assemble the working set from the sample data and any --entry values.

    Raises:
        ValueError: An --entry value is not a number or not a known workout type.
    """
    store = ObservationStore() if args.no_sample else load_sample_store()
    for values in args.entry:
        store.add(dict(zip(ENTRY_FIELDS, values, strict=True)))
    return store


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the 'analyze' command: print ranked factors and summaries."""
    settings = get_settings()
    metric = OutcomeMetric(args.metric) if args.metric else settings.default_metric
    try:
        store = _build_store(args)
    except ValueError as e:
        print(f"Error: invalid entry: {e}", file=sys.stderr)
        return 1

    report = analyze(store.snapshot(), metric)

    print(f"Outcome: {metric.label} ({report.sample_size} observations)")
    print()
    print("Factor correlations:")
    for rank, corr in enumerate(report.correlations, start=1):
        print(
            f"  {rank}. {corr.factor_name:<13} {corr.coefficient:+.3f}"
            f"  {corr.category:<9} ({corr.strength.value})"
        )
    print()
    print("Workout types:")
    for summary in report.summaries:
        print(
            f"  {summary.category.value:<9} muscle gain {summary.mean_muscle_gain:.2f}"
            f"  fat loss {summary.mean_fat_loss:.2f}  n={summary.sample_count}"
        )
    print()
    if report.strongest_factor is not None:
        strongest = report.strongest_factor
        print(f"Strongest factor: {strongest.factor_name} ({abs(strongest.percent)}% correlation)")
    if report.best_category is not None:
        print(f"Best workout for {metric.label.lower()}: {report.best_category.category.value}")
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Handle the 'export' command: write the dataset as CSV."""
    settings = get_settings()
    output = args.output if args.output is not None else Path(settings.export_filename)
    try:
        store = _build_store(args)
    except ValueError as e:
        print(f"Error: invalid entry: {e}", file=sys.stderr)
        return 1

    path = write_csv(store.list(), output)
    print(f"Wrote {len(store)} observations to {path}")
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: run the site build flow."""
    print("Building site...")
    build_all(metric=args.metric)
    print("Done.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.site_dir)

    if not site_dir.exists():
        print("No site directory found. Run 'gym-progress build' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    setup_logger(
        level="DEBUG" if args.debug or settings.debug else settings.log_level,
        log_file=settings.log_file,
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "analyze": cmd_analyze,
        "export": cmd_export,
        "build": cmd_build,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        logger.debug("Running command {}", args.command)
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
