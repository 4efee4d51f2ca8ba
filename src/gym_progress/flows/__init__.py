"""
Prefect flows.

Flows:
- build: Analyze the working set and render the static site

Usage (local):
    python -m gym_progress.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'build-site/default'
"""
