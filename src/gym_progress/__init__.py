"""Gym Progress Analyzer - which lifestyle factors drive your gym results.

Architecture::

    schemas.py     Observation models and fixed enumerations
    store.py       In-memory, insertion-ordered observation store
    analysis/      Pearson correlation, factor ranking, workout-type summaries
    export.py      CSV export of the working set
    renderers/     Pure data -> HTML (correlation, comparison, scatter, table)
    flows/         Prefect orchestration (build renders the site)

Data flow: store -> snapshot -> analysis -> renderers / CLI

Extension points - see each package's docstring:
  - New predictor:    analysis/__init__.py
  - New UI module:    renderers/__init__.py
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from gym_progress.analysis import rank_factors, summarize_by_category
from gym_progress.config import Settings
from gym_progress.schemas import Observation, ObservationFields, OutcomeMetric, WorkoutType
from gym_progress.store import DuplicateObservationError, ObservationStore

__all__ = [
    "DuplicateObservationError",
    "Observation",
    "ObservationFields",
    "ObservationStore",
    "OutcomeMetric",
    "Settings",
    "WorkoutType",
    "__version__",
    "rank_factors",
    "summarize_by_category",
]
