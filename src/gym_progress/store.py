"""In-memory observation store.

Holds the working set of observations in insertion order. The store is the
only owner of observation records; everything else (analysis, renderers,
CSV export) reads from ``list()`` or ``snapshot()``.

Ids are plain integers, unique among live observations. They exist so a row
can be removed; nothing orders or computes by id.

The store does no locking. A multi-threaded host should guard ``add`` and
``remove`` with an exclusive lock, take ``snapshot()`` under a shared lock,
and run the analysis on the snapshot outside the lock.
"""

from __future__ import annotations

import builtins
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from loguru import logger

from gym_progress.schemas import Observation, ObservationFields, advisory_warnings


class DuplicateObservationError(ValueError):
    """An explicit id is already used by a live observation."""


class ObservationStore:
    """Ordered in-memory collection of observations."""

    def __init__(self) -> None:
        self._records: dict[int, Observation] = {}
        self._next_id = 1

    @classmethod
    def from_entries(
        cls, entries: Iterable[ObservationFields | Mapping[str, Any]]
    ) -> ObservationStore:
        """Build a store pre-populated with ``entries`` (in order)."""
        store = cls()
        for entry in entries:
            store.add(entry)
        return store

    def add(self, entry: ObservationFields | Mapping[str, Any]) -> Observation:
        """Insert a new observation and return the stored record.

        Args:
            entry: Observation values, either validated ``ObservationFields``
                or a mapping of field name -> value. An ``id`` key is optional.

        Returns:
            The stored ``Observation`` with its id filled in.

        Raises:
            pydantic.ValidationError: A field is missing, non-numeric, or the
                workout type is not a ``WorkoutType``.
            DuplicateObservationError: The explicit id is already in use.
        """
        fields = (
            entry
            if isinstance(entry, ObservationFields)
            else ObservationFields.model_validate(dict(entry))
        )

        if fields.id is None:
            obs_id = self._next_id
        elif fields.id in self._records:
            msg = f"Observation id already in use: {fields.id}"
            raise DuplicateObservationError(msg)
        else:
            obs_id = fields.id

        for warning in advisory_warnings(fields):
            logger.warning("Observation {}: {}", obs_id, warning)

        observation = Observation(**fields.model_dump(exclude={"id"}), id=obs_id)
        self._records[obs_id] = observation
        self._next_id = max(self._next_id, obs_id + 1)
        logger.debug("Added observation {} ({} total)", obs_id, len(self._records))
        return observation

    def remove(self, obs_id: int) -> None:
        """Remove the observation with ``obs_id``. Unknown ids are ignored."""
        if self._records.pop(obs_id, None) is None:
            logger.debug("Remove ignored, no observation {}", obs_id)
            return
        logger.debug("Removed observation {} ({} left)", obs_id, len(self._records))

    def list(self) -> builtins.list[Observation]:
        """Return the live observations in insertion order (a new list each call)."""
        return list(self._records.values())

    def snapshot(self) -> tuple[Observation, ...]:
        """Immutable copy of the current contents for analysis."""
        return tuple(self._records.values())

    def get(self, obs_id: int) -> Observation | None:
        """Return the observation with ``obs_id``, or None."""
        return self._records.get(obs_id)

    def clear(self) -> None:
        """Remove every observation. Id assignment keeps counting upward."""
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self.list())

    def __contains__(self, obs_id: object) -> bool:
        return obs_id in self._records
