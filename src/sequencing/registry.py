"""Composition registry: the live listing of mounted sequences."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimelineSequence:
    """Registration payload for one mounted sequence."""

    id: str
    absolute_from: int
    from_frame: int
    duration: int
    parent: str | None
    display_name: str
    type: str = "sequence"
    is_thumbnail: bool = False
    root_id: str = ""


@runtime_checkable
class SequenceManager(Protocol):

    def register_sequence(self, sequence: TimelineSequence) -> None: ...

    def unregister_sequence(self, sequence_id: str) -> None: ...


class CompositionRegistry:
    """In-memory, id-keyed store of registered sequences.

    Registering an id that is already present replaces its entry. All
    mutations are serialised by a lock so sequences may register from
    several threads.
    """

    def __init__(self) -> None:
        self._sequences: dict[str, TimelineSequence] = {}
        self._lock = threading.Lock()

    def register_sequence(self, sequence: TimelineSequence) -> None:
        """Insert or replace the entry for ``sequence.id``."""
        with self._lock:
            replaced = sequence.id in self._sequences
            self._sequences[sequence.id] = sequence
        log.debug(
            "%s sequence %s (%r) at %d for %d frames",
            "Updated" if replaced else "Registered",
            sequence.id,
            sequence.display_name,
            sequence.absolute_from,
            sequence.duration,
        )

    def unregister_sequence(self, sequence_id: str) -> None:
        """Remove the entry for *sequence_id*."""
        with self._lock:
            if sequence_id not in self._sequences:
                raise KeyError(f"No sequence registered for {sequence_id!r}")
            del self._sequences[sequence_id]
        log.debug("Unregistered sequence %s", sequence_id)

    def get(self, sequence_id: str) -> TimelineSequence:
        """Retrieve a registered sequence by id."""
        with self._lock:
            if sequence_id not in self._sequences:
                raise KeyError(f"No sequence registered for {sequence_id!r}")
            return self._sequences[sequence_id]

    @property
    def sequences(self) -> list[TimelineSequence]:
        """Snapshot of all registered sequences in registration order."""
        with self._lock:
            return list(self._sequences.values())

    def children_of(self, parent_id: str | None) -> list[TimelineSequence]:
        """Return registered sequences whose parent is *parent_id* (None for roots)."""
        return [s for s in self.sequences if s.parent == parent_id]

    def clear(self) -> None:
        with self._lock:
            self._sequences.clear()

    def __contains__(self, sequence_id: object) -> bool:
        with self._lock:
            return sequence_id in self._sequences

    def __len__(self) -> int:
        with self._lock:
            return len(self._sequences)


registry = CompositionRegistry()
