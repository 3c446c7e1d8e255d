"""Root timeline owning a tree of sequences."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import Iterator, Self

from .config import SequencingConfig
from .interval import ResolvedInterval
from .registry import CompositionRegistry, SequenceManager
from .sequence import Sequence, TimelineContext

log = logging.getLogger(__name__)


@dataclass
class Composition:
    """A fixed-length timeline and its top-level sequences.

    Mounting walks the tree root first, so every sequence resolves against
    an already resolved parent. Used as a context manager the whole tree is
    unmounted on every exit path::

        with Composition(300).add(Sequence(0, 60, intro)) as comp:
            comp.render(12)
    """

    duration_in_frames: int
    registry: SequenceManager = field(default_factory=CompositionRegistry)
    config: SequencingConfig = field(default_factory=SequencingConfig)
    context: TimelineContext = field(default_factory=TimelineContext)
    sequences: list[Sequence] = field(default_factory=list)
    _mounted: bool = field(default=False, init=False, repr=False)

    def add(self, sequence: Sequence) -> Self:
        if sequence.parent is not None:
            raise ValueError(f"{sequence!r} is nested in another sequence")
        self.sequences.append(sequence)
        if self._mounted:
            sequence.mount(None, self.duration_in_frames, self.registry, self.context)
        return self

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def mount(self) -> Self:
        if self._mounted:
            raise RuntimeError("Composition is already mounted")
        self._mounted = True
        log.debug(
            "Mounting %d sequences on a %d frame timeline",
            len(self.sequences), self.duration_in_frames,
        )
        try:
            for sequence in self.sequences:
                sequence.mount(None, self.duration_in_frames, self.registry, self.context)
        except BaseException:
            self.unmount()
            raise
        return self

    def unmount(self) -> None:
        """Release every sequence. Each one unregisters exactly once."""
        if not self._mounted:
            return
        self._mounted = False
        with ExitStack() as stack:
            for sequence in self.sequences:
                stack.callback(sequence.unmount)

    def set_duration(self, duration_in_frames: int) -> None:
        """Change the root timeline length, re-resolving mounted sequences in place."""
        self.duration_in_frames = duration_in_frames
        if not self._mounted:
            return
        for sequence in self.sequences:
            if sequence.is_mounted:
                sequence.set_root_duration(duration_in_frames)

    def walk(self) -> Iterator[Sequence]:
        """Every sequence in the tree, parents before children."""
        stack = list(reversed(self.sequences))
        while stack:
            sequence = stack.pop()
            yield sequence
            stack.extend(reversed(sequence.children))

    def intervals(self) -> dict[str, ResolvedInterval]:
        return {s.id: s.interval for s in self.walk() if s.is_mounted}

    def active_at(self, frame: int) -> list[Sequence]:
        """Sequences producing content at *frame*, parents before children."""
        mode = self.config.boundary_mode
        return [
            s for top in self.sequences if top.is_mounted
            for s in top.walk_active(frame, mode)
        ]

    def render(self, frame: int) -> list:
        mode = self.config.boundary_mode
        return [
            content for top in self.sequences if top.is_mounted
            for content in top.render(frame, mode)
        ]

    def __enter__(self) -> Self:
        return self.mount()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unmount()
