"""Sequence instances: resolution, registration and scoped cleanup."""

from __future__ import annotations

import dataclasses
import logging
import uuid
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Self

from . import visibility
from .config import BoundaryMode
from .interval import Layout, ResolvedInterval, SequenceDeclaration, resolve
from .naming import get_timeline_clip_name
from .registry import SequenceManager, TimelineSequence

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimelineContext:
    """Flags forwarded with every registration."""

    is_thumbnail: bool = False
    root_id: str = ""


class Sequence:
    """A time-bounded node in a composition tree.

    The declaration is validated on construction, so an invalid sequence
    (and therefore its subtree) is never built. Once mounted the sequence
    keeps its registry entry in sync with its resolved interval until
    ``unmount`` releases it.
    """

    def __init__(
        self,
        from_frame: int,
        duration_in_frames: int,
        content: Any = None,
        *,
        name: str | None = None,
        layout: Layout | str = Layout.ABSOLUTE_FILL,
        children: Iterable[Sequence] = (),
    ) -> None:
        self.declaration = SequenceDeclaration(from_frame, duration_in_frames, name, layout)
        self.content = content
        self.id = uuid.uuid4().hex
        self.parent: Sequence | None = None
        self.children: list[Sequence] = []
        self.interval: ResolvedInterval | None = None

        self._manager: SequenceManager | None = None
        self._context = TimelineContext()
        self._parent_interval: ResolvedInterval | None = None
        self._root_duration: int | None = None
        self._registered = False
        self._destroyed = False

        for child in children:
            self.add(child)

    def __repr__(self) -> str:
        d = self.declaration
        return (
            f"Sequence(from_frame={d.from_frame}, duration_in_frames={d.duration_in_frames}, "
            f"name={self.display_name!r})"
        )

    @property
    def layout(self) -> Layout:
        return self.declaration.layout

    @property
    def display_name(self) -> str:
        if self.declaration.name is not None:
            return self.declaration.name
        return get_timeline_clip_name(self.content)

    @property
    def is_mounted(self) -> bool:
        return self._manager is not None and not self._destroyed

    def add(self, child: Sequence) -> Self:
        """Append *child*. A child added to a mounted parent is mounted at once."""
        if child.parent is not None:
            raise ValueError(f"{child!r} already has a parent")
        child.parent = self
        self.children.append(child)
        if self.is_mounted:
            child.mount(self.interval, self._root_duration, self._manager, self._context)
        return self

    def mount(
        self,
        parent: ResolvedInterval | None,
        root_duration: int | None,
        manager: SequenceManager,
        context: TimelineContext | None = None,
    ) -> ResolvedInterval:
        """Resolve against *parent*, register, then mount the children.

        If anything fails part way, whatever was registered is released
        before the error propagates.
        """
        if self._destroyed:
            raise RuntimeError(f"{self!r} has been unmounted and cannot be mounted again")
        if self._manager is not None:
            raise RuntimeError(f"{self!r} is already mounted")

        self._manager = manager
        self._context = context or TimelineContext()
        try:
            self._refresh(parent, root_duration)
        except BaseException:
            self.unmount()
            raise
        return self.interval

    def set_root_duration(self, root_duration: int | None) -> ResolvedInterval:
        """Re-resolve this subtree against a new root timeline length."""
        self._require_mounted()
        self._refresh(self._parent_interval, root_duration)
        return self.interval

    def redeclare(self, **changes: Any) -> SequenceDeclaration:
        """Replace declaration fields, re-resolving if mounted.

        The new declaration is validated before anything changes.
        """
        declaration = dataclasses.replace(self.declaration, **changes)
        self.declaration = declaration
        if self.is_mounted:
            self._refresh(self._parent_interval, self._root_duration)
        return declaration

    def unmount(self) -> None:
        """Unregister this sequence and its subtree.

        Runs at most once per instance. Every child is unmounted and this
        sequence's own entry is released even if one of them raises. A
        sequence unmounted on its own is detached from its parent.
        """
        if self._manager is None or self._destroyed:
            return
        self._destroyed = True
        self.interval = None
        parent = self.parent
        if parent is not None and not parent._destroyed:
            parent.children.remove(self)
            self.parent = None
        with ExitStack() as stack:
            if self._registered:
                stack.callback(self._unregister)
            for child in self.children:
                stack.callback(child.unmount)

    def is_active(self, frame: int, mode: BoundaryMode = BoundaryMode.LEGACY) -> bool:
        self._require_mounted()
        return visibility.is_active(self.interval, frame, mode)

    def walk_active(self, frame: int, mode: BoundaryMode = BoundaryMode.LEGACY) -> Iterator[Sequence]:
        """Yield this sequence and its active descendants, parents first.

        Children of an inactive sequence are never visited.
        """
        if not self.is_active(frame, mode):
            return
        yield self
        for child in self.children:
            if child.is_mounted:
                yield from child.walk_active(frame, mode)

    def render(self, frame: int, mode: BoundaryMode = BoundaryMode.LEGACY) -> list:
        """Content of the active subtree at *frame*, depth first."""
        return [s.content for s in self.walk_active(frame, mode) if s.content is not None]

    def _require_mounted(self) -> None:
        if not self.is_mounted:
            raise RuntimeError(f"{self!r} is not mounted")

    def _refresh(self, parent: ResolvedInterval | None, root_duration: int | None) -> None:
        self._parent_interval = parent
        self._root_duration = root_duration
        self.interval = resolve(self.declaration, parent, root_duration, sequence_id=self.id)
        if self.interval.is_empty:
            log.debug(
                "Sequence %s (%r) clipped to %d frames",
                self.id, self.display_name, self.interval.duration_in_frames,
            )
        self._register()

        # Parent is registered before any child resolves
        for child in self.children:
            if child._destroyed:
                continue
            if child.is_mounted:
                child._refresh(self.interval, root_duration)
            else:
                child.mount(self.interval, root_duration, self._manager, self._context)

    def _register(self) -> None:
        interval = self.interval
        self._manager.register_sequence(TimelineSequence(
            id=self.id,
            absolute_from=interval.absolute_from,
            from_frame=interval.relative_from,
            duration=interval.duration_in_frames,
            parent=self._parent_interval.id if self._parent_interval is not None else None,
            display_name=self.display_name,
            is_thumbnail=self._context.is_thumbnail,
            root_id=self._context.root_id,
        ))
        self._registered = True

    def _unregister(self) -> None:
        self._registered = False
        self._manager.unregister_sequence(self.id)
