"""Start/end frames of mounted sequences for timeline previews."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .composition import Composition
from .config import BoundaryMode
from .sequence import Sequence
from .visibility import end_threshold


@dataclass
class TimelinePoint:
    frame: int
    label: str
    sequence_id: str
    edge: str  # "start" or "end"


def _build_label(index: int, sequence: Sequence) -> str:
    return sequence.display_name or f"sequence[{index}]"


def collect_timeline_points(
    source: Composition | Iterable[Sequence],
    mode: BoundaryMode | None = None,
) -> list[TimelinePoint]:
    """Collect start/end points of every mounted sequence, nested ones included.

    The end point is the last frame of the clipped interval, or the last
    active frame if the boundary mode ends the sequence earlier. Sequences
    clipped away entirely produce no points. Returns points sorted by
    (frame, edge) where start sorts before end.
    """
    if isinstance(source, Composition):
        sequences = source.sequences
        if mode is None:
            mode = source.config.boundary_mode
    else:
        sequences = list(source)
    if mode is None:
        mode = BoundaryMode.LEGACY

    points: list[tuple[int, int, TimelinePoint]] = []
    _collect(sequences, mode, points)
    points.sort(key=lambda p: (p[0], p[1]))
    return [tp for _, _, tp in points]


def _collect(sequences, mode, points) -> None:
    for i, sequence in enumerate(sequences):
        interval = sequence.interval
        if interval is None or interval.is_empty:
            continue
        label = _build_label(i, sequence)
        start = interval.absolute_from
        end = min(interval.end - 1, end_threshold(interval, mode))
        if end < start:
            continue

        points.append((start, 0, TimelinePoint(start, f"{label} (start)", sequence.id, "start")))
        points.append((end, 1, TimelinePoint(end, f"{label} (end)", sequence.id, "end")))

        _collect(sequence.children, mode, points)
