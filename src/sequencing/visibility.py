"""Frame visibility of resolved sequences."""

from __future__ import annotations

from .config import BoundaryMode
from .interval import ResolvedInterval


def end_threshold(interval: ResolvedInterval, mode: BoundaryMode = BoundaryMode.LEGACY) -> int:
    """Last frame (inclusive) on which the sequence is active.

    Uses the declared duration, not the clipped one.
    """
    end = interval.absolute_from + interval.declared_duration
    if BoundaryMode(mode) is BoundaryMode.CORRECTED:
        return end - 1
    return end


def is_active(
    interval: ResolvedInterval,
    frame: int,
    mode: BoundaryMode = BoundaryMode.LEGACY,
) -> bool:
    """Return whether the sequence produces content at absolute *frame*.

    A sequence clipped away to zero frames or less is never active.

    >>> from .interval import SequenceDeclaration, resolve
    >>> iv = resolve(SequenceDeclaration(10, 5), None, 100)
    >>> [f for f in range(8, 17) if is_active(iv, f, BoundaryMode.CORRECTED)]
    [10, 11, 12, 13, 14]
    """
    if interval.is_empty or frame < interval.absolute_from:
        return False
    return frame <= end_threshold(interval, mode)


def active_frames(interval: ResolvedInterval, mode: BoundaryMode = BoundaryMode.LEGACY) -> range:
    if interval.is_empty:
        return range(0)
    return range(interval.absolute_from, end_threshold(interval, mode) + 1)
