"""Sequence declarations and absolute interval resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidDurationError, InvalidLayoutError, InvalidOffsetError


class Layout(str, Enum):
    ABSOLUTE_FILL = "absolute-fill"
    NONE = "none"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SequenceDeclaration:
    """What a sequence asks for, relative to its parent.

    >>> SequenceDeclaration(10, 5)
    SequenceDeclaration(from_frame=10, duration_in_frames=5, name=None, layout=<Layout.ABSOLUTE_FILL: 'absolute-fill'>)
    """

    from_frame: int
    duration_in_frames: int
    name: str | None = None
    layout: Layout = Layout.ABSOLUTE_FILL

    def __post_init__(self) -> None:
        object.__setattr__(self, "layout", _coerce_layout(self.layout))
        validate_declaration(self)


def _coerce_layout(layout) -> Layout:
    try:
        return Layout(layout)
    except ValueError:
        raise InvalidLayoutError(
            f'The layout of a sequence expects either "absolute-fill" or "none", '
            f"but got: {layout!r}"
        ) from None


def validate_declaration(declaration) -> None:
    """Raise if *declaration* breaks the sequence contract.

    Checked in order: layout, duration, offset.
    """
    _coerce_layout(declaration.layout)

    duration = declaration.duration_in_frames
    if not _is_int(duration):
        raise InvalidDurationError(
            f"duration_in_frames must be an integer, but got {type(duration).__name__}"
        )
    if duration <= 0:
        raise InvalidDurationError(
            f"duration_in_frames must be positive, but got {duration}"
        )

    from_frame = declaration.from_frame
    if not _is_int(from_frame):
        raise InvalidOffsetError(
            f"from_frame must be an integer, but got {type(from_frame).__name__}"
        )


@dataclass(frozen=True)
class ResolvedInterval:
    """Where a sequence sits on the root timeline.

    ``duration_in_frames`` is clipped to the parent and the root timeline and
    may be zero or negative. ``declared_duration`` is the value the sequence
    asked for.
    """

    absolute_from: int
    relative_from: int
    duration_in_frames: int
    declared_duration: int
    id: str = ""

    @property
    def end(self) -> int:
        """Exclusive end frame of the clipped interval."""
        return self.absolute_from + self.duration_in_frames

    @property
    def is_empty(self) -> bool:
        return self.duration_in_frames <= 0


def resolve(
    declaration: SequenceDeclaration,
    parent: ResolvedInterval | None,
    root_duration: int | None,
    *,
    sequence_id: str = "",
) -> ResolvedInterval:
    """Resolve *declaration* against its parent and the root timeline.

    The duration is the tightest of the declared duration, what is left of
    the root timeline and what is left of the parent's (already clipped)
    interval.

    >>> parent = resolve(SequenceDeclaration(20, 50), None, 100)
    >>> child = resolve(SequenceDeclaration(40, 30), parent, 100)
    >>> child.absolute_from, child.duration_in_frames
    (60, 10)
    """
    if not isinstance(declaration, SequenceDeclaration):
        validate_declaration(declaration)
    if root_duration is None:
        root_duration = 0

    from_frame = declaration.from_frame
    absolute_from = (parent.absolute_from if parent is not None else 0) + from_frame

    duration = min(root_duration - from_frame, declaration.duration_in_frames)
    if parent is not None:
        duration = min(
            duration,
            parent.duration_in_frames + parent.absolute_from - absolute_from,
        )

    return ResolvedInterval(
        absolute_from=absolute_from,
        relative_from=from_frame,
        duration_in_frames=duration,
        declared_duration=declaration.duration_in_frames,
        id=sequence_id,
    )
