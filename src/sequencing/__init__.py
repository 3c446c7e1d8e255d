"""Frame-accurate sequence scheduling."""

from .composition import Composition
from .config import BoundaryMode, SequencingConfig
from .errors import InvalidDurationError, InvalidLayoutError, InvalidOffsetError, SequenceError
from .interval import Layout, ResolvedInterval, SequenceDeclaration, resolve, validate_declaration
from .naming import get_timeline_clip_name
from .points import TimelinePoint, collect_timeline_points
from .registry import CompositionRegistry, SequenceManager, TimelineSequence, registry
from .sequence import Sequence, TimelineContext
from .visibility import active_frames, end_threshold, is_active

__all__ = [
    "active_frames",
    "BoundaryMode",
    "collect_timeline_points",
    "Composition",
    "CompositionRegistry",
    "end_threshold",
    "get_timeline_clip_name",
    "InvalidDurationError",
    "InvalidLayoutError",
    "InvalidOffsetError",
    "is_active",
    "Layout",
    "registry",
    "resolve",
    "ResolvedInterval",
    "Sequence",
    "SequenceDeclaration",
    "SequenceError",
    "SequenceManager",
    "SequencingConfig",
    "TimelineContext",
    "TimelinePoint",
    "TimelineSequence",
    "validate_declaration",
]

__version__ = "0.1.0"
