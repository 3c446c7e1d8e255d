"""Contract violations raised while building a sequence tree."""

from __future__ import annotations


class SequenceError(TypeError):
    """Base class for invalid sequence declarations."""


class InvalidDurationError(SequenceError):
    pass


class InvalidOffsetError(SequenceError):
    pass


class InvalidLayoutError(SequenceError):
    pass
