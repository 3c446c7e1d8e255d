"""Process-wide sequencing options."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BoundaryMode(str, Enum):
    """How the last frame of a sequence is interpreted.

    ``LEGACY`` keeps the sequence visible on ``from + duration`` (one frame
    too many). ``CORRECTED`` treats the range as half-open so a sequence of
    duration D is visible on exactly D frames.
    """

    LEGACY = "legacy"
    CORRECTED = "corrected"


class SequencingConfig(BaseModel):
    """Sequencing configuration.

    Example:
        >>> SequencingConfig().boundary_mode
        <BoundaryMode.LEGACY: 'legacy'>
        >>> SequencingConfig.from_feature_flag(True).boundary_mode
        <BoundaryMode.CORRECTED: 'corrected'>
    """

    model_config = ConfigDict(frozen=True)

    boundary_mode: BoundaryMode = Field(
        default=BoundaryMode.LEGACY,
        description="Visibility boundary semantics used when evaluating frames",
    )

    @classmethod
    def from_feature_flag(cls, v2_breaking_changes: bool) -> SequencingConfig:
        """Build a config from the boolean v2 breaking-changes flag."""
        mode = BoundaryMode.CORRECTED if v2_breaking_changes else BoundaryMode.LEGACY
        return cls(boundary_mode=mode)
