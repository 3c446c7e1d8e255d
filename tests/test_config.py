"""Tests for SequencingConfig."""

import pytest
from pydantic import ValidationError

from sequencing import BoundaryMode, SequencingConfig


class TestSequencingConfig:
    def test_default_is_legacy(self) -> None:
        assert SequencingConfig().boundary_mode is BoundaryMode.LEGACY

    def test_from_string(self) -> None:
        assert SequencingConfig(boundary_mode="corrected").boundary_mode is BoundaryMode.CORRECTED

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SequencingConfig(boundary_mode="sideways")

    def test_frozen(self) -> None:
        config = SequencingConfig()
        with pytest.raises(ValidationError):
            config.boundary_mode = BoundaryMode.CORRECTED

    @pytest.mark.parametrize(
        ("flag", "mode"),
        [(False, BoundaryMode.LEGACY), (True, BoundaryMode.CORRECTED)],
    )
    def test_from_feature_flag(self, flag: bool, mode: BoundaryMode) -> None:
        assert SequencingConfig.from_feature_flag(flag).boundary_mode is mode
