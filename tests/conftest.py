"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from sequencing import Composition, CompositionRegistry, Sequence, TimelineSequence


@dataclass
class RecordingManager:
    """Registry stand-in that records every call in order."""

    calls: list[tuple[str, object]] = field(default_factory=list)

    def register_sequence(self, sequence: TimelineSequence) -> None:
        self.calls.append(("register", sequence))

    def unregister_sequence(self, sequence_id: str) -> None:
        self.calls.append(("unregister", sequence_id))

    def registered(self) -> list[TimelineSequence]:
        return [payload for kind, payload in self.calls if kind == "register"]

    def unregistered(self) -> list[str]:
        return [payload for kind, payload in self.calls if kind == "unregister"]


@dataclass
class Title:
    """Content with an explicit display name."""

    text: str
    display_name: str = "Title"


def intro() -> str:
    return "intro"


@pytest.fixture
def manager() -> RecordingManager:
    return RecordingManager()


@pytest.fixture
def comp_registry() -> CompositionRegistry:
    return CompositionRegistry()


@pytest.fixture
def nested() -> tuple[Sequence, Sequence]:
    """Parent from=20 dur=50 with child from=40 dur=30."""
    child = Sequence(40, 30, "child", name="child")
    parent = Sequence(20, 50, "parent", name="parent", children=[child])
    return parent, child


@pytest.fixture
def composition(comp_registry: CompositionRegistry) -> Composition:
    return Composition(100, registry=comp_registry)
