"""Tests for CompositionRegistry."""

import threading

import pytest

from sequencing import CompositionRegistry, SequenceManager, TimelineSequence


def _entry(sequence_id: str, duration: int = 10, parent: str | None = None) -> TimelineSequence:
    return TimelineSequence(
        id=sequence_id,
        absolute_from=0,
        from_frame=0,
        duration=duration,
        parent=parent,
        display_name=sequence_id,
    )


class TestRegisterUnregister:
    def test_register_and_get(self, comp_registry: CompositionRegistry) -> None:
        comp_registry.register_sequence(_entry("a"))
        assert "a" in comp_registry
        assert comp_registry.get("a").duration == 10
        assert len(comp_registry) == 1

    def test_register_same_id_overwrites(self, comp_registry: CompositionRegistry) -> None:
        comp_registry.register_sequence(_entry("a", duration=10))
        comp_registry.register_sequence(_entry("a", duration=4))
        assert len(comp_registry) == 1
        assert comp_registry.get("a").duration == 4

    def test_update_keeps_registration_order(self, comp_registry: CompositionRegistry) -> None:
        comp_registry.register_sequence(_entry("a"))
        comp_registry.register_sequence(_entry("b"))
        comp_registry.register_sequence(_entry("a", duration=3))
        assert [s.id for s in comp_registry.sequences] == ["a", "b"]

    def test_unregister(self, comp_registry: CompositionRegistry) -> None:
        comp_registry.register_sequence(_entry("a"))
        comp_registry.unregister_sequence("a")
        assert "a" not in comp_registry
        assert comp_registry.sequences == []

    def test_unregister_unknown_raises(self, comp_registry: CompositionRegistry) -> None:
        with pytest.raises(KeyError, match="nope"):
            comp_registry.unregister_sequence("nope")

    def test_get_unknown_raises(self, comp_registry: CompositionRegistry) -> None:
        with pytest.raises(KeyError):
            comp_registry.get("nope")

    def test_children_of(self, comp_registry: CompositionRegistry) -> None:
        comp_registry.register_sequence(_entry("p"))
        comp_registry.register_sequence(_entry("c1", parent="p"))
        comp_registry.register_sequence(_entry("c2", parent="p"))
        assert [s.id for s in comp_registry.children_of("p")] == ["c1", "c2"]
        assert [s.id for s in comp_registry.children_of(None)] == ["p"]

    def test_clear(self, comp_registry: CompositionRegistry) -> None:
        comp_registry.register_sequence(_entry("a"))
        comp_registry.clear()
        assert len(comp_registry) == 0

    def test_default_kind_is_sequence(self) -> None:
        assert _entry("a").type == "sequence"


class TestConcurrency:
    def test_parallel_upserts(self, comp_registry: CompositionRegistry) -> None:
        """Many threads upserting their own ids leave one entry each."""

        def work(n: int) -> None:
            for duration in range(1, 50):
                comp_registry.register_sequence(_entry(f"s{n}", duration=duration))

        threads = [threading.Thread(target=work, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(comp_registry) == 8
        assert all(s.duration == 49 for s in comp_registry.sequences)


class TestProtocol:
    def test_registry_satisfies_protocol(self, comp_registry: CompositionRegistry) -> None:
        assert isinstance(comp_registry, SequenceManager)

    def test_recording_manager_satisfies_protocol(self, manager) -> None:
        assert isinstance(manager, SequenceManager)

    def test_object_rejected(self) -> None:
        assert not isinstance(object(), SequenceManager)
