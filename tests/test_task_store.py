from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError
from datetime import timezone

import pytest

from task_tracker.api.errors import TaskValidationError
from task_tracker.api.store import TaskStore


class TestCreate:
    def test_create_assigns_sequential_ids(self, store: TaskStore):
        ids = [store.create(f"Task {i}").id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_create_sets_defaults(self, store: TaskStore):
        task = store.create("Buy milk")
        assert task.description == "Buy milk"
        assert task.is_completed is False
        assert task.created_at.tzinfo is timezone.utc

    @pytest.mark.parametrize("description", ["", "   ", "\t\n", None])
    def test_create_rejects_blank(self, store: TaskStore, description):
        with pytest.raises(TaskValidationError):
            store.create(description)
        assert len(store) == 0

    def test_rejected_create_does_not_consume_an_id(self, store: TaskStore):
        with pytest.raises(TaskValidationError):
            store.create(" ")
        assert store.create("First").id == 1

    def test_deleted_id_is_never_reused(self, store: TaskStore):
        first = store.create("First")
        second = store.create("Second")
        assert store.delete(second.id) is True
        assert store.delete(first.id) is True
        assert store.create("Third").id == 3

    def test_concurrent_creates_get_unique_ids(self, store: TaskStore):
        with ThreadPoolExecutor(max_workers=16) as pool:
            tasks = list(pool.map(lambda i: store.create(f"Task {i}"), range(400)))
        ids = [t.id for t in tasks]
        assert len(set(ids)) == 400
        assert sorted(ids) == list(range(1, 401))
        assert len(store) == 400


class TestReadAndMutate:
    def test_get_all_sorted_by_id(self, store: TaskStore):
        for i in range(6):
            store.create(f"Task {i}")
        store.delete(2)
        store.toggle(5)
        store.update_description(1, "Renamed")
        ids = [t.id for t in store.get_all()]
        assert ids == sorted(ids) == [1, 3, 4, 5, 6]

    def test_get_missing_returns_none(self, store: TaskStore):
        assert store.get(42) is None

    def test_toggle_twice_restores_flag(self, store: TaskStore):
        task = store.create("Flip me")
        assert store.toggle(task.id).is_completed is True
        assert store.toggle(task.id).is_completed is False
        assert store.get(task.id).is_completed is False

    def test_toggle_missing_returns_none(self, store: TaskStore):
        assert store.toggle(7) is None

    def test_toggle_replaces_record_and_keeps_created_at(self, store: TaskStore):
        original = store.create("Keep timestamp")
        toggled = store.toggle(original.id)
        assert toggled is not original
        assert original.is_completed is False
        assert toggled.created_at == original.created_at

    @pytest.mark.parametrize("blank", ["", "  ", None])
    def test_update_with_blank_keeps_description(self, store: TaskStore, blank):
        task = store.create("Buy milk")
        updated = store.update_description(task.id, blank)
        assert updated.description == "Buy milk"
        assert store.get(task.id).description == "Buy milk"

    def test_update_sets_description_exactly(self, store: TaskStore):
        task = store.create("Buy milk")
        updated = store.update_description(task.id, " new text ")
        assert updated.description == " new text "
        assert updated.is_completed is task.is_completed
        assert updated.created_at == task.created_at

    def test_update_missing_returns_none(self, store: TaskStore):
        assert store.update_description(3, "anything") is None

    def test_delete_missing_returns_false(self, store: TaskStore):
        assert store.delete(1) is False

    def test_records_are_immutable(self, store: TaskStore):
        task = store.create("Frozen")
        with pytest.raises(FrozenInstanceError):
            task.description = "changed"  # type: ignore[misc]

    def test_concurrent_toggles_are_not_lost(self, store: TaskStore):
        task = store.create("Busy")
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda _: store.toggle(task.id), range(200)))
        # An even number of flips lands back on the starting value
        assert store.get(task.id).is_completed is False


def test_scenario_buy_milk(store: TaskStore):
    created = store.create("Buy milk")
    assert (created.id, created.description, created.is_completed) == (1, "Buy milk", False)
    assert store.toggle(1).is_completed is True
    assert store.update_description(1, "").description == "Buy milk"
    assert store.delete(1) is True
    assert store.get(1) is None
    assert store.create("Next").id == 2
