"""Tests for the task repository, activity log and persistent store."""

import json
from datetime import date, datetime, timedelta, timezone

import pytest

from paddock.activity import ActivityLog
from paddock.adapters.memory_store import MemoryStore
from paddock.core.activity import ActivityEntry, prepend_entry
from paddock.core.tasks import Priority
from paddock.errors import NotFoundError, ValidationError
from paddock.repository import TaskRepository
from paddock.store import ACTIVITY_KEY, TASKS_KEY, PlannerStore, ThemePreference


class FakeClock:
    """Deterministic clock advancing one minute per call."""

    def __init__(self):
        self.current = datetime(2025, 5, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(minutes=1)
        return self.current


@pytest.fixture
def backend():
    return MemoryStore()


@pytest.fixture
def store(backend):
    return PlannerStore(backend)


@pytest.fixture
def activity(store):
    return ActivityLog(store, now=FakeClock())


@pytest.fixture
def repo(store, activity):
    return TaskRepository(store, activity)


def reload(backend) -> TaskRepository:
    store = PlannerStore(backend)
    return TaskRepository(store, ActivityLog(store))


class TestCreate:
    def test_watch_qualifying_scenario(self, repo, activity):
        task = repo.create("Watch qualifying", "Set reminder", "2025-05-10", "High")

        assert len(repo.all()) == 1
        assert task.completed is False
        assert task.date == date(2025, 5, 10)
        assert activity.all()[0].message == 'Added: "Watch qualifying" (High)'
        summary = repo.summary()
        assert (summary.total, summary.completed, summary.pending) == (1, 0, 1)

    def test_ids_are_unique(self, repo):
        ids = {repo.create(f"Plan {i}", "d", "2025-01-01").id for i in range(50)}
        assert len(ids) == 50

    def test_appends_in_creation_order(self, repo):
        repo.create("First", "d", "2025-03-01")
        repo.create("Second", "d", "2025-01-01")
        assert [t.name for t in repo.all()] == ["First", "Second"]

    def test_priority_defaults_to_medium(self, repo):
        assert repo.create("A", "b", "2025-01-01").priority is Priority.MEDIUM

    def test_validation_error_changes_nothing(self, repo, backend, activity):
        with pytest.raises(ValidationError):
            repo.create("  ", "desc", "2025-01-01")
        assert repo.all() == []
        assert activity.all() == []
        assert backend.get(TASKS_KEY) is None


class TestToggle:
    def test_complete_then_reopen(self, repo, activity):
        task = repo.create("Watch qualifying", "Set reminder", "2025-05-10", "High")

        repo.toggle_complete(task.id)
        summary = repo.summary()
        assert (summary.completed, summary.pending) == (1, 0)
        assert activity.all()[0].message == 'Completed: "Watch qualifying"'

        repo.toggle_complete(task.id)
        assert repo.find_by_id(task.id).completed is False
        assert activity.all()[0].message == 'Reopened: "Watch qualifying"'

    def test_missing_id(self, repo):
        with pytest.raises(NotFoundError):
            repo.toggle_complete("nope")


class TestUpdate:
    def test_overwrites_fields_keeps_id_and_completed(self, repo, activity):
        task = repo.create("Old", "d", "2025-01-01", "Low")
        repo.toggle_complete(task.id)

        updated = repo.update(task.id, "New", "desc", "2025-02-02", "High")

        assert updated.id == task.id
        assert updated.completed is True
        assert (updated.name, updated.date, updated.priority) == ("New", date(2025, 2, 2), Priority.HIGH)
        assert activity.all()[0].message == 'Edited: "New" (High)'

    def test_missing_id(self, repo):
        with pytest.raises(NotFoundError):
            repo.update("nope", "a", "b", "2025-01-01")

    def test_invalid_fields_leave_task_untouched(self, repo):
        task = repo.create("Keep", "d", "2025-01-01")
        with pytest.raises(ValidationError):
            repo.update(task.id, "", "d", "2025-01-01")
        assert repo.find_by_id(task.id).name == "Keep"


class TestDelete:
    def test_removes_task(self, repo, activity):
        task = repo.create("Gone", "d", "2025-01-01")
        repo.delete(task.id)
        assert repo.find_by_id(task.id) is None
        assert activity.all()[0].message == 'Deleted: "Gone"'

    def test_missing_id_leaves_collection_unchanged(self, repo, backend):
        repo.create("Stay", "d", "2025-01-01")
        snapshot = backend.get(TASKS_KEY)
        before = repo.all()

        with pytest.raises(NotFoundError) as exc:
            repo.delete("missing")

        assert exc.value.task_id == "missing"
        assert repo.all() == before
        assert backend.get(TASKS_KEY) == snapshot


class TestPersistence:
    def test_snapshot_matches_memory_after_mixed_operations(self, repo, backend):
        a = repo.create("A", "d", "2025-03-01", "High")
        b = repo.create("B", "d", "2025-01-01", "Low")
        c = repo.create("C", "d", "2025-02-01")
        repo.toggle_complete(b.id)
        repo.update(c.id, "C2", "d2", "2025-02-02", "High")
        repo.delete(a.id)

        reloaded = reload(backend)
        assert reloaded.all() == repo.all()
        assert [t.name for t in reloaded.all()] == ["B", "C2"]

    def test_activity_survives_reload(self, repo, backend):
        repo.create("A", "d", "2025-01-01")
        store = PlannerStore(backend)
        assert ActivityLog(store).all()[0].message == 'Added: "A" (Medium)'


class FailingStore(MemoryStore):
    """Memory store whose writes fail once `broken` is set."""

    broken = False

    def set(self, key: str, value: str) -> None:
        if self.broken:
            raise OSError("disk full")
        super().set(key, value)


class TestFailedSave:
    @pytest.fixture
    def backend(self):
        return FailingStore()

    def test_create_leaves_memory_untouched(self, repo, backend, activity):
        backend.broken = True
        with pytest.raises(OSError):
            repo.create("A", "b", "2025-01-01")
        assert repo.all() == []
        assert activity.all() == []

    def test_toggle_update_delete_leave_memory_untouched(self, repo, backend, activity):
        task = repo.create("A", "b", "2025-01-01", "Low")
        before = repo.all()
        log_before = activity.all()
        backend.broken = True

        with pytest.raises(OSError):
            repo.toggle_complete(task.id)
        with pytest.raises(OSError):
            repo.update(task.id, "B", "c", "2025-02-02", "High")
        with pytest.raises(OSError):
            repo.delete(task.id)

        assert repo.all() == before
        assert repo.find_by_id(task.id).completed is False
        assert repo.find_by_id(task.id).name == "A"
        assert activity.all() == log_before

    def test_activity_record_leaves_log_untouched(self, store, backend):
        log = ActivityLog(store, now=FakeClock())
        log.record("kept")
        backend.broken = True
        with pytest.raises(OSError):
            log.record("lost")
        assert [e.message for e in log.all()] == ["kept"]


class TestActivityLog:
    def test_bounded_to_ten_newest_first(self, repo, activity):
        task = repo.create("Flip", "d", "2025-01-01")
        for _ in range(25):
            repo.toggle_complete(task.id)
            entries = activity.all()
            assert len(entries) <= 10
            assert entries[0].timestamp == max(e.timestamp for e in entries)

        assert len(activity.all()) == 10
        # 25 toggles leave the task completed
        assert activity.all()[0].message == 'Completed: "Flip"'

    def test_record_persists(self, store, backend):
        log = ActivityLog(store, now=FakeClock())
        log.record("hello")
        stored = json.loads(backend.get(ACTIVITY_KEY))
        assert stored[0]["message"] == "hello"
        assert stored[0]["timestamp"].endswith("+00:00")

    def test_empty(self, activity):
        assert activity.all() == []

    def test_prepend_entry_is_pure(self):
        ts = datetime(2025, 1, 1, tzinfo=timezone.utc)
        entries = [ActivityEntry(str(i), ts) for i in range(10)]
        result = prepend_entry(entries, ActivityEntry("new", ts))
        assert [e.message for e in result][:2] == ["new", "0"]
        assert len(result) == 10
        assert len(entries) == 10


class TestPlannerStore:
    def test_corrupt_tasks_load_empty(self, backend):
        backend.set(TASKS_KEY, "{not json")
        assert PlannerStore(backend).load_tasks() == []

    def test_non_list_loads_empty(self, backend):
        backend.set(TASKS_KEY, '{"a": 1}')
        assert PlannerStore(backend).load_tasks() == []

    def test_skips_malformed_records(self, backend):
        backend.set(TASKS_KEY, json.dumps([
            {"id": "1", "name": "ok", "description": "", "date": "2025-01-01", "priority": "Low", "completed": False},
            {"id": "2", "name": "bad date", "date": "someday"},
            {"name": "no id", "date": "2025-01-01"},
        ]))
        tasks = PlannerStore(backend).load_tasks()
        assert [t.id for t in tasks] == ["1"]


class TestThemePreference:
    def test_defaults_to_light(self, backend):
        assert ThemePreference(backend).is_dark() is False

    def test_toggle_persists(self, backend):
        theme = ThemePreference(backend)
        assert theme.toggle() is True
        assert backend.get("darkMode") == "enabled"
        assert theme.toggle() is False
        assert backend.get("darkMode") == "disabled"
