"""
Tests for the JSON habit store and the document (de)serialization.
"""

import json

import pendulum
import pytest

from habitual.repository.habit_store import (
    HabitStoreError,
    HabitStoreNotFoundError,
    JsonHabitStore,
    deserialize_state,
)
from habitual.service.tracker import HabitTracker


@pytest.fixture
def habits_path(tmp_path):
    return tmp_path / "data" / "habits.json"


class TestJsonHabitStore:
    def test_missing_file_is_not_found(self, habits_path):
        with pytest.raises(HabitStoreNotFoundError):
            JsonHabitStore(habits_path).load()

    def test_first_run_writes_empty_state(self, habits_path, clock):
        HabitTracker(JsonHabitStore(habits_path), now=clock)

        document = json.loads(habits_path.read_text())
        assert document["habits"] == []
        assert document["user"]["name"] == "User"
        assert document["user"]["stats"] == {"habitsCreated": 0, "totalCompletions": 0}

    def test_round_trip(self, habits_path, clock, monday):
        tracker = HabitTracker(JsonHabitStore(habits_path), now=clock)
        tracker.add_habit("Read", 3)
        tracker.add_habit("Write", 0)
        tracker.complete_habit(0)
        clock.current = monday.add(days=1)
        tracker.complete_habit(0)

        reloaded = HabitTracker(JsonHabitStore(habits_path), now=clock)

        for original, restored in zip(tracker.habits, reloaded.habits, strict=True):
            assert restored["id"] == original["id"]
            assert restored["name"] == original["name"]
            assert restored["target_frequency"] == original["target_frequency"]
            assert set(restored["completions"]) == set(original["completions"])
            assert restored["created"] == original["created"]
        assert reloaded.get_profile()["created"] == tracker.get_profile()["created"]
        assert reloaded.get_profile()["stats"]["total_completions"] == 2

    def test_document_layout(self, habits_path, clock):
        tracker = HabitTracker(JsonHabitStore(habits_path), now=clock)
        tracker.add_habit("Read", 3)
        tracker.complete_habit(0)

        document = json.loads(habits_path.read_text())
        habit = document["habits"][0]
        assert set(habit) == {"id", "name", "targetFrequency", "completions", "createdAt"}
        assert habit["completions"] == ["2024-01-08"]
        assert set(document["user"]) == {"name", "createdAt", "stats"}

    def test_corrupt_file_is_a_store_error(self, habits_path, clock):
        habits_path.parent.mkdir(parents=True)
        habits_path.write_text("{not json")

        with pytest.raises(HabitStoreError):
            JsonHabitStore(habits_path).load()

        tracker = HabitTracker(JsonHabitStore(habits_path), now=clock)
        assert tracker.habits == []
        # The unreadable file is left alone
        assert habits_path.read_text() == "{not json"

    def test_unwritable_location_is_a_store_error(self, tmp_path, clock):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = JsonHabitStore(blocker / "habits.json")

        tracker = HabitTracker(store, now=clock)
        tracker.add_habit("Read", 3)

        assert isinstance(tracker.last_persistence_error, HabitStoreError)
        assert [h["name"] for h in tracker.habits] == ["Read"]


class TestDeserializeState:
    def test_missing_sections_default(self):
        state = deserialize_state({}, profile_name="Ana")

        assert state["habits"] == []
        assert state["profile"]["name"] == "Ana"

    def test_missing_habit_fields_default(self):
        state = deserialize_state({"habits": [{"name": "Read"}]})

        habit = state["habits"][0]
        assert habit["id"]
        assert habit["target_frequency"] == 0
        assert habit["completions"] == []
        assert isinstance(habit["created"], pendulum.DateTime)

    def test_non_numeric_frequency_is_zero(self):
        state = deserialize_state(
            {"habits": [{"name": "Read", "targetFrequency": "lots"}]}
        )
        assert state["habits"][0]["target_frequency"] == 0

    def test_duplicate_days_collapse(self):
        state = deserialize_state(
            {
                "habits": [
                    {
                        "name": "Read",
                        "completions": ["2024-01-08", "2024-01-09", "2024-01-08"],
                    }
                ]
            }
        )
        assert state["habits"][0]["completions"] == [
            pendulum.date(2024, 1, 8),
            pendulum.date(2024, 1, 9),
        ]

    def test_iso_timestamps_are_kept(self):
        state = deserialize_state(
            {
                "user": {"name": "Ana", "createdAt": "2023-05-01T08:00:00.000Z"},
                "habits": [
                    {"id": "h1", "name": "Read", "createdAt": "2023-06-01T09:30:00Z"}
                ],
            }
        )
        assert state["profile"]["created"] == pendulum.datetime(2023, 5, 1, 8)
        assert state["habits"][0]["id"] == "h1"
        assert state["habits"][0]["created"] == pendulum.datetime(2023, 6, 1, 9, 30)

    @pytest.mark.parametrize(
        "raw",
        [
            [],
            "habits",
            {"habits": [{"name": "Read", "completions": ["not-a-date"]}]},
            {"habits": [{"name": "Read", "createdAt": "yesterday-ish"}]},
            {"user": {"createdAt": "10:00"}},
            {"habits": [{"name": "Read", "createdAt": "P2D"}]},
        ],
    )
    def test_malformed_documents(self, raw):
        with pytest.raises(HabitStoreError):
            deserialize_state(raw)
