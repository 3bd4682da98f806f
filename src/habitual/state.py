# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

from habitual import configuration
from habitual.repository.configuration import CONFIGURATION_REPO
from habitual.repository.habit_store import JsonHabitStore
from habitual.service.tracker import HabitTracker

_tracker: ContextVar[Optional[HabitTracker]] = ContextVar("tracker", default=None)


def set_tracker(tracker: Optional[HabitTracker]) -> None:
    _tracker.set(tracker)


def get_tracker() -> HabitTracker:
    """Return the tracker for this invocation, loading it from disk on first use."""
    tracker = _tracker.get()
    if tracker is None:
        profile_name = CONFIGURATION_REPO.get_config()["profile_name"]
        store = JsonHabitStore(configuration.DATA_HABITS_PATH, profile_name)
        tracker = HabitTracker(store, profile_name=profile_name)
        _tracker.set(tracker)
    return tracker
