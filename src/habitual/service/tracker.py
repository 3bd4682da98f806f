# SPDX-License-Identifier: MIT

import logging
import threading
from copy import deepcopy
from typing import Any, Callable, Optional

import pendulum

from habitual.model.habit import Habit
from habitual.model.profile import UserProfile
from habitual.model.result import CompletionResult, HabitFilter, HabitStatistics
from habitual.repository.habit_store import (
    HabitStore,
    HabitStoreError,
    HabitStoreNotFoundError,
)
from habitual.service.habit import (
    get_this_week_completions,
    is_completed_this_week,
    mark_complete,
)
from habitual.service.profile import update_stats
from habitual.template.habit import get_habit_template
from habitual.template.profile import get_profile_template
from habitual.time import Reference, now_local

logger = logging.getLogger(__name__)

HABIT_FILTERS: tuple[HabitFilter, ...] = ("all", "active", "completed")


class HabitValidationError(ValueError):
    """Raised when a habit name or target frequency is rejected."""

    pass


def validate_habit_name(name: Any) -> str:
    if not isinstance(name, str) or name.strip() == "":
        raise HabitValidationError("Habit name must not be empty.")
    return name.strip()


def validate_target_frequency(frequency: Any) -> int:
    """
    Accept ints, integral floats and integer strings that are >= 0.
    """
    if isinstance(frequency, bool):
        raise HabitValidationError("Target frequency must be a number.")
    if isinstance(frequency, str):
        try:
            frequency = float(frequency.strip())
        except ValueError:
            raise HabitValidationError("Target frequency must be a number.")
    if isinstance(frequency, float):
        if frequency != frequency or frequency in (float("inf"), float("-inf")):
            raise HabitValidationError("Target frequency must be a number.")
        frequency = int(frequency)
    if not isinstance(frequency, int):
        raise HabitValidationError("Target frequency must be a number.")
    if frequency < 0:
        raise HabitValidationError("Target frequency must be 0 or greater.")
    return frequency


class HabitTracker:
    """
    Owns the ordered habit list and the user profile.

    Every mutation recomputes the profile stats and saves through the
    injected store before returning. Store failures are logged and kept in
    last_persistence_error; the in-memory state stays authoritative.
    """

    def __init__(
        self,
        store: HabitStore,
        profile_name: str = "User",
        now: Callable[[], pendulum.DateTime] = now_local,
    ) -> None:
        self.store = store
        self.now = now
        self.last_persistence_error: Optional[HabitStoreError] = None
        self._lock = threading.RLock()
        self._habits: list[Habit] = []
        self._profile: UserProfile = get_profile_template(
            name=profile_name, created=self.now()
        )
        self.__load()

    def __load(self) -> None:
        try:
            state = self.store.load()
        except HabitStoreNotFoundError:
            logger.info("No saved habits found, starting with an empty tracker")
            self.__save()
            return
        except HabitStoreError as e:
            logger.error("Failed to load habits, continuing with empty state: %s", e)
            self.last_persistence_error = e
            return

        self._profile = state["profile"]
        self._habits = state["habits"]
        update_stats(self._profile, self._habits)

    def __save(self) -> None:
        try:
            self.store.save(self._profile, self._habits)
        except HabitStoreError as e:
            logger.error("Failed to save habits: %s", e)
            self.last_persistence_error = e
            return
        self.last_persistence_error = None

    def __reference(self, reference: Optional[Reference]) -> Reference:
        return reference if reference is not None else self.now()

    def __resolve_index(self, index: Any) -> Optional[int]:
        if isinstance(index, bool):
            return None
        if isinstance(index, str):
            try:
                index = int(index.strip())
            except ValueError:
                return None
        if not isinstance(index, int):
            return None
        if index < 0 or index >= len(self._habits):
            return None
        return index

    @property
    def habits(self) -> list[Habit]:
        with self._lock:
            return deepcopy(self._habits)

    def get_profile(self) -> UserProfile:
        with self._lock:
            return deepcopy(self._profile)

    def get_habit(self, index: Any) -> Optional[Habit]:
        with self._lock:
            resolved = self.__resolve_index(index)
            if resolved is None:
                return None
            return deepcopy(self._habits[resolved])

    def add_habit(self, name: Any, frequency: Any) -> Habit:
        valid_name = validate_habit_name(name)
        valid_frequency = validate_target_frequency(frequency)

        with self._lock:
            habit = get_habit_template(valid_name, valid_frequency)
            self._habits.append(habit)
            update_stats(self._profile, self._habits)
            self.__save()
            logger.debug("Added habit %s (%s)", habit["id"], habit["name"])
            return deepcopy(habit)

    def complete_habit(
        self, index: Any, reference: Optional[Reference] = None
    ) -> CompletionResult:
        with self._lock:
            resolved = self.__resolve_index(index)
            if resolved is None:
                return {"status": "invalid_index", "habit": None}

            habit = self._habits[resolved]
            added = mark_complete(habit, self.__reference(reference))
            if added:
                update_stats(self._profile, self._habits)
                self.__save()
            return {
                "status": "added" if added else "already_complete",
                "habit": deepcopy(habit),
            }

    def delete_habit(self, index: Any) -> bool:
        with self._lock:
            resolved = self.__resolve_index(index)
            if resolved is None:
                return False

            removed = self._habits.pop(resolved)
            update_stats(self._profile, self._habits)
            self.__save()
            logger.debug("Deleted habit %s (%s)", removed["id"], removed["name"])
            return True

    def list_habits(
        self, habit_filter: HabitFilter = "all", reference: Optional[Reference] = None
    ) -> list[tuple[int, Habit]]:
        """
        Habits matching the filter, paired with their positional index.

        active: not completed this week; completed: completed this week.
        """
        if habit_filter not in HABIT_FILTERS:
            raise ValueError(f"Unknown habit filter: {habit_filter}")

        with self._lock:
            ref = self.__reference(reference)
            listed = []
            for index, habit in enumerate(self._habits):
                if habit_filter == "active" and is_completed_this_week(habit, ref):
                    continue
                if habit_filter == "completed" and not is_completed_this_week(
                    habit, ref
                ):
                    continue
                listed.append((index, deepcopy(habit)))
            return listed

    def get_statistics(self, reference: Optional[Reference] = None) -> HabitStatistics:
        with self._lock:
            ref = self.__reference(reference)
            completed = sum(
                1 for habit in self._habits if is_completed_this_week(habit, ref)
            )

            most_active: Optional[Habit] = None
            most_active_count = 0
            for habit in self._habits:
                count = len(get_this_week_completions(habit, ref))
                if most_active is None or count > most_active_count:
                    most_active = habit
                    most_active_count = count

            return {
                "total": len(self._habits),
                "completed_this_week": completed,
                "active_this_week": len(self._habits) - completed,
                "most_active": deepcopy(most_active),
                "most_active_count": most_active_count,
                "names": [habit["name"] for habit in self._habits],
            }

    def reset(self) -> None:
        with self._lock:
            self._habits = []
            self._profile = get_profile_template(
                name=self._profile["name"], created=self.now()
            )
            update_stats(self._profile, self._habits)
            self.__save()
            logger.info("Cleared all habits and reset the profile")
