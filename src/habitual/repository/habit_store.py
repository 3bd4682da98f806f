# SPDX-License-Identifier: MIT

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, Protocol, TypedDict

from habitual import time
from habitual.model.entity_id import generate_entity_id
from habitual.model.habit import Habit
from habitual.model.profile import UserProfile
from habitual.service.habit import coerce_frequency
from habitual.template.profile import get_profile_template

logger = logging.getLogger(__name__)


class HabitStoreError(Exception):
    """Raised when the habit store cannot be read or written."""

    pass


class HabitStoreNotFoundError(HabitStoreError):
    """Raised when the habit store holds no saved state yet."""

    pass


class StoredState(TypedDict):
    profile: UserProfile
    habits: list[Habit]


class HabitStore(Protocol):
    def load(self) -> StoredState: ...

    def save(self, profile: UserProfile, habits: list[Habit]) -> None: ...


def serialize_state(profile: UserProfile, habits: list[Habit]) -> dict[str, Any]:
    return {
        "user": {
            "name": profile["name"],
            "createdAt": time.datetime_to_iso_str(profile["created"]),
            "stats": {
                "habitsCreated": profile["stats"]["habits_created"],
                "totalCompletions": profile["stats"]["total_completions"],
            },
        },
        "habits": [
            {
                "id": habit["id"],
                "name": habit["name"],
                "targetFrequency": habit["target_frequency"],
                "completions": [time.date_to_str(day) for day in habit["completions"]],
                "createdAt": time.datetime_to_iso_str(habit["created"]),
            }
            for habit in habits
        ],
    }


def deserialize_state(raw: Any, profile_name: str = "User") -> StoredState:
    """
    Build the in-memory state from the raw JSON document.

    Missing fields fall back to defaults. Stats are recomputed by the
    tracker and are not read here.
    """
    if not isinstance(raw, dict):
        raise HabitStoreError("habit data must be a JSON object")

    try:
        raw_user = raw.get("user")
        if isinstance(raw_user, dict):
            profile = get_profile_template(
                name=str(raw_user.get("name", profile_name)),
                created=time.datetime_from_str_optional(raw_user.get("createdAt")),
            )
        else:
            profile = get_profile_template(name=profile_name)

        habits = [
            __deserialize_habit(raw_habit) for raw_habit in raw.get("habits") or []
        ]
    except (TypeError, ValueError, AttributeError) as e:
        raise HabitStoreError(f"malformed habit data: {e}") from e

    return {"profile": profile, "habits": habits}


def __deserialize_habit(raw_habit: dict[str, Any]) -> Habit:
    completions = []
    for raw_day in raw_habit.get("completions") or []:
        day = time.date_from_str(raw_day)
        # Collapse duplicate days written by older versions
        if day not in completions:
            completions.append(day)

    created = time.datetime_from_str_optional(raw_habit.get("createdAt"))

    return {
        "id": raw_habit.get("id") or generate_entity_id(),
        "name": str(raw_habit.get("name", "")),
        "target_frequency": coerce_frequency(raw_habit.get("targetFrequency", 0)),
        "completions": completions,
        "created": created if created is not None else time.now_local(),
    }


class JsonHabitStore:
    def __init__(self, path: Path, profile_name: str = "User") -> None:
        self.path = path
        self.profile_name = profile_name

    def load(self) -> StoredState:
        if not self.path.is_file():
            raise HabitStoreNotFoundError(f"no habit data at {self.path}")
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise HabitStoreError(f"could not read {self.path}: {e}") from e
        logger.debug("Loaded habit data from %s", self.path)
        return deserialize_state(raw, self.profile_name)

    def save(self, profile: UserProfile, habits: list[Habit]) -> None:
        payload = serialize_state(profile, habits)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            raise HabitStoreError(f"could not write {self.path}: {e}") from e
        logger.debug("Saved %d habit(s) to %s", len(habits), self.path)


class MemoryHabitStore:
    """Keeps the serialized document in memory, used in place of a file."""

    def __init__(
        self, document: Optional[dict[str, Any]] = None, profile_name: str = "User"
    ) -> None:
        self.document = document
        self.profile_name = profile_name
        self.save_count = 0
        self.fail_saves = False

    def load(self) -> StoredState:
        if self.document is None:
            raise HabitStoreNotFoundError("no habit data in memory")
        return deserialize_state(deepcopy(self.document), self.profile_name)

    def save(self, profile: UserProfile, habits: list[Habit]) -> None:
        if self.fail_saves:
            raise HabitStoreError("memory store is read-only")
        self.document = serialize_state(profile, habits)
        self.save_count += 1
