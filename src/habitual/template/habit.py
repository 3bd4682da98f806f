# SPDX-License-Identifier: MIT

from habitual.model.entity_id import generate_entity_id
from habitual.model.habit import Habit
from habitual.time import now_local


def get_habit_template(name: str, target_frequency: int) -> Habit:
    return {
        "id": generate_entity_id(),
        "name": name,
        "target_frequency": target_frequency,
        "completions": [],
        "created": now_local(),
    }
