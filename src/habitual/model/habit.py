# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from habitual.model.entity_id import EntityId


class Habit(TypedDict):
    id: EntityId
    name: str  # e.g., "Read"
    target_frequency: int  # Completions per Monday-start week, 0 = no target
    completions: list[pendulum.Date]  # One entry per calendar day, insertion order
    created: pendulum.DateTime
