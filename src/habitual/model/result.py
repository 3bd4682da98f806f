# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

from habitual.model.habit import Habit

HabitFilter = Literal["all", "active", "completed"]
CompletionStatus = Literal["added", "already_complete", "invalid_index"]


class CompletionResult(TypedDict):
    status: CompletionStatus
    habit: Optional[Habit]  # None when status is "invalid_index"


class HabitStatistics(TypedDict):
    total: int
    completed_this_week: int
    active_this_week: int
    most_active: Optional[Habit]  # Highest this-week count, first wins ties
    most_active_count: int
    names: list[str]
