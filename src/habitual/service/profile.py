# SPDX-License-Identifier: MIT

import pendulum

from habitual.model.habit import Habit
from habitual.model.profile import ProfileStats, UserProfile
from habitual.time import days_between


def compute_stats(habits: list[Habit]) -> ProfileStats:
    return {
        "habits_created": len(habits),
        "total_completions": sum(len(habit["completions"]) for habit in habits),
    }


def update_stats(profile: UserProfile, habits: list[Habit]) -> None:
    profile["stats"] = compute_stats(habits)


def get_days_joined(profile: UserProfile, reference: pendulum.DateTime) -> int:
    """Days since the profile was created, counting the first day as 1."""
    return days_between(profile["created"], reference) + 1
