# SPDX-License-Identifier: MIT

import math
from typing import Any

import pendulum

from habitual.model.habit import Habit
from habitual.time import Reference, end_of_week, start_of_week, to_local_date


def coerce_frequency(value: Any) -> int:
    """
    Coerce a raw target frequency into an int.

    Ints pass through, floats and numeric strings are truncated, anything
    that is not a finite number becomes 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number)


def mark_complete(habit: Habit, date: Reference) -> bool:
    """
    Record a completion on the calendar day of date.

    Returns True if the day was appended, False if it was already recorded.
    """
    day = to_local_date(date)
    if day in habit["completions"]:
        return False
    habit["completions"].append(day)
    return True


def get_this_week_completions(
    habit: Habit, reference: Reference
) -> list[pendulum.Date]:
    """Completions inside the Monday-Sunday week of reference, insertion order."""
    start = start_of_week(reference).date()
    end = end_of_week(reference).date()
    return [day for day in habit["completions"] if start <= day <= end]


def is_completed_this_week(habit: Habit, reference: Reference) -> bool:
    # A target of 0 is always met
    return len(get_this_week_completions(habit, reference)) >= habit["target_frequency"]


def get_progress_percentage(habit: Habit, reference: Reference) -> float:
    # No target reports 0% even though is_completed_this_week is True
    if habit["target_frequency"] <= 0:
        return 0.0
    done = len(get_this_week_completions(habit, reference))
    return min(100.0, done / habit["target_frequency"] * 100)


def get_status(habit: Habit, reference: Reference) -> str:
    if habit["target_frequency"] <= 0:
        return "no target set"
    done = len(get_this_week_completions(habit, reference))
    state = "done" if is_completed_this_week(habit, reference) else "not done"
    return f"{done}/{habit['target_frequency']} per week - {state}"
