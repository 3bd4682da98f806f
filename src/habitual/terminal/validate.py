# SPDX-License-Identifier: MIT

import typer

from habitual.service.tracker import HABIT_FILTERS


def validate_habit_filter(habit_filter: str) -> str:
    if habit_filter not in HABIT_FILTERS:
        raise typer.BadParameter(
            f"Invalid filter: {habit_filter}. Valid options: {', '.join(HABIT_FILTERS)}"
        )
    return habit_filter
