# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from habitual.model.habit import Habit
from habitual.model.profile import UserProfile
from habitual.model.result import HabitStatistics
from habitual.service.habit import (
    get_progress_percentage,
    get_status,
    get_this_week_completions,
    is_completed_this_week,
)
from habitual.service.profile import get_days_joined
from habitual.time import (
    datetime_to_display_local_datetime_str,
    end_of_week,
    start_of_week,
)
from habitual.view.state import get_progress_bar_width
from habitual.view.util import completion_state, progress_bar
from habitual.view.views.header import header


def habits_view(
    profile_name: str,
    report_name: str,
    habits: list[tuple[int, Habit]],
    reference: pendulum.DateTime,
) -> None:
    """
    Display habits with their weekly progress.

    index  name     status                     progress
    ──────────────────────────────────────────────────────────────
    0      Read     2/3 per week - not done    [#############-------] 67%
    1      Write    no target set              [--------------------] 0%
    """
    header(profile_name, report_name)

    week_start = start_of_week(reference).format("MMM DD")
    week_end = end_of_week(reference).format("MMM DD")

    habits_table = Table(box=box.SIMPLE, caption=f"week {week_start} - {week_end}")
    habits_table.add_column("index")
    habits_table.add_column("name")
    habits_table.add_column("done")
    habits_table.add_column("status")
    habits_table.add_column("progress", no_wrap=True)

    width = get_progress_bar_width()
    for index, habit in habits:
        habits_table.add_row(
            str(index),
            escape(habit["name"]),
            completion_state(is_completed_this_week(habit, reference)),
            get_status(habit, reference),
            Text(progress_bar(get_progress_percentage(habit, reference), width)),
        )

    console = Console()
    if len(habits) == 0:
        console.print("  (no habits)")
        return
    console.print(habits_table)


def single_habit_view(
    profile_name: str,
    index: int,
    habit: Habit,
    reference: pendulum.DateTime,
) -> None:
    """Display detailed view of a single habit."""
    header(profile_name, "habit")

    habit_table = Table(box=box.SIMPLE)
    habit_table.add_column("property")
    habit_table.add_column("value")

    this_week = get_this_week_completions(habit, reference)

    habit_table.add_row("index", str(index))
    habit_table.add_row("id", habit["id"])
    habit_table.add_row("name", escape(habit["name"]))
    habit_table.add_row("target", f"{habit['target_frequency']} per week")
    habit_table.add_row("status", get_status(habit, reference))
    habit_table.add_row(
        "progress",
        Text(
            progress_bar(
                get_progress_percentage(habit, reference), get_progress_bar_width()
            )
        ),
    )
    habit_table.add_row(
        "this week", ", ".join(day.format("ddd DD") for day in this_week)
    )
    habit_table.add_row("total completions", str(len(habit["completions"])))
    habit_table.add_row(
        "created", datetime_to_display_local_datetime_str(habit["created"])
    )

    console = Console()
    console.print(habit_table)


def profile_view(profile: UserProfile, reference: pendulum.DateTime) -> None:
    header(profile["name"], "profile")

    profile_table = Table(box=box.SIMPLE)
    profile_table.add_column("property")
    profile_table.add_column("value")

    profile_table.add_row("name", escape(profile["name"]))
    profile_table.add_row(
        "joined", datetime_to_display_local_datetime_str(profile["created"])
    )
    profile_table.add_row("days joined", str(get_days_joined(profile, reference)))
    profile_table.add_row("habits", str(profile["stats"]["habits_created"]))
    profile_table.add_row(
        "total completions", str(profile["stats"]["total_completions"])
    )

    console = Console()
    console.print(profile_table)


def statistics_view(profile_name: str, statistics: HabitStatistics) -> None:
    header(profile_name, "stats")

    stats_table = Table(box=box.SIMPLE)
    stats_table.add_column("statistic")
    stats_table.add_column("value")

    stats_table.add_row("total habits", str(statistics["total"]))
    stats_table.add_row("completed this week", str(statistics["completed_this_week"]))
    stats_table.add_row("not completed", str(statistics["active_this_week"]))
    names = ", ".join(statistics["names"])
    stats_table.add_row("habit names", escape(names) or "(none)")

    most_active = statistics["most_active"]
    if most_active is not None:
        stats_table.add_row(
            "most active this week",
            f"{escape(most_active['name'])} ({statistics['most_active_count']} times)",
        )
    else:
        stats_table.add_row("most active this week", "(no completions this week)")

    console = Console()
    console.print(stats_table)


def reminder_view(pending: list[Habit], reference: pendulum.DateTime) -> None:
    console = Console()
    if len(pending) == 0:
        console.print(
            "\n[green]\\[Reminder][/green] All habits reached their target this week\n"
        )
        return

    console.print(
        "\n[yellow]\\[Reminder][/yellow] These habits have not reached their target this week:"
    )
    for habit in pending:
        done = len(get_this_week_completions(habit, reference))
        console.print(f" - {escape(habit['name'])}: {done}/{habit['target_frequency']}")
    console.print()
