# SPDX-License-Identifier: MIT

from typing import Callable

import typer
from rich.console import Console

from habitual.model.habit import Habit
from habitual.model.result import HabitFilter
from habitual.repository.configuration import CONFIGURATION_REPO
from habitual.service.reminder import Reminder
from habitual.service.tracker import HabitTracker, HabitValidationError
from habitual.state import get_tracker
from habitual.terminal.habit import warn_if_unsaved
from habitual.view.views import habit as habit_report

MENU_ENTRIES = [
    ("0", "View profile"),
    ("1", "List all habits"),
    ("2", "List active habits"),
    ("3", "List completed habits"),
    ("4", "Add a habit"),
    ("5", "Mark a habit complete (today)"),
    ("6", "Delete a habit"),
    ("7", "View statistics"),
    ("8", "Exit"),
]


def __print_menu(console: Console) -> None:
    console.print("\n[dark_orange]====== HABIT TRACKER MENU ======[/dark_orange]")
    for key, label in MENU_ENTRIES:
        console.print(f"{key}. {label}")
    console.print("[dark_orange]================================[/dark_orange]\n")


def __list(tracker: HabitTracker, habit_filter: HabitFilter) -> None:
    reference = tracker.now()
    habit_report.habits_view(
        tracker.get_profile()["name"],
        f"habits ({habit_filter})",
        tracker.list_habits(habit_filter, reference),
        reference,
    )


def __add(tracker: HabitTracker) -> None:
    name = typer.prompt("Habit name")
    target = typer.prompt("Target per week (number)", default="0")
    try:
        habit = tracker.add_habit(name, target)
    except HabitValidationError as e:
        typer.echo(f"Invalid input: {e}")
        return
    typer.echo(f"Added habit: {habit['name']} (target {habit['target_frequency']}/week)")
    warn_if_unsaved(tracker)


def __complete(tracker: HabitTracker) -> None:
    __list(tracker, "all")
    index = typer.prompt("Index of the habit to mark complete today")
    result = tracker.complete_habit(index)
    if result["status"] == "invalid_index" or result["habit"] is None:
        typer.echo("Error: invalid index")
        return
    if result["status"] == "added":
        typer.echo(f'Marked "{result["habit"]["name"]}" complete for today.')
    else:
        typer.echo("Already marked complete for today (no change).")
    warn_if_unsaved(tracker)


def __delete(tracker: HabitTracker) -> None:
    __list(tracker, "all")
    index = typer.prompt("Index of the habit to delete")
    if tracker.delete_habit(index):
        typer.echo("Habit deleted.")
        warn_if_unsaved(tracker)
    else:
        typer.echo("Error: invalid index")


def run_menu(tracker: HabitTracker, reminder: Reminder) -> None:
    """Run the numbered menu until the user exits, reminding in the background."""
    console = Console()
    actions: dict[str, Callable[[], None]] = {
        "0": lambda: habit_report.profile_view(tracker.get_profile(), tracker.now()),
        "1": lambda: __list(tracker, "all"),
        "2": lambda: __list(tracker, "active"),
        "3": lambda: __list(tracker, "completed"),
        "4": lambda: __add(tracker),
        "5": lambda: __complete(tracker),
        "6": lambda: __delete(tracker),
        "7": lambda: habit_report.statistics_view(
            tracker.get_profile()["name"], tracker.get_statistics()
        ),
    }

    reminder.start()
    try:
        while True:
            __print_menu(console)
            choice = typer.prompt("Choose (0-8)").strip()
            if choice == "8":
                typer.echo("Exiting.")
                break
            action = actions.get(choice)
            if action is None:
                typer.echo("Unknown choice. Enter a number from 0 to 8.")
                continue
            action()
    finally:
        reminder.stop()


def menu() -> None:
    """Interactive menu with periodic reminders."""
    tracker = get_tracker()
    interval = CONFIGURATION_REPO.get_config()["reminder_interval_seconds"]

    def show_reminder(pending: list[Habit]) -> None:
        habit_report.reminder_view(pending, tracker.now())

    reminder = Reminder(tracker, interval, show_reminder)
    try:
        run_menu(tracker, reminder)
    except typer.Abort:
        typer.echo("\nExiting.")
