# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from habitual.model.result import HabitFilter
from habitual.service.reminder import get_reminder_habits
from habitual.service.tracker import HabitTracker, HabitValidationError
from habitual.state import get_tracker
from habitual.terminal.validate import validate_habit_filter
from habitual.view.views import habit as habit_report


def warn_if_unsaved(tracker: HabitTracker) -> None:
    if tracker.last_persistence_error is not None:
        typer.echo(
            f"Warning: changes were not saved: {tracker.last_persistence_error}",
            err=True,
        )


def profile() -> None:
    """Show the user profile."""
    tracker = get_tracker()
    habit_report.profile_view(tracker.get_profile(), tracker.now())


def list_habits(
    habit_filter: Annotated[
        str,
        typer.Option(
            "--filter",
            "-f",
            help="all, active, completed",
            callback=validate_habit_filter,
        ),
    ] = "all",
) -> None:
    """List habits with their progress this week."""
    tracker = get_tracker()
    reference = tracker.now()
    filter_value: HabitFilter = habit_filter  # type: ignore[assignment]
    habit_report.habits_view(
        tracker.get_profile()["name"],
        f"habits ({habit_filter})",
        tracker.list_habits(filter_value, reference),
        reference,
    )


def show(index: int) -> None:
    """Show a single habit."""
    tracker = get_tracker()
    habit = tracker.get_habit(index)
    if habit is None:
        typer.echo(f"Error: invalid index: {index}")
        raise typer.Exit(1)

    habit_report.single_habit_view(
        tracker.get_profile()["name"], index, habit, tracker.now()
    )


def add(
    name: str,
    target: Annotated[
        str,
        typer.Option("--target", "-t", help="Completions per week, 0 for no target"),
    ] = "0",
) -> None:
    """Add a new habit."""
    tracker = get_tracker()
    try:
        habit = tracker.add_habit(name, target)
    except HabitValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    typer.echo(f"Added habit: {habit['name']} (target {habit['target_frequency']}/week)")
    warn_if_unsaved(tracker)


def complete(index: str) -> None:
    """Mark a habit complete for today."""
    tracker = get_tracker()
    result = tracker.complete_habit(index)

    if result["status"] == "invalid_index" or result["habit"] is None:
        typer.echo(f"Error: invalid index: {index}")
        raise typer.Exit(1)

    if result["status"] == "added":
        typer.echo(f'Marked "{result["habit"]["name"]}" complete for today.')
    else:
        typer.echo(
            f'"{result["habit"]["name"]}" is already complete for today (no change).'
        )
    warn_if_unsaved(tracker)


def delete(index: str) -> None:
    """Delete a habit. Habits after it move up one index."""
    tracker = get_tracker()
    if not tracker.delete_habit(index):
        typer.echo(f"Error: invalid index: {index}")
        raise typer.Exit(1)

    typer.echo("Habit deleted.")
    warn_if_unsaved(tracker)


def stats() -> None:
    """Show statistics for this week."""
    tracker = get_tracker()
    habit_report.statistics_view(
        tracker.get_profile()["name"], tracker.get_statistics()
    )


def remind() -> None:
    """Show habits that have not reached their target this week."""
    tracker = get_tracker()
    reference = tracker.now()
    habit_report.reminder_view(get_reminder_habits(tracker, reference), reference)


def reset(
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")
    ] = False,
) -> None:
    """Delete all habits and reset the profile."""
    if not yes:
        typer.confirm("Delete all habits and reset the profile?", abort=True)

    tracker = get_tracker()
    tracker.reset()
    typer.echo("All habit data cleared.")
    warn_if_unsaved(tracker)
