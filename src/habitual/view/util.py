# SPDX-License-Identifier: MIT


def progress_bar(percent: float, width: int = 20) -> str:
    """
    Render a percentage as a fixed width text bar.

    >>> progress_bar(50, width=10)
    '[#####-----] 50%'
    """
    clamped = max(0.0, min(100.0, percent))
    filled = round(clamped / 100 * width)
    empty = width - filled
    return "[" + "#" * filled + "-" * empty + f"] {round(clamped)}%"


def completion_state(completed: bool) -> str:
    return "[green]✓[/green]" if completed else "[yellow]-[/yellow]"
