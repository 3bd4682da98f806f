"""Global view state using context variables."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for controlling header visibility in reports
# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Width of text progress bars in characters
_progress_bar_width_var: ContextVar[int] = ContextVar("progress_bar_width", default=20)


def set_show_header(value: bool) -> None:
    """Set whether headers should be displayed in reports.

    Args:
        value: True to show headers, False to hide them
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_progress_bar_width(value: int) -> None:
    _progress_bar_width_var.set(value)


def get_progress_bar_width() -> int:
    return _progress_bar_width_var.get()
