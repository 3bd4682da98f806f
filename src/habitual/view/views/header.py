# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.markup import escape
from rich.padding import Padding

from habitual.view.state import get_show_header


def header(profile_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the profile name.

    Args:
        profile_name: The name of the user profile
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    profile_name = f"[plum1]{escape(profile_name)}[/plum1]"

    print(Padding("[dark_orange]habitual[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(profile_name, (0, 1)))
