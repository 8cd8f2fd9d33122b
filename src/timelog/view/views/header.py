# SPDX-License-Identifier: MIT

from typing import Optional

from rich.padding import Padding

from timelog.view.message import console
from timelog.view.state import get_show_header


def header(sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        sub_header: Optional sub-header markup to display
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]timelog[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
