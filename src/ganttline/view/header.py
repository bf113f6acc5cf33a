# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from ganttline.view.state import get_show_header


def header(
    source_name: str,
    view_name: Optional[str] = None,
    project_count: Optional[int] = None,
) -> None:
    """
    Print the banner above a chart or table: the application name, the view
    being shown (e.g. "week positions") and the project file it was built
    from. Suppressed by --no-header or the show_header setting.
    """
    if not get_show_header():
        return

    source = f"[plum1]{source_name}[/plum1]"
    if project_count is not None:
        noun = "project" if project_count == 1 else "projects"
        source += f" [dim]({project_count} {noun})[/dim]"

    print(Padding("[dark_orange]ganttline[/dark_orange]", (1, 0, 0, 1)))
    if view_name is not None:
        print(Padding(f"[sandy_brown]{view_name}[/sandy_brown]", (0, 1)))
    print(Padding(source, (0, 1)))
