# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional, TypedDict

import typer
from rich.console import Console

from ganttline import configuration
from ganttline.errors import ProjectImportError, TimelineMismatchError
from ganttline.model.granularity_type import GranularityType
from ganttline.model.layout import GanttLayout
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.service.exchange import read_projects_file
from ganttline.terminal.parse import parse_granularity, parse_weekday
from ganttline.timeline.layout import build_gantt_layout
from ganttline.view.gantt import gantt_view, left_column_width_for
from ganttline.view.table import buckets_view, positions_view

logger = logging.getLogger(__name__)

console = Console()

ProjectFileArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON project file (as written by the export command)",
    ),
]
GranularityOption = Annotated[
    Optional[str],
    typer.Option(
        "--granularity",
        "-g",
        parser=parse_granularity,
        help="Time granularity: day, week, month, quarter, or year",
    ),
]
WeekStartOption = Annotated[
    Optional[str],
    typer.Option(
        "--week-start",
        "-ws",
        parser=parse_weekday,
        help="First day of the week used by day and week views",
    ),
]
StrictOption = Annotated[
    Optional[bool],
    typer.Option(
        "--strict/--no-strict",
        help="Fail instead of clamping bars that fall outside the timeline",
    ),
]
ColumnWidthOption = Annotated[
    Optional[int],
    typer.Option(
        "--column-width",
        "-w",
        min=1,
        help="Pixel width of one timeline column",
    ),
]


class ResolvedSettings(TypedDict):
    granularity: GranularityType
    column_width: int
    project_column_width: int
    week_starts_on: str
    strict: bool


def load_layout(
    project_file: Path,
    granularity: Optional[str] = None,
    week_start: Optional[str] = None,
    strict: Optional[bool] = None,
    column_width: Optional[int] = None,
) -> tuple[GanttLayout, ResolvedSettings]:
    """
    Read a project file and compute its layout.

    Settings given on the command line win over settings stored in the file,
    which win over the configuration file. Import failures, strict mode
    mismatches and invalid configured values end the command with exit code 1.
    """
    config = CONFIGURATION_REPO.get_config()

    try:
        collection = read_projects_file(project_file)
    except ProjectImportError as e:
        console.print(f"[red]Error importing {project_file}: {e}[/red]")
        raise typer.Exit(1)

    file_settings = collection["settings"]
    settings: ResolvedSettings = {
        "granularity": granularity  # type: ignore[typeddict-item]
        or file_settings.get("granularity")
        or config["default_granularity"],
        "column_width": column_width
        or file_settings.get("column_width")
        or config["column_width"],
        "project_column_width": file_settings.get("project_column_width")
        or config["project_column_width"],
        "week_starts_on": week_start or config["week_starts_on"],
        "strict": config["strict_positions"] if strict is None else strict,
    }
    logger.debug("layout settings for %s: %s", project_file, settings)

    try:
        layout = build_gantt_layout(
            collection["projects"],
            settings["granularity"],
            settings["column_width"],
            settings["week_starts_on"],
            settings["strict"],
        )
    except TimelineMismatchError as e:
        console.print(f"[red]Timeline mismatch: {e}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        # Only configured granularity, weekday and width values reach here
        console.print(
            f"[red]Invalid configuration in {configuration.APP_CONFIG_PATH}: "
            f"{e}[/red]"
        )
        raise typer.Exit(1)

    return layout, settings


def chart(
    project_file: ProjectFileArgument,
    granularity: GranularityOption = None,
    week_start: WeekStartOption = None,
    strict: StrictOption = None,
    left_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-width",
            "-lw",
            min=10,
            help="Width of the project name column "
            "(default: project_column_width in characters)",
        ),
    ] = None,
) -> None:
    """Display projects as bars on a gantt chart timeline."""
    layout, settings = load_layout(project_file, granularity, week_start, strict)
    if left_width is None:
        left_width = left_column_width_for(settings["project_column_width"])
    gantt_view(project_file.name, layout, left_column_width=left_width)


def buckets(
    project_file: ProjectFileArgument,
    granularity: GranularityOption = None,
    week_start: WeekStartOption = None,
) -> None:
    """List the timeline buckets covering every project."""
    layout, _ = load_layout(project_file, granularity, week_start)
    buckets_view(project_file.name, layout)


def positions(
    project_file: ProjectFileArgument,
    granularity: GranularityOption = None,
    week_start: WeekStartOption = None,
    strict: StrictOption = None,
    column_width: ColumnWidthOption = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", "-nc", help="Do not color project names")
    ] = False,
) -> None:
    """Show bucket index ranges and pixel geometry for every project."""
    layout, _ = load_layout(
        project_file, granularity, week_start, strict, column_width
    )
    positions_view(project_file.name, layout, use_color=not no_color)
