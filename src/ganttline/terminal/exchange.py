# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console

from ganttline import configuration
from ganttline.errors import ProjectImportError, UnknownGranularityError
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.service.exchange import (
    default_export_file_name,
    export_projects,
    read_projects_file,
    sample_projects,
    write_projects_file,
)
from ganttline.terminal.parse import parse_granularity

console = Console()


def sample(
    out: Annotated[
        Optional[Path],
        typer.Argument(dir_okay=False, help="Output file (default: dated file name)"),
    ] = None,
) -> None:
    """Write a demo project collection to a JSON file."""
    config = CONFIGURATION_REPO.get_config()

    if out is None:
        out = Path(default_export_file_name())

    try:
        content = export_projects(
            sample_projects(),
            granularity=config["default_granularity"],
            column_width=config["column_width"],
            project_column_width=config["project_column_width"],
        )
    except UnknownGranularityError as e:
        _invalid_configuration(e)
    write_projects_file(out, content)
    console.print(f"[green]Wrote sample projects to {out}[/green]")


def export(
    project_file: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, readable=True),
    ],
    out: Annotated[
        Optional[Path],
        typer.Argument(dir_okay=False, help="Output file (default: dated file name)"),
    ] = None,
    granularity: Annotated[
        Optional[str],
        typer.Option(
            "--granularity",
            "-g",
            parser=parse_granularity,
            help="Time scale stored with the exported settings",
        ),
    ] = None,
    column_width: Annotated[
        Optional[int],
        typer.Option("--column-width", "-w", min=1),
    ] = None,
    project_column_width: Annotated[
        Optional[int],
        typer.Option("--project-column-width", "-pw", min=1),
    ] = None,
) -> None:
    """
    Re-export a project file, filling in missing ids and normalizing dates.
    """
    config = CONFIGURATION_REPO.get_config()

    try:
        collection = read_projects_file(project_file)
    except ProjectImportError as e:
        console.print(f"[red]Error importing {project_file}: {e}[/red]")
        raise typer.Exit(1)

    settings = collection["settings"]
    try:
        content = export_projects(
            collection["projects"],
            granularity=granularity  # type: ignore[arg-type]
            or settings.get("granularity")
            or config["default_granularity"],
            column_width=column_width
            or settings.get("column_width")
            or config["column_width"],
            project_column_width=project_column_width
            or settings.get("project_column_width")
            or config["project_column_width"],
        )
    except UnknownGranularityError as e:
        _invalid_configuration(e)

    if out is None:
        out = Path(default_export_file_name())
    write_projects_file(out, content)
    console.print(
        f"[green]Exported {len(collection['projects'])} projects to {out}[/green]"
    )


def _invalid_configuration(error: Exception) -> NoReturn:
    console.print(
        f"[red]Invalid configuration in {configuration.APP_CONFIG_PATH}: "
        f"{error}[/red]"
    )
    raise typer.Exit(1)
