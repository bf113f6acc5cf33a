# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ganttline import configuration
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.terminal.custom_typer import AliasedTyperGroup
from ganttline.terminal.parse import parse_granularity, parse_weekday

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("default_granularity", config["default_granularity"])
    table.add_row("column_width", str(config["column_width"]))
    table.add_row("project_column_width", str(config["project_column_width"]))
    table.add_row("week_starts_on", config["week_starts_on"])
    table.add_row(
        "strict_positions",
        "✓ Enabled" if config["strict_positions"] else "✗ Disabled",
    )
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    default_granularity: Annotated[
        Optional[str],
        typer.Option(
            "--default-granularity",
            parser=parse_granularity,
            help="Granularity used when none is given",
        ),
    ] = None,
    column_width: Annotated[
        Optional[int],
        typer.Option("--column-width", min=1, help="Pixel width of one column"),
    ] = None,
    project_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--project-column-width",
            min=1,
            help="Project column width in pixels, also sizes the chart name column",
        ),
    ] = None,
    week_starts_on: Annotated[
        Optional[str],
        typer.Option(
            "--week-starts-on",
            parser=parse_weekday,
            help="First day of the week (monday, sunday, ...)",
        ),
    ] = None,
    strict_positions: Annotated[
        Optional[bool],
        typer.Option(
            "--strict-positions/--no-strict-positions",
            help="Fail instead of clamping bars outside the timeline",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Print the header"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="One of DEBUG, INFO, WARNING, ERROR"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            raise typer.BadParameter(
                f"Log level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
            )

    CONFIGURATION_REPO.update_config(
        default_granularity=default_granularity,  # type: ignore[arg-type]
        column_width=column_width,
        project_column_width=project_column_width,
        week_starts_on=week_starts_on,
        strict_positions=strict_positions,
        show_header=show_header,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    view()
