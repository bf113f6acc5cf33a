# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.terminal import configuration, exchange, view
from ganttline.terminal.custom_typer import OrderedAliasedTyperGroup
from ganttline.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="ganttline - Project timelines in the CLI",
    no_args_is_help=True,
)
app.command(name="chart, c")(view.chart)
app.command(name="buckets, b")(view.buckets)
app.command(name="positions, p")(view.positions)
app.command(name="sample, sa")(exchange.sample)
app.command(name="export, ex")(exchange.export)
app.add_typer(configuration.app, name="config, cf", help="View or change settings")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
) -> None:
    """
    ganttline - Project timelines in the CLI

    Global options that apply to all commands.
    """
    config = CONFIGURATION_REPO.get_config()
    configure_logging("DEBUG" if verbose else config["log_level"])
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
