# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from timelog.initialize import configure_logging, initialize
from timelog.service.error import TimelogError
from timelog.terminal import configuration, tracking
from timelog.terminal.amend import amend
from timelog.terminal.custom_typer import OrderedAliasedTyperGroup
from timelog.terminal.report import report
from timelog.terminal.upload import upload
from timelog.terminal.version import version
from timelog.view import state as view_state
from timelog.view.message import die

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="timelog - track time spent on tasks from the CLI",
    no_args_is_help=True,
)
app.command(name="start, st", no_args_is_help=True)(tracking.start)
app.command(name="pause, p")(tracking.pause)
app.command(name="resume, r")(tracking.resume)
app.command(name="stop, sp")(tracking.stop)
app.command(name="status, s")(tracking.status)
app.command(name="report, rp", no_args_is_help=True)(report)
app.command(name="amend, am", no_args_is_help=True)(amend)
app.command(name="upload, u", no_args_is_help=True)(upload)
app.add_typer(configuration.app, name="config, c")
app.command(name="version, ve")(version)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log diagnostics to stderr"),
    ] = False,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    timelog - track time spent on tasks from the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    try:
        initialize()
    except TimelogError as e:
        die(str(e))
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
