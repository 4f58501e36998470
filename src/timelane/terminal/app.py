# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from timelane import state as app_state
from timelane.log import configure_logging
from timelane.terminal import configuration
from timelane.terminal.custom_typer import OrderedAliasedTyperGroup
from timelane.terminal.layout import layout

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="timelane - Lay out dated items on a timeline in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="layout, l")(layout)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log layout details to stderr",
        ),
    ] = False,
) -> None:
    """
    timelane - Lay out dated items on a timeline in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        app_state.set_show_header(False)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
