"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from orgscan.cli.commands import headlines_cmd, objects_cmd


app = typer.Typer(name="orgscan", no_args_is_help=True, help="Org headline and inline object scanner")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Parse Org headlines and tokenize inline markup."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="headlines")(headlines_cmd)
app.command(name="objects")(objects_cmd)
