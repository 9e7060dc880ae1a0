from typing import Annotated

import typer

from zipentrytools import dostime, entry
from zipentrytools.log import setup_logging

app = typer.Typer(help="Collection of tools for ZIP archive entry metadata")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            is_flag=True,
            help="Print debug messages (e.g. timestamp clamping)",
        ),
    ] = False,
):
    setup_logging(verbose)


app.add_typer(
    entry.app, name="entry", help="Tools for ZIP entry records (per-entry metadata)"
)

app.add_typer(
    dostime.app,
    name="dostime",
    help="Tools for packed MS-DOS date/time values used by ZIP entries",
)

if __name__ == "__main__":
    app()
