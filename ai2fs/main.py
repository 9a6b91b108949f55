#!/usr/bin/env python3
# ai2fs/main.py (entrypoint for `ai2fs`)

import sys
from typing import Optional

import typer

from shared.config import config
from modules.cli_errorhandler import bannering_handle_exception
from modules.cli_core import BannerCommand, apply_global_options, version_callback
from modules.errors import FatalError
from modules.run_driver import run

# install our excepthook so *any* uncaught exception prints banner + message
sys.excepthook = bannering_handle_exception

app = typer.Typer(
    name="ai2fs",
    help="Turn an AI assistant transcript with path-marked code blocks into real files.",
    add_completion=False,
)


@app.command(cls=BannerCommand)
def convert(
    input_file: str = typer.Argument(..., help="Transcript to convert", show_default=False),
    root: Optional[str] = typer.Option(
        None, "--root", "-r", help="Output root folder (default: AI2FS_ROOT_FOLDER or 'generated-code')"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug output"),
    no_banner: bool = typer.Option(False, "--no-banner", help="Suppress banner"),
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version",
        callback=version_callback, is_eager=True,
    ),
):
    """
    Create every file announced by a path marker (// a/b.js, # c/d.py,
    [ x/y.json ], ...) under the output root, with the lines that follow it
    as its exact content.
    """
    apply_global_options(debug=debug, no_banner=no_banner)
    if root:
        config["AI2FS_ROOT_FOLDER"] = root

    try:
        run(input_file)
    except FatalError as e:
        typer.secho(str(e), fg="red", err=True)
        raise typer.Exit(code=e.exit_code)


def main():
    app()

if __name__ == "__main__":
    main()
