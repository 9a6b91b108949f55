# modules/cli_core/core.py

import os
import sys
import click
import typer
from typer import Context

from shared.config import config
from shared.logger import logger, set_log_level
from .utils import banner, set_no_banner

VERSION = "1.0.0"


class BannerCommand(typer.core.TyperCommand):
    """
    Single-command variant of the banner group: help gets the banner, and
    every usage error ends the process with exit code 1 instead of click's 2.
    """

    def format_help(self, ctx: Context, formatter: click.formatting.HelpFormatter):
        if sys.stdout.isatty():
            banner()
        super().format_help(ctx, formatter)

    def main(self, *args, **kwargs):
        """
        Run in non-standalone mode so parse errors reach us; print the error
        (with usage) on stderr and exit(1). Exit codes raised by the command
        through typer.Exit are passed through unchanged.
        """
        kwargs["standalone_mode"] = False
        try:
            rv = super().main(*args, **kwargs)
        except click.ClickException as exc:
            exc.show()
            sys.exit(1)
        except click.exceptions.Abort:
            click.echo("Aborted!", err=True)
            sys.exit(1)
        sys.exit(rv if isinstance(rv, int) else 0)


def version_callback(value: bool):
    if value:
        if sys.stdout.isatty():
            banner()
        typer.echo(f"ai2fs v{VERSION}")
        raise typer.Exit()


def apply_global_options(debug: bool = False, no_banner: bool = False) -> None:
    # 0) AI2FS_DEBUG from env / .config.yml
    if not debug and config.get_bool("AI2FS_DEBUG"):
        debug = True

    # 1) --debug or AI2FS_DEBUG
    if debug:
        import modules.cli_errorhandler as _errhdl  # defer import to avoid cycle
        set_log_level("DEBUG")
        _errhdl.DEBUG = True
        logger.debug("DEBUG mode ON (pid %s)", os.getpid())

    # 2) --no-banner
    if no_banner:
        set_no_banner(True)
