# modules/cli_errorhandler.py

import os
import sys
import typer
import traceback
from modules.cli_core import banner
from modules.errors import Ai2fsError, FatalError

# This flag will be flipped by the --debug CLI option
DEBUG = False

def _in_debug_mode() -> bool:
    """
    Return True if either:
      - the --debug flag was passed (which sets our DEBUG flag), or
      - AI2FS_DEBUG env var is set to a non-empty, non-0, non-false value.
    """
    if DEBUG:
        return True
    v = os.getenv("AI2FS_DEBUG", "")
    return v.lower() not in ("", "0", "false", "no")

def bannering_handle_exception(exc_type, exc_value, exc_traceback):
    """
    Global exception hook that prints a banner (if in a TTY)
    followed by a user-friendly error message for:
      1) Missing or malformed config keys
      2) Engine errors that escaped the command
      3) Fallback for anything else (with optional full traceback)
    """
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    # 0) Print banner if interactive
    if sys.stdout.isatty():
        banner()

    # 1) Config KeyError
    if exc_type is KeyError and "Config key" in str(exc_value):
        typer.echo(f"❌ Configuration error: {exc_value.args[0]}", err=True)
        sys.exit(1)

    # 2) Engine errors
    if isinstance(exc_value, Ai2fsError):
        typer.echo(f"❌ {exc_value}", err=True)
        if _in_debug_mode():
            traceback.print_exception(exc_type, exc_value, exc_traceback, file=sys.stderr)
        sys.exit(exc_value.exit_code if isinstance(exc_value, FatalError) else 1)

    # 3) Fallback for anything else
    typer.echo("❌ An unexpected error has occurred.", err=True)
    if _in_debug_mode():
        traceback.print_exception(exc_type, exc_value, exc_traceback, file=sys.stderr)
    else:
        typer.echo(f"   {exc_type.__name__}: {exc_value}", err=True)
        typer.echo("   Re-run with --debug for the full traceback.", err=True)
    sys.exit(1)
