# modules/cli_core/utils.py

import sys

# ——— Banner control —————————————————————————————
_no_banner = False

def set_no_banner(flag: bool) -> None:
    """
    Globally suppress future banner() calls when flag is True.
    """
    global _no_banner
    _no_banner = bool(flag)

def banner() -> None:
    """
    Print the ASCII banner only when stdout is a TTY and not suppressed.
    """
    if _no_banner or not sys.stdout.isatty():
        return
    sys.stdout.write(r"""
        _ ____     __
  __ _ (_)___ \   / _|___
 / _` || | __) | | |_/ __|
| (_| || |/ __/  |  _\__ \
 \__,_||_|_____| |_| |___/

""")
    sys.stdout.flush()
