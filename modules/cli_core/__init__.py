# modules/cli_core/__init__.py

# Re-export banner utilities
from .utils import banner, set_no_banner

# Re-export our custom Typer command and the global option handling
from .core import VERSION, BannerCommand, apply_global_options, version_callback
