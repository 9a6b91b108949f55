# shared/logger.py

import logging
import os
from pathlib import Path
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from pythonjsonlogger.json import JsonFormatter

from shared.config import config

SERVICE_NAME = "ai2fs"

# ------------ CUSTOM TRACE LEVEL SUPPORT ------------
TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

def trace(self, message, *args, **kwargs):
    if self.isEnabledFor(TRACE_LEVEL):
        self._log(TRACE_LEVEL, message, args, **kwargs)
logging.TRACE = TRACE_LEVEL
logging.Logger.trace = trace


def _numeric_level(name: str) -> int:
    name = str(name).upper()
    if name == "TRACE":
        return TRACE_LEVEL
    return getattr(logging, name, logging.INFO)

# ------------ LOGGER BOOTSTRAP (config-driven, 'one logger') ------------

_app_logger = logging.getLogger(SERVICE_NAME)
_app_logger.setLevel(_numeric_level(config.get("LOG_LEVEL", "INFO")))
_app_logger.handlers.clear()
_app_logger.propagate = False

# --- Console handler on stderr; stdout is reserved for user-facing notices ---
console = Console(stderr=True)
stream_handler = RichHandler(
    console=console,
    rich_tracebacks=True,
    show_time=True,
    show_level=True,
    show_path=False,
)
_app_logger.addHandler(stream_handler)

# --- Optional JSON-lines file handler ---
json_log_path: Optional[Path] = None
LOG_DIR = config.get("LOG_DIR", None)
if LOG_DIR:
    log_dir_path = Path(LOG_DIR)
    log_dir_path.mkdir(parents=True, exist_ok=True)
    now_str = datetime.now().strftime("%Y-%m-%d")
    json_log_path = log_dir_path / f"{SERVICE_NAME}.{now_str}.{os.getpid()}.jsonl"

    json_log_handler = logging.FileHandler(json_log_path, encoding="utf-8")
    json_log_handler.setFormatter(JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(filename)s %(module)s %(lineno)d %(message)s"
    ))
    _app_logger.addHandler(json_log_handler)

# --- Expose logger singleton ---
logger = _app_logger


def set_log_level(level_name: str) -> None:
    """Re-level the shared logger at runtime (e.g. for --debug)."""
    logger.setLevel(_numeric_level(level_name))
