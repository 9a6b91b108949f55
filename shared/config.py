# shared/config.py

"""
Unified config access for the CLI, the engine and tests.

- Reads (config["key"], config.get("key")) resolve in this order:
    1) in-memory override (config["key"] = value, e.g. set from a CLI flag)
    2) os.environ
    3) .config.yml in the current directory, else beside the entrypoint
    4) built-in DEFAULTS
- If a key is found nowhere (and no default is passed), KeyError is raised.
- Writes / remove_config: in-memory only (never persisted).
"""

import os
import sys
from typing import Any, MutableMapping, Optional, Iterator, Dict

import yaml

# debug flag
DEBUG_CONFIG = os.environ.get("AI2FS_CONFIG_DEBUG", "0") == "1"
def debug_print(msg: str):
    if DEBUG_CONFIG:
        print(f"[CONFIG DEBUG] {msg!r}", file=sys.stderr)

CONFIG_FILENAME = ".config.yml"

DEFAULTS: Dict[str, Any] = {
    "AI2FS_ROOT_FOLDER": "generated-code",
    "AI2FS_MAX_LINE_LENGTH": 4096,
    "AI2FS_MAX_PATH_LENGTH": 256,
    "LOG_LEVEL": "INFO",
}

_TRUTHY = ("1", "true", "yes", "on")

# sentinel to detect "no default passed"
_NO_DEFAULT = object()


def load_config_file() -> Dict[str, Any]:
    """
    Load the first .config.yml found in the working directory or next to
    the entrypoint script. Returns {} when there is none.
    """
    entrypoint_dir = os.path.dirname(os.path.abspath(sys.argv[0]))
    for directory in (os.getcwd(), entrypoint_dir):
        config_file = os.path.join(directory, CONFIG_FILENAME)
        if os.path.isfile(config_file):
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
            debug_print(f"loaded {config_file}")
            return data if isinstance(data, dict) else {}
    return {}


class LazyConfigDict(MutableMapping):
    """
    Dict-like config with environment and file fallback.
    """

    def __init__(self):
        self._local: Dict[str, Any] = {}
        self._file: Optional[Dict[str, Any]] = None

    def _file_values(self) -> Dict[str, Any]:
        if self._file is None:
            self._file = load_config_file()
        return self._file

    def __getitem__(self, key: str) -> Any:
        return self.get(key, default=_NO_DEFAULT)

    def get(self, key: str, default: Any = _NO_DEFAULT) -> Any:
        # 1) in-memory
        if key in self._local:
            return self._local[key]

        # 2) environment
        envv = os.environ.get(key)
        if envv is not None:
            return envv

        # 3) config file
        filev = self._file_values().get(key)
        if filev is not None:
            return filev

        # 4) explicit default wins over the built-in table
        if default is not _NO_DEFAULT:
            debug_print(f"{key} missing → using default={default!r}")
            return default
        if key in DEFAULTS:
            return DEFAULTS[key]

        debug_print(f"{key} missing everywhere, no default → KeyError")
        raise KeyError(
            f"Config key '{key}' not found in overrides, environment, "
            f"{CONFIG_FILENAME} or defaults"
        )

    def get_int(self, key: str, default: Any = _NO_DEFAULT) -> int:
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            raise KeyError(f"Config key '{key}' must be an integer, got {value!r}")

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in _TRUTHY

    def set(self, key: str, value: Any) -> None:
        """In-memory-only override. Same as config[key] = value."""
        self._local[key] = value

    def __setitem__(self, key: str, value: Any) -> None:
        self._local[key] = value

    def __delitem__(self, key: str) -> None:
        if key in self._local:
            del self._local[key]
        else:
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return (
            key in self._local
            or key in os.environ
            or key in self._file_values()
            or key in DEFAULTS
        )

    def __iter__(self) -> Iterator[str]:
        return iter(self._local)

    def __len__(self) -> int:
        return len(self._local)

    def clear_cache(self) -> None:
        """Drop in-memory overrides and force the config file to be re-read."""
        self._local.clear()
        self._file = None


config = LazyConfigDict()


def remove_config(key: str) -> bool:
    """
    Remove a key from the in-memory overrides only.
    Returns True if it was present and removed.
    """
    if key in config._local:
        del config._local[key]
        return True
    return False
