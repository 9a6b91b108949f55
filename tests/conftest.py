# tests/conftest.py

import os
import pytest

from shared.config import config
from shared.logger import set_log_level
from modules.cli_core import set_no_banner
import modules.cli_errorhandler as errhdl

ROOT = "generated-code"

CONFIG_ENV_KEYS = (
    "AI2FS_ROOT_FOLDER",
    "AI2FS_MAX_LINE_LENGTH",
    "AI2FS_MAX_PATH_LENGTH",
    "AI2FS_DEBUG",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """
    Every test runs in its own empty directory with a clean config, so the
    output root always lands under tmp_path.
    """
    monkeypatch.chdir(tmp_path)
    for key in CONFIG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    config.clear_cache()
    yield tmp_path
    config.clear_cache()
    errhdl.DEBUG = False
    set_log_level("INFO")
    set_no_banner(False)


@pytest.fixture
def transcript(workdir):
    """Write an input transcript (str or bytes) and return its path."""
    def _write(text, name="transcript.txt"):
        path = workdir / name
        data = text.encode("utf-8") if isinstance(text, str) else text
        path.write_bytes(data)
        return str(path)
    return _write


def output_tree(workdir, root=ROOT):
    """Map of relative path -> bytes for every file under the output root."""
    base = workdir / root
    files = {}
    for dirpath, _, filenames in os.walk(base):
        for name in filenames:
            full = os.path.join(dirpath, name)
            rel = os.path.relpath(full, base).replace(os.sep, "/")
            with open(full, "rb") as f:
                files[rel] = f.read()
    return files
