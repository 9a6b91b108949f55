# modules/tree_materializer.py

"""
Writes collected files under the output root.

Paths are joined as "<root>/<path>" (plain concatenation, so a leading "/"
stays inside the root) and every ancestor directory is created in order.
Failures are reported once on stderr and recorded; they never stop the run.
"""

import os
from typing import List, Optional

import typer

from shared.logger import logger
from modules.errors import MaterializeError, printable

DEFAULT_ROOT_FOLDER = "generated-code"


class TreeMaterializer:
    def __init__(self, root: str = DEFAULT_ROOT_FOLDER):
        root = root.rstrip("/") or "/"
        self.root = root
        self.created: List[str] = []
        self.failed: List[str] = []

    def target_for(self, path: str) -> str:
        return f"{self.root}/{path}"

    def ensure_root(self) -> None:
        """Create the output root if needed. Raises MaterializeError."""
        try:
            os.makedirs(self.root, exist_ok=True)
        except OSError as e:
            raise MaterializeError(self.root, e, kind="directory") from e
        if not os.path.isdir(self.root):
            raise MaterializeError(
                self.root, NotADirectoryError(20, "Not a directory"), kind="directory"
            )

    def _make_parents(self, target: str) -> None:
        prefix = "/" if target.startswith("/") else ""
        for part in target.split("/")[:-1]:
            if not part:
                continue
            current = prefix + part
            prefix = current + "/"
            try:
                os.mkdir(current)
                logger.trace("mkdir %s", current)
            except FileExistsError as e:
                if not os.path.isdir(current):
                    raise MaterializeError(current, e, kind="directory") from e
            except OSError as e:
                raise MaterializeError(current, e, kind="directory") from e

    def prepare(self, path: str) -> Optional[str]:
        """
        Create the ancestors of `path` and create/truncate the file itself.
        Returns the full target path, or None after reporting a failure.
        """
        target = self.target_for(path)
        try:
            self._make_parents(target)
            try:
                with open(target, "wb"):
                    pass
            except OSError as e:
                raise MaterializeError(target, e, kind="file") from e
        except MaterializeError as e:
            self.report(e, path)
            return None
        return target

    def write(self, path: str, target: str, buffer: bytes) -> bool:
        try:
            with open(target, "wb") as f:
                f.write(buffer)
        except OSError as e:
            self.report(MaterializeError(target, e, kind="file"), path)
            return False
        self.created.append(path)
        logger.debug("wrote %d bytes to '%s'", len(buffer), target)
        typer.echo(f"Created file: {printable(path)}")
        return True

    def report(self, error: MaterializeError, path: str) -> None:
        self.failed.append(path)
        logger.debug("materialize failure for '%s': %r", path, error.os_error)
        typer.secho(str(error), fg="red", err=True)
