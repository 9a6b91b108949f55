# modules/files_accumulator.py

"""
Buffers the content of the one file currently being collected.

States:
  IDLE  - no active file; content lines are dropped.
  OPEN  - an ActiveFile exists; content lines are appended verbatim.

open() on an OPEN accumulator flushes first, so "next marker" is a single
flush-then-reopen transition. flush() hands the buffer to the materializer
and returns to IDLE. When the destination could not be prepared the file is
still OPEN (its target is None) so that its content is swallowed rather than
leaking into another file.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TYPE_CHECKING

from shared.logger import logger
from modules.errors import OutOfMemoryError

if TYPE_CHECKING:
    from modules.tree_materializer import TreeMaterializer


class FileState(Enum):
    IDLE = "idle"
    OPEN = "open"


@dataclass
class ActiveFile:
    path: str
    target: Optional[str]
    buffer: bytearray = field(default_factory=bytearray)

    @property
    def writable(self) -> bool:
        return self.target is not None


class FileAccumulator:
    def __init__(self, materializer: "TreeMaterializer"):
        self.materializer = materializer
        self._active: Optional[ActiveFile] = None

    def __enter__(self) -> "FileAccumulator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Anything still buffered here was not flushed by the driver.
        self.discard()

    @property
    def state(self) -> FileState:
        return FileState.IDLE if self._active is None else FileState.OPEN

    @property
    def active(self) -> Optional[ActiveFile]:
        return self._active

    def open(self, path: str, target: Optional[str]) -> None:
        if self._active is not None:
            self.flush()
        self._active = ActiveFile(path=path, target=target)
        logger.debug("collecting '%s'%s", path, "" if target else " (discarding, no target)")

    def append(self, data: bytes) -> bool:
        """
        Append one raw content line. Returns True if the bytes were kept.
        """
        active = self._active
        if active is None or not active.writable:
            return False
        try:
            active.buffer.extend(data)
        except MemoryError:
            held = len(active.buffer)
            self.discard()
            raise OutOfMemoryError(active.path, held)
        return True

    def flush(self) -> Optional[bool]:
        """
        Hand the active buffer to the materializer and go IDLE.

        Returns None when IDLE, False if the file had no target or could not
        be written, True once written.
        """
        active = self._active
        if active is None:
            return None
        self._active = None
        if not active.writable:
            return False
        return self.materializer.write(active.path, active.target, active.buffer)

    def discard(self) -> None:
        if self._active is not None:
            self._active.buffer = bytearray()
            self._active = None
