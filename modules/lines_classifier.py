# modules/lines_classifier.py

"""
Decides, line by line, whether the input is a path marker or file content.

A line is a Marker when, after trimming, it
  • has no directory-tree drawing glyphs (├── └── │ |--),
  • starts with a token from the MarkerTable (first match wins),
  • has a non-empty remainder after the token, and
  • that remainder looks like a file name: some non-blank text after its last ".".
Everything else is Content, carried as the untouched raw bytes.
"""

from dataclasses import dataclass
from typing import Union

from shared.logger import logger
from modules.lines_markers import MarkerDescriptor, MarkerTable, DEFAULT_MARKER_TABLE

TREE_INDICATORS = ("├──", "└──", "│", "|--")

DEFAULT_MAX_LINE_LENGTH = 4096


@dataclass(frozen=True)
class Marker:
    raw_path: str
    descriptor: MarkerDescriptor


@dataclass(frozen=True)
class Content:
    data: bytes

    @property
    def text(self) -> str:
        return decode_line(self.data)


ClassifiedLine = Union[Marker, Content]


def decode_line(raw: bytes) -> str:
    return raw.decode("utf-8", errors="surrogateescape")


def is_tree_line(text: str) -> bool:
    return any(glyph in text for glyph in TREE_INDICATORS)


def has_extension(path_text: str) -> bool:
    dot = path_text.rfind(".")
    if dot == -1:
        return False
    return path_text[dot + 1:].strip() != ""


class LineClassifier:
    def __init__(self, markers: MarkerTable = DEFAULT_MARKER_TABLE,
                 max_line_length: int = DEFAULT_MAX_LINE_LENGTH):
        if max_line_length <= 0:
            raise ValueError("max_line_length must be positive")
        self.markers = markers
        self.max_line_length = max_line_length

    def classify(self, raw: bytes) -> ClassifiedLine:
        content = Content(raw)
        trimmed = decode_line(raw)[:self.max_line_length].strip()
        if not trimmed:
            return content

        if is_tree_line(trimmed):
            logger.trace("tree preview line ignored: %r", trimmed)
            return content

        descriptor = self.markers.match(trimmed)
        if descriptor is None:
            return content

        path_start = trimmed[len(descriptor.token):].lstrip()
        if not path_start:
            return content

        if not has_extension(path_start):
            return content

        logger.trace("marker %r -> %r", descriptor.token, path_start)
        return Marker(raw_path=path_start, descriptor=descriptor)
