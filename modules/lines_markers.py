# modules/lines_markers.py

"""
Path marker descriptors.

A marker is a literal prefix token which announces that the rest of the line
is a file path, e.g. "// src/app.js" or "[ styles/main.css ]". The table is
ordered and immutable; the first descriptor whose token prefixes a line wins,
so within an overlapping family the longest token comes first.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class MarkerDescriptor:
    token: str
    # True when the marker encloses the path and expects a closing "]".
    has_explicit_separator: bool = False


class MarkerTable:
    """Ordered, read-only sequence of MarkerDescriptor."""

    def __init__(self, descriptors: Iterable[MarkerDescriptor]):
        self._descriptors: Tuple[MarkerDescriptor, ...] = tuple(descriptors)
        if not self._descriptors:
            raise ValueError("a marker table needs at least one descriptor")
        for d in self._descriptors:
            if not d.token or d.token != d.token.strip():
                raise ValueError(f"invalid marker token {d.token!r}")

    def __iter__(self) -> Iterator[MarkerDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __getitem__(self, index: int) -> MarkerDescriptor:
        return self._descriptors[index]

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(d.token for d in self._descriptors)

    def match(self, text: str) -> Optional[MarkerDescriptor]:
        """Return the first descriptor whose token starts `text`, or None."""
        for descriptor in self._descriptors:
            if text.startswith(descriptor.token):
                return descriptor
        return None


DEFAULT_MARKER_TABLE = MarkerTable((
    MarkerDescriptor("//"),        # C-style comment     // path/to/file.js
    MarkerDescriptor("##"),        # doubled hash        ## path/to/file.config
    MarkerDescriptor("#"),         # shell/python        # path/to/file.py
    MarkerDescriptor("-->"),       # long arrow          --> path/to/file.tsx
    MarkerDescriptor("->"),        # arrow               -> path/to/file.tsx
    MarkerDescriptor("---"),       # md separator        --- path/to/file.yml
    MarkerDescriptor("-"),         # list dash           - path/to/file.json
    MarkerDescriptor("=>"),        # fat arrow           => path/to/file.html
    MarkerDescriptor(">"),         # md quote            > path/to/file.md
    MarkerDescriptor("***"),       # md separator        *** path/to/file.yml
    MarkerDescriptor("[", has_explicit_separator=True),  # [ path/to/file.css ]
))
