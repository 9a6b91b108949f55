# modules/paths_normalizer.py

from shared.logger import logger
from modules.errors import InvalidPathError, printable

DEFAULT_MAX_PATH_LENGTH = 256


def escapes_root(path: str) -> bool:
    """
    True if the path has a ".." segment and could therefore land outside
    the output root once joined under it.
    """
    return ".." in path.replace("\\", "/").split("/")


class PathNormalizer:
    """
    Cleans the raw path captured from a marker line.

    `max_path_length` mirrors a C-style buffer size: the usable length is one
    less, so with the default of 256 the longest accepted path is 255 chars.
    """

    def __init__(self, max_path_length: int = DEFAULT_MAX_PATH_LENGTH):
        if max_path_length <= 1:
            raise ValueError("max_path_length must be greater than 1")
        self.max_path_length = max_path_length

    def normalize(self, raw_path: str) -> str:
        path = raw_path.strip()
        # "[ dir/file.css ]" style markers leave a closing bracket behind
        if path.endswith("]"):
            path = path[:-1].strip()

        if not path:
            raise InvalidPathError(raw_path, "empty path")
        if len(path) >= self.max_path_length:
            raise InvalidPathError(
                raw_path,
                f"path is {len(path)} characters, limit is {self.max_path_length - 1}",
            )

        if escapes_root(path):
            logger.warning("path '%s' contains '..' and may resolve outside the output root", printable(path))
        return path
