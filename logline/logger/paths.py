# logline/logger/paths.py
from pathlib import PurePath
from typing import Optional

UNKNOWN = "unknown"

_SOURCE_ROOT = "src"
# What logging.Logger.findCaller reports when there is no frame
_STDLIB_UNKNOWN_FILE = "(unknown file)"


def project_relative_path(file_path: Optional[str], depth: int) -> str:
    """
    Shorten a source path for display.

    Everything before the first "src" component is dropped. A depth of 0
    keeps the rest; otherwise only the last `depth` components are kept.
    Depth is a maximum: it never shortens below what is available.

    Example:
        >>> project_relative_path("/home/u/proj/src/mod/file.py", 0)
        'src/mod/file.py'
        >>> project_relative_path("/home/u/proj/src/mod/file.py", 2)
        'mod/file.py'
        >>> project_relative_path(None, 2)
        'unknown'
    """
    if not file_path or file_path == _STDLIB_UNKNOWN_FILE:
        return UNKNOWN

    components = PurePath(file_path).parts

    if _SOURCE_ROOT in components:
        components = components[components.index(_SOURCE_ROOT):]

    total = len(components)
    if depth == 0 or depth >= total:
        return PurePath(*components).as_posix()

    return "/".join(components[total - depth:])


__all__ = ["UNKNOWN", "project_relative_path"]
