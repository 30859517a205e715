"""Path-based access into decoded JSON response trees.

Response trees are plain ``dict``/``list``/scalar values straight from the
JSON decoder. Their shape is owned by the service and drifts between
versions and regions, so every lookup here answers "absent" (``None``)
instead of raising when a path does not exist.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

__all__ = ["Path", "nav", "nav_first"]

Path = Sequence[str | int]


def nav(root: Any, *path: str | int, default: Any = None) -> Any:
    """Walk ``root`` along ``path`` and return the value found there.

    Integer segments index lists (negative indices count from the end),
    string segments look up mapping keys. The walk stops with ``default``
    as soon as a segment does not apply: missing key, index out of range,
    or a segment applied to a value of the wrong kind (e.g. indexing a
    string). A present-but-null value is treated the same as a missing one.

    Args:
        root: Tree to walk.
        *path: Keys and indices, outermost first.
        default: Value returned when the path cannot be followed.

    Returns:
        The value at ``path`` or ``default``.

    Examples:
        >>> nav({"a": [{"b": 1}]}, "a", 0, "b")
        1
        >>> nav({"a": []}, "a", 0, "b") is None
        True
    """
    current = root
    for key in path:
        if current is None:
            return default
        if isinstance(key, int) and not isinstance(key, bool):
            if not isinstance(current, list | tuple):
                return default
            if not -len(current) <= key < len(current):
                return default
            current = current[key]
        elif isinstance(current, Mapping):
            if key not in current:
                return default
            current = current[key]
        else:
            return default
    return default if current is None else current


def nav_first(root: Any, paths: Iterable[Path], default: Any = None) -> Any:
    """Return the value at the first path in ``paths`` that resolves.

    Candidate paths are equally valid layouts of the same logical field,
    tried in priority order.
    """
    for path in paths:
        value = nav(root, *path)
        if value is not None:
            return value
    return default
