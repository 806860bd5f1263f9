"""
Dot-path access to nested document structures.

A dot-path such as 'fields.status.name' addresses a value through nested
dicts, one key per segment. Keys containing a literal dot can't be addressed;
there is no escaping.
"""

from typing import Any, Callable, Dict, List

from .data_types import MISSING, ValueKind, kind_of_or_none
from .errors import PathConflictError


def split_path(path: str) -> List[str]:
    """
    Split a dot-path into its segments.

    Raises:
        ValueError: If the path is not a string, is blank or has empty segments
    """
    if not isinstance(path, str) or not path.strip():
        raise ValueError(f"Dot-path must be a non-empty string, got {path!r}")
    segments = path.split('.')
    if any(not segment for segment in segments):
        raise ValueError(f"Dot-path '{path}' contains an empty segment")
    return segments


def get_value(document: Dict[str, Any], path: str) -> Any:
    """
    Read the value at a dot-path.

    Args:
        document: Document to read from
        path: Dot-path of the value

    Returns:
        The stored value (possibly None), or MISSING if any level is absent or
        an intermediate level is not an object
    """
    if '.' not in path:
        return document.get(path, MISSING)

    current = document
    for segment in path.split('.'):
        if kind_of_or_none(current) is not ValueKind.OBJECT or segment not in current:
            return MISSING
        current = current[segment]
    return current


def put_value(document: Dict[str, Any], path: str, value: Any) -> None:
    """
    Write a value at a dot-path, creating missing intermediate objects.

    Args:
        document: Document to write into
        path: Dot-path of the target location
        value: Value to store, overwriting anything already there

    Raises:
        PathConflictError: If an intermediate level holds a non-object value.
            Nothing is written in that case.
    """
    segments = path.split('.')
    current = document
    for segment in segments[:-1]:
        child = current.get(segment, MISSING)
        if child is MISSING:
            # everything below a freshly created level is new, so no conflict can follow
            child = {}
            current[segment] = child
        elif kind_of_or_none(child) is not ValueKind.OBJECT:
            raise PathConflictError(path, segment, child)
        current = child
    current[segments[-1]] = value


def try_put_value(document: Dict[str, Any], path: str, value: Any, report: Callable[[str], None]) -> bool:
    """put_value() that reports a path conflict instead of raising it."""
    try:
        put_value(document, path, value)
    except PathConflictError as e:
        report(str(e))
        return False
    return True
