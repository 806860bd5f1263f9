"""
Source base resolution.

A source base is a dot-path pointing at an object, or at a list of objects,
inside a document. Field operations configured with bases run once per
resolved object, with their own paths taken relative to it.
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional, Sequence

from .data_types import MISSING, ValueKind, kind_of_or_none
from .structure import get_value

logger = logging.getLogger("content-preprocessor")

Reporter = Callable[[str], None]


def resolve_bases(
    document: Dict[str, Any], base_paths: Sequence[str], report: Optional[Reporter] = None
) -> Iterator[Dict[str, Any]]:
    """
    Yield the existing sub-documents found at the given base paths.

    Order follows `base_paths`, then list order inside each base. Nothing is
    created: absent bases are skipped silently, unusable values are reported
    and skipped.

    Args:
        document: Document to search
        base_paths: Dot-paths of the bases
        report: Callable receiving a message for each skipped value,
            defaults to a module-level warning

    Yields:
        Dicts found at the bases, by reference
    """
    report = report or logger.warning

    for base in base_paths:
        value = get_value(document, base)
        if value is MISSING or value is None:
            continue

        kind = kind_of_or_none(value)
        if kind is ValueKind.OBJECT:
            yield value
        elif kind is ValueKind.LIST:
            for index, element in enumerate(value):
                if kind_of_or_none(element) is ValueKind.OBJECT:
                    yield element
                else:
                    report(f"Source base '{base}' contains non-object element at index {index}: {element!r}")
        else:
            report(f"Source base '{base}' is not an object or collection of objects: {value!r}")


def iter_field_contexts(
    document: Dict[str, Any], base_paths: Optional[Sequence[str]], report: Optional[Reporter] = None
) -> Iterator[Dict[str, Any]]:
    """
    Yield the objects field paths are resolved against.

    Without bases that is the document itself, otherwise every object found
    by `resolve_bases`.
    """
    if base_paths is None:
        yield document
    else:
        yield from resolve_bases(document, base_paths, report)
