"""
Pattern replacement for computed values.

Templates reference document values with `{dot.path}` placeholders. The
special placeholder `{__original}` stands for the value being replaced.

Example:
    >>> expand_pattern("No mapping for {__original} in {project.key}", document, "Reopened")
    'No mapping for Reopened in ORG'
"""

import re
from typing import Any, Dict, Optional

from .data_types import MISSING, stringify
from .structure import get_value

ORIGINAL_VALUE_KEY = '__original'

PLACEHOLDER_PATTERN = re.compile(r'\{([^{}]+)\}')


def expand_pattern(template: Optional[str], document: Dict[str, Any], original_value: Any = None) -> Optional[str]:
    """
    Replace every placeholder in a template.

    Args:
        template: Text with `{path}` placeholders, returned as is when it has none
        document: Document placeholders are resolved against; never modified
        original_value: Value substituted for `{__original}`

    Returns:
        Expanded text. Placeholders that resolve to nothing become ''.
    """
    if not template or '{' not in template:
        return template

    def _replace(match: re.Match) -> str:
        key = match.group(1).strip()
        if key == ORIGINAL_VALUE_KEY:
            return stringify(original_value)
        if not key:
            return ''
        value = get_value(document, key)
        if value is MISSING:
            return ''
        return stringify(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)
