"""
Utilities package for shared functionality.
Dot-path access, source base resolution, pattern replacement, settings and
error types used by all preprocessors.
"""

from .data_types import MISSING, ValueKind, kind_of, stringify
from .structure import get_value, put_value, split_path
from .bases import resolve_bases
from .patterns import ORIGINAL_VALUE_KEY, expand_pattern
from .errors import ConfigurationError, PathConflictError, ErrorTracker

__all__ = [
    'MISSING',
    'ValueKind',
    'kind_of',
    'stringify',
    'get_value',
    'put_value',
    'split_path',
    'resolve_bases',
    'ORIGINAL_VALUE_KEY',
    'expand_pattern',
    'ConfigurationError',
    'PathConflictError',
    'ErrorTracker',
]
