"""
Apps package for structured content preprocessors.

Each app is one preprocessor kind, built on the shared dot-path, source base
and pattern utilities.
"""

from .trim_value import TrimStringValuePreprocessor
from .value_mapper import SimpleValueMapMapperPreprocessor
from .strip_html import StripHtmlPreprocessor

__all__ = [
    'TrimStringValuePreprocessor',
    'SimpleValueMapMapperPreprocessor',
    'StripHtmlPreprocessor',
]
