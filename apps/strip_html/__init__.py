"""Strip HTML preprocessor."""

from .strip_html_preprocessor import StripHtmlPreprocessor

__all__ = ['StripHtmlPreprocessor']
