"""Trim string value preprocessor."""

from .trim_value_preprocessor import TrimStringValuePreprocessor

__all__ = ['TrimStringValuePreprocessor']
