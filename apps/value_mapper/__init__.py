"""Simple value map mapper preprocessor."""

from .value_map_preprocessor import SimpleValueMapMapperPreprocessor

__all__ = ['SimpleValueMapMapperPreprocessor']
