"""
Preprocessor factory creating configured preprocessors from definitions.

A definition names the preprocessor, the class implementing it and its
settings:

    {
        "name": "Status Normalizer",
        "class": "SimpleValueMapMapperPreprocessor",
        "settings": {...}
    }
"""

import importlib
import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from apps import SimpleValueMapMapperPreprocessor, StripHtmlPreprocessor, TrimStringValuePreprocessor
from pipeline.base.processor import StructuredContentPreprocessor
from utils.errors import ConfigurationError, ErrorTracker

logger = logging.getLogger("content-preprocessor")

CFG_NAME = 'name'
CFG_CLASS = 'class'
CFG_SETTINGS = 'settings'


class ProcessorFactory:
    """Factory for creating preprocessors by class name."""

    # Registry of available preprocessors
    _processors: Dict[str, Type[StructuredContentPreprocessor]] = {
        'TrimStringValuePreprocessor': TrimStringValuePreprocessor,
        'SimpleValueMapMapperPreprocessor': SimpleValueMapMapperPreprocessor,
        'StripHtmlPreprocessor': StripHtmlPreprocessor,
    }

    @classmethod
    def get_processor_class(cls, class_name: str) -> Type[StructuredContentPreprocessor]:
        """
        Resolve a class name to a preprocessor class.

        Registered short names are looked up first; dotted names such as
        'mypackage.preprocessors.UpperCasePreprocessor' are imported.

        Raises:
            ConfigurationError: If the class can't be found or is not a preprocessor
        """
        processor_class = cls._processors.get(class_name)
        if processor_class is None and '.' in class_name:
            module_name, _, attribute = class_name.rpartition('.')
            try:
                processor_class = getattr(importlib.import_module(module_name), attribute)
            except (ImportError, AttributeError) as e:
                raise ConfigurationError(f"Preprocessor class '{class_name}' can't be loaded: {e}")

        if processor_class is None:
            raise ConfigurationError(
                f"Unknown preprocessor class: {class_name}\n" f"Supported classes: {cls.get_supported_classes()}"
            )
        if not (isinstance(processor_class, type) and issubclass(processor_class, StructuredContentPreprocessor)):
            raise ConfigurationError(f"'{class_name}' is not a StructuredContentPreprocessor")
        return processor_class

    @classmethod
    def create_processor(cls, definition: Mapping[str, Any]) -> StructuredContentPreprocessor:
        """
        Create and configure a preprocessor from its definition.

        Args:
            definition: Dict with 'name', 'class' and 'settings' keys

        Returns:
            Configured preprocessor

        Raises:
            ConfigurationError: If the definition or its settings are invalid
        """
        if not isinstance(definition, Mapping):
            raise ConfigurationError(f"Preprocessor definition must be an object, got {type(definition).__name__}")

        name = definition.get(CFG_NAME)
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(f"'{CFG_NAME}' is not defined for preprocessor definition", option=CFG_NAME)

        class_name = definition.get(CFG_CLASS)
        if not isinstance(class_name, str) or not class_name.strip():
            raise ConfigurationError(
                f"'{CFG_CLASS}' is not defined for preprocessor '{name}'", option=CFG_CLASS, preprocessor=name
            )

        processor_class = cls.get_processor_class(class_name.strip())
        processor = processor_class(name.strip())
        processor.configure(definition.get(CFG_SETTINGS))
        return processor

    @classmethod
    def get_supported_classes(cls) -> List[str]:
        return list(cls._processors.keys())

    @classmethod
    def is_supported(cls, class_name: str) -> bool:
        return class_name in cls._processors

    @classmethod
    def register_processor(cls, class_name: str, processor_class: Type[StructuredContentPreprocessor]):
        """
        Register a new preprocessor class.

        Args:
            class_name: Name used in the 'class' key of definitions
            processor_class: Preprocessor class to register
        """
        cls._processors[class_name] = processor_class

    @classmethod
    def get_processor_info(cls) -> Dict[str, str]:
        """Map registered class names to the first line of their docstring."""
        info = {}
        for class_name, processor_class in cls._processors.items():
            doc = (processor_class.__doc__ or '').strip()
            info[class_name] = doc.splitlines()[0] if doc else f"Preprocessor {class_name}"
        return info


def create_processors(
    definitions: List[Mapping[str, Any]], tracker: Optional[ErrorTracker] = None
) -> List[StructuredContentPreprocessor]:
    """
    Create preprocessors for several definitions, in definition order.

    With a tracker in 'continue' mode a broken definition is recorded as error
    and skipped until the tracker's `max_errors` is reached; otherwise the
    first ConfigurationError is raised.

    Args:
        definitions: Preprocessor definitions
        tracker: Optional error tracker deciding whether to continue

    Returns:
        Configured preprocessors
    """
    processors = []
    for index, definition in enumerate(definitions):
        try:
            processors.append(ProcessorFactory.create_processor(definition))
        except ConfigurationError as e:
            if tracker is None:
                raise
            stage = e.preprocessor or f"definition {index}"
            if not tracker.add_error(str(e), stage=stage):
                raise

    logger.info(f"Created {len(processors)} of {len(definitions)} preprocessors")
    return processors
