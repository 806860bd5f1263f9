"""
Loading of preprocessor definitions from a JSON file.

The file holds a list of definitions under 'preprocessors':

    {
        "preprocessors": [
            {"name": "...", "class": "...", "settings": {...}}
        ]
    }
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from utils.errors import ConfigurationError

logger = logging.getLogger("content-preprocessor")

ENV_CONFIG_PATH = 'PREPROCESSORS_CONFIG'


class ConfigManager:
    """Manages preprocessor definitions."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to the definitions file, defaults to the
                PREPROCESSORS_CONFIG environment variable
        """
        self.config_path = config_path or os.getenv(ENV_CONFIG_PATH)
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file."""
        config: Dict[str, Any] = {}

        if self.config_path:
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    config = json.load(f)
            except (OSError, ValueError) as e:
                raise ConfigurationError(f"Failed to load config file {self.config_path}: {e}")
            if not isinstance(config, dict):
                raise ConfigurationError(f"Config file {self.config_path} must contain a JSON object")

        config.setdefault('preprocessors', [])
        return config

    def get_definitions(self) -> List[Dict[str, Any]]:
        """
        Get all preprocessor definitions, in file order.

        Raises:
            ConfigurationError: If 'preprocessors' is not a list
        """
        definitions = self._config['preprocessors']
        if not isinstance(definitions, list):
            raise ConfigurationError("'preprocessors' must be a list of preprocessor definitions")
        return definitions

    def get_definition(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Get the definition of one preprocessor by name.

        Args:
            name: Preprocessor name

        Returns:
            Definition dict or None if no preprocessor has that name
        """
        for definition in self.get_definitions():
            if isinstance(definition, dict) and definition.get('name') == name:
                return definition
        return None

    def validate_definitions(self) -> bool:
        """
        Check that every definition has a name, a class and a settings object.

        Settings contents are validated by the preprocessors themselves when
        they are configured.

        Returns:
            True if valid, False otherwise
        """
        try:
            definitions = self.get_definitions()
        except ConfigurationError as e:
            logger.error(str(e))
            return False

        valid = True
        for index, definition in enumerate(definitions):
            if not isinstance(definition, dict):
                logger.error(f"Preprocessor definition {index} is not an object")
                valid = False
                continue
            for key in ('name', 'class'):
                value = definition.get(key)
                if not isinstance(value, str) or not value.strip():
                    logger.error(f"Missing required field '{key}' in preprocessor definition {index}")
                    valid = False
            if not isinstance(definition.get('settings'), dict):
                logger.error(f"'settings' section is not defined for preprocessor definition {index}")
                valid = False
        return valid
