"""
Preprocessor settings with validation.

Settings arrive as a flat dict of option name to value, produced by whatever
loads the pipeline definition. The `read_*` helpers validate single options
and raise ConfigurationError; the dataclasses group the validated options of
each preprocessor kind and are immutable once built.
"""
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .data_types import ValueKind, kind_of_or_none, stringify
from .errors import ConfigurationError
from .structure import split_path

CFG_SOURCE_FIELD = 'source_field'
CFG_TARGET_FIELD = 'target_field'
CFG_SOURCE_BASES = 'source_bases'
CFG_MAX_SIZE = 'max_size'
CFG_VALUE_MAPPING = 'value_mapping'
CFG_VALUE_DEFAULT = 'value_default'


def _option_error(name: str, option: str, problem: str) -> ConfigurationError:
    return ConfigurationError(f"'settings/{option}' {problem} for preprocessor '{name}'", option=option, preprocessor=name)


def read_mandatory_string(settings: Mapping[str, Any], option: str, name: str = '') -> str:
    """
    Read a required, non-blank string option.

    Raises:
        ConfigurationError: If the option is missing, blank or not a string
    """
    value = settings.get(option)
    if value is None:
        raise _option_error(name, option, "is not defined")
    if not isinstance(value, str):
        raise _option_error(name, option, f"must be a string, got {type(value).__name__}")
    if not value.strip():
        raise _option_error(name, option, "is blank")
    return value


def read_optional_string(settings: Mapping[str, Any], option: str, name: str = '') -> Optional[str]:
    """Read an optional string option. Blank values count as not set."""
    value = settings.get(option)
    if value is None:
        return None
    if not isinstance(value, str):
        raise _option_error(name, option, f"must be a string, got {type(value).__name__}")
    return value.strip() or None


def read_mandatory_path(settings: Mapping[str, Any], option: str, name: str = '') -> str:
    """Read a required dot-path option."""
    value = read_mandatory_string(settings, option, name).strip()
    try:
        split_path(value)
    except ValueError as e:
        raise _option_error(name, option, f"is not a valid dot-path ({e})")
    return value


def read_mandatory_integer(settings: Mapping[str, Any], option: str, name: str = '') -> int:
    """
    Read a required non-negative integer option.

    Integers and decimal strings (as found in hand-written JSON/YAML) are accepted.

    Raises:
        ConfigurationError: If missing, not an integer, or negative
    """
    value = settings.get(option)
    if value is None:
        raise _option_error(name, option, "is not defined")
    if isinstance(value, bool):
        raise _option_error(name, option, "must be an integer, got bool")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise _option_error(name, option, f"must be an integer, got '{value}'")
    if not isinstance(value, int):
        raise _option_error(name, option, f"must be an integer, got {type(value).__name__}")
    if value < 0:
        raise _option_error(name, option, f"must not be negative, got {value}")
    return value


def read_optional_path_list(settings: Mapping[str, Any], option: str, name: str = '') -> Optional[Tuple[str, ...]]:
    """Read an optional list of dot-paths as a tuple."""
    value = settings.get(option)
    if value is None:
        return None
    if kind_of_or_none(value) is not ValueKind.LIST:
        raise _option_error(name, option, f"must be a list of strings, got {type(value).__name__}")

    paths = []
    for entry in value:
        if not isinstance(entry, str) or not entry.strip():
            raise _option_error(name, option, f"contains invalid entry {entry!r}")
        try:
            split_path(entry.strip())
        except ValueError as e:
            raise _option_error(name, option, f"contains invalid dot-path ({e})")
        paths.append(entry.strip())
    return tuple(paths)


def read_mandatory_mapping(settings: Mapping[str, Any], option: str, name: str = '') -> Mapping[str, str]:
    """
    Read a required string to string mapping.

    Scalar values are stringified; nested objects or lists are rejected.
    The returned mapping is read-only.
    """
    value = settings.get(option)
    if value is None:
        raise _option_error(name, option, "is not defined")
    if kind_of_or_none(value) is not ValueKind.OBJECT:
        raise _option_error(name, option, f"must be an object, got {type(value).__name__}")

    mapping = {}
    for key, mapped in value.items():
        kind = kind_of_or_none(mapped)
        if kind is None or not kind.is_scalar:
            raise _option_error(name, option, f"has non-scalar value for key '{key}'")
        mapping[str(key)] = stringify(mapped)
    return MappingProxyType(mapping)


@dataclass(frozen=True)
class FieldSettings:
    """
    Source/target settings shared by all preprocessors.

    Example:
        settings = FieldSettings.from_dict({
            'source_field': 'fields.summary',
            'target_field': 'description',
            'source_bases': ['comments'],
        }, name='Description creator')
    """

    source_field: str
    target_field: str
    source_bases: Optional[Tuple[str, ...]] = None

    @staticmethod
    def _read_fields(settings: Mapping[str, Any], name: str) -> Dict[str, Any]:
        if settings is None:
            raise ConfigurationError(f"'settings' section is not defined for preprocessor '{name}'", preprocessor=name)
        if not isinstance(settings, Mapping):
            raise ConfigurationError(
                f"'settings' section must be an object, got {type(settings).__name__} for preprocessor '{name}'",
                preprocessor=name,
            )
        return {
            'source_field': read_mandatory_path(settings, CFG_SOURCE_FIELD, name),
            'target_field': read_mandatory_path(settings, CFG_TARGET_FIELD, name),
            'source_bases': read_optional_path_list(settings, CFG_SOURCE_BASES, name),
        }

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any], name: str = '') -> 'FieldSettings':
        return cls(**cls._read_fields(settings, name))

    def to_dict(self) -> dict:
        """Convert settings back to an options dict, omitting unset options."""
        result = {f.name: getattr(self, f.name) for f in fields(self)}
        if self.source_bases is not None:
            result[CFG_SOURCE_BASES] = list(self.source_bases)
        return {key: value for key, value in result.items() if value is not None}


@dataclass(frozen=True)
class TrimSettings(FieldSettings):
    """Settings of the trim preprocessor: `max_size` is required."""

    max_size: int = 0

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any], name: str = '') -> 'TrimSettings':
        options = cls._read_fields(settings, name)
        options['max_size'] = read_mandatory_integer(settings, CFG_MAX_SIZE, name)
        return cls(**options)


@dataclass(frozen=True)
class ValueMapSettings(FieldSettings):
    """Settings of the value mapper: `value_mapping` is required, `value_default` optional."""

    value_mapping: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    value_default: Optional[str] = None

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any], name: str = '') -> 'ValueMapSettings':
        options = cls._read_fields(settings, name)
        options['value_mapping'] = read_mandatory_mapping(settings, CFG_VALUE_MAPPING, name)
        options['value_default'] = read_optional_string(settings, CFG_VALUE_DEFAULT, name)
        return cls(**options)

    def to_dict(self) -> dict:
        result = super().to_dict()
        result[CFG_VALUE_MAPPING] = dict(self.value_mapping)
        return result
