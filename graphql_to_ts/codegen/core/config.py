"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files and command-line
overrides, providing defaults and validation for conversion settings.
"""

import json
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_OUTPUT = "types/generated.ts"

# Looked up in the working directory when no explicit config path is given
CONFIG_FILE_NAMES = ("graphql-to-ts.config.json", ".graphql-to-ts.json")

_IDENTIFIER_FRAGMENT = re.compile(r"[A-Za-z0-9_$]+")

# Config files may use camelCase keys
_KEY_ALIASES = {
    "customScalarTypes": "custom_scalar_types",
    "customScalars": "custom_scalar_types",
    "includeComments": "include_comments",
    "comments": "include_comments",
    "typePrefix": "type_prefix",
    "prefix": "type_prefix",
    "typeSuffix": "type_suffix",
    "suffix": "type_suffix",
    "enumsAsConst": "enums_as_const",
}


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class InvalidScalarMappingError(ConfigError):
    """Raised when a custom scalar mapping payload is malformed."""

    pass


@dataclass(frozen=True)
class ConversionOptions:
    """Options consumed by a single conversion run."""

    custom_scalar_types: Mapping[str, str] = field(default_factory=dict)
    include_comments: bool = True
    type_prefix: str = ""
    type_suffix: str = ""
    enums_as_const: bool = False

    def __post_init__(self):
        """Validate field types and freeze the scalar mapping."""
        _require_type(self, ("include_comments", "enums_as_const"), bool)
        _require_type(self, ("type_prefix", "type_suffix"), str)
        mapping = parse_custom_scalars(self.custom_scalar_types)
        object.__setattr__(self, "custom_scalar_types", MappingProxyType(mapping))

    def to_dict(self) -> Dict[str, Any]:
        """Return the options as a plain dictionary."""
        return {
            "custom_scalar_types": dict(self.custom_scalar_types),
            "include_comments": self.include_comments,
            "type_prefix": self.type_prefix,
            "type_suffix": self.type_suffix,
            "enums_as_const": self.enums_as_const,
        }


@dataclass(frozen=True)
class ProjectConfig:
    """Complete configuration for one CLI invocation."""

    input: Optional[str] = None
    output: str = DEFAULT_OUTPUT
    watch: bool = False
    options: ConversionOptions = field(default_factory=ConversionOptions)

    def __post_init__(self):
        """Validate field types."""
        if self.input is not None:
            _require_type(self, ("input",), str)
        _require_type(self, ("output",), str)
        _require_type(self, ("watch",), bool)


def _require_type(instance: Any, names: Tuple[str, ...], expected: type) -> None:
    """Raise ConfigError when a field does not hold a value of ``expected`` type."""
    for name in names:
        value = getattr(instance, name)
        if not isinstance(value, expected):
            raise ConfigError(
                f"Configuration value '{name}' must be {expected.__name__}, "
                f"got {type(value).__name__}: {value!r}"
            )


def parse_custom_scalars(value: Union[None, str, Mapping[str, Any]]) -> Dict[str, str]:
    """
    Normalize a custom scalar mapping.

    Args:
        value: None, a mapping, or a JSON object string

    Returns:
        Mapping of scalar name to TypeScript type

    Raises:
        InvalidScalarMappingError: If the payload is not a string-to-string object
    """
    if value is None:
        return {}

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise InvalidScalarMappingError(
                f"Invalid JSON format for custom scalars: {e}"
            ) from e

    if not isinstance(value, Mapping):
        raise InvalidScalarMappingError(
            f"Custom scalars must be a JSON object, got {type(value).__name__}"
        )

    mapping = {}
    for scalar, target in value.items():
        if not isinstance(scalar, str) or not isinstance(target, str):
            raise InvalidScalarMappingError(
                f"Custom scalar mapping entries must be strings: {scalar!r} -> {target!r}"
            )
        if not scalar or not target:
            raise InvalidScalarMappingError(
                f"Custom scalar mapping entries must not be empty: {scalar!r} -> {target!r}"
            )
        mapping[scalar] = target

    return mapping


class ConfigManager:
    """Manages configuration discovery, loading and merging."""

    def __init__(self, search_dir: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            search_dir: Directory searched for default config files (cwd if None)
        """
        self.search_dir = Path(search_dir) if search_dir else None

    def find_config_file(self, config_file: Optional[Union[str, Path]] = None) -> Optional[Path]:
        """
        Locate the configuration file to use.

        An explicit path must exist; otherwise the default names are tried in
        order and the first existing one wins.
        """
        if config_file:
            path = Path(config_file)
            if not path.exists():
                raise ConfigError(f"Configuration file not found: {path}")
            return path

        base = self.search_dir or Path.cwd()
        for name in CONFIG_FILE_NAMES:
            candidate = base / name
            if candidate.exists():
                return candidate
        return None

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> ProjectConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Overrides applied on top of the file values
            config_file: Explicit path to a JSON configuration file

        Returns:
            Merged configuration
        """
        base_config: Dict[str, Any] = {}

        path = self.find_config_file(config_file)
        if path is not None:
            try:
                base_config.update(self._load_config_file(path))
            except ConfigError as e:
                if config_file:
                    raise
                logger.warning("Could not load config from %s: %s", path, e)

        if custom_config:
            base_config.update(normalize_keys(custom_config))

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        if config_path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {config_path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {config_path}")

        logger.info("Loaded configuration from %s", config_path)
        return normalize_keys(config)

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> ProjectConfig:
        """Convert dictionary to ProjectConfig instance."""
        option_fields = {f.name for f in fields(ConversionOptions)}
        project_fields = {"input", "output", "watch"}

        option_args = {}
        project_args = {}

        for key, value in config_dict.items():
            if key in option_fields:
                option_args[key] = value
            elif key in project_fields:
                project_args[key] = value
            else:
                logger.warning("Ignoring unknown configuration key: %s", key)

        if project_args.get("output") is None:
            project_args.pop("output", None)

        return ProjectConfig(options=ConversionOptions(**option_args), **project_args)

    def validate_config(self, config: ProjectConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []
        options = config.options

        for label, value in (("type_prefix", options.type_prefix), ("type_suffix", options.type_suffix)):
            if value and not _IDENTIFIER_FRAGMENT.fullmatch(value):
                warnings.append(f"{label} {value!r} is not a valid identifier fragment")

        if options.type_prefix and options.type_prefix[0].isdigit():
            warnings.append(f"type_prefix {options.type_prefix!r} starts with a digit")

        if not config.output.endswith((".ts", ".d.ts")):
            warnings.append(f"Output file {config.output!r} does not end in .ts")

        return warnings


def normalize_keys(config: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase config keys onto their snake_case field names."""
    return {_KEY_ALIASES.get(key, key): value for key, value in config.items()}


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
    search_dir: Optional[Union[str, Path]] = None,
) -> ProjectConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Overrides applied on top of file values
        config_file: Path to JSON configuration file
        search_dir: Directory searched for default config files

    Returns:
        Merged configuration
    """
    return ConfigManager(search_dir).get_config(custom_config, config_file)

