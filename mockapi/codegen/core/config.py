"""
Configuration management for code generation.

Handles loading and merging generator options from JSON files,
providing per-language defaults and validation of option flags.
"""

import json
import re
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .naming import NamingCase


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class NamingConvention(Enum):
    """Naming conventions selectable for generated names."""

    PASCAL_CASE = "PascalCase"
    CAMEL_CASE = "camelCase"
    SNAKE_CASE = "snake_case"

    @property
    def case(self) -> NamingCase:
        return {
            NamingConvention.PASCAL_CASE: NamingCase.PASCAL_CASE,
            NamingConvention.CAMEL_CASE: NamingCase.CAMEL_CASE,
            NamingConvention.SNAKE_CASE: NamingCase.SNAKE_CASE,
        }[self]

    @classmethod
    def parse(cls, value: Union[str, "NamingConvention"]) -> "NamingConvention":
        if isinstance(value, cls):
            return value
        normalized = str(value).replace("-", "_").lower()
        aliases = {
            "pascalcase": cls.PASCAL_CASE,
            "pascal": cls.PASCAL_CASE,
            "camelcase": cls.CAMEL_CASE,
            "camel": cls.CAMEL_CASE,
            "snake_case": cls.SNAKE_CASE,
            "snake": cls.SNAKE_CASE,
        }
        if normalized not in aliases:
            raise ConfigError(f"Invalid naming convention: {value}")
        return aliases[normalized]


class ObjectType(Enum):
    """Object role types a language can be asked to generate."""

    DTO = "dto"
    POCO = "poco"
    BO = "bo"
    DAO = "dao"


@dataclass(frozen=True)
class GeneratorOptions:
    """Options consumed uniformly by all language generators."""

    naming_convention: NamingConvention = NamingConvention.PASCAL_CASE
    prefix: str = ""
    suffix: str = ""

    # Serialization annotations
    use_annotations: bool = True
    use_lombok: bool = False
    use_json_serializable: bool = False
    use_system_text_json: bool = False

    # Additive features
    generate_validation: bool = False
    generate_builders: bool = False
    generate_factory_methods: bool = False
    generate_equals_and_hash: bool = False
    generate_to_string: bool = False
    generate_comments: bool = False
    generate_null_checks: bool = True

    object_types: tuple = (ObjectType.DTO,)
    package_name: Optional[str] = None

    # Language-specific settings
    custom: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "naming_convention", NamingConvention.parse(self.naming_convention)
        )
        object.__setattr__(
            self, "object_types", tuple(ObjectType(t) for t in self.object_types)
        )
        object.__setattr__(self, "custom", dict(self.custom))

    def get_custom(self, key: str, default: Any = None) -> Any:
        return self.custom.get(key, default)

    def merged(self, **overrides) -> "GeneratorOptions":
        """Return a copy with the given overrides applied."""
        return replace(self, **overrides)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorOptions":
        """
        Build options from a dictionary.

        Accepts snake_case keys or the camelCase keys stored by the web UI
        (``useAnnotations``, ``namingConvention``...). Unknown keys are kept
        in ``custom``.
        """
        known_fields = {f.name for f in fields(cls)}
        option_args: Dict[str, Any] = {}
        custom_args: Dict[str, Any] = dict(data.get("custom") or {})

        for key, value in data.items():
            if key == "custom":
                continue
            snake_key = _camel_to_snake(key)
            if snake_key in known_fields:
                option_args[snake_key] = value
            else:
                custom_args[key] = value

        option_args["custom"] = custom_args
        try:
            return cls(**option_args)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid generator options: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "naming_convention":
                value = value.value
            elif f.name == "object_types":
                value = [t.value for t in value]
            elif f.name == "custom":
                value = dict(value)
            result[f.name] = value
        return result


def _camel_to_snake(key: str) -> str:
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", key).lower()


class ConfigManager:
    """Manages option loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default option overrides for supported languages."""
        self._configs["typescript"] = {}
        self._configs["java"] = {"package_name": "com.example.dto"}
        self._configs["dart"] = {"use_json_serializable": True}
        self._configs["go"] = {"package_name": "models", "generate_null_checks": False}
        self._configs["python"] = {"custom": {"style": "pydantic"}}
        self._configs["csharp"] = {
            "use_system_text_json": True,
            "package_name": "Models",
        }
        self._configs["swift"] = {"generate_null_checks": False}
        self._configs["kotlin"] = {"package_name": "com.example.dto"}

    def get_options(
        self,
        language: str,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorOptions:
        """
        Get complete options for a language.

        Args:
            language: Target language name
            custom_config: Option overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged options for the language
        """
        base_config = _deep_copy(self._configs.get(language.lower(), {}))

        if config_file:
            _merge(base_config, self._load_config_file(config_file))

        if custom_config:
            _merge(base_config, custom_config)

        return GeneratorOptions.from_dict(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def save_options(self, options: GeneratorOptions, output_path: Union[str, Path]):
        """Save options to a JSON file."""
        path = Path(output_path)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(options.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> List[str]:
        return list(self._configs.keys())


def validate_options(options: GeneratorOptions, language: str) -> List[str]:
    """
    Report option flags the language ignores.

    Returns:
        List of warnings (empty if every enabled flag is honoured)
    """
    from .capabilities import get_capabilities

    capabilities = get_capabilities(language)
    warnings = []

    for flag in capabilities.ignored_flags(options):
        warnings.append(f"{capabilities.name} ignores option '{flag}'")

    for object_type in options.object_types:
        if object_type not in capabilities.supported_object_types:
            warnings.append(
                f"{capabilities.name} does not support object type '{object_type.value}'"
            )

    return warnings


def _deep_copy(config: Dict[str, Any]) -> Dict[str, Any]:
    return {k: dict(v) if isinstance(v, dict) else v for k, v in config.items()}


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]):
    known_fields = {f.name for f in fields(GeneratorOptions)}
    for key, value in overrides.items():
        if key == "custom" and isinstance(value, dict):
            base.setdefault("custom", {}).update(value)
            continue
        # Option keys are stored snake_case
        snake_key = _camel_to_snake(key)
        base[snake_key if snake_key in known_fields else key] = value


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_options(
    language: str,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorOptions:
    """
    Convenience function to load options for a language.

    Args:
        language: Target language name
        custom_config: Option overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged options for the language
    """
    return get_config_manager().get_options(language, custom_config, config_file)
