"""
Generator registry system for managing available code generators.

Maps language identifiers (and their aliases) to generator classes and
instantiates them with resolved options.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import ConfigError, GeneratorOptions, load_options
from .core.generator import CodeGenerator

logger = get_logger(__name__)

OptionsLike = Optional[Union[GeneratorOptions, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class UnsupportedLanguage(RegistryError):
    """Raised when no generator is registered for a language."""

    def __init__(self, language: str, available: List[str]):
        self.language = language
        self.available = available
        super().__init__(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(available)}"
        )


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a language.

        Args:
            language: Primary language name (e.g., 'go', 'python')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this language
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or conflicts exist
        """
        if not issubclass(generator_class, CodeGenerator):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()

        if language_key in self._generators and not replace:
            return

        self._generators[language_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != language_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = language_key

        logger.debug("Registered %s generator %s", language_key, generator_class.__name__)

    def unregister(self, language: str):
        """Unregister a generator and its aliases."""
        language_key = language.lower()
        self._generators.pop(language_key, None)

        for alias in [a for a, target in self._aliases.items() if target == language_key]:
            del self._aliases[alias]

    def resolve(self, language: str) -> str:
        """
        Resolve a language name or alias to its primary key.

        Raises:
            UnsupportedLanguage: If the language is not registered
        """
        language_key = language.lower()

        if language_key in self._generators:
            return language_key

        if language_key in self._aliases:
            return self._aliases[language_key]

        raise UnsupportedLanguage(language, self.list_languages())

    def create_generator(self, language: str, options: OptionsLike = None) -> CodeGenerator:
        """
        Create generator instance for language.

        Fails here, not at generation time, when the language is unknown.

        Args:
            language: Language name or alias
            options: GeneratorOptions, dict of overrides, or config file path

        Returns:
            Configured generator instance

        Raises:
            UnsupportedLanguage: If no generator is registered
            RegistryError: If options cannot be resolved
        """
        language_key = self.resolve(language)
        generator_class = self._generators[language_key]

        try:
            if isinstance(options, GeneratorOptions):
                final_options = options
            elif isinstance(options, (str, Path)):
                final_options = load_options(language_key, config_file=options)
            elif isinstance(options, dict):
                final_options = load_options(language_key, custom_config=options)
            elif options is None:
                final_options = load_options(language_key)
            else:
                raise RegistryError(f"Invalid options type: {type(options)}")
        except ConfigError as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

        return generator_class(final_options)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._generators.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        language_key = language.lower()
        return sorted(alias for alias, target in self._aliases.items() if target == language_key)

    def is_supported(self, language: str) -> bool:
        language_key = language.lower()
        return language_key in self._generators or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Raises:
            UnsupportedLanguage: If language not found
        """
        from .core.capabilities import LANGUAGE_CAPABILITIES

        language_key = self.resolve(language)
        generator_class = self._generators[language_key]
        capabilities = LANGUAGE_CAPABILITIES.get(language_key)

        info = {
            "language": language_key,
            "class": generator_class.__name__,
            "aliases": self.get_aliases_for_language(language_key),
            "module": generator_class.__module__,
        }
        if capabilities:
            info.update(capabilities.to_dict())
        return info


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in generators with their aliases."""
    from .languages.csharp import CSharpGenerator
    from .languages.dart import DartGenerator
    from .languages.go import GoGenerator
    from .languages.java import JavaGenerator
    from .languages.kotlin import KotlinGenerator
    from .languages.python import PythonGenerator
    from .languages.swift import SwiftGenerator
    from .languages.typescript import TypeScriptGenerator

    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
    registry.register("java", JavaGenerator)
    registry.register("dart", DartGenerator)
    registry.register("go", GoGenerator, aliases=["golang"])
    registry.register("python", PythonGenerator, aliases=["py"])
    registry.register("csharp", CSharpGenerator, aliases=["c#", "cs"])
    registry.register("swift", SwiftGenerator)
    registry.register("kotlin", KotlinGenerator, aliases=["kt"])


# Public API functions using the global registry


def create_generator(language: str, options: OptionsLike = None) -> CodeGenerator:
    """Create a generator instance from the global registry."""
    return get_registry().create_generator(language, options)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)
