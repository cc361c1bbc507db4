"""
Mock API code generation module.

Extracts object schemas from endpoint bodies and generates DTO source in
eight languages, individually or as a ZIP archive.
"""

import json
from typing import Any, Dict

from .core.config import ConfigError, ConfigManager, GeneratorOptions, load_options
from .core.extractor import ParseError, extract_objects, extract_value
from .core.generator import (
    CodeGenerator,
    GenerationError,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .core.schema import ObjectDefinition, ObjectRole, Schema, SchemaKind
from .packager import build_archive, generate_zip, order_by_dependency
from .registry import (
    GeneratorRegistry,
    RegistryError,
    UnsupportedLanguage,
    create_generator,
    get_language_info,
    get_registry,
    list_supported_languages,
)


def quick_generate(
    json_data: Any, language: str = "typescript", type_name: str = "Root", **options
) -> Dict[str, str]:
    """
    Quick code generation from a JSON example.

    Args:
        json_data: JSON object (dict or JSON text)
        language: Target language
        type_name: Base name for the root type
        **options: Generator option overrides

    Returns:
        Mapping of file name to generated code, dependencies first

    Raises:
        GenerationError: If any object fails to render
    """
    if isinstance(json_data, str):
        json_data = json.loads(json_data)

    objects = extract_value(json_data, type_name)
    generator = create_generator(language, options or None)

    return {
        f"{obj.name}{generator.file_extension}": generator.generate(obj.schema, obj.name)
        for obj in order_by_dependency(objects)
    }


__all__ = [
    "CodeGenerator",
    "ConfigError",
    "ConfigManager",
    "GenerationError",
    "GenerationResult",
    "GeneratorError",
    "GeneratorOptions",
    "GeneratorRegistry",
    "ObjectDefinition",
    "ObjectRole",
    "ParseError",
    "RegistryError",
    "Schema",
    "SchemaKind",
    "UnsupportedLanguage",
    "build_archive",
    "create_generator",
    "extract_objects",
    "extract_value",
    "generate_code",
    "generate_zip",
    "get_language_info",
    "get_registry",
    "list_supported_languages",
    "load_options",
    "order_by_dependency",
    "quick_generate",
]
