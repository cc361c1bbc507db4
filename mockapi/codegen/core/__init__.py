"""
Core code generation components.

Provides the schema model, extraction, naming, configuration and the base
generator used by all language generators.
"""

from .capabilities import LANGUAGE_CAPABILITIES, LanguageCapabilities, get_capabilities
from .config import (
    ConfigError,
    ConfigManager,
    GeneratorOptions,
    NamingConvention,
    ObjectType,
    load_options,
    validate_options,
)
from .extractor import (
    ExtractionContext,
    ParseError,
    extract_objects,
    extract_value,
    infer_schema,
)
from .generator import (
    CodeGenerator,
    FieldSpec,
    GenerationError,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .naming import NameSanitizer, NamingCase
from .schema import ObjectDefinition, ObjectRole, ObjectSource, Schema, SchemaKind
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Schema model
    "Schema",
    "SchemaKind",
    "ObjectDefinition",
    "ObjectRole",
    "ObjectSource",
    # Extraction
    "ExtractionContext",
    "ParseError",
    "extract_objects",
    "extract_value",
    "infer_schema",
    # Base generator interface
    "CodeGenerator",
    "FieldSpec",
    "GeneratorError",
    "GenerationError",
    "GenerationResult",
    "generate_code",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    # Configuration system
    "ConfigError",
    "ConfigManager",
    "GeneratorOptions",
    "NamingConvention",
    "ObjectType",
    "load_options",
    "validate_options",
    # Capabilities
    "LANGUAGE_CAPABILITIES",
    "LanguageCapabilities",
    "get_capabilities",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
