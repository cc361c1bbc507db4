"""
Base generator interface for all code generation targets.

Defines the contract that all language generators implement: a pure
translation of one object Schema plus a type name into source text.
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ...logging_config import get_logger
from .config import GeneratorOptions
from .naming import NameSanitizer, NamingCase, convert_case
from .schema import Schema, SchemaKind
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class GenerationError(GeneratorError):
    """Raised when a generator fails to render one object."""

    def __init__(self, type_name: str, message: str):
        self.type_name = type_name
        super().__init__(f"Failed to generate '{type_name}': {message}")


@dataclass
class FieldSpec:
    """One rendered property of a generated type."""

    wire_name: str
    name: str
    type: str
    required: bool
    schema: Schema

    @property
    def renamed(self) -> bool:
        return self.name != self.wire_name


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    #: Native scalar for each primitive kind
    scalar_types: Dict[SchemaKind, str] = {}
    #: The language's untyped construct, used for null and unknown
    any_type: str = "any"
    #: String-keyed map used for objects without known properties
    dict_type: str = "Map"
    #: Field case used unless the snake_case convention is selected
    default_field_case: NamingCase = NamingCase.CAMEL_CASE
    #: Longest run of blank lines kept by format_code
    max_blank_lines: int = 1

    def __init__(self, options: Optional[GeneratorOptions] = None):
        """Initialize generator with options."""
        self.options = options or GeneratorOptions()
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go', '.py')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """Return the ``templates`` directory beside the generator module."""
        module = sys.modules[type(self).__module__]
        return Path(module.__file__).parent / "templates"

    @property
    def template_engine(self) -> TemplateEngine:
        return self._template_engine

    def generate(self, schema: Schema, type_name: str) -> str:
        """
        Generate source code for a single object type.

        Args:
            schema: Object schema to render
            type_name: Unformatted type name (naming options are applied)

        Returns:
            Self-contained source text for the type

        Raises:
            GenerationError: If the schema cannot be rendered
        """
        if not schema.is_object:
            raise GenerationError(
                type_name, f"expected an object schema, got {schema.kind.value}"
            )

        try:
            code = self.generate_type(schema, self.format_type_name(type_name), type_name)
        except GenerationError:
            raise
        except (TemplateError, KeyError, TypeError, ValueError) as e:
            logger.debug("Generation of %s failed", type_name, exc_info=True)
            raise GenerationError(type_name, str(e)) from e

        return self.format_code(code)

    @abstractmethod
    def generate_type(self, schema: Schema, class_name: str, type_name: str) -> str:
        """
        Render the declaration for one object schema.

        Args:
            schema: Object schema
            class_name: Already formatted type name
            type_name: Unformatted name, which is also the archive file stem

        Returns:
            Generated code for this type only
        """
        pass

    # Naming helpers

    def format_type_name(self, name: str) -> str:
        """Apply the naming convention, prefix and suffix to a type name."""
        formatted = convert_case(name, self.options.naming_convention.case) or "Root"
        return self.create_sanitizer().sanitize_type_name(
            f"{self.options.prefix}{formatted}{self.options.suffix}"
        )

    def field_case(self) -> NamingCase:
        if self.options.naming_convention.case is NamingCase.SNAKE_CASE:
            return NamingCase.SNAKE_CASE
        return self.default_field_case

    def create_sanitizer(self) -> NameSanitizer:
        """Create a fresh name sanitizer; subclasses add reserved words."""
        return NameSanitizer()

    def build_fields(self, schema: Schema, class_name: str) -> List[FieldSpec]:
        """Build field specs for every property of an object schema."""
        sanitizer = self.create_sanitizer()
        sanitizer.reset_used_names()

        fields = []
        for wire_name, prop in schema.properties.items():
            fields.append(
                FieldSpec(
                    wire_name=wire_name,
                    name=self.field_name(wire_name, sanitizer),
                    type=self.map_type(prop, class_name),
                    required=schema.is_required(wire_name),
                    schema=prop,
                )
            )
        return fields

    def field_name(self, wire_name: str, sanitizer: NameSanitizer) -> str:
        return sanitizer.sanitize_name(wire_name, self.field_case())

    def referenced_types(self, schema: Schema, type_name: str) -> List[Tuple[str, str]]:
        """
        Hoisted types referenced by an object's properties.

        Returns:
            (file stem, formatted type name) pairs in property order,
            without duplicates or the type itself
        """
        refs: List[Tuple[str, str]] = []

        def visit(prop: Schema):
            if prop.is_array:
                visit(prop.item_schema)
            elif prop.is_object and prop.ref and prop.ref != type_name:
                entry = (prop.ref, self.format_type_name(prop.ref))
                if entry not in refs:
                    refs.append(entry)

        for prop in schema.properties.values():
            visit(prop)
        return refs

    # Type mapping

    def map_type(self, schema: Schema, enclosing_name: str) -> str:
        """
        Translate a schema into this language's type expression.

        Objects hoisted by the extractor are referenced by their own type
        name; other objects with properties fall back to the enclosing type.
        """
        if schema.kind is SchemaKind.OBJECT:
            if schema.ref:
                return self.format_type_name(schema.ref)
            if not schema.properties:
                return self.dict_type
            return enclosing_name

        if schema.kind is SchemaKind.ARRAY:
            return self.array_type(self.map_type(schema.item_schema, enclosing_name))

        if schema.kind in self.scalar_types:
            return self.scalar_types[schema.kind]

        return self.any_type

    @abstractmethod
    def array_type(self, item_type: str) -> str:
        """Wrap an item type in the language's list type."""
        pass

    # Output helpers

    def doc_summary(self, class_name: str) -> Optional[str]:
        """Doc comment text for the type, or None when comments are off."""
        if not self.options.generate_comments:
            return None
        return f"{class_name} data transfer object."

    def uses_kind(self, fields: List[FieldSpec], kind: SchemaKind) -> bool:
        """Whether any field (or array item, at any depth) has the given kind."""

        def contains(schema: Schema) -> bool:
            if schema.kind is kind:
                return True
            return schema.is_array and contains(schema.item_schema)

        return any(contains(f.schema) for f in fields)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, collapses runs of blank lines and ends
        the unit with a single newline.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= self.max_blank_lines:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Optional[Exception] = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, schema: Schema, type_name: str
) -> GenerationResult:
    """
    Generate code for live preview, capturing failures in the result.

    Args:
        generator: Code generator instance
        schema: Object schema to render
        type_name: Name of the generated type

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    from .config import validate_options

    try:
        code = generator.generate(schema, type_name)
    except GeneratorError as e:
        logger.warning("%s", e)
        return GenerationResult.error(str(e), exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "type_name": generator.format_type_name(type_name),
        "field_count": len(schema.properties),
    }
    warnings = validate_options(generator.options, generator.language_name)
    return GenerationResult(code, warnings, metadata)
