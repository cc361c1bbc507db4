"""
Kotlin code generator implementation.

Generates a data class per object. Optional properties are nullable and
default to null when null checks are enabled; otherwise every property is.
"""

from typing import Any, Dict

from ...core.generator import CodeGenerator, FieldSpec
from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import Schema, SchemaKind
from .naming import create_kotlin_sanitizer


def kotlin_string(value: str) -> str:
    """Double-quoted Kotlin string literal with templates disabled."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
    return f'"{escaped}"'


class KotlinGenerator(CodeGenerator):
    """Code generator for Kotlin data classes."""

    scalar_types = {
        SchemaKind.STRING: "String",
        SchemaKind.NUMBER: "Double",
        SchemaKind.BOOLEAN: "Boolean",
    }
    any_type = "Any"
    dict_type = "Map<String, Any>"
    default_field_case = NamingCase.CAMEL_CASE

    @property
    def language_name(self) -> str:
        return "kotlin"

    @property
    def file_extension(self) -> str:
        return ".kt"

    def create_sanitizer(self) -> NameSanitizer:
        return create_kotlin_sanitizer()

    def array_type(self, item_type: str) -> str:
        return f"List<{item_type}>"

    def generate_type(self, schema: Schema, class_name: str, type_name: str) -> str:
        fields = self.build_fields(schema, class_name)
        serialized_names = self.options.use_annotations and any(
            f.renamed for f in fields
        )

        context = {
            "package": self.options.package_name,
            "class_name": class_name,
            "doc": self.doc_summary(class_name),
            "properties": [self._property_data(f) for f in fields],
            "serialized_names": serialized_names,
        }
        return self.render_template("data_class.kt.j2", context)

    def _property_data(self, field: FieldSpec) -> Dict[str, Any]:
        nullable = not (field.required and self.options.generate_null_checks)
        prop_type = f"{field.type}?" if nullable else field.type
        return {
            "name": field.name,
            "wire_literal": kotlin_string(field.wire_name),
            "renamed": field.renamed,
            "type": prop_type,
            "default": "null" if nullable else None,
        }
