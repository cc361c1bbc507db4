"""
Swift code generator implementation.

Generates a Codable struct per object, with a CodingKeys enum when any
property name differs from its JSON key.
"""

from typing import Any, Dict, List

from ...core.generator import CodeGenerator, FieldSpec
from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import Schema, SchemaKind
from .naming import create_swift_sanitizer


class SwiftGenerator(CodeGenerator):
    """Code generator for Swift Codable structs."""

    scalar_types = {
        SchemaKind.STRING: "String",
        SchemaKind.NUMBER: "Double",
        SchemaKind.BOOLEAN: "Bool",
    }
    any_type = "Any"
    dict_type = "[String: Any]"
    default_field_case = NamingCase.CAMEL_CASE

    @property
    def language_name(self) -> str:
        return "swift"

    @property
    def file_extension(self) -> str:
        return ".swift"

    def create_sanitizer(self) -> NameSanitizer:
        if self.options.generate_to_string:
            return create_swift_sanitizer({"description"})
        return create_swift_sanitizer()

    def array_type(self, item_type: str) -> str:
        return f"[{item_type}]"

    def generate_type(self, schema: Schema, class_name: str, type_name: str) -> str:
        fields = self.build_fields(schema, class_name)
        options = self.options

        context = {
            "struct_name": class_name,
            "doc": self.doc_summary(class_name),
            "conformances": self._conformances(),
            "properties": [self._property_data(f) for f in fields],
            "coding_keys": options.use_annotations and any(f.renamed for f in fields),
            "to_string": options.generate_to_string,
        }
        return self.render_template("struct.swift.j2", context)

    def _conformances(self) -> List[str]:
        conformances = ["Codable"]
        if self.options.generate_equals_and_hash:
            conformances.append("Hashable")
        if self.options.generate_to_string:
            conformances.append("CustomStringConvertible")
        return conformances

    def _property_data(self, field: FieldSpec) -> Dict[str, Any]:
        prop_type = field.type if field.required else f"{field.type}?"
        return {
            "name": field.name,
            "wire_name": field.wire_name,
            "renamed": field.renamed,
            "type": prop_type,
        }
