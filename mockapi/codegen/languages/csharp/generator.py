"""
C# code generator implementation.

Generates a class with auto-properties per object. Optional properties
are nullable when null checks are enabled.
"""

from typing import Any, Dict, List

from ...core.generator import CodeGenerator, FieldSpec
from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import Schema, SchemaKind
from .naming import create_csharp_sanitizer

VALUE_TYPES = {"double", "bool"}


class CSharpGenerator(CodeGenerator):
    """Code generator for C# classes."""

    scalar_types = {
        SchemaKind.STRING: "string",
        SchemaKind.NUMBER: "double",
        SchemaKind.BOOLEAN: "bool",
    }
    any_type = "object"
    dict_type = "Dictionary<string, object>"
    default_field_case = NamingCase.PASCAL_CASE

    @property
    def language_name(self) -> str:
        return "csharp"

    @property
    def file_extension(self) -> str:
        return ".cs"

    def create_sanitizer(self) -> NameSanitizer:
        return create_csharp_sanitizer()

    def array_type(self, item_type: str) -> str:
        return f"List<{item_type}>"

    def generate_type(self, schema: Schema, class_name: str, type_name: str) -> str:
        fields = self.build_fields(schema, class_name)
        options = self.options

        properties = [self._property_data(f, class_name) for f in fields]
        context = {
            "usings": self._get_usings(fields),
            "namespace": options.package_name,
            "class_name": class_name,
            "doc": self.doc_summary(class_name),
            "properties": properties,
            "nullable": options.generate_null_checks,
            "annotations": options.use_annotations,
            "attribute": (
                "JsonPropertyName" if options.use_system_text_json else "JsonProperty"
            ),
            "validation": options.generate_validation,
        }
        return self.render_template("class.cs.j2", context)

    def _property_data(self, field: FieldSpec, class_name: str) -> Dict[str, Any]:
        name = field.name
        # Members may not share the enclosing type's name
        if name == class_name:
            name = f"{name}Value"

        prop_type = field.type
        initializer = None
        if self.options.generate_null_checks:
            if not field.required:
                prop_type = f"{prop_type}?"
            elif prop_type not in VALUE_TYPES:
                initializer = "default!"

        return {
            "name": name,
            "wire_name": field.wire_name,
            "type": prop_type,
            "required": field.required,
            "initializer": initializer,
        }

    def _get_usings(self, fields: List[FieldSpec]) -> List[str]:
        usings = set()
        if any("List<" in f.type or "Dictionary<" in f.type for f in fields):
            usings.add("System.Collections.Generic")
        if self.options.use_annotations and fields:
            if self.options.use_system_text_json:
                usings.add("System.Text.Json.Serialization")
            else:
                usings.add("Newtonsoft.Json")
        if self.options.generate_validation and any(f.required for f in fields):
            usings.add("System.ComponentModel.DataAnnotations")
        return sorted(usings)
