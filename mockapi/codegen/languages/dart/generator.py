"""
Dart code generator implementation.

Every class gets ``fromJson``/``toJson``: delegated to json_serializable
when enabled, otherwise written out field by field.
"""

from typing import Any, Dict

from ...core.generator import CodeGenerator, FieldSpec
from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import Schema, SchemaKind
from .naming import create_dart_sanitizer

JSON_MAP = "Map<String, dynamic>"


def dart_string(value: str) -> str:
    """Single-quoted Dart string literal with interpolation disabled."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$")
    return f"'{escaped}'"


class DartGenerator(CodeGenerator):
    """Code generator for Dart classes."""

    scalar_types = {
        SchemaKind.STRING: "String",
        SchemaKind.NUMBER: "double",
        SchemaKind.BOOLEAN: "bool",
    }
    any_type = "dynamic"
    dict_type = JSON_MAP
    default_field_case = NamingCase.CAMEL_CASE

    @property
    def language_name(self) -> str:
        return "dart"

    @property
    def file_extension(self) -> str:
        return ".dart"

    def create_sanitizer(self) -> NameSanitizer:
        return create_dart_sanitizer()

    def array_type(self, item_type: str) -> str:
        return f"List<{item_type}>"

    def generate_type(self, schema: Schema, class_name: str, type_name: str) -> str:
        fields = self.build_fields(schema, class_name)
        options = self.options
        serializable = options.use_json_serializable

        context = {
            "class_name": class_name,
            "file_stem": type_name,
            "doc": self.doc_summary(class_name),
            "imports": [stem for stem, _ in self.referenced_types(schema, type_name)],
            "fields": [self._field_data(f) for f in fields],
            "json_serializable": serializable,
            "json_keys": serializable and options.use_annotations,
            "copy_with": options.generate_factory_methods,
            "equals_and_hash": options.generate_equals_and_hash,
            "to_string": options.generate_to_string,
        }
        return self.render_template("class.dart.j2", context)

    def _field_data(self, field: FieldSpec) -> Dict[str, Any]:
        nullable = not (field.required and self.options.generate_null_checks)
        # dynamic already admits null
        if field.type == self.any_type:
            declared = field.type
        else:
            declared = f"{field.type}?" if nullable else field.type

        access = f"json[{dart_string(field.wire_name)}]"
        if declared.endswith("?") or declared == self.any_type:
            param_type = declared
        else:
            param_type = f"{declared}?"

        return {
            "name": field.name,
            "wire_name": field.wire_name,
            "wire_literal": dart_string(field.wire_name),
            "renamed": field.renamed,
            "type": declared,
            "param_type": param_type,
            "nullable": nullable,
            "decode": self._decode(field.schema, access, nullable),
            "encode": self._encode(field.schema, field.name, nullable),
        }

    def _decode(self, schema: Schema, expr: str, nullable: bool) -> str:
        """Expression converting a decoded JSON value to the field type."""
        q = "?" if nullable else ""
        kind = schema.kind

        if kind is SchemaKind.STRING:
            return f"{expr} as String{q}"
        if kind is SchemaKind.NUMBER:
            return f"({expr} as num{q}){q}.toDouble()"
        if kind is SchemaKind.BOOLEAN:
            return f"{expr} as bool{q}"
        if kind is SchemaKind.OBJECT:
            if not schema.ref:
                return f"{expr} as {JSON_MAP}{q}"
            decoded = f"{self.format_type_name(schema.ref)}.fromJson({expr} as {JSON_MAP})"
            return f"{expr} == null ? null : {decoded}" if nullable else decoded
        if kind is SchemaKind.ARRAY:
            item = self._decode(schema.item_schema, "e", False)
            return f"({expr} as List<dynamic>{q}){q}.map((e) => {item}).toList()"
        return expr

    def _encode(self, schema: Schema, expr: str, nullable: bool) -> str:
        """Expression converting a field value back to plain JSON."""
        q = "?" if nullable else ""
        if schema.is_object and schema.ref:
            return f"{expr}{q}.toJson()"
        if schema.is_array and self._needs_encoding(schema.item_schema):
            item = self._encode(schema.item_schema, "e", False)
            return f"{expr}{q}.map((e) => {item}).toList()"
        return expr

    def _needs_encoding(self, schema: Schema) -> bool:
        if schema.is_array:
            return self._needs_encoding(schema.item_schema)
        return schema.is_object and bool(schema.ref)
