"""
TypeScript code generator implementation.

Properties keep their wire names unless the snake_case convention is
selected; keys that are not valid identifiers are quoted.
"""

import re
from typing import Any, Dict, List

from ...core.generator import CodeGenerator, FieldSpec
from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import Schema, SchemaKind

IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

TYPEOF_NAMES = {
    SchemaKind.STRING: "string",
    SchemaKind.NUMBER: "number",
    SchemaKind.BOOLEAN: "boolean",
}

DEFAULT_VALUES = {
    SchemaKind.STRING: "''",
    SchemaKind.NUMBER: "0",
    SchemaKind.BOOLEAN: "false",
    SchemaKind.ARRAY: "[]",
}


def property_key(name: str) -> str:
    """Render a property name, quoting it when it is not an identifier."""
    if IDENTIFIER.match(name):
        return name
    return _string_literal(name)


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces."""

    scalar_types = {
        SchemaKind.STRING: "string",
        SchemaKind.NUMBER: "number",
        SchemaKind.BOOLEAN: "boolean",
    }
    any_type = "any"
    dict_type = "Record<string, any>"
    default_field_case = NamingCase.ORIGINAL

    @property
    def language_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    def array_type(self, item_type: str) -> str:
        if " " in item_type:
            return f"Array<{item_type}>"
        return f"{item_type}[]"

    def field_name(self, wire_name: str, sanitizer: NameSanitizer) -> str:
        if self.field_case() is NamingCase.ORIGINAL:
            return wire_name
        return super().field_name(wire_name, sanitizer)

    def generate_type(self, schema: Schema, class_name: str, type_name: str) -> str:
        fields = self.build_fields(schema, class_name)
        options = self.options

        context = {
            "class_name": class_name,
            "doc": self.doc_summary(class_name),
            "imports": [
                {"name": name, "module": stem}
                for stem, name in self.referenced_types(schema, type_name)
            ],
            "fields": [self._field_data(f) for f in fields],
            "json_keys": options.use_annotations and any(f.renamed for f in fields),
            "type_guard": self._type_guard_checks(fields)
            if options.generate_validation
            else None,
            "factory": options.generate_factory_methods,
            "comments": options.generate_comments,
        }
        return self.render_template("interface.ts.j2", context)

    def _field_data(self, field: FieldSpec) -> Dict[str, Any]:
        field_type = field.type
        if not field.required and self.options.generate_null_checks:
            field_type = f"{field_type} | null"

        return {
            "key": property_key(field.name),
            "wire_name": field.wire_name,
            "type": field_type,
            "optional": not field.required,
            "default": self._default_value(field) if field.required else None,
        }

    def _default_value(self, field: FieldSpec) -> str:
        kind = field.schema.kind
        if kind in DEFAULT_VALUES:
            return DEFAULT_VALUES[kind]
        if kind is SchemaKind.OBJECT:
            return f"{{}} as {field.type}"
        return "null"

    def _type_guard_checks(self, fields: List[FieldSpec]) -> List[str]:
        """Runtime checks for every required property, by interface name."""
        checks = []
        for field in fields:
            if not field.required:
                continue
            access = f"record[{_string_literal(field.name)}]"
            kind = field.schema.kind
            if kind in TYPEOF_NAMES:
                checks.append(f"typeof {access} === '{TYPEOF_NAMES[kind]}'")
            elif kind is SchemaKind.ARRAY:
                checks.append(f"Array.isArray({access})")
            elif kind is SchemaKind.OBJECT:
                checks.append(f"typeof {access} === 'object' && {access} !== null")
            else:
                checks.append(f"{_string_literal(field.name)} in record")
        return checks


def _string_literal(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"
