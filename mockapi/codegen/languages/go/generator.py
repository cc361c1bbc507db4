"""
Go code generator implementation.

Generates one exported struct per object. Optional scalar and struct
fields become pointers and their tags carry ``omitempty``.
"""

from typing import Any, Dict, List

from ....logging_config import get_logger
from ...core.generator import CodeGenerator, FieldSpec
from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import Schema, SchemaKind
from .naming import create_go_sanitizer, package_clause_problems

logger = get_logger(__name__)

DEFAULT_PACKAGE = "models"


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with JSON tags."""

    scalar_types = {
        SchemaKind.STRING: "string",
        SchemaKind.NUMBER: "float64",
        SchemaKind.BOOLEAN: "bool",
    }
    any_type = "interface{}"
    dict_type = "map[string]interface{}"
    default_field_case = NamingCase.PASCAL_CASE

    @property
    def language_name(self) -> str:
        return "go"

    @property
    def file_extension(self) -> str:
        return ".go"

    def create_sanitizer(self) -> NameSanitizer:
        return create_go_sanitizer()

    def field_case(self) -> NamingCase:
        # Unexported fields are invisible to encoding/json
        return NamingCase.PASCAL_CASE

    def array_type(self, item_type: str) -> str:
        return f"[]{item_type}"

    @property
    def package_name(self) -> str:
        return self.options.package_name or DEFAULT_PACKAGE

    def generate_type(self, schema: Schema, class_name: str, type_name: str) -> str:
        for problem in package_clause_problems(self.package_name):
            logger.warning("Package %r: %s", self.package_name, problem)

        fields = [self._field_data(f) for f in self.build_fields(schema, class_name)]
        name_width = max((len(f["name"]) for f in fields), default=0)
        type_width = max((len(f["type"]) for f in fields), default=0)
        for f in fields:
            f["padded_name"] = f["name"].ljust(name_width)
            f["padded_type"] = f["type"].ljust(type_width)

        context = {
            "package_name": self.package_name,
            "struct_name": class_name,
            "doc": self.doc_summary(class_name),
            "fields": fields,
            "factory": self._factory_params(fields)
            if self.options.generate_factory_methods
            else None,
        }
        return self.render_template("struct.go.j2", context)

    def _field_data(self, field: FieldSpec) -> Dict[str, Any]:
        field_type = field.type
        if not field.required and self._is_pointable(field.schema):
            field_type = f"*{field_type}"

        return {
            "name": field.name,
            "type": field_type,
            "required": field.required,
            "json_tag": self._json_tag(field),
        }

    def _is_pointable(self, schema: Schema) -> bool:
        """Slices, maps and interfaces are already nilable."""
        if schema.kind in self.scalar_types:
            return True
        return schema.is_object and bool(schema.ref)

    def _json_tag(self, field: FieldSpec) -> str:
        tag_content = field.wire_name.replace("\\", "\\\\").replace('"', '\\"')
        if not field.required:
            tag_content += ",omitempty"

        tag = f'json:"{tag_content}"'
        if self.options.generate_validation and field.required:
            tag += ' validate:"required"'
        return f"`{tag}`"

    def _factory_params(self, fields: List[Dict[str, Any]]) -> List[Dict[str, str]]:
        """Constructor parameters, one per required field."""
        sanitizer = create_go_sanitizer()
        return [
            {
                "param": sanitizer.sanitize_name(f["name"], NamingCase.CAMEL_CASE),
                "field": f["name"],
                "type": f["type"],
            }
            for f in fields
            if f["required"]
        ]
