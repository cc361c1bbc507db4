"""
Python code generator implementation.

Generates a pydantic model, dataclass or TypedDict per object. Field
names are snake_case; the wire name is kept as an alias when it differs.
"""

import keyword
import re
from typing import Any, Dict, List

from ...core.generator import CodeGenerator, FieldSpec
from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import Schema, SchemaKind
from .config import PythonConfig, PythonStyle
from .naming import create_python_sanitizer


class PythonGenerator(CodeGenerator):
    """Code generator for Python dataclasses, Pydantic models, and TypedDict."""

    scalar_types = {
        SchemaKind.STRING: "str",
        SchemaKind.NUMBER: "float",
        SchemaKind.BOOLEAN: "bool",
    }
    any_type = "Any"
    dict_type = "Dict[str, Any]"
    default_field_case = NamingCase.SNAKE_CASE
    max_blank_lines = 2

    def __init__(self, options=None):
        super().__init__(options)
        self.python_config = PythonConfig.from_options(self.options)

    @property
    def language_name(self) -> str:
        return "python"

    @property
    def file_extension(self) -> str:
        return ".py"

    def create_sanitizer(self) -> NameSanitizer:
        return create_python_sanitizer()

    def array_type(self, item_type: str) -> str:
        return f"List[{item_type}]"

    def generate_type(self, schema: Schema, class_name: str, type_name: str) -> str:
        style = self.python_config.style
        fields = self.build_fields(schema, class_name)
        if style is PythonStyle.DATACLASS:
            # Fields with defaults must follow those without
            fields.sort(key=lambda f: not f.required)

        field_data = [self._field_data(f) for f in fields]
        use_alias = self.options.use_annotations and any(f.renamed for f in fields)

        context = {
            "class_name": class_name,
            "doc": self.doc_summary(class_name),
            "imports": self._get_imports(fields, style, use_alias),
            "ref_imports": self.referenced_types(schema, type_name),
            "fields": field_data,
            "use_alias": use_alias,
            "frozen": self.python_config.dataclass_frozen,
            "extra_forbid": self.python_config.pydantic_extra_forbid,
            "factory": self.options.generate_factory_methods,
            "functional": not all(
                f.wire_name.isidentifier() and not keyword.iskeyword(f.wire_name)
                for f in fields
            ),
        }
        return self.render_template(self.python_config.template_name, context)

    def _field_data(self, field: FieldSpec) -> Dict[str, Any]:
        optional_type = field.type
        if not field.required and self.options.generate_null_checks:
            optional_type = f"Optional[{field.type}]"

        if field.required:
            access = f"data[{field.wire_name!r}]"
        else:
            access = f"data.get({field.wire_name!r})"

        return {
            "name": field.name,
            "wire_name": field.wire_name,
            "renamed": field.renamed,
            "type": field.type if field.required else optional_type,
            "required": field.required,
            "from_dict": self._decode(field.schema, access, not field.required),
            "dict_type": (
                field.type if field.required else f"NotRequired[{optional_type}]"
            ),
        }

    def _decode(self, schema: Schema, expr: str, optional: bool) -> str:
        """Expression building a field value from its parsed JSON value."""
        if schema.is_object and schema.ref:
            decoded = f"{self.format_type_name(schema.ref)}.from_dict({expr})"
            if optional:
                return f"{decoded} if {expr} is not None else None"
            return decoded

        if schema.is_array and self._needs_decoding(schema.item_schema):
            item = self._decode(schema.item_schema, "item", False)
            decoded = f"[{item} for item in {expr}]"
            if optional:
                return f"{decoded} if {expr} is not None else None"
            return decoded

        return expr

    def _needs_decoding(self, schema: Schema) -> bool:
        if schema.is_array:
            return self._needs_decoding(schema.item_schema)
        return schema.is_object and bool(schema.ref)

    def _get_imports(
        self, fields: List[FieldSpec], style: PythonStyle, use_alias: bool
    ) -> List[str]:
        """Get required imports based on types used."""
        rendered = [f.type for f in fields]
        typing_names = {
            name
            for name in ("Any", "Dict", "List")
            if any(re.search(rf"\b{name}\b", t) for t in rendered)
        }
        optional_fields = any(not f.required for f in fields)

        if self.options.generate_null_checks and optional_fields:
            typing_names.add("Optional")
        if style is PythonStyle.TYPEDDICT:
            typing_names.add("TypedDict")
            if optional_fields:
                typing_names.add("NotRequired")
        elif self.options.generate_factory_methods:
            typing_names.update({"Any", "Dict"})

        imports = []
        if style is PythonStyle.DATACLASS:
            names = "dataclass, field" if use_alias else "dataclass"
            imports.append(f"from dataclasses import {names}")
        if typing_names:
            imports.append(f"from typing import {', '.join(sorted(typing_names))}")
        if style is PythonStyle.PYDANTIC:
            names = ["BaseModel"]
            if use_alias or self.python_config.pydantic_extra_forbid:
                names.append("ConfigDict")
            if use_alias:
                names.append("Field")
            imports.append(f"from pydantic import {', '.join(names)}")

        return imports
