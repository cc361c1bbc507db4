"""
Java code generator implementation.

Generates one class per object with Jackson annotations. Lombok replaces
the hand-written accessors, builder and value methods when enabled.
"""

from typing import Any, Dict, List

from ...core.generator import CodeGenerator, FieldSpec
from ...core.naming import NameSanitizer, NamingCase, to_pascal_case
from ...core.schema import Schema, SchemaKind
from .naming import create_java_sanitizer


class JavaGenerator(CodeGenerator):
    """Code generator for Java classes."""

    scalar_types = {
        SchemaKind.STRING: "String",
        SchemaKind.NUMBER: "Double",
        SchemaKind.BOOLEAN: "Boolean",
    }
    any_type = "Object"
    dict_type = "Map<String, Object>"
    default_field_case = NamingCase.CAMEL_CASE

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    def create_sanitizer(self) -> NameSanitizer:
        return create_java_sanitizer()

    def array_type(self, item_type: str) -> str:
        return f"List<{item_type}>"

    def generate_type(self, schema: Schema, class_name: str, type_name: str) -> str:
        fields = self.build_fields(schema, class_name)
        options = self.options
        lombok = options.use_lombok

        context = {
            "package": options.package_name,
            "imports": self._get_imports(fields),
            "class_name": class_name,
            "doc": self.doc_summary(class_name),
            "fields": [self._field_data(f) for f in fields],
            "annotations": options.use_annotations,
            "lombok": lombok,
            "validation": options.generate_validation,
            "null_checks": options.generate_null_checks,
            "builder": options.generate_builders,
            "accessors": not lombok,
            "factory": options.generate_factory_methods,
            "equals_and_hash": options.generate_equals_and_hash and not lombok,
            "to_string": options.generate_to_string and not lombok,
        }
        return self.render_template("class.java.j2", context)

    def _field_data(self, field: FieldSpec) -> Dict[str, Any]:
        accessor = to_pascal_case(field.name) or "Value"
        # getClass() is final on Object
        if accessor == "Class":
            accessor = "ClassValue"
        return {
            "name": field.name,
            "wire_name": field.wire_name,
            "type": field.type,
            "required": field.required,
            "getter": f"get{accessor}",
            "setter": f"set{accessor}",
        }

    def _get_imports(self, fields: List[FieldSpec]) -> List[str]:
        """Collect the import statements needed by the class body."""
        options = self.options
        lombok = options.use_lombok
        imports = set()

        if self.uses_kind(fields, SchemaKind.ARRAY):
            imports.add("java.util.List")
        if any(self.dict_type in f.type for f in fields):
            imports.add("java.util.Map")

        if options.use_annotations:
            imports.add("com.fasterxml.jackson.annotation.JsonIgnoreProperties")
            if fields:
                imports.add("com.fasterxml.jackson.annotation.JsonProperty")

        if lombok:
            imports.update(
                {"lombok.AllArgsConstructor", "lombok.Data", "lombok.NoArgsConstructor"}
            )
            if options.generate_builders:
                imports.add("lombok.Builder")
        elif options.generate_equals_and_hash:
            imports.add("java.util.Objects")

        if options.generate_validation and any(f.required for f in fields):
            imports.add("jakarta.validation.constraints.NotNull")
        if options.generate_null_checks and any(not f.required for f in fields):
            imports.add("jakarta.annotation.Nullable")

        # java.* first, then everything else
        return sorted(imports, key=lambda name: (not name.startswith("java."), name))
