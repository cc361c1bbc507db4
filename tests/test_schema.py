import pytest

from mockapi.codegen.core.schema import (
    ObjectDefinition,
    ObjectRole,
    ObjectSource,
    Schema,
    SchemaKind,
)

NUMBER = Schema.scalar(SchemaKind.NUMBER)
STRING = Schema.scalar(SchemaKind.STRING)


class TestSchemaInvariants:
    def test_object_requires_properties(self):
        with pytest.raises(ValueError):
            Schema(SchemaKind.OBJECT)

    def test_scalar_rejects_properties(self):
        with pytest.raises(ValueError):
            Schema(SchemaKind.STRING, properties={})

    def test_array_requires_item_schema(self):
        with pytest.raises(ValueError):
            Schema(SchemaKind.ARRAY)

    def test_properties_are_copied(self):
        props = {"id": NUMBER}
        schema = Schema.object(props, required=["id"])
        props["name"] = STRING
        assert list(schema.properties) == ["id"]

    def test_required_is_frozenset(self):
        schema = Schema.object({"id": NUMBER}, required=["id"])
        assert schema.required == frozenset({"id"})
        assert schema.is_required("id")


class TestSchemaDict:
    def test_from_dict_builds_nested_schema(self):
        schema = Schema.from_dict(
            {
                "type": "object",
                "properties": {
                    "id": {"type": "number"},
                    "tags": {"type": "array", "items": {"type": "string"}},
                },
                "required": ["id"],
            }
        )
        assert schema.kind is SchemaKind.OBJECT
        assert schema.properties["id"].kind is SchemaKind.NUMBER
        assert schema.properties["tags"].item_schema.kind is SchemaKind.STRING
        assert schema.required == frozenset({"id"})

    def test_unknown_type_becomes_unknown(self):
        assert Schema.from_dict({"type": "integer"}).kind is SchemaKind.UNKNOWN

    def test_to_dict_matches_from_dict(self):
        data = {
            "type": "object",
            "properties": {"id": {"type": "number"}},
            "required": ["id"],
        }
        assert Schema.from_dict(data).to_dict() == data

    def test_to_dict_keeps_ref_unless_excluded(self):
        schema = Schema.object({"id": NUMBER}, ref="UserResponse")
        assert schema.to_dict()["ref"] == "UserResponse"
        assert "ref" not in schema.to_dict(include_refs=False)


class TestFingerprint:
    def test_ignores_ref(self):
        schema = Schema.object({"id": NUMBER}, required=["id"])
        assert schema.fingerprint() == schema.with_ref("Other").fingerprint()

    def test_ignores_property_order(self):
        first = Schema.object({"id": NUMBER, "name": STRING})
        second = Schema.object({"name": STRING, "id": NUMBER})
        assert first.fingerprint() == second.fingerprint()

    def test_depends_on_required(self):
        required = Schema.object({"id": NUMBER}, required=["id"])
        optional = Schema.object({"id": NUMBER})
        assert required.fingerprint() != optional.fingerprint()


class TestObjectDefinition:
    source = ObjectSource(
        endpoint_id="ep", path="/users", method="GET", role=ObjectRole.RESPONSE
    )

    def test_rejects_non_object_schema(self):
        with pytest.raises(ValueError):
            ObjectDefinition(id="x", name="X", schema=STRING, source=self.source)

    def test_role_comes_from_source(self):
        definition = ObjectDefinition(
            id="x",
            name="UsersResponse",
            schema=Schema.object({}),
            source=self.source,
            dependencies=["a"],
        )
        assert definition.role is ObjectRole.RESPONSE
        assert definition.dependencies == ("a",)
        assert definition.to_dict()["source"]["type"] == "response"
