import pytest

from mockapi.codegen.core.extractor import (
    ExtractionContext,
    ParseError,
    extract_objects,
    extract_value,
    infer_schema,
)
from mockapi.codegen.core.schema import ObjectRole, SchemaKind
from mockapi.models import Endpoint, EndpointResponse


def _endpoint(body, path="/api/items", endpoint_id="ep"):
    return Endpoint(id=endpoint_id, path=path, response=EndpointResponse(body=body))


class TestInferSchema:
    def test_integers_and_floats_are_numbers(self):
        schema = infer_schema({"count": 3, "ratio": 0.5})
        assert schema.properties["count"].kind is SchemaKind.NUMBER
        assert schema.properties["ratio"].kind is SchemaKind.NUMBER

    def test_bool_is_not_number(self):
        assert infer_schema(True).kind is SchemaKind.BOOLEAN

    def test_null_property_is_not_required(self):
        schema = infer_schema({"a": None, "b": "x"})
        assert schema.properties["a"].kind is SchemaKind.NULL
        assert schema.required == frozenset({"b"})

    def test_empty_array_has_unknown_items(self):
        schema = infer_schema([])
        assert schema.item_schema.kind is SchemaKind.UNKNOWN

    def test_array_uses_first_element(self):
        schema = infer_schema([1, "two"])
        assert schema.item_schema.kind is SchemaKind.NUMBER


class TestExtractObjects:
    def test_nested_array_objects_are_hoisted(self, users_endpoint):
        objects = extract_objects([users_endpoint])

        assert [o.name for o in objects] == ["UsersResponse", "AddressResponse"]
        root, address = objects
        assert root.dependencies == (address.id,)
        assert set(root.schema.properties) == {"id", "name", "addresses"}
        assert root.schema.properties["id"].kind is SchemaKind.NUMBER
        assert root.schema.properties["addresses"].item_schema.ref == "AddressResponse"
        assert address.schema.properties["street"].kind is SchemaKind.STRING
        assert address.dependencies == ()

    def test_ids_follow_endpoint_role_fingerprint_counter(self, users_endpoint):
        root = extract_objects([users_endpoint])[0]
        prefix, counter = root.id.rsplit("_", 1)
        assert prefix.startswith("ep1_response_")
        assert counter == "0"

    def test_extraction_is_repeatable(self, users_endpoint):
        first = extract_objects([users_endpoint])
        second = extract_objects([users_endpoint])
        assert [o.id for o in first] == [o.id for o in second]
        assert first == second

    def test_does_not_modify_endpoints(self, users_endpoint):
        body = users_endpoint.response.body
        extract_objects([users_endpoint])
        assert users_endpoint.response.body == body

    def test_identical_nested_objects_are_deduplicated(self):
        endpoint = _endpoint(
            '{"billing": {"city": "Oslo"}, "shipping": {"city": "Bergen"}}',
            path="/orders",
        )
        objects = extract_objects([endpoint])

        assert [o.name for o in objects] == ["OrdersResponse", "BillingResponse"]
        root = objects[0]
        assert root.schema.properties["shipping"].ref == "BillingResponse"
        assert len(root.dependencies) == 1

    def test_request_bodies(self, login_endpoint):
        objects = extract_objects([login_endpoint])
        assert [(o.name, o.role) for o in objects] == [
            ("LoginResponse", ObjectRole.RESPONSE),
            ("LoginRequest", ObjectRole.REQUEST),
        ]
        assert objects[1].source.method == "POST"

    def test_roles_filter(self, login_endpoint):
        objects = extract_objects([login_endpoint], roles=["request"])
        assert [o.name for o in objects] == ["LoginRequest"]

    def test_path_parameters_are_skipped_in_names(self):
        objects = extract_objects([_endpoint('{"id": 1}', path="/users/:id")])
        assert objects[0].name == "UsersResponse"

    def test_invalid_json_is_recorded_and_skipped(self, users_endpoint):
        broken = _endpoint("{not json", endpoint_id="bad")
        context = ExtractionContext()

        objects = extract_objects([broken, users_endpoint], context=context)

        assert [o.name for o in objects] == ["UsersResponse", "AddressResponse"]
        assert len(context.errors) == 1
        assert isinstance(context.errors[0], ParseError)
        assert context.errors[0].endpoint_id == "bad"

    def test_reused_context_starts_clean(self):
        context = ExtractionContext()
        alpha = _endpoint('{"id": 1}', path="/api/alpha", endpoint_id="a")
        extract_objects([_endpoint("{broken", endpoint_id="bad"), alpha], context=context)

        beta = _endpoint('{"id": 1}', path="/api/beta", endpoint_id="b")
        objects = extract_objects([beta], context=context)

        assert [o.name for o in objects] == ["BetaResponse"]
        assert objects[0].id.endswith("_0")
        assert context.errors == []
        assert context.counter == 1

    def test_non_object_root_is_skipped(self):
        assert extract_objects([_endpoint("[1, 2, 3]")]) == []

    def test_empty_body_is_skipped(self):
        assert extract_objects([_endpoint("   ")]) == []

    def test_empty_nested_object_is_not_hoisted(self):
        objects = extract_objects([_endpoint('{"meta": {}}')])
        assert len(objects) == 1
        assert objects[0].schema.properties["meta"].ref is None

    def test_empty_array_property(self):
        root = extract_objects([_endpoint('{"tags": []}')])[0]
        assert root.schema.properties["tags"].item_schema.kind is SchemaKind.UNKNOWN


class TestExtractValue:
    def test_names_root_after_base_name(self):
        objects = extract_value({"id": 1, "owner": {"name": "x"}}, "User")
        assert [o.name for o in objects] == ["UserResponse", "OwnerResponse"]

    def test_request_role(self):
        objects = extract_value({"id": 1}, "user", role=ObjectRole.REQUEST)
        assert objects[0].name == "UserRequest"

    @pytest.mark.parametrize("value", [[1, 2], "text", 3, None])
    def test_non_objects_yield_nothing(self, value):
        assert extract_value(value) == []
