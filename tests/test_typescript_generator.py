import pytest

from mockapi.codegen import create_generator
from mockapi.codegen.core.schema import Schema, SchemaKind

STRING = Schema.scalar(SchemaKind.STRING)


@pytest.fixture
def address_ref():
    return Schema.object({"street": STRING}, required=["street"], ref="AddressResponse")


class TestTypeScriptGenerator:
    def test_required_properties(self, user_schema):
        code = create_generator("typescript").generate(user_schema, "User")
        assert "export interface User {\n  id: number;\n  name: string;\n}" in code

    def test_optional_properties(self, optional_user_schema):
        code = create_generator("typescript").generate(optional_user_schema, "User")
        assert "  id?: number | null;" in code
        assert "  name?: string | null;" in code

    def test_optional_without_null_checks(self, optional_user_schema):
        generator = create_generator("typescript", {"generate_null_checks": False})
        code = generator.generate(optional_user_schema, "User")
        assert "  id?: number;" in code

    def test_wire_names_are_kept(self):
        schema = Schema.object({"first_name": STRING, "content-type": STRING})
        code = create_generator("typescript").generate(schema, "Header")
        assert "  first_name?: string | null;" in code
        assert "  'content-type'?: string | null;" in code
        assert "JsonKeys" not in code

    def test_snake_case_convention_renames_and_maps_keys(self):
        schema = Schema.object({"firstName": STRING}, required=["firstName"])
        generator = create_generator("typescript", {"naming_convention": "snake_case"})
        code = generator.generate(schema, "UserProfile")
        assert "export interface user_profile {" in code
        assert "  first_name: string;" in code
        assert "export const user_profileJsonKeys = {\n  first_name: 'firstName',\n} as const;" in code

    def test_referenced_types_are_imported(self, address_ref):
        schema = Schema.object(
            {"address": address_ref, "previous": Schema.array(address_ref)},
            required=["address", "previous"],
        )
        code = create_generator("typescript").generate(schema, "UserResponse")
        assert code.count("import { AddressResponse } from './AddressResponse';") == 1
        assert "  address: AddressResponse;" in code
        assert "  previous: AddressResponse[];" in code

    def test_empty_object_property_is_record(self):
        schema = Schema.object({"meta": Schema.object({})}, required=["meta"])
        code = create_generator("typescript").generate(schema, "Page")
        assert "  meta: Record<string, any>;" in code

    def test_type_guard(self, user_schema):
        generator = create_generator("typescript", {"generate_validation": True})
        code = generator.generate(user_schema, "User")
        assert "export function isUser(value: unknown): value is User {" in code
        assert "typeof record['id'] === 'number' &&" in code
        assert "typeof record['name'] === 'string'" in code

    def test_factory(self, user_schema):
        generator = create_generator("typescript", {"generate_factory_methods": True})
        code = generator.generate(user_schema, "User")
        assert "export function createUser(overrides: Partial<User> = {}): User {" in code
        assert "    id: 0,\n    name: '',\n    ...overrides," in code

    def test_type_guard_checks_renamed_properties(self):
        schema = Schema.object(
            {"userId": Schema.scalar(SchemaKind.NUMBER), "extra": Schema.scalar(SchemaKind.NULL)},
            required=["userId", "extra"],
        )
        generator = create_generator(
            "typescript", {"naming_convention": "snake_case", "generate_validation": True}
        )
        code = generator.generate(schema, "User")
        assert "  user_id: number;" in code
        assert "typeof record['user_id'] === 'number' &&" in code
        assert "'extra' in record" in code
        assert "record['userId']" not in code
