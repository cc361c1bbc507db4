from mockapi.codegen import create_generator
from mockapi.codegen.core.schema import Schema, SchemaKind

STRING = Schema.scalar(SchemaKind.STRING)


class TestCSharpGenerator:
    def test_class_with_system_text_json(self, user_schema):
        code = create_generator("csharp").generate(user_schema, "User")
        assert code == (
            "using System.Text.Json.Serialization;\n"
            "\n"
            "#nullable enable\n"
            "\n"
            "namespace Models;\n"
            "\n"
            "public class User\n"
            "{\n"
            '    [JsonPropertyName("id")]\n'
            "    public double Id { get; set; }\n"
            "\n"
            '    [JsonPropertyName("name")]\n'
            "    public string Name { get; set; } = default!;\n"
            "}\n"
        )

    def test_optional_properties_are_nullable(self, optional_user_schema):
        code = create_generator("csharp").generate(optional_user_schema, "User")
        assert "    public double? Id { get; set; }" in code
        assert "    public string? Name { get; set; }\n" in code

    def test_newtonsoft(self, user_schema):
        generator = create_generator("csharp", {"use_system_text_json": False})
        code = generator.generate(user_schema, "User")
        assert "using Newtonsoft.Json;" in code
        assert '    [JsonProperty("id")]' in code

    def test_validation(self, user_schema):
        generator = create_generator("csharp", {"generate_validation": True})
        code = generator.generate(user_schema, "User")
        assert "using System.ComponentModel.DataAnnotations;" in code
        assert '    [JsonPropertyName("id")]\n    [Required]\n' in code

    def test_without_null_checks(self, user_schema):
        generator = create_generator("csharp", {"generate_null_checks": False})
        code = generator.generate(user_schema, "User")
        assert "#nullable" not in code
        assert "    public string Name { get; set; }\n" in code

    def test_collections_use_generic_namespace(self, tags_schema):
        code = create_generator("csharp").generate(tags_schema, "Tagged")
        assert "using System.Collections.Generic;" in code
        assert "    public List<object> Tags { get; set; } = default!;" in code

    def test_member_named_like_class(self):
        schema = Schema.object({"user": STRING}, required=["user"])
        code = create_generator("csharp").generate(schema, "User")
        assert "    public string UserValue { get; set; }" in code

    def test_object_members_are_escaped(self):
        schema = Schema.object({"toString": STRING}, required=["toString"])
        code = create_generator("csharp").generate(schema, "Item")
        assert "    public string ToString_ { get; set; }" in code
