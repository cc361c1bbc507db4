from mockapi.codegen import create_generator
from mockapi.codegen.core.schema import Schema, SchemaKind

STRING = Schema.scalar(SchemaKind.STRING)


class TestJavaGenerator:
    def test_class_with_jackson_annotations(self, user_schema):
        code = create_generator("java").generate(user_schema, "User")
        assert code.startswith("package com.example.dto;\n")
        assert "@JsonIgnoreProperties(ignoreUnknown = true)\npublic class User {" in code
        assert '    @JsonProperty("id")\n    private Double id;' in code
        assert "    private String name;" in code
        assert "    public Double getId() {" in code
        assert "    public void setName(String name) {" in code

    def test_optional_fields_are_nullable(self, optional_user_schema):
        code = create_generator("java").generate(optional_user_schema, "User")
        assert "import jakarta.annotation.Nullable;" in code
        assert "    @Nullable\n    private Double id;" in code

    def test_no_annotations(self, user_schema):
        generator = create_generator("java", {"use_annotations": False})
        code = generator.generate(user_schema, "User")
        assert "@JsonProperty" not in code
        assert "@JsonIgnoreProperties" not in code

    def test_lombok_replaces_accessors(self, user_schema):
        generator = create_generator(
            "java", {"use_lombok": True, "generate_builders": True}
        )
        code = generator.generate(user_schema, "User")
        assert "@Data\n@Builder\n@NoArgsConstructor\n@AllArgsConstructor\n" in code
        assert "import lombok.Builder;" in code
        assert "getId()" not in code
        assert "class Builder" not in code

    def test_hand_written_builder(self, user_schema):
        generator = create_generator("java", {"generate_builders": True})
        code = generator.generate(user_schema, "User")
        assert "    public static class Builder {" in code
        assert "        public Builder id(Double id) {" in code
        assert "            return new User(this);" in code

    def test_validation(self, user_schema):
        generator = create_generator("java", {"generate_validation": True})
        code = generator.generate(user_schema, "User")
        assert "import jakarta.validation.constraints.NotNull;" in code
        assert "    @NotNull\n    private Double id;" in code

    def test_equals_hash_and_to_string(self, user_schema):
        generator = create_generator(
            "java", {"generate_equals_and_hash": True, "generate_to_string": True}
        )
        code = generator.generate(user_schema, "User")
        assert "import java.util.Objects;" in code
        assert "Objects.equals(id, that.id)" in code
        assert "return Objects.hash(id, name);" in code
        assert 'return "User{"' in code

    def test_factory(self, user_schema):
        generator = create_generator("java", {"generate_factory_methods": True})
        code = generator.generate(user_schema, "User")
        assert "    public static User of(Double id, String name) {" in code

    def test_imports_sorted_java_first(self):
        schema = Schema.object(
            {"tags": Schema.array(STRING), "extra": Schema.object({})},
            required=["tags", "extra"],
        )
        code = create_generator("java").generate(schema, "Item")
        imports = [line for line in code.splitlines() if line.startswith("import ")]
        assert imports[:2] == ["import java.util.List;", "import java.util.Map;"]
        assert "    private Map<String, Object> extra;" in code

    def test_reserved_words_are_escaped(self):
        schema = Schema.object({"class": STRING}, required=["class"])
        code = create_generator("java").generate(schema, "Course")
        assert '    @JsonProperty("class")\n    private String class_;' in code
