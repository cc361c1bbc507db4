"""Behaviour shared by every language generator."""

import pytest

from mockapi.codegen import GenerationError, create_generator, generate_code
from mockapi.codegen.core.schema import Schema, SchemaKind

LANGUAGES = ["typescript", "java", "dart", "go", "python", "csharp", "swift", "kotlin"]

FLOAT_TYPES = {
    "typescript": "number",
    "java": "Double",
    "dart": "double",
    "go": "float64",
    "python": "float",
    "csharp": "double",
    "swift": "Double",
    "kotlin": "Double",
}

ANY_ARRAYS = {
    "typescript": "any[]",
    "java": "List<Object>",
    "dart": "List<dynamic>",
    "go": "[]interface{}",
    "python": "List[Any]",
    "csharp": "List<object>",
    "swift": "[Any]",
    "kotlin": "List<Any>",
}

EXTENSIONS = {
    "typescript": ".ts",
    "java": ".java",
    "dart": ".dart",
    "go": ".go",
    "python": ".py",
    "csharp": ".cs",
    "swift": ".swift",
    "kotlin": ".kt",
}


@pytest.mark.parametrize("language", LANGUAGES)
class TestEveryGenerator:
    def test_names_the_type(self, language, user_schema):
        code = create_generator(language).generate(user_schema, "User")
        assert "User" in code

    def test_type_name_from_numeric_segment_is_valid(self, language, user_schema):
        generator = create_generator(language)
        assert generator.format_type_name("123Response") == "T123Response"
        assert "T123Response" in generator.generate(user_schema, "123Response")

    def test_numbers_are_floating_point(self, language, user_schema):
        code = create_generator(language).generate(user_schema, "User")
        assert FLOAT_TYPES[language] in code

    def test_unknown_array_items_render_as_any(self, language, tags_schema):
        code = create_generator(language).generate(tags_schema, "Tagged")
        assert ANY_ARRAYS[language] in code

    def test_output_is_deterministic(self, language, user_schema):
        generator = create_generator(language)
        assert generator.generate(user_schema, "User") == generator.generate(
            user_schema, "User"
        )

    def test_schema_is_not_modified(self, language, user_schema):
        before = user_schema.to_dict()
        create_generator(language).generate(user_schema, "User")
        assert user_schema.to_dict() == before

    def test_output_ends_with_single_newline(self, language, user_schema):
        code = create_generator(language).generate(user_schema, "User")
        assert code.endswith("\n")
        assert not code.endswith("\n\n")

    def test_empty_object(self, language):
        code = create_generator(language).generate(Schema.object({}), "Empty")
        assert "Empty" in code

    def test_non_object_schema_fails(self, language):
        with pytest.raises(GenerationError):
            create_generator(language).generate(Schema.scalar(SchemaKind.STRING), "X")

    def test_file_extension(self, language):
        assert create_generator(language).file_extension == EXTENSIONS[language]

    def test_comments(self, language, user_schema):
        generator = create_generator(language, {"generate_comments": True})
        assert "User data transfer object." in generator.generate(user_schema, "User")

    def test_prefix_and_suffix(self, language, user_schema):
        generator = create_generator(language, {"prefix": "Api", "suffix": "Dto"})
        assert "ApiUserDto" in generator.generate(user_schema, "User")


class TestGenerateCode:
    def test_success_carries_metadata(self, user_schema):
        result = generate_code(create_generator("ts"), user_schema, "user")
        assert result.success
        assert result.metadata["type_name"] == "User"
        assert result.metadata["field_count"] == 2
        assert result.warnings == []

    def test_reports_ignored_options(self, user_schema):
        generator = create_generator("kotlin", {"use_lombok": True})
        result = generate_code(generator, user_schema, "User")
        assert result.warnings == ["Kotlin ignores option 'lombok'"]

    def test_failure_is_captured(self):
        result = generate_code(
            create_generator("go"), Schema.scalar(SchemaKind.NUMBER), "Bad"
        )
        assert not result.success
        assert result.code == ""
        assert "Bad" in result.error_message
        assert isinstance(result.exception, GenerationError)
