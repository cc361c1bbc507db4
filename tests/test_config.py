import json

import pytest

from mockapi.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorOptions,
    NamingConvention,
    ObjectType,
    load_options,
    validate_options,
)


class TestGeneratorOptions:
    def test_defaults(self):
        options = GeneratorOptions()
        assert options.naming_convention is NamingConvention.PASCAL_CASE
        assert options.use_annotations is True
        assert options.generate_null_checks is True
        assert options.object_types == (ObjectType.DTO,)

    def test_from_dict_accepts_camel_case_keys(self):
        options = GeneratorOptions.from_dict(
            {"namingConvention": "camelCase", "useAnnotations": False, "prefix": "Api"}
        )
        assert options.naming_convention is NamingConvention.CAMEL_CASE
        assert options.use_annotations is False
        assert options.prefix == "Api"

    def test_unknown_keys_go_to_custom(self):
        options = GeneratorOptions.from_dict({"style": "dataclass"})
        assert options.get_custom("style") == "dataclass"

    def test_invalid_naming_convention(self):
        with pytest.raises(ConfigError):
            GeneratorOptions.from_dict({"naming_convention": "kebab"})

    def test_invalid_object_type(self):
        with pytest.raises(ConfigError):
            GeneratorOptions.from_dict({"object_types": ["entity"]})

    def test_to_dict_round_trips(self):
        options = GeneratorOptions(prefix="X", object_types=("dto", "dao"))
        assert GeneratorOptions.from_dict(options.to_dict()) == options

    def test_merged_returns_copy(self):
        options = GeneratorOptions()
        merged = options.merged(generate_comments=True)
        assert merged.generate_comments is True
        assert options.generate_comments is False


class TestConfigManager:
    def test_language_defaults(self):
        manager = ConfigManager()
        assert manager.get_options("java").package_name == "com.example.dto"
        assert manager.get_options("dart").use_json_serializable is True
        assert manager.get_options("go").generate_null_checks is False

    def test_file_then_overrides(self, tmp_path):
        config_file = tmp_path / "options.json"
        config_file.write_text(
            json.dumps({"packageName": "com.acme", "prefix": "Api"}), encoding="utf-8"
        )

        options = ConfigManager().get_options(
            "java", custom_config={"prefix": "Dto"}, config_file=config_file
        )

        assert options.package_name == "com.acme"
        assert options.prefix == "Dto"

    def test_overrides_win_across_key_spellings(self, tmp_path):
        config_file = tmp_path / "options.json"
        config_file.write_text(
            json.dumps({"packageName": "com.file", "namingConvention": "snake_case"}),
            encoding="utf-8",
        )

        options = ConfigManager().get_options(
            "java",
            custom_config={"package_name": "com.cli", "naming_convention": "camelCase"},
            config_file=config_file,
        )

        assert options.package_name == "com.cli"
        assert options.naming_convention is NamingConvention.CAMEL_CASE

    def test_file_spelling_overrides_language_default(self, tmp_path):
        config_file = tmp_path / "options.json"
        config_file.write_text(json.dumps({"packageName": "com.file"}), encoding="utf-8")

        options = ConfigManager().get_options("java", config_file=config_file)

        assert options.package_name == "com.file"

    def test_custom_values_merge(self):
        options = ConfigManager().get_options(
            "python", custom_config={"custom": {"dataclass_frozen": True}}
        )
        assert options.custom == {"style": "pydantic", "dataclass_frozen": True}

    def test_defaults_are_not_mutated(self):
        manager = ConfigManager()
        manager.get_options("python", custom_config={"custom": {"style": "dataclass"}})
        assert manager.get_options("python").get_custom("style") == "pydantic"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            ConfigManager().get_options("java", config_file=tmp_path / "nope.json")

    def test_non_json_suffix(self, tmp_path):
        config_file = tmp_path / "options.yaml"
        config_file.write_text("prefix: Api", encoding="utf-8")
        with pytest.raises(ConfigError):
            ConfigManager().get_options("java", config_file=config_file)

    def test_file_must_hold_object(self, tmp_path):
        config_file = tmp_path / "options.json"
        config_file.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError):
            ConfigManager().get_options("java", config_file=config_file)

    def test_save_options(self, tmp_path):
        output = tmp_path / "saved.json"
        ConfigManager().save_options(GeneratorOptions(prefix="Api"), output)
        assert json.loads(output.read_text(encoding="utf-8"))["prefix"] == "Api"

    def test_load_options_helper(self):
        assert load_options("csharp").package_name == "Models"


class TestValidateOptions:
    def test_no_warnings_for_supported_flags(self):
        assert validate_options(GeneratorOptions(use_lombok=True), "java") == []

    def test_ignored_flag(self):
        warnings = validate_options(GeneratorOptions(use_lombok=True), "typescript")
        assert warnings == ["TypeScript ignores option 'lombok'"]

    def test_alias_is_resolved(self):
        warnings = validate_options(GeneratorOptions(generate_builders=True), "ts")
        assert warnings == ["TypeScript ignores option 'builders'"]
