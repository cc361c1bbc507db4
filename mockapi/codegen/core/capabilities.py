"""
Per-language capability descriptors.

Lets callers discover which generator options and object types each
language honours, so inapplicable controls can be hidden.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List

from .config import GeneratorOptions, ObjectType

# Option flag -> GeneratorOptions attribute
FLAG_ATTRIBUTES = {
    "annotations": "use_annotations",
    "lombok": "use_lombok",
    "json_serializable": "use_json_serializable",
    "system_text_json": "use_system_text_json",
    "validation": "generate_validation",
    "builders": "generate_builders",
    "factory_methods": "generate_factory_methods",
    "equals_and_hash": "generate_equals_and_hash",
    "to_string": "generate_to_string",
    "comments": "generate_comments",
    "null_checks": "generate_null_checks",
}

ALL_OBJECT_TYPES = frozenset(ObjectType)


@dataclass(frozen=True)
class LanguageCapabilities:
    """What a language generator supports."""

    language: str
    name: str
    extension: str
    flags: FrozenSet[str]
    supported_object_types: FrozenSet[ObjectType] = ALL_OBJECT_TYPES

    def ignored_flags(self, options: GeneratorOptions) -> List[str]:
        """Flags enabled in ``options`` that this language does not honour."""
        return [
            flag
            for flag, attribute in FLAG_ATTRIBUTES.items()
            if getattr(options, attribute) and flag not in self.flags
        ]

    def to_dict(self) -> Dict[str, object]:
        return {
            "language": self.language,
            "name": self.name,
            "extension": self.extension,
            "options": {flag: flag in self.flags for flag in FLAG_ATTRIBUTES},
            "supported_object_types": sorted(t.value for t in self.supported_object_types),
        }


LANGUAGE_CAPABILITIES: Dict[str, LanguageCapabilities] = {
    "typescript": LanguageCapabilities(
        language="typescript",
        name="TypeScript",
        extension=".ts",
        flags=frozenset(
            {"annotations", "validation", "factory_methods", "comments", "null_checks"}
        ),
    ),
    "java": LanguageCapabilities(
        language="java",
        name="Java",
        extension=".java",
        flags=frozenset(
            {
                "annotations",
                "lombok",
                "validation",
                "builders",
                "factory_methods",
                "equals_and_hash",
                "to_string",
                "comments",
                "null_checks",
            }
        ),
    ),
    "dart": LanguageCapabilities(
        language="dart",
        name="Dart",
        extension=".dart",
        flags=frozenset(
            {
                "annotations",
                "json_serializable",
                "factory_methods",
                "equals_and_hash",
                "to_string",
                "comments",
                "null_checks",
            }
        ),
    ),
    "go": LanguageCapabilities(
        language="go",
        name="Go",
        extension=".go",
        flags=frozenset({"annotations", "validation", "factory_methods", "comments"}),
    ),
    "python": LanguageCapabilities(
        language="python",
        name="Python",
        extension=".py",
        flags=frozenset({"annotations", "factory_methods", "comments", "null_checks"}),
    ),
    "csharp": LanguageCapabilities(
        language="csharp",
        name="C#",
        extension=".cs",
        flags=frozenset(
            {"annotations", "system_text_json", "validation", "comments", "null_checks"}
        ),
    ),
    "swift": LanguageCapabilities(
        language="swift",
        name="Swift",
        extension=".swift",
        flags=frozenset({"annotations", "equals_and_hash", "to_string", "comments"}),
    ),
    "kotlin": LanguageCapabilities(
        language="kotlin",
        name="Kotlin",
        extension=".kt",
        flags=frozenset({"annotations", "comments", "null_checks"}),
    ),
}


def get_capabilities(language: str) -> LanguageCapabilities:
    """Look up the capability descriptor for a language."""
    from ..registry import UnsupportedLanguage, get_registry

    key = get_registry().resolve(language)
    if key not in LANGUAGE_CAPABILITIES:
        raise UnsupportedLanguage(language, list(LANGUAGE_CAPABILITIES))
    return LANGUAGE_CAPABILITIES[key]
