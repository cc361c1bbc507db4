"""
Naming utilities for safe code generation.

Handles case conversions, type-name formatting, keyword conflicts,
and other naming concerns across different programming languages.
"""

import re
from enum import Enum
from typing import Dict, Iterable, Optional, Set


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    ORIGINAL = "original"  # left as written, only made a valid identifier


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    name = re.sub(r"[-\s.]+", "_", name)
    # Insert underscore before uppercase letters
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = name.lower()
    name = re.sub(r"_+", "_", name)
    return name.strip("_")


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    parts = [p for p in to_snake_case(name).split("_") if p]
    if not parts:
        return name
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    parts = [p for p in to_snake_case(name).split("_") if p]
    return "".join(part.capitalize() for part in parts)


_CASE_CONVERTERS = {
    NamingCase.SNAKE_CASE: to_snake_case,
    NamingCase.CAMEL_CASE: to_camel_case,
    NamingCase.PASCAL_CASE: to_pascal_case,
    NamingCase.ORIGINAL: lambda name: name,
}


def convert_case(name: str, target_case: NamingCase) -> str:
    return _CASE_CONVERTERS[target_case](name)


def singularize(word: str) -> str:
    """Best-effort English singular for collection property names."""
    lower = word.lower()
    if lower.endswith("ies") and len(word) > 3:
        return word[:-3] + ("Y" if word[-3].isupper() else "y")
    if lower.endswith(("sses", "xes", "ches", "shes", "zzes")):
        return word[:-2]
    if lower.endswith("s") and not lower.endswith(("ss", "us", "is")) and len(word) > 1:
        return word[:-1]
    return word


def path_type_name(path: str) -> str:
    """Derive a base type name from the last non-empty segment of a URL path."""
    segments = [s for s in path.split("?")[0].split("/") if s]
    # Skip path parameters such as :id or {id}
    while segments and (segments[-1].startswith(":") or segments[-1].startswith("{")):
        segments.pop()
    last = segments[-1] if segments else "root"
    return to_pascal_case(last) or "Root"


class NameSanitizer:
    """Handles name sanitization and case conversion for one target language."""

    def __init__(
        self,
        reserved_words: Optional[Iterable[str]] = None,
        builtin_types: Optional[Iterable[str]] = None,
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Language reserved words
            builtin_types: Builtin type names that might conflict
        """
        self.reserved_words: Set[str] = set(reserved_words or ())
        self.builtin_types: Set[str] = set(builtin_types or ())
        self._name_cache: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.SNAKE_CASE,
        suffix_on_conflict: str = "_",
    ) -> str:
        """
        Sanitize a name for safe use in the target language.

        The same input always maps to the same output for the lifetime of
        the sanitizer; distinct inputs that collapse to the same identifier
        get a numeric suffix.
        """
        cache_key = f"{name}\x00{target_case.value}\x00{suffix_on_conflict}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        converted = convert_case(cleaned, target_case) or "field"

        if converted[0].isdigit():
            converted = f"_{converted}"

        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._name_cache[cache_key] = final_name
        self._used_names.add(final_name)
        return final_name

    def sanitize_type_name(self, name: str) -> str:
        """
        Make an already formatted type name a legal identifier.

        Type names are not deduplicated. A leading digit gets a ``T``
        prefix instead of an underscore.
        """
        cleaned = re.sub(r"[^a-zA-Z0-9_]", "", name) or "Root"
        if cleaned[0].isdigit():
            cleaned = f"T{cleaned}"
        if self.is_reserved(cleaned):
            cleaned = f"{cleaned}_"
        return cleaned

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words or name in self.builtin_types

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r"[^a-zA-Z0-9_-]", "_", name)
        cleaned = cleaned.strip("_-")
        return cleaned or "field"

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve naming conflicts with reserved words and already used names."""
        if self.is_reserved(name):
            name = f"{name}{suffix}"

        original_name = name
        counter = 1
        while name in self._used_names:
            name = f"{original_name}{counter}"
            counter += 1

        return name

    def reset_used_names(self):
        """Reset the tracking of used names."""
        self._used_names.clear()
        self._name_cache.clear()
