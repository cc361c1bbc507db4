"""
Dart-specific naming utilities.

Handles Dart reserved words and built-in identifiers.
"""

from ...core.naming import NameSanitizer

DART_RESERVED_WORDS = {
    "assert",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "for",
    "if",
    "in",
    "is",
    "new",
    "null",
    "rethrow",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "var",
    "void",
    "while",
    "with",
    "abstract",
    "as",
    "covariant",
    "deferred",
    "dynamic",
    "export",
    "extension",
    "external",
    "factory",
    "Function",
    "get",
    "implements",
    "import",
    "interface",
    "late",
    "library",
    "mixin",
    "operator",
    "part",
    "required",
    "set",
    "static",
    "typedef",
}

# Members every Dart object already has
DART_OBJECT_MEMBERS = {"hashCode", "runtimeType", "toString", "noSuchMethod"}


def create_dart_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Dart."""
    return NameSanitizer(DART_RESERVED_WORDS, DART_OBJECT_MEMBERS)
