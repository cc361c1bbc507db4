"""
Kotlin-specific naming utilities.

Handles Kotlin hard keywords.
"""

from ...core.naming import NameSanitizer

KOTLIN_RESERVED_WORDS = {
    "as",
    "break",
    "class",
    "continue",
    "do",
    "else",
    "false",
    "for",
    "fun",
    "if",
    "in",
    "interface",
    "is",
    "null",
    "object",
    "package",
    "return",
    "super",
    "this",
    "throw",
    "true",
    "try",
    "typealias",
    "typeof",
    "val",
    "var",
    "when",
    "while",
}


def create_kotlin_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Kotlin."""
    return NameSanitizer(KOTLIN_RESERVED_WORDS)
