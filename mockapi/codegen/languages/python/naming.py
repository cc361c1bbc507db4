"""
Python-specific naming utilities and sanitization.

Handles Python reserved words and the attribute names model base classes
already claim.
"""

from ...core.naming import NameSanitizer

# Python reserved keywords
PYTHON_RESERVED_WORDS = {
    "False",
    "None",
    "True",
    "and",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "class",
    "continue",
    "def",
    "del",
    "elif",
    "else",
    "except",
    "finally",
    "for",
    "from",
    "global",
    "if",
    "import",
    "in",
    "is",
    "lambda",
    "nonlocal",
    "not",
    "or",
    "pass",
    "raise",
    "return",
    "try",
    "while",
    "with",
    "yield",
}

# Attributes defined on pydantic.BaseModel and dataclass helpers
PYTHON_MODEL_ATTRIBUTES = {
    "model_config",
    "model_fields",
    "model_dump",
    "model_validate",
    "construct",
    "copy",
    "dict",
    "json",
    "schema",
    "from_dict",
}


def create_python_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Python."""
    return NameSanitizer(PYTHON_RESERVED_WORDS, PYTHON_MODEL_ATTRIBUTES)
