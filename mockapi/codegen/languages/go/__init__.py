"""
Go code generator module.

Generates Go structs with JSON tags.
"""

from .generator import GoGenerator
from .naming import GO_BUILTIN_TYPES, GO_RESERVED_WORDS, create_go_sanitizer

__all__ = ["GoGenerator", "GO_BUILTIN_TYPES", "GO_RESERVED_WORDS", "create_go_sanitizer"]
