"""
Dart code generator module.

Generates immutable model classes, either for json_serializable or with
hand-written JSON conversion.
"""

from .generator import DartGenerator
from .naming import DART_RESERVED_WORDS, create_dart_sanitizer

__all__ = ["DartGenerator", "DART_RESERVED_WORDS", "create_dart_sanitizer"]
