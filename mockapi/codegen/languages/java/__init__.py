"""
Java code generator module.

Generates Jackson-annotated classes, with Lombok or hand-written accessors.
"""

from .generator import JavaGenerator
from .naming import JAVA_RESERVED_WORDS, create_java_sanitizer

__all__ = ["JavaGenerator", "JAVA_RESERVED_WORDS", "create_java_sanitizer"]
