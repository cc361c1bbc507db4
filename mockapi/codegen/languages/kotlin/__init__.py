"""
Kotlin code generator module.

Generates data classes with Gson annotations.
"""

from .generator import KotlinGenerator
from .naming import KOTLIN_RESERVED_WORDS, create_kotlin_sanitizer

__all__ = ["KotlinGenerator", "KOTLIN_RESERVED_WORDS", "create_kotlin_sanitizer"]
