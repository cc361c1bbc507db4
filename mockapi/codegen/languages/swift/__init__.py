"""
Swift code generator module.

Generates Codable structs.
"""

from .generator import SwiftGenerator
from .naming import SWIFT_RESERVED_WORDS, create_swift_sanitizer

__all__ = ["SwiftGenerator", "SWIFT_RESERVED_WORDS", "create_swift_sanitizer"]
