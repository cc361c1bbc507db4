"""
C# code generator module.

Generates classes with System.Text.Json or Newtonsoft.Json attributes.
"""

from .generator import CSharpGenerator
from .naming import CSHARP_RESERVED_WORDS, create_csharp_sanitizer

__all__ = ["CSharpGenerator", "CSHARP_RESERVED_WORDS", "create_csharp_sanitizer"]
