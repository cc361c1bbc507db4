"""
TypeScript code generator module.

Generates exported interfaces, with optional key maps, type guards and
factory functions.
"""

from .generator import TypeScriptGenerator

__all__ = ["TypeScriptGenerator"]
