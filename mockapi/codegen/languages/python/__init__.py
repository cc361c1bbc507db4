"""
Python code generator module.

Generates pydantic models, dataclasses, or TypedDict definitions.
"""

from .config import PythonConfig, PythonStyle
from .generator import PythonGenerator
from .naming import PYTHON_RESERVED_WORDS, create_python_sanitizer

__all__ = [
    "PythonGenerator",
    "PythonConfig",
    "PythonStyle",
    "PYTHON_RESERVED_WORDS",
    "create_python_sanitizer",
]
