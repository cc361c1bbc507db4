"""
Language-specific code generators.

Each subpackage provides one CodeGenerator subclass together with its
templates and, where the language needs it, reserved-word handling.
"""
