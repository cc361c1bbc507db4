"""
Go identifiers for generated structs.

Constructor parameters must not shadow predeclared names. Every generated
file shares one package clause.
"""

from typing import List

from ...core.naming import NameSanitizer

# Go keywords
GO_RESERVED_WORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}

# Predeclared identifiers that constructor parameters must not shadow
GO_BUILTIN_TYPES = {
    "any",
    "bool",
    "byte",
    "error",
    "float32",
    "float64",
    "int",
    "int64",
    "rune",
    "string",
    "uint",
    "append",
    "cap",
    "close",
    "copy",
    "delete",
    "len",
    "make",
    "new",
    "nil",
    "panic",
    "print",
    "println",
    "recover",
    "true",
    "false",
}


def create_go_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Go."""
    return NameSanitizer(GO_RESERVED_WORDS, GO_BUILTIN_TYPES)


def package_clause_problems(name: str) -> List[str]:
    """
    Problems with the package clause written at the top of each struct file.

    An empty list means the files compile as one importable package.
    """
    if not name:
        return ["empty package clause"]

    problems = []
    if not name.isidentifier() or name in GO_RESERVED_WORDS:
        problems.append(f"'{name}' cannot name a Go package")
    if name != name.lower():
        problems.append("package names are lowercase by convention")
    if "_" in name:
        problems.append("package names do not use underscores by convention")
    if name == "main":
        problems.append("structs in package main cannot be imported")
    return problems
