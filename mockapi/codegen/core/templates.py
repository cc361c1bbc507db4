"""
Template engine wrapper for code generation.

Each generator renders from the ``templates`` directory beside its module.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


def quote(value: Any, quote_char: str = '"') -> str:
    """Quote a value as a string literal, escaping backslashes and quotes."""
    escaped = str(value).replace("\\", "\\\\").replace(quote_char, "\\" + quote_char)
    return f"{quote_char}{escaped}{quote_char}"


class TemplateEngine:
    """Jinja2 environment bound to one generator's template directory."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = template_dir

        if template_dir and template_dir.exists():
            loader = FileSystemLoader(str(template_dir))
        else:
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.filters["quote"] = quote

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Raises:
            TemplateError: If the template is missing, malformed, or uses
                an undefined variable
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except (TemplateNotFound, TemplateSyntaxError, UndefinedError) as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine for the given directory."""
    return TemplateEngine(template_dir)
