"""
Python-specific configuration.

Python options ride in ``GeneratorOptions.custom``:

- ``style``: ``pydantic`` (default), ``dataclass`` or ``typeddict``
- ``dataclass_frozen``: emit ``@dataclass(frozen=True)``
- ``pydantic_extra_forbid``: reject unknown keys in pydantic models
"""

from dataclasses import dataclass
from enum import Enum

from ....logging_config import get_logger
from ...core.config import GeneratorOptions

logger = get_logger(__name__)


class PythonStyle(Enum):
    """Python code generation styles."""

    DATACLASS = "dataclass"
    PYDANTIC = "pydantic"
    TYPEDDICT = "typeddict"


TEMPLATES = {
    PythonStyle.DATACLASS: "dataclass.py.j2",
    PythonStyle.PYDANTIC: "pydantic.py.j2",
    PythonStyle.TYPEDDICT: "typeddict.py.j2",
}


@dataclass(frozen=True)
class PythonConfig:
    """Python-specific settings resolved from generator options."""

    style: PythonStyle = PythonStyle.PYDANTIC
    dataclass_frozen: bool = False
    pydantic_extra_forbid: bool = False

    @property
    def template_name(self) -> str:
        return TEMPLATES[self.style]

    @classmethod
    def from_options(cls, options: GeneratorOptions) -> "PythonConfig":
        style_value = options.get_custom("style", PythonStyle.PYDANTIC.value)
        try:
            style = PythonStyle(str(style_value).lower())
        except ValueError:
            logger.warning("Unknown Python style %r, using pydantic", style_value)
            style = PythonStyle.PYDANTIC

        return cls(
            style=style,
            dataclass_frozen=bool(options.get_custom("dataclass_frozen", False)),
            pydantic_extra_forbid=bool(
                options.get_custom("pydantic_extra_forbid", False)
            ),
        )
