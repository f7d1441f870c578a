"""Configuration for the twig command-line tool.

Covers how raw argument strings become tree elements and how the resulting
tree is shown.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Any, Dict

from twig import constants


@unique
class ElemType(Enum):
    """The type command-line values are parsed into before insertion."""

    Int = auto()
    Float = auto()
    Str = auto()

    def parse(self, raw: str) -> Any:
        """Parse a raw argument into an element.

        Args:
            raw: The argument as given on the command line.

        Returns:
            The parsed element.

        Raises:
            ValueError: If the argument is not a valid element of this type.
        """
        if self == ElemType.Int:
            return int(raw)
        elif self == ElemType.Float:
            return float(raw)
        else:
            return raw

    @staticmethod
    def from_name(name: str) -> ElemType:
        try:
            return ELEM_TYPE_LOOKUP[name.lower()]
        except KeyError:
            raise ValueError(f"Unknown element type: {name}")


ELEM_TYPE_LOOKUP: Dict[str, ElemType] = {
    "int": ElemType.Int,
    "float": ElemType.Float,
    "str": ElemType.Str,
}


@unique
class Format(Enum):
    """How the final tree is printed."""

    Shape = auto()  # One-line variant shape
    Pretty = auto()  # Indented diagram
    List = auto()  # In-order values

    @staticmethod
    def from_name(name: str) -> Format:
        try:
            return FORMAT_LOOKUP[name.lower()]
        except KeyError:
            raise ValueError(f"Unknown format: {name}")


FORMAT_LOOKUP: Dict[str, Format] = {
    "shape": Format.Shape,
    "pretty": Format.Pretty,
    "list": Format.List,
}


@dataclass(frozen=True)
class Config:
    elem_type: ElemType
    fmt: Format
    indent: int


def init_config(
    elem_type: str = constants.DEFAULT_ELEM_TYPE,
    fmt: str = constants.DEFAULT_FORMAT,
    indent: int = constants.DEFAULT_INDENT,
) -> Config:
    """Build a Config from option names.

    Args:
        elem_type: Name of the element type (``int``, ``float`` or ``str``).
        fmt: Name of the output format (``shape``, ``pretty`` or ``list``).
        indent: Spaces per level for the pretty format.

    Returns:
        The resolved configuration.

    Raises:
        ValueError: If a name is unknown or the indent is negative.
    """
    if indent < 0:
        raise ValueError(f"Indent must be non-negative: {indent}")
    return Config(
        elem_type=ElemType.from_name(elem_type),
        fmt=Format.from_name(fmt),
        indent=indent,
    )
