"""
The errors and value types that the other modules share.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from frozendict import frozendict


class ConfigurationError(ValueError):
    """
    Raised when a configuration can never produce a valid result.
    For example a fluid scale whose upper screen lock is not above the lower one.
    """


class UnknownPresetError(LookupError):
    """Raised when a preset name is not in the preset table"""


# Aliases
##########################################################################

Number = int, float  # for isinstance(x, Number)
Ratio = tuple[float, float]

V_T = TypeVar("V_T")


@dataclass(frozen=True)
class Percentage:
    value: float

    def resolve(self, num: float) -> float:
        """`num` is what 100% stands for"""
        if isinstance(num, bool) or not isinstance(num, Number):
            raise ValueError(f"A percentage can only be resolved against a number, got {num!r}")
        return self.value * num / 100

    def __str__(self):
        return f"{self.value:g}%"


class CompStr(str):
    """A computed value that is kept as written, like a keyword"""

    def __repr__(self) -> str:
        return f"CompStr({self})"


__all__ = [
    "ConfigurationError",
    "UnknownPresetError",
    "Number",
    "Ratio",
    "V_T",
    "Percentage",
    "CompStr",
    "frozendict",
]
