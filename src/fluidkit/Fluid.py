"""
Fluid sizes.

A fluid size grows linearly with the viewport width between two locks.
A lock is a (size, viewport-width) pair:

    size
     ^
 max |            ________
     |           /
     |          /
 min |_________/
     +---------|----|--------> viewport width
           min_screen max_screen

Below the lower lock the size is `min_size`, above the upper lock it is `max_size`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .config import g
from .types import ConfigurationError, Number
from .utils import fmt_num

Lock = tuple[float, float]


def _check_number(name: str, x) -> float:
    if isinstance(x, bool) or not isinstance(x, Number) or not math.isfinite(x):
        raise ConfigurationError(f"{name} has to be a finite number, got {x!r}")
    return x


@dataclass(frozen=True)
class FluidScaleConfig:
    """
    The two locks of a fluid scale. All values are in the same unit (usually rem).
    Raises a ConfigurationError if `max_screen <= min_screen`.
    """

    min_size: float
    max_size: float
    min_screen: float
    max_screen: float

    def __post_init__(self):
        for name in ("min_size", "max_size", "min_screen", "max_screen"):
            _check_number(name, getattr(self, name))
        if self.max_screen <= self.min_screen:
            raise ConfigurationError(
                f"max_screen ({self.max_screen}) has to be greater than min_screen ({self.min_screen})"
            )

    @property
    def slope(self) -> float:
        """How much the size grows per unit of viewport width"""
        return (self.max_size - self.min_size) / (self.max_screen - self.min_screen)

    @property
    def intercept(self) -> float:
        """The (extrapolated) size at a viewport width of 0"""
        return self.min_size - self.slope * self.min_screen

    @property
    def locks(self) -> tuple[Lock, Lock]:
        return (self.min_size, self.min_screen), (self.max_size, self.max_screen)

    def replace(self, **changes) -> FluidScaleConfig:
        """Returns a copy with the given fields replaced. The copy is validated again."""
        return replace(self, **changes)


def compute_fluid_size(
    viewport_width: float, config: FluidScaleConfig, clamp: bool = True
) -> float:
    """
    Interpolates the size for the given viewport width.

    If `clamp` is False the linear formula is continued outside of the locks,
    which is what a bare `calc()` in a style sheet does.
    """
    if not math.isfinite(viewport_width) or viewport_width < 0:
        raise ValueError(
            f"The viewport width has to be a finite, non negative number: {viewport_width}"
        )
    if clamp:
        if viewport_width <= config.min_screen:
            return config.min_size
        elif viewport_width >= config.max_screen:
            return config.max_size
    # the locks are returned as is, so that there is no floating point drift
    if viewport_width == config.min_screen:
        return config.min_size
    elif viewport_width == config.max_screen:
        return config.max_size
    return config.min_size + (config.max_size - config.min_size) * (
        viewport_width - config.min_screen
    ) / (config.max_screen - config.min_screen)


def fluid_locks(config: FluidScaleConfig) -> tuple[Lock, Lock]:
    """
    The lower and the upper lock as (size, screen) pairs
    """
    return config.locks


def fluid_calc(config: FluidScaleConfig, unit: str | None = None) -> str:
    """
    The unclamped formula as a css calc expression, for example
    `calc(1rem + 1 * (100vw - 20rem) / 68)`
    """
    unit = unit or g["unit"]
    diff = config.max_size - config.min_size
    sign = "-" if diff < 0 else "+"
    return (
        f"calc({fmt_num(config.min_size)}{unit} {sign} {fmt_num(abs(diff))}"
        f" * (100vw - {fmt_num(config.min_screen)}{unit})"
        f" / {fmt_num(config.max_screen - config.min_screen)})"
    )
