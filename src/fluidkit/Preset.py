"""
The named layout presets.

Every preset is a fixed set of declarations for a container and optionally for its children.
Configurable values are referenced as custom properties (`var(--flow-space, 1em)`),
so that the table itself never changes.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from .types import ConfigurationError, Number, Percentage, UnknownPresetError, frozendict

Declarations = frozendict  # frozendict[str, str]

max_columns = 12


@dataclass(frozen=True)
class Preset:
    name: str
    declarations: Declarations
    children: Declarations = field(default_factory=frozendict)
    child_selector: str = "> *"
    columns: int | None = None


def aspect_ratio_padding(width: float, height: float) -> Percentage:
    """
    The padding (relative to the width) that gives a box the ratio `width:height`.
    Percentage padding is always relative to the width of the containing block,
    so the height follows the width.

    `aspect_ratio_padding(16, 9) == Percentage(56.25)`
    """
    for side in (width, height):
        if isinstance(side, bool) or not isinstance(side, Number) or side <= 0:
            raise ConfigurationError(
                f"An aspect ratio needs two positive sides, got {width}:{height}"
            )
    return Percentage(height / width * 100)


# the children of an aspect ratio box fill it completely
_fill = frozendict(
    {
        "position": "absolute",
        "top": "0",
        "left": "0",
        "width": "100%",
        "height": "100%",
    }
)


def _aspect(name: str, padding: str) -> Preset:
    return Preset(
        name,
        frozendict(
            {
                "position": "relative",
                "height": "0",
                "padding-bottom": padding,
            }
        ),
        _fill,
    )


def _grid_cols(n: int) -> Preset:
    return Preset(
        f"grid-cols-{n}",
        frozendict(
            {
                "display": "grid",
                "grid-template-columns": f"repeat({n}, minmax(0, 1fr))",
                "gap": "var(--flow-space, 1em)",
            }
        ),
        columns=n,
    )


_presets = [
    Preset(
        "flow",
        frozendict(),
        frozendict({"margin-top": "var(--flow-space, 1em)"}),
        child_selector="> * + *",
    ),
    Preset(
        "sr-only",
        frozendict(
            {
                "position": "absolute",
                "width": "1px",
                "height": "1px",
                "padding": "0",
                "margin": "-1px",
                "overflow": "hidden",
                "clip": "rect(0, 0, 0, 0)",
                "white-space": "nowrap",
                "border": "0",
            }
        ),
    ),
    Preset(
        "not-sr-only",
        frozendict(
            {
                "position": "static",
                "width": "auto",
                "height": "auto",
                "padding": "0",
                "margin": "0",
                "overflow": "visible",
                "clip": "auto",
                "white-space": "normal",
            }
        ),
    ),
    Preset(
        "full-bleed",
        frozendict(
            {
                "width": "100vw",
                "margin-left": "50%",
                "transform": "translateX(-50%)",
            }
        ),
    ),
    _aspect("aspect-wide", str(aspect_ratio_padding(16, 9))),
    _aspect("aspect-square", str(aspect_ratio_padding(1, 1))),
    _aspect("aspect", "calc(var(--aspect-h, 9) / var(--aspect-w, 16) * 100%)"),
    Preset(
        "scroll-x",
        frozendict(
            {
                "display": "flex",
                "gap": "var(--flow-space, 1em)",
                "overflow-x": "auto",
                "overscroll-behavior-x": "contain",
                "scroll-snap-type": "x mandatory",
            }
        ),
        frozendict({"flex": "0 0 auto", "scroll-snap-align": "start"}),
    ),
    Preset(
        "grid-auto",
        frozendict(
            {
                "display": "grid",
                "grid-template-columns": "repeat(auto-fit, minmax(min(var(--grid-min, 16rem), 100%), 1fr))",
                "gap": "var(--flow-space, 1em)",
            }
        ),
    ),
    *map(_grid_cols, range(1, max_columns + 1)),
    Preset(
        "wrapper",
        frozendict(
            {
                "max-width": "var(--wrapper-max, 60rem)",
                "margin-left": "auto",
                "margin-right": "auto",
                "padding-left": "var(--wrapper-gutter, 1rem)",
                "padding-right": "var(--wrapper-gutter, 1rem)",
            }
        ),
    ),
    Preset(
        "center-fill",
        frozendict(
            {
                "display": "flex",
                "flex-direction": "column",
                "justify-content": "center",
                "align-items": "center",
                "min-height": "100%",
            }
        ),
    ),
    Preset(
        "center-auto",
        frozendict({"display": "flex"}),
        frozendict({"margin": "auto"}),
    ),
]

presets: frozendict[str, Preset] = frozendict({p.name: p for p in _presets})
""" The read-only preset table """
del _presets

grid_cols_re = re.compile(r"grid-cols-(\d+)")


def get_preset(name: str) -> Preset:
    """
    Look up a preset by name. Raises an UnknownPresetError if there is none.
    """
    try:
        return presets[name]
    except KeyError:
        raise UnknownPresetError(f"Unknown preset: {name!r}") from None


def column_count(name: str) -> int:
    """
    The number of columns of a `grid-cols-N` preset
    """
    if not grid_cols_re.fullmatch(name):
        raise UnknownPresetError(f"Not a column grid preset: {name!r}")
    columns = get_preset(name).columns
    assert columns is not None
    return columns


def preset_names() -> list[str]:
    return sorted(presets)


def bind(names: Iterable[str]) -> list[Preset]:
    """
    Binds a list of preset names, for example the classes of an element.
    Fails on the first unknown name instead of silently skipping it.
    """
    return [get_preset(name) for name in names]
