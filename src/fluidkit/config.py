""" Any global variables are stored here"""
from typing import Any

import jinja2

from .types import ConfigurationError

# fmt: off
_defaults: dict[str, Any] = {
    # User settable
    "W": 1280,                      # int, viewport width in px
    "H": 800,                       # int, viewport height in px
    "root_font_size": 16,           # float, px per rem
    "prefix": "",                   # str, prepended to every generated class name
    "clamp": True,                  # bool, hold fluid sizes flat outside of the locks
    "unit": "rem",                  # str, unit of FluidScaleConfig values, one of fluid_units
}
g: dict[str, Any] = dict(_defaults)

jinja_env = jinja2.Environment(         # The global jinja Environment used for rendering sheets
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    autoescape=False,
)

# units that a FluidScaleConfig can be expressed in
fluid_units = frozenset({"rem", "em", "px"})
# fmt: on


def set_config(**kwargs):
    """
    Update the global config. Unknown keys are ignored and None means "leave as is".
    Raises a ConfigurationError for a unit that fluid sizes can't be written in.

    `set_config(width=800, root_font_size=10)`
    """
    aliases = {"width": "W", "height": "H"}
    changes = {
        key: v
        for k, v in kwargs.items()
        if (key := aliases.get(k, k)) in g and v is not None
    }
    if changes.get("unit", g["unit"]) not in fluid_units:
        raise ConfigurationError(
            f"unit has to be one of {', '.join(sorted(fluid_units))}, got {changes['unit']!r}"
        )
    g.update(changes)


def reset_config():
    g.clear()
    g.update(_defaults)


################################ constant data ########################

# px per unit
abs_length_units: dict[str, float] = {
    "px": 1,
    "cm": 96 / 2.54,
    "mm": 96 / 25.4,
    "Q": 96 / 101.6,
    "in": 96,
    "pc": 16,
    "pt": 4 / 3,
}
