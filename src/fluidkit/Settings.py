"""
The overridable values of the presets and the fluid contexts.

Settings can be loaded from the `:root` block of a style sheet:

    :root {
        --flow-space: 1.5em;
        --heading-min-size: 2;
        --heading-max-size: 3.5;
    }
"""
from __future__ import annotations

import logging
import re
from collections import defaultdict
from dataclasses import dataclass, fields, replace

from .config import g
from .Fluid import FluidScaleConfig
from .Preset import aspect_ratio_padding
from .Sheet import custom_properties
from .Style import length_percentage
from .types import ConfigurationError, Ratio, frozendict
from .utils import fmt_num
from .utils.regex import ident_re, number_re

default_fluid = FluidScaleConfig(min_size=1, max_size=2, min_screen=20, max_screen=88)
""" Fallback for every field of a fluid context that is not set """

default_contexts: frozendict[str, FluidScaleConfig] = frozendict(
    {
        "text": default_fluid.replace(max_size=1.25),
        "heading": default_fluid.replace(min_size=1.75, max_size=3),
        "blockquote": default_fluid.replace(min_size=1.25),
    }
)

fluid_fields = tuple(f.name for f in fields(FluidScaleConfig))

# custom property -> Settings field
layout_props = {
    "--flow-space": "flow_space",
    "--grid-min": "grid_min",
    "--wrapper-max": "wrapper_max",
    "--wrapper-gutter": "wrapper_gutter",
}
context_prop_re = re.compile(rf"--({ident_re})-(min|max)-(size|screen)")


@dataclass(frozen=True)
class Settings:
    flow_space: str = "1em"
    grid_min: str = "16rem"
    wrapper_max: str = "60rem"
    wrapper_gutter: str = "1rem"
    aspect_ratio: Ratio = (16, 9)
    clamp: bool = True
    fluid: frozendict[str, FluidScaleConfig] = default_contexts

    def __post_init__(self):
        for name in layout_props.values():
            value = getattr(self, name)
            if not isinstance(value, str) or length_percentage(value) is None:
                raise ConfigurationError(f"{name} has to be a length, got {value!r}")
        if len(self.aspect_ratio) != 2:
            raise ConfigurationError(f"Invalid aspect ratio: {self.aspect_ratio}")
        aspect_ratio_padding(*self.aspect_ratio)
        if not isinstance(self.fluid, frozendict):
            object.__setattr__(self, "fluid", frozendict(self.fluid))
        for name, config in self.fluid.items():
            if not re.fullmatch(ident_re, name):
                raise ConfigurationError(f"Invalid fluid context name: {name!r}")
            if not isinstance(config, FluidScaleConfig):
                raise ConfigurationError(
                    f"Fluid context {name!r} needs a FluidScaleConfig, got {config!r}"
                )

    def replace(self, **changes) -> Settings:
        return replace(self, **changes)

    def with_context(
        self, name: str, config: FluidScaleConfig | None = None, **changes: float
    ) -> Settings:
        """
        Adds or overrides a single fluid context.
        Without a config the changes are applied to the current one (or the default).
        """
        if config is None:
            config = self.fluid.get(name, default_fluid).replace(**changes)
        return self.replace(fluid=self.fluid | {name: config})

    def custom_properties(self) -> dict[str, str]:
        """
        The settings as custom properties, the inverse of `load_settings`
        """
        w, h = self.aspect_ratio
        props = {key: getattr(self, name) for key, name in layout_props.items()}
        props |= {
            "--aspect-w": fmt_num(w),
            "--aspect-h": fmt_num(h),
            "--fluid-clamp": "1" if self.clamp else "0",
        }
        for name, config in self.fluid.items():
            for field in fluid_fields:
                props[f"--{name}-{field.replace('_', '-')}"] = fmt_num(
                    getattr(config, field)
                )
        return props


def _fluid_number(name: str, value: str) -> float:
    # a number or a number in the fluid unit: "20" or "20rem"
    if not (match := re.fullmatch(rf"({number_re})({re.escape(g['unit'])})?", value)):
        raise ConfigurationError(
            f"{name} has to be a number or a {g['unit']} length, got {value!r}"
        )
    return float(match.group(1))


def _number(name: str, value: str) -> float:
    if not re.fullmatch(number_re, value):
        raise ConfigurationError(f"{name} has to be a number, got {value!r}")
    return float(value)


def _flag(name: str, value: str) -> bool:
    if value not in ("0", "1"):
        raise ConfigurationError(f"{name} has to be 0 or 1, got {value!r}")
    return value == "1"


def settings_from_custom(
    custom: dict[str, str], base: Settings | None = None
) -> Settings:
    """
    Creates Settings from custom properties. Anything that is not set is taken from `base`.
    """
    base = base or Settings()
    changes: dict = {}
    w, h = base.aspect_ratio
    contexts: defaultdict[str, dict[str, float]] = defaultdict(dict)
    for name, value in custom.items():
        value = value.strip()
        if (key := layout_props.get(name)) is not None:
            changes[key] = value
        elif name == "--aspect-w":
            w = _number(name, value)
        elif name == "--aspect-h":
            h = _number(name, value)
        elif name == "--fluid-clamp":
            changes["clamp"] = _flag(name, value)
        elif match := context_prop_re.fullmatch(name):
            context, bound, kind = match.groups()
            contexts[context][f"{bound}_{kind}"] = _fluid_number(name, value)
        else:
            logging.warning(f"Ignoring unknown custom property: {name}")
    changes["aspect_ratio"] = (w, h)
    fluid = dict(base.fluid)
    for context, fluid_changes in contexts.items():
        try:
            fluid[context] = fluid.get(context, default_fluid).replace(**fluid_changes)
        except ConfigurationError as e:
            raise ConfigurationError(f"Invalid fluid context {context!r}: {e}") from e
    changes["fluid"] = frozendict(fluid)
    return base.replace(**changes)


def load_settings(source: str, base: Settings | None = None) -> Settings:
    """
    Loads Settings from the :root custom properties of a style sheet
    """
    return settings_from_custom(dict(custom_properties(source)), base)


def load_settings_file(path: str, base: Settings | None = None) -> Settings:
    logging.info(f"Loading settings: {path!r}")
    with open(path, encoding="utf-8") as f:
        return load_settings(f.read(), base)
