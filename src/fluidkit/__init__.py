from fluidkit.config import reset_config, set_config
from fluidkit.Fluid import FluidScaleConfig, compute_fluid_size, fluid_calc, fluid_locks

from .Preset import (Preset, aspect_ratio_padding, bind, column_count,
                     get_preset, preset_names, presets)
from .Render import build_sheet, render_fluid_rule, render_sheet
from .Settings import Settings, load_settings, load_settings_file
from .Sheet import SourceSheet, parse_sheet
from .types import ConfigurationError, Percentage, UnknownPresetError

__all__ = [
    # fluid sizes
    "FluidScaleConfig",
    "compute_fluid_size",
    "fluid_calc",
    "fluid_locks",
    # presets
    "Preset",
    "presets",
    "get_preset",
    "column_count",
    "preset_names",
    "bind",
    "aspect_ratio_padding",
    # sheets
    "Settings",
    "load_settings",
    "load_settings_file",
    "render_sheet",
    "render_fluid_rule",
    "build_sheet",
    "parse_sheet",
    "SourceSheet",
    # config
    "set_config",
    "reset_config",
    # errors
    "ConfigurationError",
    "UnknownPresetError",
    "Percentage",
]
