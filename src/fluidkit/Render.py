"""
Renders the presets and fluid contexts into a style sheet
"""
import logging

import fluidkit.config as config

from .config import g
from .Fluid import FluidScaleConfig, fluid_calc
from .Preset import Preset, presets
from .Settings import Settings
from .Sheet import SourceSheet, parse_sheet
from .utils import ensure_prefix, fmt_num

sheet_template = """\
:root {
{% for name, value in custom.items() %}
  {{ name }}: {{ value }};
{% endfor %}
}
{% for preset in presets %}
{% if preset.declarations %}

{{ cls(preset.name) }} {
{% for key, value in preset.declarations.items() %}
  {{ key }}: {{ value }};
{% endfor %}
}
{% endif %}
{% if preset.children %}

{{ cls(preset.name) }} {{ preset.child_selector }} {
{% for key, value in preset.children.items() %}
  {{ key }}: {{ value }};
{% endfor %}
}
{% endif %}
{% endfor %}
{% for rule in fluid_rules %}

{{ rule }}
{% endfor %}
"""

# below the lower lock the size is fixed, the two media queries are the locks
fluid_template = """\
{% if clamp %}
{{ selector }} {
  font-size: {{ min_size }};
}

@media (min-width: {{ min_screen }}) {
  {{ selector }} {
    font-size: {{ calc }};
  }
}

@media (min-width: {{ max_screen }}) {
  {{ selector }} {
    font-size: {{ max_size }};
  }
}
{% else %}
{{ selector }} {
  font-size: {{ calc }};
}
{% endif %}
"""


def class_selector(name: str) -> str:
    """`class_selector("flow") == ".flow"`, honoring the configured prefix"""
    return "." + ensure_prefix(name, g["prefix"])


def render_fluid_rule(name: str, fluid: FluidScaleConfig, clamp: bool = True) -> str:
    """
    Renders the rules of a single fluid context (the class `.fluid-<name>`)
    """
    unit = g["unit"]
    size = lambda x: f"{fmt_num(x)}{unit}"
    return (
        config.jinja_env.from_string(fluid_template)
        .render(
            selector=class_selector(f"fluid-{name}"),
            clamp=clamp,
            min_size=size(fluid.min_size),
            max_size=size(fluid.max_size),
            min_screen=size(fluid.min_screen),
            max_screen=size(fluid.max_screen),
            calc=fluid_calc(fluid, unit),
        )
        .rstrip("\n")
    )


def render_sheet(settings: Settings | None = None) -> str:
    """
    Renders a complete style sheet:
    the settings as custom properties on :root, one class per preset
    and one `.fluid-<context>` class per fluid context.
    """
    settings = settings or Settings(clamp=g["clamp"])
    _presets: list[Preset] = list(presets.values())
    logging.debug(
        f"Rendering {len(_presets)} presets and {len(settings.fluid)} fluid contexts"
    )
    return config.jinja_env.from_string(sheet_template).render(
        custom=settings.custom_properties(),
        presets=_presets,
        fluid_rules=[
            render_fluid_rule(name, fluid, settings.clamp)
            for name, fluid in settings.fluid.items()
        ],
        cls=class_selector,
    )


def build_sheet(settings: Settings | None = None) -> SourceSheet:
    """
    Renders and parses the sheet, so that it can be resolved for a viewport
    """
    return parse_sheet(render_sheet(settings))
