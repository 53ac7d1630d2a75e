"""
The command line interface
"""
import logging
import sys

from .Fluid import compute_fluid_size
from .Render import render_sheet
from .Settings import Settings, load_settings_file
from .types import ConfigurationError
from .utils import fmt_num

usage = """\
Usage:
  fluidkit [settings.css] [--unclamped]
      Print the style sheet. Settings are read from the :root block of settings.css
  fluidkit size <context> <width> [settings.css] [--unclamped]
      Print the size of a fluid context at a viewport width (both in rem)\
"""


def _settings(files: list[str], unclamped: bool) -> Settings:
    settings = load_settings_file(files[0]) if files else Settings()
    return settings.replace(clamp=False) if unclamped else settings


def size(context: str, width: float, settings: Settings) -> float:
    if (fluid := settings.fluid.get(context)) is None:
        raise ConfigurationError(
            f"Unknown fluid context: {context!r}, known are {', '.join(settings.fluid)}"
        )
    return compute_fluid_size(width, fluid, clamp=settings.clamp)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO)
    unclamped = "--unclamped" in argv
    args = [arg for arg in argv if arg != "--unclamped"]
    try:
        match args:
            case l if "-h" in l or "--help" in l:
                print(usage)
            case ["size", context, width, *files] if len(files) <= 1:
                settings = _settings(files, unclamped)
                print(fmt_num(size(context, float(width), settings)))
            case [] | [_]:
                print(render_sheet(_settings(args, unclamped)), end="")
            case _:
                print(usage)
                return 2
    except (ValueError, OSError) as e:
        logging.error(e)
        return 1
    return 0
