import math
from contextlib import contextmanager
from decimal import Decimal
from typing import Any

from fluidkit.types import V_T


########################## Misc #########################
def make_default(value: V_T | None, default: V_T) -> V_T:
    """
    If the `value` is None this returns `default` else it returns `value`

    `make_default(height, g["H"])`
    """
    return default if value is None else value


def ensure_prefix(s: str, pre: str) -> str:
    return s if s.startswith(pre) else pre + s


def fmt_num(x: float) -> str:
    """
    Format a number the way it should appear in a style sheet, without losing precision.
    `fmt_num(2.0) == "2"`, `fmt_num(0.125) == "0.125"`, `fmt_num(1e-7) == "0.0000001"`

    Raises a ValueError for infinity and nan, css has no way to write them.
    """
    if not math.isfinite(x):
        raise ValueError(f"{x} can't be written as a css number")
    if x == int(x):
        return str(int(x))
    # repr is the shortest string that reads back as x, css needs it without an exponent
    return format(Decimal(repr(float(x))), "f")


@contextmanager
def set_items(d: dict[str, Any], **items):
    """
    A context in which the given keys of the dict are set to the given values
    """
    old_items = {k: d[k] for k in items}
    try:
        d.update(items)
        yield
    finally:
        d.update(old_items)
