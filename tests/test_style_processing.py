import pytest

from fluidkit.config import set_config
from fluidkit.Style import (LengthPercentage, compute_value, evaluate,
                            length_percentage, substitute_vars, to_px, tokenize)
from fluidkit.types import CompStr, Percentage


def test_units():
    assert to_px(2, "rem") == 32
    assert to_px(1, "in") == 96
    assert to_px(12, "pt") == pytest.approx(16)
    assert to_px(2.54, "cm") == pytest.approx(96)
    with pytest.raises(ValueError):
        to_px(1, "fr")

    assert evaluate("0") == 0
    assert evaluate("2") == 2
    assert evaluate("-1.5px") == LengthPercentage(px=-1.5)
    assert evaluate("2rem") == LengthPercentage(px=32)
    assert evaluate("10%") == LengthPercentage(perc=10)
    assert evaluate("1fr") is None
    assert evaluate("1 px") is None

    assert length_percentage("0") == LengthPercentage(px=0)
    assert length_percentage("10%") == LengthPercentage(perc=10)
    assert length_percentage("2") is None


def test_viewport_units():
    set_config(width=1000, height=500)
    assert compute_value("50vw") == 500
    assert compute_value("10vh") == 50
    assert compute_value("10vmin") == 50
    assert compute_value("10vmax") == 100
    set_config(width=20 * 16)
    assert compute_value("100vw") == 320


def test_font_relative_units():
    set_config(root_font_size=10)
    assert compute_value("2rem") == 20
    # em uses the font-size of the element if there is one
    assert compute_value("2em", {"font-size": 12}) == 24
    assert compute_value("2em") == 20


def test_tokenize():
    assert list(tokenize("calc(1px*-2)")) == [
        "(",
        LengthPercentage(px=1),
        "*",
        "-",
        2.0,
        ")",
    ]
    with pytest.raises(ValueError):
        list(tokenize("calc(1px $ 2px)"))


def test_calc():
    assert evaluate("calc((1px + 2px) * 2)") == LengthPercentage(px=6)
    assert evaluate("calc(1 + 2 * 3)") == 7
    assert evaluate("calc(2 * (1 + 2) / 4)") == 1.5
    assert evaluate("calc(1rem - -1rem)") == LengthPercentage(px=32)
    assert evaluate("calc(50% - 10px)") == LengthPercentage(px=-10, perc=50)
    assert evaluate("calc( 1px + calc(2px * 2) )") == LengthPercentage(px=5)
    assert compute_value("calc(9 / 16 * 100%)") == Percentage(56.25)
    assert compute_value("calc(9 / 16 * 100%)", perc_val=320) == pytest.approx(180)
    assert compute_value("calc(50% - 10px)", perc_val=200) == pytest.approx(90)


def test_fluid_calc():
    # 54rem is right between the locks at 20rem and 88rem
    set_config(width=54 * 16)
    assert compute_value("calc(1rem + 1 * (100vw - 20rem) / 68)") == pytest.approx(24)
    set_config(width=20 * 16)
    assert compute_value("calc(1rem + 1 * (100vw - 20rem) / 68)") == 16
    set_config(width=88 * 16)
    assert compute_value("calc(1rem + 1 * (100vw - 20rem) / 68)") == 32
    # shrinking sizes subtract
    assert compute_value("calc(2rem - 1 * (100vw - 20rem) / 68)") == 16


def test_invalid_calc():
    # lengths and numbers can't be added
    assert evaluate("calc(1px + 2)") is None
    assert evaluate("calc(1px * 2px)") is None
    assert evaluate("calc(2 / 1px)") is None
    assert evaluate("calc(1px / 0)") is None
    assert evaluate("calc(1px +)") is None
    assert evaluate("calc((1px)") is None
    assert evaluate("calc(1px $ 2px)") is None
    assert evaluate("calc(1px) + 1px") is None
    assert evaluate("1px + 1px") is None
    assert evaluate("calc(min(1px, 2px))") is None


def test_keywords():
    assert compute_value("grid") == "grid"
    assert isinstance(compute_value("grid"), CompStr)
    assert compute_value("repeat(3, minmax(0, 1fr))") == "repeat(3, minmax(0, 1fr))"
    # a percentage that can't be resolved is kept as it is
    assert compute_value("calc(50% - 10px)") == "calc(50% - 10px)"
    assert isinstance(compute_value("calc(50% - 10px)"), CompStr)


def test_vars():
    custom = {"--a": "1px", "--b": "var(--a)"}
    assert substitute_vars("var(--a)", custom) == "1px"
    assert substitute_vars("var(--c, 2px)", custom) == "2px"
    assert substitute_vars("var(--c, var(--a))", custom) == "1px"
    assert substitute_vars("var(--b)", custom) == "1px"
    assert substitute_vars("var(--c, min(1rem, 100%))", custom) == "min(1rem, 100%)"
    assert substitute_vars("calc(var(--a) * 2)", custom) == "calc(1px * 2)"
    assert compute_value("calc(var(--a) * 2)", custom=custom) == 2
    with pytest.raises(KeyError):
        substitute_vars("var(--c)", custom)
    with pytest.raises(ValueError):
        substitute_vars("var(--loop)", {"--loop": "var(--loop)"})
