import re

import pytest

import fluidkit.utils as util
import fluidkit.utils.regex as regex_utils
from fluidkit import ConfigurationError
from fluidkit.config import g, reset_config, set_config


def test_func():
    assert util.ensure_prefix("u-flow", "u-") == "u-flow"
    assert util.ensure_prefix("flow", "u-") == "u-flow"

    assert util.make_default(None, 3) == 3
    assert util.make_default(0, 3) == 0


def test_fmt_num():
    assert util.fmt_num(2.0) == "2"
    assert util.fmt_num(0.125) == "0.125"
    assert util.fmt_num(-1.5) == "-1.5"
    assert util.fmt_num(1 / 3) == "0.3333333333333333"
    assert util.fmt_num(1e-7) == "0.0000001"
    # nothing is lost, even for locks that are very close together
    for x in (20.0000004, 20.0000004 - 20, 1 / 68, 123456.789e-3):
        assert "e" not in util.fmt_num(x)
        assert float(util.fmt_num(x)) == x
    for x in (float("inf"), float("-inf"), float("nan")):
        with pytest.raises(ValueError):
            util.fmt_num(x)


def test_set_items():
    d = {"W": 100, "H": 200}
    with util.set_items(d, W=1):
        assert d == {"W": 1, "H": 200}
    assert d == {"W": 100, "H": 200}


def test_config():
    set_config(width=500, height=None, root_font_size=10, unknown=1)
    assert g["W"] == 500
    assert g["H"] == 800
    assert g["root_font_size"] == 10
    assert "unknown" not in g
    reset_config()
    assert g["W"] == 1280

    set_config(unit="px")
    assert g["unit"] == "px"
    with pytest.raises(ConfigurationError):
        set_config(unit="vw", width=1)
    # nothing is changed by an invalid call
    assert g["unit"] == "px"
    assert g["W"] == 1280


def test_regex():
    assert regex_utils.match_bracket("a(b)c)d") == 5
    assert regex_utils.match_bracket("(a)") is None
    assert regex_utils.match_bracket("abc") is None

    number = re.compile(regex_utils.number_re)
    for s in ("1", "-1.5", "+.5", "1e3", "2."):
        assert number.fullmatch(s)
    for s in ("", "-", "e3", "1px"):
        assert not number.fullmatch(s)

    assert re.fullmatch(regex_utils.ident_re, "heading")
    assert re.fullmatch(regex_utils.ident_re, "card-title_2")
    assert not re.fullmatch(regex_utils.ident_re, "2col")
