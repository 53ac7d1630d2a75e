"""
Computing declared values.

Only what the generated sheets need is understood:
numbers, lengths, percentages and `calc()` expressions of them, after `var()` substitution.
Everything else (keywords, other functions) is kept as a string.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from operator import add, mul, sub, truediv
from typing import Callable, Iterator, Mapping

from .config import abs_length_units, g
from .types import CompStr, Number, Percentage
from .utils import match_bracket
from .utils.regex import number_re, unsigned_re

ComputedStyle = Mapping[str, float]


def is_custom(k: str):
    return k.startswith("--")


######################### Units ##############################
font_units: dict[str, Callable[[ComputedStyle], float]] = {
    "em": lambda p_style: p_style.get("font-size", g["root_font_size"]),
    "rem": lambda _: g["root_font_size"],
}
# what 100 of the unit is
viewport_units: dict[str, Callable[[], float]] = {
    "vw": lambda: g["W"],
    "vh": lambda: g["H"],
    "vmin": lambda: min(g["W"], g["H"]),
    "vmax": lambda: max(g["W"], g["H"]),
}


def to_px(num: float, unit: str, p_style: ComputedStyle = {}) -> float:
    """
    `to_px(2, "rem") == 32` with the default root font size.
    Raises a ValueError for units that are not lengths.

    See: https://developer.mozilla.org/en-US/docs/Web/CSS/length
    """
    if unit in abs_length_units:
        return num * abs_length_units[unit]
    elif unit in font_units:
        return num * font_units[unit](p_style)
    elif unit in viewport_units:
        # 100vw is exactly the viewport width
        return num * viewport_units[unit]() / 100
    raise ValueError(f"'{unit}' is not an accepted unit")


######################### Calculation ##############################
def _plus(a: float | None, b: float | None) -> float | None:
    if a is None:
        return b
    return a if b is None else a + b


@dataclass(frozen=True)
class LengthPercentage:
    """
    `px + perc%`: what a calc() with lengths and percentages adds up to.
    A part that never occurred in the expression is None.
    """

    px: float | None = None
    perc: float | None = None

    def __add__(self, other):
        if not isinstance(other, LengthPercentage):
            return NotImplemented
        return LengthPercentage(_plus(self.px, other.px), _plus(self.perc, other.perc))

    def __neg__(self):
        return self * -1

    def __sub__(self, other):
        if not isinstance(other, LengthPercentage):
            return NotImplemented
        return self + -other

    def __mul__(self, factor):
        if isinstance(factor, bool) or not isinstance(factor, Number):
            return NotImplemented
        return LengthPercentage(
            None if self.px is None else self.px * factor,
            None if self.perc is None else self.perc * factor,
        )

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if isinstance(divisor, bool) or not isinstance(divisor, Number):
            return NotImplemented
        return LengthPercentage(
            None if self.px is None else self.px / divisor,
            None if self.perc is None else self.perc / divisor,
        )

    def resolve(self, perc_val: float) -> float:
        """The px value, with `perc_val` standing for 100%"""
        return (self.px or 0) + Percentage(self.perc or 0).resolve(perc_val)


CalcValue = float | LengthPercentage
Token = str | CalcValue  # operators and brackets are str

op_map: dict[str, Callable[[CalcValue, CalcValue], CalcValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": truediv,
}
token_re = re.compile(
    rf"""\s*(?:
        (?P<number>{unsigned_re})(?P<unit>%|[a-zA-Z]+)?
        | (?P<op>[-+*/])
        | (?P<open>(?:calc)?\()
        | (?P<close>\))
    )""",
    re.VERBOSE,
)
single_value_re = re.compile(rf"{number_re}(?:%|[a-zA-Z]+)?")


def tokenize(value: str, p_style: ComputedStyle = {}) -> Iterator[Token]:
    """
    Splits a (stripped) value into operators, brackets and values.
    Lengths are converted to px right away. Raises a ValueError on anything unknown.
    """
    pos = 0
    while pos < len(value):
        if not (match := token_re.match(value, pos)):
            raise ValueError(f"Unexpected {value[pos:]!r} in {value!r}")
        pos = match.end()
        if (number := match["number"]) is None:
            yield "(" if match["open"] else match["op"] or match["close"]
        elif (unit := match["unit"]) is None:
            yield float(number)
        elif unit == "%":
            yield LengthPercentage(perc=float(number))
        else:
            yield LengthPercentage(px=to_px(float(number), unit, p_style))


class CalcParser:
    """
    A recursive descent parser that evaluates while it parses:

        sum     := product (("+" | "-") product)*
        product := unary (("*" | "/") unary)*
        unary   := ("+" | "-") unary | value | "(" sum ")"

    Mixing numbers and lengths where css doesn't allow it raises a TypeError,
    dividing by zero a ZeroDivisionError and any other syntax error a ValueError.
    """

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self) -> Token:
        if (token := self.peek()) is None:
            raise ValueError("Unexpected end of expression")
        self.pos += 1
        return token

    def parse(self) -> CalcValue:
        rv = self.sum()
        if self.pos != len(self.tokens):
            raise ValueError(f"Unexpected {self.peek()!r}")
        return rv

    def sum(self) -> CalcValue:
        rv = self.product()
        while (op := self.peek()) in ("+", "-"):
            self.pos += 1
            rv = op_map[op](rv, self.product())  # type: ignore
        return rv

    def product(self) -> CalcValue:
        rv = self.unary()
        while (op := self.peek()) in ("*", "/"):
            self.pos += 1
            rv = op_map[op](rv, self.unary())  # type: ignore
        return rv

    def unary(self) -> CalcValue:
        match self.take():
            case "-":
                return -self.unary()
            case "+":
                return self.unary()
            case "(":
                rv = self.sum()
                if self.take() != ")":
                    raise ValueError("Missing closing bracket")
                return rv
            case str(token):
                raise ValueError(f"Unexpected {token!r}")
            case value:
                return value


def evaluate(value: str, p_style: ComputedStyle = {}) -> CalcValue | None:
    """
    Evaluates a single number, length or percentage or a calc() of them.
    Returns None for anything else.

    `evaluate("calc(1rem + 50%)") == LengthPercentage(px=16, perc=50)`
    """
    value = value.strip()
    if value.startswith("calc("):
        # the calc has to span the whole value
        if match_bracket(value[len("calc(") :]) != len(value) - len("calc(") - 1:
            return None
    elif not single_value_re.fullmatch(value):
        return None
    try:
        return CalcParser(list(tokenize(value, p_style))).parse()
    except (ValueError, TypeError, ZeroDivisionError):
        return None


def length_percentage(value: str, p_style: ComputedStyle = {}) -> LengthPercentage | None:
    """A length, a percentage or both. A plain 0 counts as a length."""
    rv = evaluate(value, p_style)
    if isinstance(rv, LengthPercentage):
        return rv
    return LengthPercentage(px=0) if rv == 0 else None


######################### Custom properties ##############################
max_var_depth = 32


def substitute_vars(value: str, custom: Mapping[str, str]) -> str:
    """
    Inserts all `var(--name)` and `var(--name, fallback)` references.
    Raises a KeyError if a custom property is not set and has no fallback.
    """
    for _ in range(max_var_depth):
        if (start := value.find("var(")) == -1:
            return value
        inner_start = start + len("var(")
        if (end := match_bracket(value[inner_start:])) is None:
            raise ValueError(f"Unclosed var() in {value!r}")
        end += inner_start
        name, has_fallback, fallback = value[inner_start:end].partition(",")
        name = name.strip()
        if name in custom:
            insert = custom[name]
        elif has_fallback:
            insert = fallback.strip()
        else:
            raise KeyError(name)
        value = value[:start] + insert + value[end + 1 :]
    raise ValueError(f"Custom properties nested too deeply in {value!r}")


def compute_value(
    value: str,
    p_style: ComputedStyle = {},
    custom: Mapping[str, str] = {},
    perc_val: float | None = None,
) -> float | Percentage | CompStr:
    """
    Computes a declared value.
    Lengths become floats in px, numbers become floats.
    Percentages are resolved if a `perc_val` is given else they are returned as is.
    Anything else (keywords, functions, lengths mixed with unresolved percentages)
    is returned as a CompStr.
    """
    value = substitute_vars(value, custom).strip()
    match evaluate(value, p_style):
        case None:
            return CompStr(value)
        case LengthPercentage(px=px, perc=None):
            return px
        case LengthPercentage() as rv if perc_val is not None:
            return rv.resolve(perc_val)
        case LengthPercentage(px=None, perc=perc):
            return Percentage(perc)
        case LengthPercentage():
            return CompStr(value)
        case number:
            return number
