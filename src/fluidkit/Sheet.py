"""
Parsing and evaluating style sheets.

A SourceSheet is what a rendering host would work with:
a list of style rules and @media rules that can be resolved for one viewport size.
"""
from __future__ import annotations

import re
from typing import Iterable, Mapping, Union

import tinycss
import tinycss.css21

from .config import g
from .Style import compute_value, is_custom
from .style.MediaQuery import InvalidMediaQuery, MediaRule, MediaValue, get_media
from .style.Parser import Parser
from .types import CompStr, Percentage, frozendict
from .utils import log_error, make_default, set_items

# A Value is the actual value together with whether the value is set as important
Value = tuple[str, bool]
Style = frozendict  # frozendict[str, Value]
StyleRule = tuple[tuple[str, ...], Style]
Rule = Union[MediaRule, StyleRule]


def normalize_selector(selector: str) -> str:
    """
    `normalize_selector(".flow>*  +  *") == ".flow > * + *"`
    """
    selector = re.sub(r"\s*([>+~])\s*", r" \1 ", selector)
    return " ".join(selector.split())


class SourceSheet(list[Rule]):
    """
    A parsed style sheet
    """

    def iter_rules(self, media: MediaValue) -> Iterable[StyleRule]:
        """
        All style rules in source order, including the ones of matching media rules
        """
        for rule in self:
            if isinstance(rule, MediaRule):
                if rule.matches(media):
                    yield from rule.content.iter_rules(media)
            else:
                yield rule

    def cascade(self, selector: str, media: MediaValue) -> dict[str, str]:
        """
        The declarations that apply to the selector.
        Later declarations win, unless an earlier one is important.
        """
        selector = normalize_selector(selector)
        result: dict[str, Value] = {}
        for selectors, style in self.iter_rules(media):
            if selector not in selectors:
                continue
            for key, (value, important) in style.items():
                if key in result and result[key][1] and not important:
                    continue
                result[key] = (value, important)
        return {k: v for k, (v, _) in result.items()}

    def custom_properties(self, media: MediaValue | None = None) -> dict[str, str]:
        """
        The custom properties that are set on :root
        """
        media = make_default(media, get_media())
        return {
            k: v for k, v in self.cascade(":root", media).items() if is_custom(k)
        }

    def resolve(
        self,
        selector: str,
        prop: str,
        width: float,
        height: float | None = None,
        perc_val: float | None = None,
    ) -> float | Percentage | CompStr:
        """
        Computes the value of a property for the selector at the given viewport size (in px).
        Lengths are returned in px.
        Raises a KeyError if the property is not set.
        """
        height = make_default(height, g["H"])
        media = (width, height)
        with set_items(g, W=width, H=height):
            style = self.cascade(selector, media)
            custom = self.custom_properties(media)
            custom.update((k, v) for k, v in style.items() if is_custom(k))
            return compute_value(style[prop], custom=custom, perc_val=perc_val)


############################### Parsing functions #######################################
def parse_sheet(source: str) -> SourceSheet:
    """
    Parses a whole css sheet
    """
    tiny_sheet: tinycss.css21.Stylesheet = Parser.parse_stylesheet(source)
    for error in tiny_sheet.errors:
        log_error("CSS:", error)
    return handle_rules(tiny_sheet.rules)


def handle_rules(rules: list):
    return SourceSheet(filter(None, (handle_rule(rule) for rule in rules)))


def handle_rule(
    rule: tinycss.css21.RuleSet
    | tinycss.css21.ImportRule
    | tinycss.css21.MediaRule
    | tinycss.css21.PageRule
    | tinycss.css21.AtRule,
) -> Rule | None:
    """
    Converts a tinycss rule into an appropriate Rule
    """
    if isinstance(rule, tinycss.css21.RuleSet):
        selectors = tuple(
            normalize_selector(s) for s in rule.selector.as_css().split(",")
        )
        return (
            selectors,
            frozendict(
                {
                    decl.name: (decl.value.as_css().strip(), bool(decl.priority))
                    for decl in rule.declarations
                }
            ),
        )
    elif isinstance(rule, tinycss.css21.MediaRule):
        try:
            return MediaRule(rule.media, handle_rules(rule.rules))
        except InvalidMediaQuery as e:
            log_error("CSS: Invalid media query:", e)
            return None
    log_error("CSS: Unsupported at-rule:", type(rule).__name__)
    return None


def custom_properties(source: str | SourceSheet) -> Mapping[str, str]:
    """
    The custom properties set on :root of a sheet (given as text or parsed)
    """
    sheet = parse_sheet(source) if isinstance(source, str) else source
    return sheet.custom_properties()
