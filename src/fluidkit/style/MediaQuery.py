"""
Media queries on the viewport size.

Supported are media types, `(min-width: 20rem)`-like features for width and height,
`and`, `not`, `only` and comma separated lists:
`@media screen and (min-width: 20rem), (max-height: 600px)`
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from operator import eq, ge, le
from typing import Callable, Protocol

from tinycss.token_data import ContainerToken, Token

from fluidkit.config import g
from fluidkit.Style import to_px

MediaValue = tuple[float, float]  # the viewport (width, height) in px


class InvalidMediaQuery(ValueError):
    pass


def get_media() -> MediaValue:
    return g["W"], g["H"]


######################### Query tree ##############################
class MediaQuery(Protocol):
    def matches(self, media: MediaValue) -> bool:
        ...


# every media type that applies to a screen
screen_types = frozenset({"all", "screen"})


@dataclass(frozen=True)
class MediaType:
    name: str

    def matches(self, media):
        return self.name in screen_types


@dataclass(frozen=True)
class SizeFeature:
    axis: int  # 0 is the width and 1 the height
    compare: Callable[[float, float], bool]
    px: float

    def matches(self, media):
        return self.compare(media[self.axis], self.px)


@dataclass(frozen=True)
class Negation:
    query: MediaQuery

    def matches(self, media):
        return not self.query.matches(media)


@dataclass(frozen=True)
class Conjunction:
    queries: tuple[MediaQuery, ...]

    def matches(self, media):
        return all(query.matches(media) for query in self.queries)


@dataclass(frozen=True)
class QueryList:
    queries: tuple[MediaQuery, ...]

    def matches(self, media):
        return any(query.matches(media) for query in self.queries)


######################### Parsing ##############################
feature_re = re.compile(r"(min-|max-)?(width|height)")
comparisons: dict[str | None, Callable[[float, float], bool]] = {
    "min-": ge,
    "max-": le,
    None: eq,
}


def _is_ident(token, value: str) -> bool:
    return token.type == "IDENT" and token.value.lower() == value


def _without_whitespace(tokens) -> list:
    return [token for token in tokens if token.type != "S"]


def parse_media_query(tokens) -> MediaQuery:
    """
    Parses the tokens of an @media head (as tinycss gives them)
    Raises InvalidMediaQuery on failure
    """
    tokens = _without_whitespace(tokens)
    if not tokens:
        return MediaType("all")
    queries: list[list] = [[]]
    for token in tokens:
        if token.type == "DELIM" and token.value == ",":
            queries.append([])
        else:
            queries[-1].append(token)
    if len(queries) == 1:
        return _parse_query(tokens)
    return QueryList(tuple(map(_parse_query, queries)))


def _parse_query(tokens: list) -> MediaQuery:
    match tokens:
        case [first, *rest] if _is_ident(first, "not"):
            return Negation(_parse_conjunction(rest))
        case [first, *rest] if _is_ident(first, "only"):
            return _parse_conjunction(rest)
    return _parse_conjunction(tokens)


def _parse_conjunction(tokens: list) -> MediaQuery:
    # operands at even indices, "and" at odd ones
    if len(tokens) % 2 == 0:
        raise InvalidMediaQuery(f"Incomplete media query: {tokens}")
    if not all(_is_ident(token, "and") for token in tokens[1::2]):
        raise InvalidMediaQuery(f"Expected 'and' in media query: {tokens}")
    queries = tuple(map(_parse_operand, tokens[::2]))
    return queries[0] if len(queries) == 1 else Conjunction(queries)


def _parse_operand(token) -> MediaQuery:
    if token.type == "IDENT":
        return MediaType(token.value.lower())
    elif isinstance(token, ContainerToken) and token.type == "(":
        return _parse_feature(_without_whitespace(token.content))
    raise InvalidMediaQuery(f"Unexpected {token.as_css()!r} in media query")


def _parse_feature(tokens: list) -> MediaQuery:
    match tokens:
        case [Token(type="IDENT", value=name), Token(type=":"), value]:
            pass
        case _:
            # `((min-width: 20rem))` or `(not (...))`
            return _parse_query(tokens)
    if not (match := feature_re.fullmatch(name.lower())):
        raise InvalidMediaQuery(f"Unsupported media feature: {name}")
    prefix, axis = match.groups()
    if value.type == "DIMENSION" and value.unit.lower() in ("px", "em", "rem"):
        # em and rem in media queries always refer to the initial font size
        px = to_px(value.value, value.unit.lower())
    elif value.type in ("NUMBER", "INTEGER") and value.value == 0:
        px = 0
    else:
        raise InvalidMediaQuery(f"Invalid media value: {value.as_css()}")
    return SizeFeature(("width", "height").index(axis), comparisons[prefix], px)


class MediaRule:
    """
    An @media rule: the query together with the rules that apply when it matches
    """

    def __init__(self, tokens: list, content):
        # content: Sheet.SourceSheet
        self.query = parse_media_query(tokens)
        self.content = content

    def matches(self, media: MediaValue) -> bool:
        return self.query.matches(media)

    def __repr__(self):
        return f"MediaRule({self.query}, {self.content})"


__all__ = [
    "MediaValue",
    "get_media",
    "MediaRule",
    "InvalidMediaQuery",
    "parse_media_query",
]
