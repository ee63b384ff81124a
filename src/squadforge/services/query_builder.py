# src/squadforge/services/query_builder.py

"""Translate listing parameters into a store-agnostic player query."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from squadforge.exceptions import InvalidPaginationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class SubstringFilter:
    """Match players whose ``field`` contains ``substring`` anywhere.

    The substring is matched literally; the store decides how to express
    it (a Unicode-aware ``lower() LIKE`` for SQL backends).
    """

    field: str
    substring: str
    case_sensitive: bool = False


@dataclass(frozen=True)
class PlayerFilter:
    """Conjunction of criteria a player must satisfy."""

    substrings: tuple[SubstringFilter, ...] = field(default_factory=tuple)
    player_id: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.substrings and self.player_id is None


@dataclass(frozen=True)
class PlayerQuery:
    """A filter plus the 1-indexed page window to read from it."""

    filter: PlayerFilter
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def _positive_int(parameter: str, value: int | str | None, default: int) -> int:
    """Read a page parameter given as an int or as raw query-string text."""
    if value is None:
        return default
    if isinstance(value, str):
        if not _INTEGER_TEXT.fullmatch(value):
            raise InvalidPaginationError(parameter, value)
        value = int(value)
    # bool is an int subclass but never a valid page size
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidPaginationError(parameter, value)
    return value


def build_player_query(
    page: int | str | None = DEFAULT_PAGE,
    limit: int | str | None = DEFAULT_LIMIT,
    name: str | None = None,
    nickname: str | None = None,
    player_id: str | None = None,
) -> PlayerQuery:
    """
    Build the query behind the player listing.

    - **page** / **limit**: integers, or their query-string text; None
      means the default.
    - **name** / **nickname**: case-insensitive substring filters; empty
      strings are ignored.
    - **player_id**: exact identifier match, combinable with the others.

    Raises:
        InvalidPaginationError: If page or limit is not a positive integer.
    """
    substrings = tuple(
        SubstringFilter(field=column, substring=value)
        for column, value in (("name", name), ("nickname", nickname))
        if value
    )
    criteria = PlayerFilter(substrings=substrings, player_id=player_id or None)

    return PlayerQuery(
        filter=criteria,
        page=_positive_int("page", page, DEFAULT_PAGE),
        limit=_positive_int("limit", limit, DEFAULT_LIMIT),
    )
