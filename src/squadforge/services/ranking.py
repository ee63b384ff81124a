# src/squadforge/services/ranking.py

"""
Skill ranking and team division.

Both operations work on any sequence of objects exposing a ``skills``
attribute (ORM rows in production, plain dataclasses in tests) and never
touch the store.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, TypeVar

from squadforge.exceptions import InsufficientPlayersError, InvalidTeamSizeError
from squadforge.services import MINIMUM_POPULATION

SKILL_ATTRIBUTES = ("strength", "speed", "drible")


class HasSkills(Protocol):
    skills: Mapping[str, Any] | None


P = TypeVar("P", bound=HasSkills)


def skill_score(skills: Mapping[str, Any] | None) -> float:
    """
    Sum a player's strength, speed and drible.

    A missing skills object, or a missing/null sub-field, counts as zero.
    """
    if not skills:
        return 0
    return sum(skills.get(attribute) or 0 for attribute in SKILL_ATTRIBUTES)


def rank_players(players: Sequence[P]) -> list[P]:
    """
    Return the players ordered by skill score, best first.

    Players with equal scores keep their relative input order.
    """
    # sorted() stays stable with reverse=True
    return sorted(players, key=lambda player: skill_score(player.skills), reverse=True)


def validate_team_size(players_per_team: Any) -> int:
    """Return players_per_team if it is a positive integer, else raise."""
    if (
        isinstance(players_per_team, bool)
        or not isinstance(players_per_team, int)
        or players_per_team < 1
    ):
        raise InvalidTeamSizeError(players_per_team)
    return players_per_team


def divide_teams(players: Sequence[P], players_per_team: Any) -> list[list[P]]:
    """
    Split the ranked players into consecutive teams of ``players_per_team``.

    Team k holds ranked positions [k * size, (k + 1) * size). The last team
    keeps whatever remains, so it may be smaller than the others.

    Raises:
        InvalidTeamSizeError: If players_per_team is missing or not a
            positive integer.
        InsufficientPlayersError: If fewer than MINIMUM_POPULATION players
            are available.
    """
    size = validate_team_size(players_per_team)

    if len(players) < MINIMUM_POPULATION:
        raise InsufficientPlayersError(len(players), MINIMUM_POPULATION)

    ranked = rank_players(players)
    return [ranked[start : start + size] for start in range(0, len(ranked), size)]
