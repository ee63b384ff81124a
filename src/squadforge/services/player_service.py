# src/squadforge/services/player_service.py

"""Business logic for player-related operations."""

from __future__ import annotations

import logging
from typing import Any

from squadforge.db.models import Player
from squadforge.db.store import PlayerStore
from squadforge.exceptions import MinimumPopulationError, PlayerNotFoundError
from squadforge.schemas import player as player_schema
from squadforge.schemas.pagination import PlayerPage
from squadforge.services import MINIMUM_POPULATION
from squadforge.services.query_builder import PlayerFilter, PlayerQuery
from squadforge.services.ranking import (
    divide_teams,
    rank_players,
    validate_team_size,
)

logger = logging.getLogger(__name__)

# Columns returned by the paginated listing
SUMMARY_FIELDS = ("id", "name", "nickname", "creation_date")


async def list_players(store: PlayerStore, query: PlayerQuery) -> PlayerPage:
    """
    Return one page of players matching the query's filter.

    The minimum population is checked against the filtered total, so a
    narrow filter fails even when the store holds many players.

    Raises:
        MinimumPopulationError: If fewer than MINIMUM_POPULATION players match.
    """
    total = await store.count(query.filter)
    logger.debug(
        "Counted players for listing",
        extra={"total": total, "filtered": not query.filter.is_empty},
    )

    if total < MINIMUM_POPULATION:
        raise MinimumPopulationError(total, MINIMUM_POPULATION)

    players = await store.find(
        query.filter, skip=query.skip, limit=query.limit, fields=SUMMARY_FIELDS
    )
    return PlayerPage(
        total=total,
        page=query.page,
        limit=query.limit,
        players=[player_schema.PlayerSummary.model_validate(p) for p in players],
    )


async def get_player(store: PlayerStore, player_id: str) -> Player:
    """Fetch a single player or raise PlayerNotFoundError."""
    player = await store.find_by_id(player_id)
    if player is None:
        raise PlayerNotFoundError(player_id)
    return player


async def create_player(
    store: PlayerStore, player_in: player_schema.PlayerCreate
) -> Player:
    """Create a player; omitted creation date and skills get defaults."""
    player = await store.create(player_in.model_dump(exclude_none=True))
    logger.info("Created player", extra={"player_id": player.id})
    return player


async def update_player(
    store: PlayerStore, player_id: str, player_in: player_schema.PlayerUpdate
) -> Player:
    """
    Apply a partial update to a player.

    Only fields present in the payload change. A skills payload is merged
    into the stored skills one sub-field at a time; a player with no stored
    skills starts from all zeros.

    Raises:
        PlayerNotFoundError: If the player doesn't exist.
    """
    changes = player_in.model_dump(exclude_unset=True)

    if "skills" in changes:
        current = await get_player(store, player_id)
        assert player_in.skills is not None
        supplied = player_in.skills.model_dump(exclude_none=True)
        merged = player_schema.StoredSkills.model_validate(
            {**(current.skills or {}), **supplied}
        )
        changes["skills"] = merged.model_dump()

    player = await store.update_by_id(player_id, changes)
    if player is None:
        raise PlayerNotFoundError(player_id)

    logger.info(
        "Updated player",
        extra={"player_id": player_id, "fields": sorted(changes)},
    )
    return player


async def delete_player(store: PlayerStore, player_id: str) -> None:
    """Delete a player or raise PlayerNotFoundError."""
    player = await store.delete_by_id(player_id)
    if player is None:
        raise PlayerNotFoundError(player_id)
    logger.info("Deleted player", extra={"player_id": player_id})


async def rank_all_players(store: PlayerStore) -> list[Player]:
    """Return every player ordered by skill score, best first."""
    players = await store.find(PlayerFilter())
    return rank_players(players)


async def divide_into_teams(
    store: PlayerStore, players_per_team: Any
) -> list[list[Player]]:
    """
    Split every player into skill-seeded teams of ``players_per_team``.

    The team size is validated before the store is read.

    Raises:
        InvalidTeamSizeError: If players_per_team is missing or not a
            positive integer.
        InsufficientPlayersError: If fewer than MINIMUM_POPULATION players exist.
    """
    validate_team_size(players_per_team)
    players = await store.find(PlayerFilter())
    teams = divide_teams(players, players_per_team)
    logger.info(
        "Divided players into teams",
        extra={
            "player_count": len(players),
            "team_count": len(teams),
            "players_per_team": players_per_team,
        },
    )
    return teams
