# src/squadforge/schemas/teams.py

"""Schemas for splitting the player pool into teams."""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field

from .player import PlayerRead


class DivideTeamsRequest(BaseModel):
    """Request body for a team division.

    ``players_per_team`` is accepted as sent; the team divider rejects
    anything that is not a positive JSON integer.
    """

    players_per_team: Any = Field(
        None,
        validation_alias=AliasChoices("playersPerTeam", "players_per_team"),
        description="The number of players to include in each team.",
        json_schema_extra={"type": "integer", "minimum": 1},
        examples=[5],
    )


class TeamsResponse(BaseModel):
    """Teams in seeding order; the last team may be smaller than the rest."""

    teams: list[list[PlayerRead]]
