# src/squadforge/schemas/__init__.py

"""Pydantic schemas for API validation and serialization."""

from .pagination import PlayerPage
from .player import (
    PlayerBase,
    PlayerCreate,
    PlayerRead,
    PlayerSummary,
    PlayerUpdate,
    Skills,
    SkillsUpdate,
    StoredSkills,
)
from .teams import DivideTeamsRequest, TeamsResponse

__all__ = [
    # Pagination
    "PlayerPage",
    # Player
    "PlayerBase",
    "PlayerCreate",
    "PlayerRead",
    "PlayerSummary",
    "PlayerUpdate",
    "Skills",
    "SkillsUpdate",
    "StoredSkills",
    # Teams
    "DivideTeamsRequest",
    "TeamsResponse",
]
