# src/squadforge/schemas/player.py

"""Pydantic schemas for the Player resource."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# ===============================================
# Skills: the optional composite attached to a player
# ===============================================
class Skills(BaseModel):
    """A player's skill ratings, each on a 0-10 scale.

    Attributes:
        strength: Physical strength (default: 0)
        speed: Sprint speed (default: 0)
        drible: Dribbling ability (optional, default: 0)
    """

    strength: float = Field(0, ge=0, le=10, description="Strength (0-10)")
    speed: float = Field(0, ge=0, le=10, description="Speed (0-10)")
    drible: float = Field(0, ge=0, le=10, description="Dribbling (0-10)")

    model_config = ConfigDict(from_attributes=True)


class StoredSkills(Skills):
    """Skills as read back from the store.

    Older records may hold null sub-fields; they read as zero.
    """

    @field_validator("strength", "speed", "drible", mode="before")
    @classmethod
    def null_as_zero(cls, value):
        return 0 if value is None else value


class SkillsUpdate(BaseModel):
    """Partial skills payload; only the sub-fields sent are changed."""

    strength: float | None = Field(None, ge=0, le=10)
    speed: float | None = Field(None, ge=0, le=10)
    drible: float | None = Field(None, ge=0, le=10)


# ===============================================
# Base Schema: Defines shared attributes for creation
# ===============================================
class PlayerBase(BaseModel):
    """Shared properties for a player."""

    name: str = Field(..., min_length=1, description="The player's name")
    nickname: str | None = None


# ===============================================
# Create Schema: Inherits the base properties
# ===============================================
class PlayerCreate(PlayerBase):
    """Properties to receive via API on create."""

    creation_date: datetime | None = Field(
        None,
        validation_alias=AliasChoices("creationDate", "creation_date"),
        description="Defaults to the time of creation",
    )
    skills: Skills = Field(default_factory=Skills)


# ===============================================
# Update Schema: Defines all fields as optional
# ===============================================
class PlayerUpdate(BaseModel):
    """Properties to receive via API on update, all optional.

    Fields left out of the payload keep their stored values. ``nickname``
    may be cleared with an explicit null; the other fields may not.
    """

    name: str | None = Field(None, min_length=1)
    nickname: str | None = None
    creation_date: datetime | None = Field(
        None, validation_alias=AliasChoices("creationDate", "creation_date")
    )
    skills: SkillsUpdate | None = None

    @field_validator("name", "creation_date", "skills")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"'{info.field_name}' cannot be null")
        return value


# ===============================================
# Read Schemas: Define attributes for returning data
# ===============================================
def _camel_case_field(name: str, camel: str, **kwargs: Any) -> Any:
    """Field read under either spelling and written out in camelCase."""
    return Field(
        validation_alias=AliasChoices(name, camel),
        serialization_alias=camel,
        **kwargs,
    )


class PlayerSummary(BaseModel):
    """Reduced projection returned by the paginated listing."""

    id: str
    name: str
    nickname: str | None = None
    creation_date: datetime = _camel_case_field("creation_date", "creationDate")

    model_config = ConfigDict(from_attributes=True)


class PlayerRead(PlayerSummary):
    """Full player record returned to the client."""

    skills: StoredSkills | None = None
    created_at: datetime = _camel_case_field("created_at", "createdAt")
    updated_at: datetime | None = _camel_case_field(
        "updated_at", "updatedAt", default=None
    )
