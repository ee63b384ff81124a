# src/squadforge/db/models.py

"""Database models for the SquadForge application."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, TypedDict

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

Base = declarative_base()


# ===============================================
# Type Definitions for JSON Fields
# ===============================================


class SkillsInfo(TypedDict, total=False):
    """Stored skills structure.

    Keys:
        strength: Physical strength, 0-10 (default: 0)
        speed: Sprint speed, 0-10 (default: 0)
        drible: Dribbling ability, 0-10 (optional, default: 0)
    """

    strength: float
    speed: float
    drible: float


def _new_player_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ===============================================
# Mixins for Common Columns
# ===============================================


class TimestampMixin:
    """Mixin providing created_at and updated_at timestamp columns."""

    created_at: Mapped[datetime] = mapped_column(default=_utcnow, nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(
        default=None,
        onupdate=_utcnow,
        nullable=True,
    )


# ===============================================
# Core Table: Player
# ===============================================


class Player(Base, TimestampMixin):
    """A football player record.

    Attributes:
        pk: Internal autoincrementing key. It is never exposed and only
            defines the store's natural (insertion) order.
        id: Public identifier, a UUID4 string assigned on creation.
        skills: JSON document with strength/speed/drible. May be NULL on
            legacy rows, which every consumer reads as all-zero skills.
    """

    __tablename__ = "players"
    pk: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(
        String(36), unique=True, nullable=False, index=True, default=_new_player_id
    )
    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    nickname: Mapped[str | None] = mapped_column(String, nullable=True)
    creation_date: Mapped[datetime] = mapped_column(default=_utcnow, nullable=False)

    # Ex: {'strength': 7, 'speed': 8, 'drible': 5}
    # See SkillsInfo TypedDict for structure documentation
    skills: Mapped[dict | None] = mapped_column(
        JSON(none_as_null=True), nullable=True
    )

    def __init__(self, name: str, **kw: Any):
        super().__init__(**kw)
        self.name = name
