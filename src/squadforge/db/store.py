# src/squadforge/db/store.py

"""Persistence layer for players.

``PlayerStore`` is the contract the services depend on;
``SQLAlchemyPlayerStore`` fulfils it over an async session.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any, Protocol

from fastapi import Depends
from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only

from squadforge.db.functions import unicode_lower
from squadforge.db.models import Player
from squadforge.db.session import get_db
from squadforge.exceptions import StoreError
from squadforge.services.query_builder import PlayerFilter, SubstringFilter

logger = logging.getLogger(__name__)


class PlayerStore(Protocol):
    """Operations the services need from a player store."""

    async def count(self, criteria: PlayerFilter) -> int:
        """Count players matching the criteria."""
        ...

    async def find(
        self,
        criteria: PlayerFilter,
        skip: int = 0,
        limit: int | None = None,
        fields: Sequence[str] | None = None,
    ) -> list[Player]:
        """Read matching players in insertion order, optionally windowed."""
        ...

    async def find_by_id(self, player_id: str) -> Player | None:
        """Get a player by ID, if the record exists."""
        ...

    async def create(self, fields: dict[str, Any]) -> Player:
        """Store a new player and return it with its assigned ID."""
        ...

    async def update_by_id(
        self, player_id: str, changes: dict[str, Any]
    ) -> Player | None:
        """Apply the given field changes and return the updated player."""
        ...

    async def delete_by_id(self, player_id: str) -> Player | None:
        """Remove a player and return the deleted record."""
        ...


def _substring_clause(predicate: SubstringFilter) -> ColumnElement[bool]:
    column = getattr(Player, predicate.field)
    if predicate.case_sensitive:
        return column.contains(predicate.substring, autoescape=True)
    return unicode_lower(column).contains(
        predicate.substring.lower(), autoescape=True
    )


def _where_clauses(criteria: PlayerFilter) -> list[ColumnElement[bool]]:
    clauses = [_substring_clause(predicate) for predicate in criteria.substrings]
    if criteria.player_id is not None:
        clauses.append(Player.id == criteria.player_id)
    return clauses


class SQLAlchemyPlayerStore:
    """Player store backed by a SQLAlchemy async session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """Roll back and re-raise driver failures as StoreError."""
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error(
                "Player store %s failed, rolling back: %s",
                operation,
                exc,
                extra={"operation": operation},
            )
            await self.db.rollback()
            raise StoreError(operation, str(exc)) from exc

    async def count(self, criteria: PlayerFilter) -> int:
        query = (
            select(func.count()).select_from(Player).where(*_where_clauses(criteria))
        )
        async with self._guard("count"):
            return (await self.db.execute(query)).scalar_one()

    async def find(
        self,
        criteria: PlayerFilter,
        skip: int = 0,
        limit: int | None = None,
        fields: Sequence[str] | None = None,
    ) -> list[Player]:
        query = select(Player).where(*_where_clauses(criteria)).order_by(Player.pk)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        if fields:
            query = query.options(
                load_only(*(getattr(Player, name) for name in fields))
            )

        async with self._guard("find"):
            result = await self.db.execute(query)
            return list(result.scalars().all())

    async def find_by_id(self, player_id: str) -> Player | None:
        query = select(Player).where(Player.id == player_id)
        async with self._guard("find_by_id"):
            result = await self.db.execute(query)
            return result.scalar_one_or_none()

    async def create(self, fields: dict[str, Any]) -> Player:
        new_player = Player(**fields)
        async with self._guard("create"):
            self.db.add(new_player)
            await self.db.commit()
            await self.db.refresh(new_player)
        return new_player

    async def update_by_id(
        self, player_id: str, changes: dict[str, Any]
    ) -> Player | None:
        player = await self.find_by_id(player_id)
        if player is None:
            return None

        for key, value in changes.items():
            setattr(player, key, value)

        async with self._guard("update_by_id"):
            self.db.add(player)
            await self.db.commit()
            await self.db.refresh(player)
        return player

    async def delete_by_id(self, player_id: str) -> Player | None:
        player = await self.find_by_id(player_id)
        if player is None:
            return None

        async with self._guard("delete_by_id"):
            await self.db.delete(player)
            await self.db.commit()
        return player


def get_player_store(db: AsyncSession = Depends(get_db)) -> PlayerStore:
    """FastAPI dependency that provides the request's player store."""
    return SQLAlchemyPlayerStore(db)
