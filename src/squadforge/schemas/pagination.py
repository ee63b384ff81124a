# src/squadforge/schemas/pagination.py

"""Pagination schemas for API responses."""

from pydantic import BaseModel, Field

from .player import PlayerSummary


class PlayerPage(BaseModel):
    """Paginated player listing.

    Attributes:
        total: Number of players matching the filters, ignoring the window
        page: 1-indexed page number that was requested
        limit: Maximum number of players per page
        players: Players in this page, in the store's insertion order
    """

    total: int = Field(..., description="Total records matching filters")
    page: int = Field(..., description="Page number (1-indexed)")
    limit: int = Field(..., description="Max records per page")
    players: list[PlayerSummary]
