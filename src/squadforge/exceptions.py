# src/squadforge/exceptions.py

"""Custom exception hierarchy for SquadForge.

This module provides a structured exception hierarchy that enables:
1. Proper HTTP status code mapping in API endpoints
2. Detailed error context for logging and debugging
3. Clear distinction between client mistakes and store failures
"""

from __future__ import annotations

from typing import Any


class SquadForgeError(Exception):
    """Base exception for all SquadForge errors.

    Attributes:
        message: Human-readable error description
        details: Optional dict with additional context for logging/debugging
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# =============================================================================
# Resource Not Found Errors (HTTP 404)
# =============================================================================


class ResourceNotFoundError(SquadForgeError):
    """Base class for resource not found errors."""

    pass


class PlayerNotFoundError(ResourceNotFoundError):
    """Raised when a player ID does not exist."""

    def __init__(self, player_id: str) -> None:
        super().__init__(
            message=f"Player with ID {player_id} not found",
            details={"player_id": player_id},
        )


# =============================================================================
# Validation Errors (HTTP 400)
# =============================================================================


class ValidationError(SquadForgeError):
    """Base class for validation errors."""

    pass


class InvalidPaginationError(ValidationError):
    """Raised when page or limit is not a positive integer."""

    def __init__(self, parameter: str, value: Any) -> None:
        super().__init__(
            message=f"'{parameter}' must be a positive integer, got {value!r}",
            details={"parameter": parameter, "value": value},
        )


class InvalidTeamSizeError(ValidationError):
    """Raised when playersPerTeam is missing or not a positive integer."""

    def __init__(self, players_per_team: Any) -> None:
        super().__init__(
            message="Please provide a valid number of players per team.",
            details={"players_per_team": players_per_team},
        )


class PopulationError(ValidationError):
    """Base class for errors raised when too few players are available."""

    def __init__(self, message: str, count: int, minimum: int) -> None:
        super().__init__(
            message=message,
            details={"player_count": count, "minimum": minimum},
        )
        self.count = count
        self.minimum = minimum


class MinimumPopulationError(PopulationError):
    """Raised when a listing filter matches fewer players than required."""

    def __init__(self, count: int, minimum: int) -> None:
        super().__init__(
            message=f"Minimum of {minimum} players required, "
            f"{count} matched the given filters.",
            count=count,
            minimum=minimum,
        )


class InsufficientPlayersError(PopulationError):
    """Raised when there are not enough players to form teams."""

    def __init__(self, count: int, minimum: int) -> None:
        super().__init__(
            message=f"At least {minimum} players are required to form teams, "
            f"got {count}.",
            count=count,
            minimum=minimum,
        )


# =============================================================================
# Store Errors (HTTP 500)
# =============================================================================


class StoreError(SquadForgeError):
    """Raised when the underlying player store fails.

    The driver message is kept so it can be surfaced for
    diagnostics.
    """

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            message=f"Player store failed during {operation}: {reason}",
            details={"operation": operation},
        )
        self.operation = operation
