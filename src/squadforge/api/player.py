# src/squadforge/api/player.py

"""API endpoints for managing players."""

from fastapi import APIRouter, Depends, Query, status

from squadforge.db.models import Player
from squadforge.db.store import PlayerStore, get_player_store
from squadforge.schemas import player as player_schema
from squadforge.schemas.pagination import PlayerPage
from squadforge.schemas.teams import DivideTeamsRequest, TeamsResponse
from squadforge.services import player_service
from squadforge.services.query_builder import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    build_player_query,
)

# Create an APIRouter instance for players
# - prefix="/api/players": All routes here will be prefixed with /api/players
# - tags=["Players"]: Groups these endpoints under "Players" in the API docs
router = APIRouter(prefix="/api/players", tags=["Players"])


@router.get("/rank", response_model=list[player_schema.PlayerRead])
async def rank_players(
    store: PlayerStore = Depends(get_player_store),
) -> list[Player]:
    """
    Rank every player by skill score (strength + speed + drible), best first.

    Missing skills count as zero. Players with equal scores keep their
    insertion order.
    """
    return await player_service.rank_all_players(store)


@router.post("/divide-teams", response_model=TeamsResponse)
async def divide_teams(
    request_in: DivideTeamsRequest | None = None,
    store: PlayerStore = Depends(get_player_store),
) -> TeamsResponse:
    """
    Divide players into teams based on their skills.

    Players are ranked by skill score and sliced into consecutive teams of
    **playersPerTeam**; the last team may be smaller.

    Raises:
        400 Bad Request: If playersPerTeam is missing or not positive, or if
            fewer than 10 players are registered.
    """
    players_per_team = request_in.players_per_team if request_in else None
    teams = await player_service.divide_into_teams(store, players_per_team)
    return TeamsResponse.model_validate({"teams": teams}, from_attributes=True)


@router.get("", response_model=PlayerPage)
async def read_players(
    # Raw text; build_player_query parses and range-checks it
    page: str | None = Query(
        None, description=f"Page number, 1-indexed (default {DEFAULT_PAGE})"
    ),
    limit: str | None = Query(
        None, description=f"Max records per page (default {DEFAULT_LIMIT})"
    ),
    name: str | None = Query(None, description="Case-insensitive name substring"),
    nickname: str | None = Query(
        None, description="Case-insensitive nickname substring"
    ),
    player_id: str | None = Query(None, alias="id", description="Exact player ID"),
    store: PlayerStore = Depends(get_player_store),
) -> PlayerPage:
    """
    Retrieve a paginated list of players.

    - **page**: Page number, starting at 1
    - **limit**: Maximum number of records to return
    - **name** / **nickname**: Filter by case-insensitive substring
    - **id**: Filter by exact player ID

    Raises:
        400 Bad Request: If page or limit is not a positive integer, or if
            fewer than 10 players match the filters.
    """
    query = build_player_query(
        page=page, limit=limit, name=name, nickname=nickname, player_id=player_id
    )
    return await player_service.list_players(store, query)


@router.get("/{player_id}", response_model=player_schema.PlayerRead)
async def read_player(
    player_id: str, store: PlayerStore = Depends(get_player_store)
) -> Player:
    """
    Retrieve a single player, with skills, by their ID.
    """
    return await player_service.get_player(store, player_id)


@router.post(
    "",
    response_model=player_schema.PlayerRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_player(
    player_in: player_schema.PlayerCreate,
    store: PlayerStore = Depends(get_player_store),
) -> Player:
    """
    Create a new player.

    - **name**: The player's name (required).
    - **nickname**: An optional nickname.
    - **creationDate**: Defaults to now.
    - **skills**: strength, speed and drible, each 0-10 (default 0).
    """
    return await player_service.create_player(store, player_in)


@router.put("/{player_id}", response_model=player_schema.PlayerRead)
async def update_player(
    player_id: str,
    player_in: player_schema.PlayerUpdate,
    store: PlayerStore = Depends(get_player_store),
) -> Player:
    """
    Update a player. Fields not sent keep their current values.

    Raises:
        404 Not Found: If the player doesn't exist.
    """
    return await player_service.update_player(store, player_id, player_in)


@router.delete("/{player_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_player(
    player_id: str, store: PlayerStore = Depends(get_player_store)
) -> None:
    """
    Delete a player by their ID.
    """
    await player_service.delete_player(store, player_id)

    # Return None for the 204 No Content response
    return None
