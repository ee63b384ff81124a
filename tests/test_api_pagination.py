# tests/test_api_pagination.py

"""Tests for player listing: pagination, filtering and the minimum population."""

import pytest
from httpx import AsyncClient

# =============================================================================
# Helper Functions
# =============================================================================


def named(*names: str) -> list[dict]:
    return [{"name": name} for name in names]


def numbered(prefix: str, count: int) -> list[dict]:
    return [{"name": f"{prefix} {i:02d}", "nickname": f"nick{i}"} for i in range(count)]


# =============================================================================
# Pagination
# =============================================================================


@pytest.mark.asyncio
async def test_list_players_defaults(async_client: AsyncClient, seed_players):
    """Without parameters the first 10 players are returned."""
    await seed_players(*numbered("Player", 15))

    response = await async_client.get("/api/players")
    assert response.status_code == 200
    data = response.json()

    assert data["total"] == 15
    assert data["page"] == 1
    assert data["limit"] == 10
    assert len(data["players"]) == 10


@pytest.mark.asyncio
async def test_list_players_second_page_window(async_client: AsyncClient, seed_players):
    """With 12 players, page=2&limit=5 returns insertion positions [5, 10)."""
    players = await seed_players(*numbered("Player", 12))

    response = await async_client.get("/api/players?page=2&limit=5")
    assert response.status_code == 200
    data = response.json()

    assert data["total"] == 12
    assert data["page"] == 2
    assert data["limit"] == 5
    assert [p["id"] for p in data["players"]] == [p.id for p in players[5:10]]


@pytest.mark.asyncio
async def test_list_players_last_page_is_partial(
    async_client: AsyncClient, seed_players
):
    players = await seed_players(*numbered("Player", 12))

    response = await async_client.get("/api/players?page=3&limit=5")
    data = response.json()

    assert [p["id"] for p in data["players"]] == [p.id for p in players[10:]]


@pytest.mark.asyncio
async def test_list_players_page_beyond_total_is_empty(
    async_client: AsyncClient, seed_players
):
    await seed_players(*numbered("Player", 10))

    response = await async_client.get("/api/players?page=50&limit=10")
    assert response.status_code == 200
    data = response.json()

    assert data["total"] == 10
    assert data["players"] == []


@pytest.mark.asyncio
async def test_list_players_returns_summary_fields_only(
    async_client: AsyncClient, seed_players
):
    await seed_players(
        *[
            {"name": f"P{i}", "skills": {"strength": 9, "speed": 9, "drible": 9}}
            for i in range(10)
        ]
    )

    response = await async_client.get("/api/players?limit=1")
    player = response.json()["players"][0]

    assert set(player) == {"id", "name", "nickname", "creationDate"}


@pytest.mark.asyncio
@pytest.mark.parametrize("params", ["page=0", "limit=0", "limit=-5"])
async def test_list_players_rejects_non_positive_pagination(
    async_client: AsyncClient, seed_players, params
):
    await seed_players(*numbered("Player", 10))

    response = await async_client.get(f"/api/players?{params}")

    assert response.status_code == 400
    assert response.json()["error_type"] == "InvalidPaginationError"


@pytest.mark.asyncio
@pytest.mark.parametrize("params", ["page=abc", "limit=2.5", "page=two", "limit=1e3"])
async def test_list_players_rejects_non_integer_pagination(
    async_client: AsyncClient, seed_players, params
):
    await seed_players(*numbered("Player", 10))

    response = await async_client.get(f"/api/players?{params}")

    assert response.status_code == 400
    assert response.json()["error_type"] == "InvalidPaginationError"


# =============================================================================
# Filtering
# =============================================================================


@pytest.mark.asyncio
async def test_filter_by_name_is_case_insensitive_substring(
    async_client: AsyncClient, seed_players
):
    await seed_players(
        *named(*[f"Ronaldo {i}" for i in range(6)]),
        *named(*[f"RONALDINHO {i}" for i in range(4)]),
        *named(*[f"Zico {i}" for i in range(5)]),
    )

    response = await async_client.get("/api/players?name=ronald&limit=20")
    assert response.status_code == 200
    data = response.json()

    assert data["total"] == 10
    assert all("ronald" in p["name"].lower() for p in data["players"])


@pytest.mark.asyncio
async def test_filter_by_name_folds_accented_letters(
    async_client: AsyncClient, seed_players
):
    await seed_players(
        *named(*[f"Éder {i}" for i in range(10)]),
        *named(*[f"Edson {i}" for i in range(5)]),
    )

    for needle in ("éder", "ÉDER", "Éder"):
        response = await async_client.get("/api/players", params={"name": needle})
        assert response.status_code == 200
        assert response.json()["total"] == 10


@pytest.mark.asyncio
async def test_filter_by_nickname(async_client: AsyncClient, seed_players):
    await seed_players(
        *[{"name": f"Striker {i}", "nickname": f"The Wall {i}"} for i in range(10)],
        *[{"name": f"Keeper {i}", "nickname": None} for i in range(3)],
    )

    response = await async_client.get("/api/players?nickname=wall")
    data = response.json()

    assert response.status_code == 200
    assert data["total"] == 10


@pytest.mark.asyncio
async def test_filter_matches_pattern_characters_literally(
    async_client: AsyncClient, seed_players
):
    await seed_players(
        *named(*[f"100% Player {i}" for i in range(10)]),
        *named(*[f"100 Player {i}" for i in range(5)]),
    )

    response = await async_client.get("/api/players", params={"name": "100%"})
    data = response.json()

    assert response.status_code == 200
    assert data["total"] == 10


@pytest.mark.asyncio
async def test_minimum_population_uses_filtered_total(
    async_client: AsyncClient, seed_players
):
    """3 of 50 players match the filter, so the listing is refused."""
    await seed_players(
        *named(*[f"Common {i}" for i in range(47)]),
        *named("Pele", "Pelezinho", "Old Pele"),
    )

    response = await async_client.get("/api/players?name=pele")

    assert response.status_code == 400
    data = response.json()
    assert data["error_type"] == "MinimumPopulationError"
    assert "minimum" in data["detail"].lower()


@pytest.mark.asyncio
async def test_minimum_population_without_filters(
    async_client: AsyncClient, seed_players
):
    await seed_players(*numbered("Player", 9))

    response = await async_client.get("/api/players")

    assert response.status_code == 400
    assert response.json()["error_type"] == "MinimumPopulationError"


@pytest.mark.asyncio
async def test_id_filter_yields_at_most_one_match(
    async_client: AsyncClient, seed_players
):
    """An id filter matches one player, which is below the minimum population."""
    players = await seed_players(*numbered("Player", 20))

    response = await async_client.get(f"/api/players?id={players[3].id}")

    assert response.status_code == 400
    assert response.json()["error_type"] == "MinimumPopulationError"
