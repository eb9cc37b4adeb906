"""Tests for BTI card endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from umai.main import app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestListCards:
    async def test_lists_all_cards_in_order(self, client: AsyncClient) -> None:
        response = await client.get("/cards")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 16
        assert data[0]["type_code"] == "FAHV"
        assert data[-1]["type_code"] == "CTSP"

    async def test_card_shape(self, client: AsyncClient) -> None:
        response = await client.get("/cards")

        card = response.json()[0]
        assert card["title"] == "The Spice Hunter"
        assert card["pattern_style"] == "dynamic"
        assert len(card["tags"]) == 4
        assert card["gradient_colors"] == [
            {"name": "red", "opacity": 0.7},
            {"name": "orange", "opacity": 0.4},
        ]
        assert card["id"]

    async def test_filter_by_pattern(self, client: AsyncClient) -> None:
        response = await client.get("/cards", params={"pattern": "elegant"})

        assert response.status_code == 200
        codes = [card["type_code"] for card in response.json()]
        assert codes == ["FTHV", "FTHP", "FTSV", "FTSP"]

    async def test_unknown_pattern_rejected(self, client: AsyncClient) -> None:
        response = await client.get("/cards", params={"pattern": "baroque"})

        assert response.status_code == 422


class TestGetCard:
    async def test_get_card(self, client: AsyncClient) -> None:
        response = await client.get("/cards/CTSP")

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "The Clean Aristocrat"
        assert data["pattern_style"] == "classic"

    async def test_lowercase_type_code(self, client: AsyncClient) -> None:
        response = await client.get("/cards/ctsp")

        assert response.status_code == 200
        assert response.json()["type_code"] == "CTSP"

    async def test_unknown_card_returns_404(self, client: AsyncClient) -> None:
        response = await client.get("/cards/XXXX")

        assert response.status_code == 404
        assert "XXXX" in response.json()["detail"]
