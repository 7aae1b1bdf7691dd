"""
Tests for emotion vote endpoints.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.unit
class TestEmotionEndpoints:
    """Test vote submission and summary."""

    async def test_list_emotions_in_canonical_order(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/emotions")

        assert response.status_code == 200
        names = [item["name"] for item in response.json()]
        assert names == ["Happy", "Calm", "Focused", "Energetic", "Melancholic"]
        assert response.json()[0]["color"].startswith("#")

    async def test_submit_emotion(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/emotions", json={"userId": "session-1", "emotion": "Calm"}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True}

    async def test_submit_accepts_snake_case_field(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/emotions", json={"user_id": "session-1", "emotion": "Focused"}
        )
        assert response.status_code == 200

    async def test_invalid_emotion_returns_400(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/emotions", json={"userId": "session-1", "emotion": "Furious"}
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid emotion"}

        summary = await client.get("/api/v1/emotions/summary")
        assert summary.json() == []

    async def test_blank_participant_returns_400(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/emotions", json={"userId": "   ", "emotion": "Calm"}
        )
        assert response.status_code == 400

    async def test_missing_participant_is_validation_error(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/emotions", json={"emotion": "Calm"})
        assert response.status_code == 422

    async def test_summary_counts_latest_vote_per_participant(self, client: AsyncClient) -> None:
        for user_id, emotion in [("a", "Happy"), ("b", "Happy"), ("a", "Calm")]:
            await client.post("/api/v1/emotions", json={"userId": user_id, "emotion": emotion})

        response = await client.get("/api/v1/emotions/summary")

        assert response.status_code == 200
        assert response.json() == [
            {"emotion": "Happy", "count": 1},
            {"emotion": "Calm", "count": 1},
        ]
