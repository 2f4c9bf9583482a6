"""
Integration tests for health endpoint.
"""
import pytest
from httpx import AsyncClient
from datetime import datetime


@pytest.mark.asyncio
async def test_health_check_success(client: AsyncClient):
    """Test health check endpoint returns healthy status."""
    response = await client.get("/health")

    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert data["dictionary_loaded"] is True
    assert data["word_count"] == 8


@pytest.mark.asyncio
async def test_health_check_degraded_without_dictionary(unloaded_client: AsyncClient):
    """Test health check stays up but reports degraded with no dictionary."""
    response = await unloaded_client.get("/health")

    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "degraded"
    assert data["dictionary_loaded"] is False
    assert data["word_count"] == 0


@pytest.mark.asyncio
async def test_health_check_response_format(client: AsyncClient):
    """Test that health check response has correct format."""
    response = await client.get("/health")

    data = response.json()

    required_fields = ["status", "dictionary_loaded", "word_count", "timestamp"]
    for field in required_fields:
        assert field in data, f"Missing required field: {field}"

    assert isinstance(data["status"], str)
    assert isinstance(data["dictionary_loaded"], bool)
    assert isinstance(data["word_count"], int)
    assert isinstance(data["timestamp"], str)


@pytest.mark.asyncio
async def test_health_check_timestamp_format(client: AsyncClient):
    """Test that timestamp is in ISO format."""
    response = await client.get("/health")

    data = response.json()

    parsed_time = datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
    now = datetime.now(parsed_time.tzinfo)
    assert abs((now - parsed_time).total_seconds()) < 60, "Timestamp is not recent"


@pytest.mark.asyncio
async def test_root_points_at_docs(client: AsyncClient):
    """Test the root endpoint links docs and health."""
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["health"] == "/health"
