"""
헬스 체크 API 통합 테스트.
서버 상태와 LLM 공급자 설정 상태를 확인합니다.
"""

import pytest
from httpx import AsyncClient, ASGITransport

from brd_generator.config import Settings
from brd_generator.main import app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def use_settings(monkeypatch):
    """health 엔드포인트가 읽는 설정을 교체합니다."""

    def _use(**values):
        settings = Settings(**values)
        monkeypatch.setattr(
            "brd_generator.api.endpoints.health.get_settings", lambda: settings
        )
        return settings

    return _use


async def test_health_check(client: AsyncClient):
    """GET /api/v1/health 는 200과 status: healthy를 반환해야 한다."""
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


async def test_root_endpoint(client: AsyncClient):
    """GET / 는 서비스 정보를 반환해야 한다."""
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "1.0.0"
    assert data["api"] == "/api/v1"


async def test_llm_status_ready(client: AsyncClient, use_settings):
    """자격 증명이 있는 공급자는 ready 상태여야 한다."""
    use_settings(llm_provider="gateway", genai_gateway_api_key="gw-key", generation_mode="multi")

    response = await client.get("/api/v1/health/llm")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["provider"] == "gateway"
    assert data["generationMode"] == "multi"
    assert "gw-key" not in response.text


async def test_llm_status_missing_credentials(client: AsyncClient, use_settings):
    """API 키가 없으면 missing_credentials 상태여야 한다."""
    use_settings(llm_provider="anthropic", anthropic_api_key="")

    response = await client.get("/api/v1/health/llm")

    assert response.json()["status"] == "missing_credentials"


async def test_llm_status_unknown_provider(client: AsyncClient, use_settings):
    """알 수 없는 공급자 이름은 misconfigured 상태여야 한다."""
    use_settings(llm_provider="mystery")

    response = await client.get("/api/v1/health/llm")

    data = response.json()
    assert data["status"] == "misconfigured"
    assert data["provider"] == "mystery"
