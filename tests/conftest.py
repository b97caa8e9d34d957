import logging

import httpx
import pytest
from httpx import AsyncClient, ASGITransport
from fastapi.testclient import TestClient

from class_config.class_env import Config
from class_lib.goalserve.client import GoalserveClient
from class_lib.goalserve.facade import GoalserveGateway
from apps.sports.deps import get_gateway
from main_http import root as app


TEST_API_KEY = "test-secret-key"
TEST_BASE_URL = "https://feeds.test/getfeed"


# ─────────────────────────────────────────────
# 환경 변수 Fixture
# ─────────────────────────────────────────────

@pytest.fixture(autouse=True)
def goalserve_env(monkeypatch):
    """모든 테스트에서 고정 API 키 / 업스트림 주소 사용"""
    monkeypatch.setenv("GOALSERVE_API_KEY", TEST_API_KEY)
    monkeypatch.setenv("GOALSERVE_BASE_URL", TEST_BASE_URL)
    monkeypatch.setenv("REQUEST_TIMEOUT_MS", "10000")


@pytest.fixture
def test_logger():
    return logging.getLogger("test")


# ─────────────────────────────────────────────
# 업스트림 Mock (httpx.MockTransport)
# ─────────────────────────────────────────────

class UpstreamRecorder:
    """업스트림 요청 기록 + 응답 핸들러 교체 가능"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler = lambda request: httpx.Response(200, json={"ok": True})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def respond_with(self, handler):
        self.handler = handler


@pytest.fixture
def upstream():
    """업스트림 Mock (기본: 200 {"ok": true})"""
    return UpstreamRecorder()


@pytest.fixture
def goalserve_client(upstream, test_logger):
    return GoalserveClient(test_logger, Config(), transport=httpx.MockTransport(upstream))


@pytest.fixture
def gateway(goalserve_client, test_logger):
    return GoalserveGateway(test_logger, goalserve_client)


# ─────────────────────────────────────────────
# TestClient Fixture
# ─────────────────────────────────────────────

@pytest.fixture
def client(gateway):
    """동기 테스트 클라이언트 (게이트웨이 → Mock 업스트림)"""
    app.dependency_overrides[get_gateway] = lambda: gateway
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(gateway):
    """비동기 테스트 클라이언트 (lifespan 미실행)"""
    app.dependency_overrides[get_gateway] = lambda: gateway
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
