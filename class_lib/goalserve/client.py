"""
GoalServe API Client

GoalServe getfeed API를 호출하는 비동기 HTTP 클라이언트.
- 단일 httpx AsyncClient 커넥션 풀을 모든 종목 어댑터가 공유
- 재시도/캐시 없음: 호출당 정확히 1회 GET
- API 키는 로그/에러 메시지에 절대 노출하지 않음
"""

import time
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import quote

import httpx

from class_config.class_env import Config
from class_config.class_log import redact_secret
from class_lib.goalserve.errors import ConfigurationError, UpstreamError


@dataclass(frozen=True)
class UpstreamRequest:
    """호출 1회분 업스트림 요청 (API 키는 repr에서 제외)"""
    api_key: str = field(repr=False)
    category: str
    segment: str
    params: dict = field(default_factory=dict)
    json_format: bool = True

    @property
    def path(self) -> str:
        return f"/{quote(self.api_key, safe='')}/{self.category}/{self.segment}"

    @property
    def display_path(self) -> str:
        return f"/***/{self.category}/{self.segment}"


class GoalserveClient:
    """
    GoalServe API 클라이언트

    사용법:
        from class_lib.goalserve.client import GoalserveClient
        from class_config.class_log import ConfigLogger

        logger = ConfigLogger('http_log', 365).get_logger('goalserve')
        client = GoalserveClient(logger)

        request = client.prepare("football", "1691_rosters")
        payload = await client.fetch(request)
    """

    def __init__(self, logger, config: Optional[Config] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.logger = logger
        self.config = config or Config()

        api_key = self.config.goalserve_api_key
        if not api_key:
            raise ConfigurationError("GOALSERVE_API_KEY is required in environment variables")

        self._api_key = api_key
        self.base_url = self.config.goalserve_base_url.rstrip('/')
        self.timeout_ms = self.config.request_timeout_ms

        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        self.logger.info(
            f"[Goalserve] Client initialized: base_url={self.base_url}, timeout={self.timeout_ms}ms"
        )

    def _get_client(self) -> httpx.AsyncClient:
        """httpx AsyncClient lazy 초기화"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Accept": "application/json"},
                timeout=httpx.Timeout(self.timeout_ms / 1000),
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """클라이언트 종료"""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self.logger.info("[Goalserve] Client closed")

    def redact(self, text: str) -> str:
        return redact_secret(text, self._api_key)

    def prepare(
        self,
        category: str,
        segment: str,
        params: Optional[dict] = None,
        json_format: bool = True
    ) -> UpstreamRequest:
        """
        업스트림 요청 구성

        json 형식 요청이면 json=1 을 항상 첫 파라미터로 포함한다.
        """
        query: dict[str, Any] = {"json": 1} if json_format else {}
        query.update(params or {})
        return UpstreamRequest(
            api_key=self._api_key,
            category=category,
            segment=segment,
            params=query,
            json_format=json_format,
        )

    async def fetch(self, request: UpstreamRequest) -> Any:
        """
        업스트림 GET 1회 실행

        Returns:
            JSON 요청: 디코딩된 페이로드 (가공 없음)
            비-JSON 요청: 응답 본문 텍스트

        Raises:
            UpstreamError: 네트워크 오류, 타임아웃, 2xx 외 응답, JSON 디코딩 실패
        """
        client = self._get_client()
        self.logger.info(f"[Goalserve] >>> GET {request.display_path} params={request.params}")
        started = time.perf_counter()

        try:
            response = await client.get(request.path, params=request.params)
            response.raise_for_status()

        except httpx.TimeoutException:
            self.logger.warning(f"[Goalserve] Timeout: {request.display_path}")
            raise UpstreamError(None, f"Request timed out after {self.timeout_ms}ms")

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            self.logger.warning(f"[Goalserve] HTTP {status}: {request.display_path}")
            raise UpstreamError(status, f"Upstream responded with HTTP {status} {e.response.reason_phrase}".strip())

        except httpx.RequestError as e:
            message = self.redact(f"{type(e).__name__}: {e}")
            self.logger.warning(f"[Goalserve] Request failed: {request.display_path} ({message})")
            raise UpstreamError(None, message)

        elapsed_ms = (time.perf_counter() - started) * 1000
        self.logger.info(
            f"[Goalserve] <<< {response.status_code} {request.display_path} ({elapsed_ms:.0f}ms)"
        )

        if not request.json_format:
            return response.text

        try:
            return response.json()
        except ValueError:
            self.logger.warning(f"[Goalserve] Non-JSON payload: {request.display_path}")
            raise UpstreamError(response.status_code, "Upstream returned a non-JSON payload")
