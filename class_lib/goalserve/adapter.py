"""
Sport Feed Adapter

종목별 피드 테이블을 기반으로 논리 오퍼레이션을 GoalServe 업스트림
요청으로 변환하고 실행한다. 종목마다 클래스를 복제하지 않고 하나의
어댑터를 SportFeedConfig 로 파라미터화한다.
"""

import re
from typing import Any, Mapping, Optional
from urllib.parse import quote

from class_lib.goalserve.client import GoalserveClient, UpstreamRequest
from class_lib.goalserve.errors import FeedNotImplementedError, InvalidArgumentError
from class_lib.goalserve.feeds import EndpointSpec, SportFeedConfig
from class_lib.goalserve.options import RequestOptions


DATE_PATTERN = re.compile(r"^\d{2}\.\d{2}\.\d{4}$")


class SportFeedAdapter:
    """종목 1개에 대한 업스트림 요청 어댑터"""

    def __init__(self, feed: SportFeedConfig, client: GoalserveClient, logger):
        self.feed = feed
        self.client = client
        self.logger = logger

    def endpoint(self, operation: str) -> EndpointSpec:
        spec = self.feed.endpoint(operation)
        if spec is None:
            raise InvalidArgumentError(f"Unknown {self.feed.label} operation: {operation}")
        return spec

    def build_request(
        self,
        operation: str,
        path_params: Optional[Mapping[str, str]] = None,
        options: Optional[RequestOptions] = None
    ) -> UpstreamRequest:
        """
        업스트림 요청 구성 (네트워크 호출 없음)

        1. 필수 경로 파라미터 검증 (누락/공백 → InvalidArgumentError)
        2. 세그먼트 템플릿에 식별자 치환 (URL 인코딩)
        3. 고정 쿼리 템플릿 + 허용 옵션 병합
        4. json=1 포함 (호출자가 비-JSON 을 명시한 경우 제외)
        """
        spec = self.endpoint(operation)
        if not spec.implemented:
            raise FeedNotImplementedError(
                f"{self.feed.label} operation '{operation}' is not yet implemented"
            )

        values = self._require_path_params(spec, path_params or {})
        options = options or RequestOptions()

        quoted = {name: quote(value, safe="") for name, value in values.items()}
        segment = spec.segment.format(**quoted)

        params = {key: template.format(**values) for key, template in spec.params.items()}
        params.update(options.to_upstream(spec.options))

        return self.client.prepare(
            self.feed.category,
            segment,
            params,
            json_format=options.json_format,
        )

    async def call(
        self,
        operation: str,
        path_params: Optional[Mapping[str, str]] = None,
        options: Optional[RequestOptions] = None
    ) -> Any:
        """오퍼레이션 실행 → 업스트림 페이로드 그대로 반환"""
        request = self.build_request(operation, path_params, options)
        return await self.client.fetch(request)

    def _require_path_params(self, spec: EndpointSpec, path_params: Mapping[str, str]) -> dict[str, str]:
        values: dict[str, str] = {}
        for name in spec.path_params:
            value = path_params.get(name)
            value = str(value).strip() if value is not None else ""
            if not value:
                raise InvalidArgumentError(f"Missing required parameter: {name}")
            if name == "date" and not DATE_PATTERN.match(value):
                raise InvalidArgumentError(f"Invalid date '{value}', expected dd.MM.yyyy")
            values[name] = value
        return values
