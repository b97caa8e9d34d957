"""
GoalServe 게이트웨이 파사드

종목별 어댑터 + 엔벨로프 빌더를 하나로 묶는 진입점.
라우트 핸들러는 이 파사드만 의존한다.

사용법:
    from class_lib.goalserve.facade import GoalserveGateway

    gateway = GoalserveGateway.create(logger)
    status_code, body = await gateway.respond(
        sport="nfl",
        operation="team_roster",
        path_params={"teamId": "1691"},
        query={},
        endpoint="/api/nfl/teams/1691/roster",
    )
"""

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from class_config.class_env import Config
from class_lib.goalserve.adapter import SportFeedAdapter
from class_lib.goalserve.client import GoalserveClient
from class_lib.goalserve.envelope import (
    GOALSERVE_API_ERROR,
    INVALID_ARGUMENT,
    NOT_IMPLEMENTED,
    CallContext,
    EnvelopeBuilder,
)
from class_lib.goalserve.errors import (
    FeedNotImplementedError,
    InvalidArgumentError,
    UpstreamError,
)
from class_lib.goalserve.feeds import FEEDS, SportFeedConfig
from class_lib.goalserve.options import RequestOptions, echo_params


class GoalserveGateway:
    """GoalServe 게이트웨이 진입점"""

    def __init__(self, logger, client: GoalserveClient,
                 feeds: Optional[Mapping[str, SportFeedConfig]] = None):
        self.logger = logger
        self.client = client
        self.envelopes = EnvelopeBuilder(logger)

        feeds = feeds if feeds is not None else FEEDS
        self.adapters: dict[str, SportFeedAdapter] = {
            sport_id: SportFeedAdapter(feed, client, logger)
            for sport_id, feed in feeds.items()
        }

        self.logger.info(f"[Gateway] Initialized: {len(self.adapters)} sports")

    @classmethod
    def create(cls, logger, config: Optional[Config] = None) -> "GoalserveGateway":
        """설정에서 게이트웨이 생성 (API 키 누락 시 ConfigurationError)"""
        return cls(logger, GoalserveClient(logger, config))

    def adapter(self, sport: str) -> SportFeedAdapter:
        try:
            return self.adapters[sport]
        except KeyError:
            raise InvalidArgumentError(f"Unknown sport: {sport}")

    async def respond(
        self,
        sport: str,
        operation: str,
        path_params: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, Any]] = None,
        endpoint: str = ""
    ) -> tuple[int, dict]:
        """
        (종목, 오퍼레이션) 호출 1회를 처리하고 (HTTP 상태, 엔벨로프) 반환

        - 성공: 200
        - InvalidArgumentError: 400 INVALID_ARGUMENT
        - FeedNotImplementedError: 501 NOT_IMPLEMENTED
        - UpstreamError: 500 GOALSERVE_API_ERROR (업스트림 상태와 무관)
        """
        adapter = self.adapter(sport)
        spec = adapter.endpoint(operation)
        path_params = dict(path_params or {})

        ctx = CallContext(
            sport=sport,
            data_type=spec.data_type,
            endpoint=endpoint,
            llm_context=adapter.feed.render_context(spec, path_params),
            params=echo_params(path_params, query, spec.options),
        )

        try:
            options = RequestOptions.from_query(query)
            payload = await adapter.call(operation, path_params, options)

        except InvalidArgumentError as e:
            self.logger.info(f"[Gateway] Invalid argument {sport}/{operation}: {e}")
            return 400, self.envelopes.failure(ctx, INVALID_ARGUMENT, str(e))

        except ValidationError as e:
            self.logger.info(f"[Gateway] Invalid options {sport}/{operation}: {e.error_count()} errors")
            return 400, self.envelopes.failure(ctx, INVALID_ARGUMENT, "Invalid query parameters")

        except FeedNotImplementedError as e:
            return 501, self.envelopes.failure(ctx, NOT_IMPLEMENTED, str(e))

        except UpstreamError as e:
            self.logger.warning(f"[Gateway] {sport}/{operation} failed: {e}")
            return 500, self.envelopes.failure(ctx, GOALSERVE_API_ERROR, self.client.redact(str(e)))

        return 200, self.envelopes.success(ctx, payload)

    async def close(self):
        """리소스 정리"""
        await self.client.close()
        self.logger.info("[Gateway] Closed")
