"""
Response Envelope Builder

업스트림 결과를 외부 계약 포맷으로 감싼다.

    성공: {success: true, data, llm_context, metadata}
    실패: {success: false, error: {code, message}, metadata}

fetchedAt 을 제외하면 같은 입력에 대해 항상 같은 결과를 만든다.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


SOURCE = "goalserve"

GOALSERVE_API_ERROR = "GOALSERVE_API_ERROR"
INVALID_ARGUMENT = "INVALID_ARGUMENT"
NOT_IMPLEMENTED = "NOT_IMPLEMENTED"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC 타임스탬프 (밀리초, Z 접미사)"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class CallContext:
    """엔벨로프 생성에 필요한 호출 정보"""
    sport: str
    data_type: str
    endpoint: str
    llm_context: str
    params: dict = field(default_factory=dict)


@dataclass
class EnvelopeMetadata:
    sport: str
    data_type: str
    endpoint: str
    fetched_at: str
    params: dict
    source: str = SOURCE

    def to_dict(self) -> dict:
        return {
            "sport": self.sport,
            "dataType": self.data_type,
            "endpoint": self.endpoint,
            "fetchedAt": self.fetched_at,
            "source": self.source,
            "params": dict(self.params),
        }


class EnvelopeBuilder:
    """결과 → 응답 엔벨로프 변환"""

    def __init__(self, logger):
        self.logger = logger

    def metadata(self, ctx: CallContext) -> EnvelopeMetadata:
        return EnvelopeMetadata(
            sport=ctx.sport,
            data_type=ctx.data_type,
            endpoint=ctx.endpoint,
            fetched_at=utc_timestamp(),
            params=ctx.params,
        )

    def success(self, ctx: CallContext, payload: Any) -> dict:
        """성공 엔벨로프 (payload 는 가공 없이 그대로)"""
        return {
            "success": True,
            "data": payload,
            "llm_context": ctx.llm_context,
            "metadata": self.metadata(ctx).to_dict(),
        }

    def failure(self, ctx: CallContext, code: str, message: str) -> dict:
        """실패 엔벨로프 (metadata.params 는 호출자 원본 유지)"""
        self.logger.debug(f"[Envelope] failure {ctx.sport}/{ctx.data_type}: {code}")
        return {
            "success": False,
            "error": {
                "code": code,
                "message": message,
            },
            "metadata": self.metadata(ctx).to_dict(),
        }
