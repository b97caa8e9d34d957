"""
Health Router

헬스체크 엔드포인트 (인증 없음)
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from class_config.class_env import Config
from class_lib.goalserve.envelope import utc_timestamp

router = APIRouter(prefix="/health", tags=["Health"])
config = Config()


class HealthResponse(BaseModel):
    success: bool
    status: str
    timestamp: str
    environment: str


class ReadyResponse(BaseModel):
    success: bool
    status: str
    checks: dict[str, bool]
    timestamp: str


@router.get("", response_model=HealthResponse)
async def health_check():
    """기본 헬스체크"""
    return HealthResponse(
        success=True,
        status="healthy",
        timestamp=utc_timestamp(),
        environment=config.app_env,
    )


@router.get("/ready", response_model=ReadyResponse, responses={503: {"model": ReadyResponse}})
async def readiness_check(request: Request):
    """
    준비 상태 확인

    - api: 항상 true
    - goalserve: lifespan 에서 게이트웨이 생성 완료 여부
    """
    checks = {
        "api": True,
        "goalserve": getattr(request.app.state, "gateway", None) is not None,
    }
    is_ready = all(checks.values())

    body = ReadyResponse(
        success=is_ready,
        status="ready" if is_ready else "not_ready",
        checks=checks,
        timestamp=utc_timestamp(),
    )
    return JSONResponse(status_code=200 if is_ready else 503, content=body.model_dump())


@router.get("/live")
async def liveness_check():
    return {"success": True, "status": "alive", "timestamp": utc_timestamp()}
