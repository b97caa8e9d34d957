"""
Sports Dependencies

FastAPI 의존성 주입 모듈
"""

from fastapi import HTTPException, Request, status
from class_config.class_log import ConfigLogger
from class_lib.goalserve.facade import GoalserveGateway

# 로거 설정
logger = ConfigLogger('http_log', 365).get_logger('sports')


def get_gateway(request: Request) -> GoalserveGateway:
    """lifespan 에서 생성된 게이트웨이 반환"""
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Gateway not initialized"
        )
    return gateway
