"""
Sports Router

종목별 GoalServe 피드 엔드포인트.
라우트는 피드 테이블(class_lib.goalserve.feeds)에서 생성한다.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from class_lib.goalserve.envelope import CallContext, EnvelopeBuilder, utc_timestamp
from class_lib.goalserve.facade import GoalserveGateway
from class_lib.goalserve.feeds import FEEDS, EndpointSpec, SportFeedConfig
from apps.sports.deps import get_gateway, logger

API_NAME = "Sports Data API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Sports data aggregation API for LLM consumption"

PATH_PARAMETER_DOCS = {
    "date": "Date in dd.MM.yyyy format (e.g., 02.12.2025)",
    "teamId": "Team ID",
    "playerId": "Player ID",
    "fighterId": "Fighter ID",
    "teamId1": "First team ID (comparison order is preserved)",
    "teamId2": "Second team ID",
}

QUERY_PARAMETER_DOCS = {
    "showOdds": "Include betting odds (1 or true)",
    "date1": "Start date for date range",
    "date2": "End date for date range",
    "bm": "Bookmaker IDs (comma-separated)",
    "market": "Market IDs (comma-separated)",
    "json": "Set to 0 to receive the raw upstream (non-JSON) body",
}


# =============================================================================
# Response Models
# =============================================================================

class EnvelopeMetadataModel(BaseModel):
    """응답 메타데이터"""
    sport: str = Field(..., description="종목 ID")
    dataType: str = Field(..., description="데이터 카테고리")
    endpoint: str = Field(..., description="호출된 경로")
    fetchedAt: str = Field(..., description="응답 생성 시각 (UTC)")
    source: str = Field(default="goalserve", description="데이터 출처")
    params: dict = Field(default_factory=dict, description="호출자 파라미터")


class SuccessEnvelope(BaseModel):
    """성공 응답"""
    success: bool = True
    data: Any = Field(default=None, description="업스트림 페이로드 (가공 없음)")
    llm_context: str = Field(..., description="LLM 용 요약 문장")
    metadata: EnvelopeMetadataModel


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorEnvelope(BaseModel):
    """실패 응답"""
    success: bool = False
    error: ErrorDetail
    metadata: EnvelopeMetadataModel


ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope, "description": "Invalid path parameter"},
    500: {"model": ErrorEnvelope, "description": "GoalServe API error"},
    501: {"model": ErrorEnvelope, "description": "Operation not yet implemented"},
}


# =============================================================================
# Route Factory
# =============================================================================

def _openapi_parameters(spec: EndpointSpec) -> list[dict]:
    parameters = [
        {
            "name": name,
            "in": "path",
            "required": True,
            "schema": {"type": "string"},
            "description": PATH_PARAMETER_DOCS.get(name, name),
        }
        for name in spec.path_params
    ]
    for name in spec.options.names + ("json",):
        parameters.append({
            "name": name,
            "in": "query",
            "required": False,
            "schema": {"type": "string"},
            "description": QUERY_PARAMETER_DOCS[name],
        })
    return parameters


def _make_handler(sport_id: str, operation: str):
    async def handler(
        request: Request,
        gateway: GoalserveGateway = Depends(get_gateway)
    ):
        status_code, body = await gateway.respond(
            sport=sport_id,
            operation=operation,
            path_params=request.path_params,
            query=request.query_params,
            endpoint=request.url.path,
        )
        return JSONResponse(status_code=status_code, content=body)

    handler.__name__ = f"{sport_id.replace('-', '_')}_{operation}"
    return handler


def build_sport_router(feed: SportFeedConfig) -> APIRouter:
    """종목 1개의 피드 테이블 → APIRouter"""
    router = APIRouter(prefix=f"/api/{feed.sport_id}", tags=[feed.label])

    for spec in feed.endpoints:
        description = spec.summary if spec.implemented else f"{spec.summary} (not yet implemented)"
        router.add_api_route(
            spec.route,
            _make_handler(feed.sport_id, spec.operation),
            methods=["GET"],
            name=f"{feed.sport_id}:{spec.operation}",
            summary=spec.summary,
            description=description,
            response_model=SuccessEnvelope,
            responses=ERROR_RESPONSES,
            openapi_extra={"parameters": _openapi_parameters(spec)},
        )

    return router


sport_routers = [build_sport_router(feed) for feed in FEEDS.values()]


# =============================================================================
# API Index / Coverage
# =============================================================================

index_router = APIRouter(prefix="/api", tags=["Index"])
envelopes = EnvelopeBuilder(logger)


def build_index() -> dict:
    """피드 테이블 기반 API 문서"""
    sports = {}
    for feed in FEEDS.values():
        endpoints = []
        for spec in feed.endpoints:
            line = f"GET {spec.route} - {spec.summary}"
            if not spec.implemented:
                line += " (not yet implemented)"
            endpoints.append(line)
        sports[feed.sport_id] = {"base": f"/api/{feed.sport_id}", "endpoints": endpoints}

    return {
        "success": True,
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "documentation": {
            "sports": sports,
            "queryParameters": {"date": PATH_PARAMETER_DOCS["date"], **QUERY_PARAMETER_DOCS},
        },
        "timestamp": utc_timestamp(),
    }


@index_router.get("")
async def api_index():
    """
    API 문서 및 사용 가능한 엔드포인트 목록
    """
    return build_index()


@index_router.get("/coverage")
async def api_coverage(request: Request):
    """
    지원 종목 목록

    - implemented: 업스트림 매핑이 있는 오퍼레이션 존재 여부
    """
    sports = [
        {
            "id": feed.sport_id,
            "name": feed.label,
            "category": feed.group,
            "implemented": any(spec.implemented for spec in feed.endpoints),
        }
        for feed in FEEDS.values()
    ]
    names = ", ".join(feed.label for feed in FEEDS.values())

    ctx = CallContext(
        sport="all",
        data_type="coverage",
        endpoint=request.url.path,
        llm_context=f"Available sports coverage: {names}",
    )
    return envelopes.success(ctx, {"sports": sports})
