import time
import traceback
from contextlib import asynccontextmanager
from http import HTTPStatus

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from class_config.class_env import Config
from class_config.class_log import ConfigLogger, redact_secret
from class_lib.goalserve.facade import GoalserveGateway
from class_lib.goalserve.feeds import FEEDS
from apps.health.router import router as health_router
from apps.sports.router import API_DESCRIPTION, API_NAME, API_VERSION, index_router, sport_routers

config = Config()
logger = ConfigLogger('http_log', 365).get_logger('http')


@asynccontextmanager
async def lifespan(app: FastAPI):
    # API 키 누락 시 ConfigurationError → 서비스 기동 실패
    app.state.gateway = GoalserveGateway.create(logger, config)
    logger.info(f"Sports Data API 서비스 시작 (env={config.app_env}, port={config.port})")
    yield
    await app.state.gateway.close()
    app.state.gateway = None
    logger.info("Sports Data API 서비스 종료")


root = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=API_VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url="/docs.json",
    openapi_tags=[{"name": feed.label, "description": f"/api/{feed.sport_id}"} for feed in FEEDS.values()],
    lifespan=lifespan,
)

# CORS 설정
root.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@root.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} {duration:.0f}ms")
    return response


# =============================================================================
# Exception Handlers
# =============================================================================

@root.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={
            "success": False,
            "error": {
                "code": "NOT_FOUND",
                "message": "The requested endpoint does not exist.",
                "details": {"availableEndpoints": "/api for documentation"},
            },
        })

    code = HTTPStatus(exc.status_code).phrase.upper().replace(" ", "_").replace("-", "_")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": {"code": code, "message": str(exc.detail)}},
        headers=getattr(exc, "headers", None),
    )


@root.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    secret = config.goalserve_api_key
    stack = redact_secret("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), secret)
    logger.error(f"Unhandled error on {request.method} {request.url.path}\n{stack}")

    error = {
        "code": "INTERNAL_SERVER_ERROR",
        "message": "An unexpected error occurred." if config.is_production else redact_secret(str(exc), secret),
    }
    if config.is_development:
        error["details"] = {"stack": stack}

    return JSONResponse(status_code=500, content={"success": False, "error": error})


# =============================================================================
# Routers
# =============================================================================

root.include_router(health_router)
root.include_router(index_router)
for sport_router in sport_routers:
    root.include_router(sport_router)


@root.get("/docs", response_class=HTMLResponse, include_in_schema=False)
async def custom_swagger_ui():
    return get_swagger_ui_html(
        openapi_url="/docs.json",
        title=f"{API_NAME} - Swagger UI",
        swagger_ui_parameters={
            "defaultModelsExpandDepth": -1,
            "displayRequestDuration": True,
        },
    )


app = root


if __name__ == "__main__":
    uvicorn.run("main_http:app", host="0.0.0.0", port=config.port, reload=config.is_development)
