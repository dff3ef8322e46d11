"""FastAPI 애플리케이션 진입점."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.cors import CORSMiddleware

from dateplan.api import health, plans
from dateplan.core.config import Settings, get_settings
from dateplan.core.logger import get_logger
from dateplan.core.logging_config import configure_logging

logger = get_logger(__name__)

# 플랜 API는 조회와 생성만 제공한다.
_CORS_METHODS = ["GET", "POST", "OPTIONS"]
_CORS_HEADERS = ["Content-Type", "x-service-secret"]

_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}


def _add_security_headers(app_: FastAPI) -> None:
    @app_.middleware("http")
    async def security_headers(request: Request, call_next) -> Response:
        response = await call_next(request)
        for header, value in _SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response


def _add_error_handler(app_: FastAPI, expose_internal_errors: bool) -> None:
    @app_.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        message = str(exc) if expose_internal_errors else "내부 서버 오류가 발생했습니다."
        return JSONResponse(status_code=500, content={"detail": message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """설정에 맞춰 미들웨어와 라우터를 구성한 앱을 만든다.

    Args:
        settings: 사용할 설정 (없으면 환경 변수에서 읽음)

    Returns:
        구성된 FastAPI 앱
    """
    resolved_settings = settings or get_settings()
    docs_enabled = resolved_settings.DOCS_ENABLED

    app_ = FastAPI(
        title="Dateplan Server",
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    origins = resolved_settings.cors_origins
    if origins:
        app_.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=_CORS_METHODS,
            allow_headers=_CORS_HEADERS,
        )
    if resolved_settings.SECURITY_HEADERS_ENABLED:
        _add_security_headers(app_)
    _add_error_handler(app_, resolved_settings.EXPOSE_INTERNAL_ERRORS)

    app_.include_router(health.router)
    app_.include_router(plans.router)
    return app_


configure_logging()
app = create_app()
