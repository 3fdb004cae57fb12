from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reqlog.api.demo import router as demo_router
from reqlog.config import LoggingConfig, Settings, get_settings
from reqlog.observability.logging import configure_logging
from reqlog.observability.middleware import RequestLoggerMiddleware


async def _unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
    _ = request, exc
    return JSONResponse(status_code=500, content={"statusCode": 500, "message": "Internal server error"})


def create_app(settings: Settings | None = None, logging_config: LoggingConfig | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    app = FastAPI(title=settings.app_name, version="0.1.0")
    app.add_middleware(
        RequestLoggerMiddleware,
        config=logging_config or LoggingConfig.from_settings(settings),
    )
    app.add_exception_handler(Exception, _unhandled_exception)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    if settings.enable_test_routes:
        app.include_router(demo_router)

    return app


app = create_app()
