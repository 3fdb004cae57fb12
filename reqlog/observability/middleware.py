from __future__ import annotations

from time import perf_counter
from typing import Any, Callable

import structlog

from reqlog.config import LoggingConfig
from reqlog.observability import log_format
from reqlog.observability.log_format import LogInfo, get_log_level, should_log


LOGGER_NAME = "HTTP"


def _header(scope: dict[str, Any], name: bytes) -> str | None:
    for key, value in scope.get("headers") or []:
        if key.lower() == name:
            return value.decode("latin-1")
    return None


def _emit(level: str, message: str) -> None:
    logger = structlog.get_logger(LOGGER_NAME)
    if level == "error":
        logger.error(message)
    elif level == "warn":
        logger.warning(message)
    else:
        logger.info(message)


class RequestLoggerMiddleware:
    """Times each HTTP request and logs it once the response has been fully sent.

    Whether a line is written depends on the response severity (5xx error,
    4xx warn, everything else log) and the configured minimum level.
    """

    def __init__(self, app: Callable[..., Any], config: LoggingConfig) -> None:
        self.app = app
        self.config = config

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")
        if not self.config.enabled or path in self.config.exclude_routes:
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "")
        start = perf_counter()
        user_agent = (_header(scope, b"user-agent") or "") if self.config.include_user_agent else None
        client = scope.get("client")
        ip = client[0] if self.config.include_ip and client else None

        status_code: int = 500
        response_started = False
        completed = False

        def complete(final_status: int) -> None:
            nonlocal completed
            if completed:
                return
            completed = True
            duration_ms = max(0, int((perf_counter() - start) * 1000))
            self._log_request(method, path, final_status, duration_ms, user_agent, ip)

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code, response_started

            if message.get("type") == "http.response.start":
                response_started = True
                status_code = int(message.get("status", 500))
            elif message.get("type") == "http.response.body" and not message.get("more_body", False):
                complete(status_code)

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            # Once the response has started the client keeps its status;
            # otherwise the server error handler sends a 500.
            complete(status_code if response_started else 500)
            raise

    def _log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: int,
        user_agent: str | None,
        ip: str | None,
    ) -> None:
        level = get_log_level(status_code)
        if not should_log(self.config.level, level):
            return

        try:
            message = log_format.format_http_log(
                LogInfo(
                    method=method,
                    path=path,
                    status_code=status_code,
                    duration_ms=duration_ms,
                    timestamp=log_format.utc_timestamp(),
                    user_agent=user_agent,
                    ip=ip,
                )
            )
        except Exception:
            message = log_format.format_fallback(method, path, status_code)

        try:
            _emit(level, message)
        except Exception:
            # A broken log sink must not fail the response.
            pass
