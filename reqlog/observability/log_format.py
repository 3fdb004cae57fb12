from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from reqlog.config import LogLevelName


@dataclass(frozen=True)
class LogInfo:
    """One completed request, as it will be written to the HTTP log."""

    method: str
    path: str
    status_code: int
    duration_ms: int
    timestamp: str
    user_agent: str | None = None
    ip: str | None = None


def utc_timestamp() -> str:
    """ISO-8601 UTC with millisecond precision, e.g. ``2024-01-01T12:00:00.000Z``."""

    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_log_level(status_code: int) -> LogLevelName:
    if 500 <= status_code < 600:
        return "error"
    if 400 <= status_code < 500:
        return "warn"
    return "log"


def should_log(configured_level: LogLevelName, record_level: LogLevelName) -> bool:
    if configured_level == "log":
        return True
    if configured_level == "warn":
        return record_level != "log"
    if configured_level == "error":
        return record_level == "error"
    return False


def format_http_log(info: LogInfo) -> str:
    line = f"{info.method} {info.path} {info.status_code} - {info.duration_ms}ms"
    if info.ip is not None:
        line += f" - IP: {info.ip}"
    if info.user_agent is not None:
        line += f' - UA: "{info.user_agent}"'
    return line


def format_fallback(method: str, path: str, status_code: int) -> str:
    return f"{method} {path} {status_code}"
