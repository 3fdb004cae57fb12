from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, get_args

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevelName = Literal["log", "warn", "error"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = Field(default="reqlog", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")
    enable_test_routes: bool = Field(default=True, alias="ENABLE_TEST_ROUTES")

    http_log_enabled: bool = Field(default=True, alias="HTTP_LOG_ENABLED")
    http_log_level: LogLevelName = Field(default="log", alias="HTTP_LOG_LEVEL")
    http_log_include_user_agent: bool = Field(default=True, alias="HTTP_LOG_INCLUDE_USER_AGENT")
    http_log_include_ip: bool = Field(default=True, alias="HTTP_LOG_INCLUDE_IP")
    # Comma-separated list of exact request paths.
    http_log_exclude_routes: str = Field(default="/health", alias="HTTP_LOG_EXCLUDE_ROUTES")

    @property
    def exclude_routes(self) -> frozenset[str]:
        return frozenset(part.strip() for part in self.http_log_exclude_routes.split(",") if part.strip())


@dataclass(frozen=True)
class LoggingConfig:
    """Request logging options, read once at startup and shared read-only."""

    enabled: bool = True
    level: LogLevelName = "log"
    include_user_agent: bool = True
    include_ip: bool = True
    exclude_routes: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if self.level not in get_args(LogLevelName):
            raise ValueError(f"Unknown request log level: {self.level!r}")

    @classmethod
    def from_settings(cls, settings: Settings) -> LoggingConfig:
        return cls(
            enabled=settings.http_log_enabled,
            level=settings.http_log_level,
            include_user_agent=settings.http_log_include_user_agent,
            include_ip=settings.http_log_include_ip,
            exclude_routes=settings.exclude_routes,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
