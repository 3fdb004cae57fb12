import re

import pytest

from reqlog.observability.log_format import (
    LogInfo,
    format_fallback,
    format_http_log,
    get_log_level,
    should_log,
    utc_timestamp,
)


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (100, "log"),
        (200, "log"),
        (204, "log"),
        (302, "log"),
        (399, "log"),
        (400, "warn"),
        (404, "warn"),
        (499, "warn"),
        (500, "error"),
        (503, "error"),
        (599, "error"),
        (600, "log"),
    ],
)
def test_status_code_classification(status_code: int, expected: str) -> None:
    assert get_log_level(status_code) == expected


def test_log_level_emits_everything() -> None:
    assert all(should_log("log", level) for level in ("log", "warn", "error"))


def test_warn_level_skips_informational_records() -> None:
    assert should_log("warn", "log") is False
    assert should_log("warn", "warn") is True
    assert should_log("warn", "error") is True


def test_error_level_only_emits_errors() -> None:
    assert should_log("error", "log") is False
    assert should_log("error", "warn") is False
    assert should_log("error", "error") is True


def test_format_includes_request_fields() -> None:
    info = LogInfo(method="GET", path="/test/hello", status_code=200, duration_ms=12, timestamp=utc_timestamp())
    assert format_http_log(info) == "GET /test/hello 200 - 12ms"


def test_format_adds_ip_and_user_agent_when_present() -> None:
    info = LogInfo(
        method="POST",
        path="/test/submit",
        status_code=201,
        duration_ms=3,
        timestamp=utc_timestamp(),
        user_agent="curl/8.4.0",
        ip="10.0.0.7",
    )
    line = format_http_log(info)
    assert line.startswith("POST /test/submit 201 - 3ms")
    assert "IP: 10.0.0.7" in line
    assert 'UA: "curl/8.4.0"' in line


def test_format_keeps_empty_user_agent() -> None:
    info = LogInfo(method="GET", path="/", status_code=200, duration_ms=0, timestamp=utc_timestamp(), user_agent="")
    assert format_http_log(info).endswith('UA: ""')


def test_fallback_line_is_minimal() -> None:
    assert format_fallback("GET", "/x", 500) == "GET /x 500"


def test_timestamp_is_iso8601_utc() -> None:
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())


def test_log_info_is_immutable() -> None:
    info = LogInfo(method="GET", path="/", status_code=200, duration_ms=1, timestamp=utc_timestamp())
    with pytest.raises(AttributeError):
        info.status_code = 500  # type: ignore[misc]
