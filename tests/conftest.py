"""Pytest configuration and shared fixtures.

Keeps tests isolated from the developer's environment: logger variables are
cleared and the working directory is a temporary path so no stray
``.env`` or ``fauna_logger.yml`` is picked up.
"""

from __future__ import annotations

from typing import Any

import pytest

from fauna_logger import RequestResult

_ENV_VARS = (
    "FAUNA_LOGGER_CONFIG",
    "FAUNA_LOG_FILE",
    "FAUNA_LOG_TIMESTAMPS",
    "FAUNA_LOG_LEVEL",
    "FAUNA_LOGGER_NAME",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def _build_result(**overrides: Any) -> RequestResult:
    """Build a ``GET /users/42`` result; keyword arguments replace fields."""
    values: dict[str, Any] = {
        "method": "GET",
        "path": "users/42",
        "query": {},
        "auth": "secret",
        "request_content": None,
        "response_headers": {"content-type": "application/json"},
        "response_content": {"id": 42},
        "status_code": 200,
        "start_time": 10.0,
        "end_time": 10.1234,
    }
    values.update(overrides)
    return RequestResult(**values)


@pytest.fixture
def make_result():
    """Factory fixture for results with selected fields replaced."""
    return _build_result


@pytest.fixture
def result() -> RequestResult:
    return _build_result()
