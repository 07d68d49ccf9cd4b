"""
Global pytest configuration and fixtures.
"""

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from provider_testkit import CREDENTIALS, RecordingTransport


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def credentials() -> dict[str, str]:
    return dict(CREDENTIALS)


@pytest.fixture
def token_payload() -> dict[str, Any]:
    return {
        "access_token": "at",
        "token_type": "Bearer",
        "expires_in": 3600,
        "refresh_token": "rt",
        "scope": "email profile",
    }


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep tests from picking up a developer's oauthhub config."""
    monkeypatch.delenv("OAUTHHUB_CONFIG", raising=False)
    monkeypatch.delenv("OAUTHHUB_DEBUG", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """CLI commands reconfigure the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)
