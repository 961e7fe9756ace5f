"""Pytest configuration and fixtures."""

import copy
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog

from claude_messages.core import config
from fixtures.sample_requests import (
    CONTENT_BLOCKS_REQUEST,
    FULL_REQUEST,
    SIMPLE_MESSAGE_REQUEST,
)
from fixtures.sample_responses import (
    OVERLOADED_ERROR,
    SIMPLE_RESPONSE,
    STOP_SEQUENCE_RESPONSE,
    STREAM_DUMP,
)


@pytest.fixture(autouse=True)
def isolated_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Keep local TOML/.env files and CLAUDE_MESSAGES_* variables out of tests."""
    for name in list(os.environ):
        if name.startswith("CLAUDE_MESSAGES_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    config._settings = None
    yield
    config._settings = None
    structlog.reset_defaults()


@pytest.fixture
def simple_request() -> dict[str, Any]:
    """Minimal Messages API request body."""
    return copy.deepcopy(SIMPLE_MESSAGE_REQUEST)


@pytest.fixture
def full_request() -> dict[str, Any]:
    """Request body with every optional parameter set."""
    return copy.deepcopy(FULL_REQUEST)


@pytest.fixture
def content_blocks_request() -> dict[str, Any]:
    """Request with an image and a text block."""
    return copy.deepcopy(CONTENT_BLOCKS_REQUEST)


@pytest.fixture
def simple_response() -> dict[str, Any]:
    """Non-streaming text response."""
    return copy.deepcopy(SIMPLE_RESPONSE)


@pytest.fixture
def stop_sequence_response() -> dict[str, Any]:
    """Response stopped by a custom stop sequence."""
    return copy.deepcopy(STOP_SEQUENCE_RESPONSE)


@pytest.fixture
def overloaded_error() -> dict[str, Any]:
    """API error body."""
    return copy.deepcopy(OVERLOADED_ERROR)


@pytest.fixture
def stream_dump() -> str:
    """Complete SSE text of a streamed response."""
    return STREAM_DUMP
