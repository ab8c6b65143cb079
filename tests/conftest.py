"""Shared fixtures for leakguard tests."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from leakguard.config import Settings
from tests.helpers import RecordingHandler, make_recording_logger


@pytest.fixture
def recording_logger(request: pytest.FixtureRequest) -> tuple[logging.Logger, RecordingHandler]:
    """Operator channel that captures records without touching real streams."""
    return make_recording_logger(f"tests.errors.{request.node.name}")


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment and any .env file."""
    return Settings(_env_file=None, log_level="WARNING")  # type: ignore[call-arg]


@pytest_asyncio.fixture
async def client(
    settings: Settings, recording_logger: tuple[logging.Logger, RecordingHandler]
) -> AsyncGenerator[AsyncClient]:
    """Create test client wired to the recording error logger."""
    from leakguard.main import create_app

    error_logger, _ = recording_logger
    app = create_app(settings=settings, error_logger=error_logger)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
