"""Shared fixtures for LogSnag client tests."""

from __future__ import annotations

import pytest

from logsnag.config import LogSnagConfig
from tests.helpers.fakes import FakeLogger

API_TOKEN = "test-token-123456"
PROJECT = "test-project"
BASE_URL = "https://api.logsnag.com"


@pytest.fixture
def config() -> LogSnagConfig:
    """Provide a fully configured LogSnag configuration."""
    return LogSnagConfig(api_token=API_TOKEN, project=PROJECT)


@pytest.fixture
def fake_logger() -> FakeLogger:
    """Provide a logger double that records calls."""
    return FakeLogger()

