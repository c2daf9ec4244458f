"""Unit tests for LogSnag client configuration."""

from __future__ import annotations

import logging
import os
from unittest import mock

import pytest

from logsnag.config import LogSnagConfig
from logsnag.errors import LogSnagConfigError
from tests.helpers.fakes import FakeLogger


class TestLogSnagConfigSetters:
    """Tests for guarded configuration assignment."""

    def test_stores_settings(self) -> None:
        """Token, project and logger are returned as assigned."""
        logger = FakeLogger()
        config = LogSnagConfig()
        config.api_token = "123456"
        config.project = "test-project"
        config.logger = logger

        assert config.api_token == "123456"
        assert config.project == "test-project"
        assert config.logger is logger

    @pytest.mark.parametrize("field", ["api_token", "project"])
    @pytest.mark.parametrize("value", [None, ""], ids=["none", "empty"])
    def test_rejects_empty_values_on_assignment(
        self, field: str, value: str | None
    ) -> None:
        """Assigning None or an empty string fails immediately."""
        config = LogSnagConfig()

        with pytest.raises(LogSnagConfigError) as exc_info:
            setattr(config, field, value)

        assert field in str(exc_info.value), "Error should name the setting"

    @pytest.mark.parametrize("field", ["api_token", "project"])
    @pytest.mark.parametrize("value", [123, b"x"], ids=["int", "bytes"])
    def test_rejects_non_string_values(self, field: str, value: object) -> None:
        """Only text is accepted for the token and project."""
        config = LogSnagConfig()

        with pytest.raises(LogSnagConfigError) as exc_info:
            setattr(config, field, value)

        assert field in str(exc_info.value), "Error should name the setting"
        assert getattr(config, field) is None

    @pytest.mark.parametrize("field", ["api_token", "project"])
    def test_constructor_routes_through_setters(self, field: str) -> None:
        """Keyword arguments are validated like assignments."""
        with pytest.raises(LogSnagConfigError):
            LogSnagConfig(**{field: ""})

    def test_rejected_assignment_keeps_previous_value(self) -> None:
        """A failed assignment leaves the stored value unchanged."""
        config = LogSnagConfig(api_token="abc", project="p")

        with pytest.raises(LogSnagConfigError):
            config.project = ""

        assert config.project == "p"

    def test_logger_accepts_none(self) -> None:
        """The logger slot is optional and unvalidated."""
        config = LogSnagConfig(logger=None)
        assert config.logger is None

    def test_logger_accepts_stdlib_logger(self) -> None:
        """Any sink is stored unchanged, including a standard library logger."""
        host_logger = logging.getLogger("host-app")

        config = LogSnagConfig(logger=host_logger)

        assert config.logger is host_logger


class TestLogSnagConfigState:
    """Tests for derived configuration state."""

    def test_unset_config_is_not_configured(self) -> None:
        """A fresh config has no token or project."""
        config = LogSnagConfig()

        assert config.api_token is None
        assert config.project is None
        assert config.is_configured is False

    def test_partial_config_is_not_configured(self) -> None:
        """Both token and project are needed."""
        assert LogSnagConfig(api_token="abc").is_configured is False
        assert LogSnagConfig(project="p").is_configured is False

    def test_full_config_is_configured(self) -> None:
        """Token plus project marks the config as configured."""
        assert LogSnagConfig(api_token="abc", project="p").is_configured is True

    def test_defaults(self) -> None:
        """Transport settings fall back to defaults."""
        config = LogSnagConfig()

        assert config.base_url == "https://api.logsnag.com"
        assert config.timeout_s == 10.0

    @pytest.mark.parametrize("timeout", [0, -1.5, True, "10"])
    def test_rejects_invalid_timeout(self, timeout: object) -> None:
        """Timeouts must be positive numbers."""
        with pytest.raises(LogSnagConfigError, match="timeout"):
            LogSnagConfig(timeout_s=timeout)  # type: ignore[arg-type]

    def test_repr_hides_api_token(self) -> None:
        """The token never appears in the representation."""
        config = LogSnagConfig(api_token="super-secret", project="p")

        assert "super-secret" not in repr(config)
        assert "project='p'" in repr(config)


class TestLogSnagConfigFromEnv:
    """Tests for configuration loading from environment variables."""

    def test_reads_required_values(self) -> None:
        """Token and project come from the environment."""
        env = {"LOGSNAG_API_TOKEN": "token-1", "LOGSNAG_PROJECT": "proj"}
        with mock.patch.dict(os.environ, env, clear=True):
            config = LogSnagConfig.from_env()

        assert config.api_token == "token-1"
        assert config.project == "proj"
        assert config.base_url == "https://api.logsnag.com"
        assert config.timeout_s == 10.0

    def test_reads_optional_overrides(self) -> None:
        """Base URL and timeout can be overridden."""
        env = {
            "LOGSNAG_API_TOKEN": "token-1",
            "LOGSNAG_PROJECT": "proj",
            "LOGSNAG_BASE_URL": "http://localhost:8080",
            "LOGSNAG_TIMEOUT_S": "2.5",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            config = LogSnagConfig.from_env()

        assert config.base_url == "http://localhost:8080"
        assert config.timeout_s == 2.5

    @pytest.mark.parametrize(
        ("env", "missing"),
        [
            ({"LOGSNAG_PROJECT": "proj"}, "LOGSNAG_API_TOKEN"),
            ({"LOGSNAG_API_TOKEN": "token-1"}, "LOGSNAG_PROJECT"),
            ({"LOGSNAG_API_TOKEN": "  ", "LOGSNAG_PROJECT": "p"}, "LOGSNAG_API_TOKEN"),
        ],
        ids=["no-token", "no-project", "blank-token"],
    )
    def test_requires_token_and_project(
        self, env: dict[str, str], missing: str
    ) -> None:
        """Missing or blank required variables are named in the error."""
        with mock.patch.dict(os.environ, env, clear=True):
            with pytest.raises(LogSnagConfigError) as exc_info:
                LogSnagConfig.from_env()

        assert missing in str(exc_info.value)

    @pytest.mark.parametrize("raw_timeout", ["soon", "0", "-3"])
    def test_rejects_invalid_timeout(self, raw_timeout: str) -> None:
        """Non-numeric and non-positive timeouts are rejected."""
        env = {
            "LOGSNAG_API_TOKEN": "token-1",
            "LOGSNAG_PROJECT": "proj",
            "LOGSNAG_TIMEOUT_S": raw_timeout,
        }
        with mock.patch.dict(os.environ, env, clear=True):
            with pytest.raises(LogSnagConfigError, match="timeout"):
                LogSnagConfig.from_env()
