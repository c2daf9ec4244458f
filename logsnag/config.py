"""Configuration for the LogSnag client."""

from __future__ import annotations

import os
import typing as typ

from logsnag.errors import LogSnagConfigError

# Default configuration values - single source of truth
_DEFAULT_BASE_URL = "https://api.logsnag.com"
_DEFAULT_TIMEOUT_S = 10.0

_UNSET = object()


def _require_text(field: str, value: object) -> str:
    """Return ``value`` or raise when it is not a non-empty string."""
    if not isinstance(value, str) or value == "":
        raise LogSnagConfigError.empty_value(field)
    return value


class LogSnagConfig:
    """Credentials and settings shared by every LogSnag request.

    ``api_token`` and ``project`` are validated on assignment, so an invalid
    value is rejected where it is set rather than on the first request.
    Instances are passed to :class:`~logsnag.client.LogSnagClient` and
    should not be changed once requests are in flight.

    Attributes
    ----------
    api_token
        Bearer token sent with every request.
    project
        Project name injected into every event payload.
    logger
        Optional host-side logger. Stored as given and never called by
        the client, which logs to its own femtologging logger.
    base_url
        Scheme and host of the LogSnag API.
    timeout_s
        Request timeout in seconds used by the default transport.

    Examples
    --------
    >>> config = LogSnagConfig(api_token="token", project="my-saas")
    >>> config.is_configured
    True

    """

    __slots__ = ("_api_token", "_project", "_timeout_s", "base_url", "logger")

    def __init__(
        self,
        *,
        api_token: str | None | object = _UNSET,
        project: str | None | object = _UNSET,
        logger: object | None = None,
        base_url: str = _DEFAULT_BASE_URL,
        timeout_s: float = _DEFAULT_TIMEOUT_S,
    ) -> None:
        """Initialise the configuration, validating any supplied settings."""
        self._api_token: str | None = None
        self._project: str | None = None
        self._timeout_s = _DEFAULT_TIMEOUT_S
        self.logger = logger
        self.base_url = base_url
        self.timeout_s = timeout_s
        if api_token is not _UNSET:
            self.api_token = typ.cast("str | None", api_token)
        if project is not _UNSET:
            self.project = typ.cast("str | None", project)

    @property
    def api_token(self) -> str | None:
        """Return the API token, or ``None`` when not yet set."""
        return self._api_token

    @api_token.setter
    def api_token(self, token: str | None) -> None:
        self._api_token = _require_text("api_token", token)

    @property
    def project(self) -> str | None:
        """Return the project name, or ``None`` when not yet set."""
        return self._project

    @project.setter
    def project(self, project_name: str | None) -> None:
        self._project = _require_text("project", project_name)

    @property
    def timeout_s(self) -> float:
        """Return the request timeout in seconds."""
        return self._timeout_s

    @timeout_s.setter
    def timeout_s(self, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise LogSnagConfigError.invalid_timeout(value)
        if value <= 0:
            raise LogSnagConfigError.invalid_timeout(value)
        self._timeout_s = float(value)

    @property
    def is_configured(self) -> bool:
        """Return True once both ``api_token`` and ``project`` are set."""
        return self._api_token is not None and self._project is not None

    def __repr__(self) -> str:
        """Return a representation that never exposes the API token."""
        token_state = "set" if self._api_token is not None else "unset"
        return (
            f"LogSnagConfig(project={self._project!r}, api_token=<{token_state}>, "
            f"base_url={self.base_url!r}, timeout_s={self._timeout_s!r})"
        )

    @staticmethod
    def _parse_timeout_from_env() -> float:
        """Parse and validate the request timeout from environment.

        Returns
        -------
        float
            Validated timeout value or default.

        Raises
        ------
        LogSnagConfigError
            If the timeout value is not a positive number.

        """
        raw_timeout = os.environ.get("LOGSNAG_TIMEOUT_S")
        if raw_timeout is None:
            return _DEFAULT_TIMEOUT_S

        try:
            timeout_s = float(raw_timeout)
        except ValueError as exc:
            raise LogSnagConfigError.invalid_timeout(raw_timeout) from exc

        if timeout_s <= 0:
            raise LogSnagConfigError.invalid_timeout(raw_timeout)

        return timeout_s

    @staticmethod
    def _required_env(variable: str) -> str:
        raw_value = os.environ.get(variable, "").strip()
        if not raw_value:
            raise LogSnagConfigError.missing_env(variable)
        return raw_value

    @classmethod
    def from_env(cls) -> LogSnagConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``LOGSNAG_API_TOKEN``: Required API token
        - ``LOGSNAG_PROJECT``: Required project name
        - ``LOGSNAG_BASE_URL``: Optional API base URL override
        - ``LOGSNAG_TIMEOUT_S``: Optional request timeout (positive number)

        Returns
        -------
        LogSnagConfig
            Configuration instance with values from environment.

        Raises
        ------
        LogSnagConfigError
            If required variables are missing or the timeout is invalid.

        """
        api_token = cls._required_env("LOGSNAG_API_TOKEN")
        project = cls._required_env("LOGSNAG_PROJECT")
        base_url = os.environ.get("LOGSNAG_BASE_URL", _DEFAULT_BASE_URL)
        timeout_s = cls._parse_timeout_from_env()

        return cls(
            api_token=api_token,
            project=project,
            base_url=base_url,
            timeout_s=timeout_s,
        )
