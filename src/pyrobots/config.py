"""Client configuration for pyrobots."""

from __future__ import annotations

import dataclasses
import os
from typing import Any
from urllib.parse import quote

from pyrobots._constants import BASE_URL, ROBOTS_PATH, USER_AGENT
from pyrobots.exceptions import RobotsConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class RobotsConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Root URL of the robots service, without trailing slash.
    resource_path : str
        Path of the robots collection resource, relative to ``base_url``.
    request_timeout : float or None
        Total timeout in seconds for a single request.  ``None`` leaves
        the decision to the underlying HTTP session.
    verify_ssl : bool
        Verify TLS certificates when talking to an ``https`` service.
    user_agent : str
        ``User-Agent`` header sent with every request.
    """

    base_url: str = BASE_URL
    resource_path: str = ROBOTS_PATH
    request_timeout: float | None = None
    verify_ssl: bool = True
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        base_url = self.base_url.strip().rstrip("/")
        if not base_url:
            raise RobotsConfigError("base_url must be non-empty")
        resource_path = "/" + self.resource_path.strip().strip("/")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise RobotsConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "base_url", base_url)
        object.__setattr__(self, "resource_path", resource_path)

    def robot_path(self, robot_id: str | None = None) -> str:
        """Path of the collection, or of a single robot when *robot_id* is given."""
        if robot_id is None:
            return self.resource_path
        return f"{self.resource_path}/{quote(robot_id, safe='')}"

    @classmethod
    def from_env(cls, **overrides: Any) -> RobotsConfig:
        """Create configuration from environment variables.

        Reads ``ROBOTS_BASE_URL``, ``ROBOTS_RESOURCE_PATH``,
        ``ROBOTS_REQUEST_TIMEOUT``, ``ROBOTS_VERIFY_SSL`` and
        ``ROBOTS_USER_AGENT``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "ROBOTS_BASE_URL": "base_url",
            "ROBOTS_RESOURCE_PATH": "resource_path",
            "ROBOTS_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("ROBOTS_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise RobotsConfigError(f"ROBOTS_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        if "verify_ssl" not in overrides:
            config_kwargs["verify_ssl"] = _env_bool(env.get("ROBOTS_VERIFY_SSL"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
