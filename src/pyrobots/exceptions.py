"""Custom exception hierarchy for pyrobots."""

from __future__ import annotations


class RobotsError(Exception):
    """Base exception for all pyrobots errors."""


class RobotsConfigError(RobotsError):
    """Invalid or missing configuration."""


class RobotsTransportError(RobotsError):
    """HTTP-level failure (network unreachable, timeout, unexpected status)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class RobotsDecodeError(RobotsError):
    """Response body is not JSON or does not have the expected shape."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class RobotsApiError(RobotsError):
    """The robots service answered with an application-level error."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class RobotsNotFoundError(RobotsApiError):
    """The service reported that the requested robot does not exist.

    Raised for ``404`` answers to get, update and delete calls.
    ``robot_id`` carries the identifier taken from the request path
    when it is known.
    """

    def __init__(
        self,
        message: str,
        *,
        robot_id: str = "",
        status_code: int | None = 404,
        endpoint: str = "",
    ) -> None:
        self.robot_id = robot_id
        super().__init__(message, status_code=status_code, endpoint=endpoint)
