"""High-level async client for the robots REST resource."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyrobots._api import robots as _robots_api
from pyrobots._transport import HttpTransport
from pyrobots.config import RobotsConfig
from pyrobots.exceptions import RobotsError
from pyrobots.models.robot import DeleteConfirmation, Robot, RobotDraft

_logger = logging.getLogger(__name__)


class RobotsClient:
    """Async client for the robots service.

    Every method is a single round trip with no side effects beyond the
    network call.  The client holds no robot state; see
    :class:`pyrobots.sync.RobotSync` for keeping a local collection in step.

    Usage::

        async with RobotsClient(config) as client:
            robots = await client.list_all()
    """

    def __init__(
        self,
        config: RobotsConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config or RobotsConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: HttpTransport | None = None

    @property
    def config(self) -> RobotsConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> RobotsClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        _logger.debug("Robots client opened for %s%s", self._config.base_url, self._config.resource_path)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> HttpTransport:
        if self._transport is None:
            raise RobotsError("Client not initialized. Use 'async with RobotsClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def list_all(self) -> list[Robot]:
        """Fetch every robot, in service order."""
        return await _robots_api.fetch_robot_list(self._config, self._require_transport())

    async def get_by_id(self, robot_id: str) -> Robot:
        """Fetch a single robot.

        Raises :class:`~pyrobots.exceptions.RobotsNotFoundError` when the
        service does not know *robot_id*.
        """
        return await _robots_api.fetch_robot(self._config, self._require_transport(), robot_id)

    async def create(self, draft: RobotDraft) -> Robot:
        """Create a robot and return the record as persisted by the service."""
        return await _robots_api.create_robot(self._config, self._require_transport(), draft)

    async def update(self, robot: Robot) -> Robot:
        """Replace the robot identified by ``robot.id`` and return the stored record."""
        return await _robots_api.update_robot(self._config, self._require_transport(), robot)

    async def remove(self, robot_id: str) -> DeleteConfirmation:
        """Delete a robot and return the service acknowledgement."""
        return await _robots_api.delete_robot(self._config, self._require_transport(), robot_id)
