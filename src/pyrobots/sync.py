"""Synchronization operations between the robots service and a local store.

Each operation performs one remote call and, on success, applies exactly
one store command built from the record the service returned.  The
caller's input is never written to the store.  On failure the error
propagates unchanged and the store is left untouched.

Operations are coroutines.  Several may be in flight at once; nothing
serializes them, so when two calls touch the same robot the one whose
response arrives last wins.
"""

from __future__ import annotations

import logging
from typing import Protocol

from pyrobots.models.robot import DeleteConfirmation, Robot, RobotDraft
from pyrobots.state.commands import RemoveOne, ReplaceAll, UpsertOne
from pyrobots.state.store import RobotStore

_logger = logging.getLogger(__name__)


class RobotsApi(Protocol):
    """Remote calls :class:`RobotSync` depends on (see :class:`pyrobots.client.RobotsClient`)."""

    async def list_all(self) -> list[Robot]: ...

    async def get_by_id(self, robot_id: str) -> Robot: ...

    async def create(self, draft: RobotDraft) -> Robot: ...

    async def update(self, robot: Robot) -> Robot: ...

    async def remove(self, robot_id: str) -> DeleteConfirmation: ...


class RobotSync:
    """Orchestrates remote calls and reconciles results into a :class:`RobotStore`.

    Usage::

        store = RobotStore()
        async with RobotsClient(config) as client:
            robots = RobotSync(client, store)
            await robots.fetch_all()
            await robots.create(RobotDraft(...))
            print(store.select_all())
    """

    def __init__(self, api: RobotsApi, store: RobotStore) -> None:
        self._api = api
        self._store = store

    @property
    def store(self) -> RobotStore:
        return self._store

    async def fetch_all(self) -> list[Robot]:
        """Replace the collection with every robot the service holds."""
        robots = await self._api.list_all()
        self._store.apply(ReplaceAll(robots=tuple(robots)))
        return robots

    async def fetch_one(self, robot_id: str) -> Robot:
        """Add or refresh a single robot, keeping unrelated records."""
        robot = await self._api.get_by_id(robot_id)
        self._store.apply(UpsertOne(robot=robot))
        return robot

    async def create(self, draft: RobotDraft) -> Robot:
        """Create a robot remotely and append the persisted record."""
        robot = await self._api.create(draft)
        self._store.apply(UpsertOne(robot=robot))
        _logger.debug("Robot %s created and stored", robot.id)
        return robot

    async def update(self, robot: Robot) -> Robot:
        """Update a robot remotely and replace it in place with the service's version."""
        updated = await self._api.update(robot)
        self._store.apply(UpsertOne(robot=updated))
        return updated

    async def remove(self, robot: Robot) -> DeleteConfirmation:
        """Delete a robot remotely, then drop it from the collection."""
        confirmation = await self._api.remove(robot.id)
        self._store.apply(RemoveOne(robot_id=robot.id))
        _logger.debug("Robot %s removed: %s", robot.id, confirmation.message)
        return confirmation
