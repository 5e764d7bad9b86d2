"""In-memory robot collection store.

This is the only component allowed to hold and mutate the canonical
robot collection.  Writers go through :meth:`RobotStore.apply`; in the
library that writer is :class:`pyrobots.sync.RobotSync` and nothing
else.  Readers get immutable snapshots.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pyrobots.models.robot import Robot
from pyrobots.state.commands import RemoveOne, ReplaceAll, StoreCommand, UpsertOne

_logger = logging.getLogger(__name__)

Listener = Callable[[tuple[Robot, ...]], None]


class RobotStore:
    """Ordered, id-keyed store for robot records.

    Ordering rules:

    * ``ReplaceAll`` installs the received order.
    * ``UpsertOne`` keeps the position of an existing id, else appends.
    * ``RemoveOne`` never reorders the survivors.

    Commands are applied synchronously and never suspend, so under
    cooperative scheduling each one is atomic.
    """

    def __init__(self) -> None:
        # dicts keep insertion order and keep the slot when an existing key is reassigned.
        self._robots: dict[str, Robot] = {}
        self._listeners: list[Listener] = []

    def apply(self, command: StoreCommand) -> None:
        """Apply a single store command and notify listeners."""
        if isinstance(command, ReplaceAll):
            robots: dict[str, Robot] = {}
            for robot in command.robots:
                robots[robot.id] = robot
            self._robots = robots
            _logger.debug("Replaced collection with %d robot(s)", len(robots))
        elif isinstance(command, UpsertOne):
            robot = command.robot
            action = "Replaced" if robot.id in self._robots else "Appended"
            self._robots[robot.id] = robot
            _logger.debug("%s robot %s", action, robot.id)
        elif isinstance(command, RemoveOne):
            if self._robots.pop(command.robot_id, None) is None:
                _logger.debug("Robot %s not in collection, nothing to remove", command.robot_id)
            else:
                _logger.debug("Removed robot %s", command.robot_id)
        else:
            raise TypeError(f"Unsupported store command: {type(command).__name__}")

        self._notify()

    def select_all(self) -> tuple[Robot, ...]:
        """All robots in stored order."""
        return tuple(self._robots.values())

    def get(self, robot_id: str) -> Robot | None:
        """The robot with *robot_id*, if present."""
        return self._robots.get(robot_id)

    def __len__(self) -> int:
        return len(self._robots)

    def __contains__(self, robot_id: object) -> bool:
        return robot_id in self._robots

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* to receive a snapshot after every command.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.select_all()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                _logger.debug("Store listener failed", exc_info=True)
