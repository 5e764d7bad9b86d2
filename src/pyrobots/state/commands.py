"""Store commands.

Every mutation of the robot collection is expressed as one of these
commands. Only :class:`pyrobots.state.store.RobotStore` applies them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pyrobots.models.robot import Robot


class ReplaceAll(BaseModel):
    """Discard the collection and install *robots* in the given order."""

    model_config = ConfigDict(frozen=True)

    robots: tuple[Robot, ...] = Field(default_factory=tuple)

    @field_validator("robots")
    @classmethod
    def _require_persisted(cls, value: tuple[Robot, ...]) -> tuple[Robot, ...]:
        if any(not robot.is_persisted for robot in value):
            raise ValueError("every robot must have an id")
        return value


class UpsertOne(BaseModel):
    """Replace the robot with the same id in place, or append it."""

    model_config = ConfigDict(frozen=True)

    robot: Robot

    @field_validator("robot")
    @classmethod
    def _require_persisted(cls, value: Robot) -> Robot:
        if not value.is_persisted:
            raise ValueError("robot must have an id")
        return value


class RemoveOne(BaseModel):
    """Remove the robot with *robot_id*; a no-op when it is absent."""

    model_config = ConfigDict(frozen=True)

    robot_id: str


StoreCommand = ReplaceAll | UpsertOne | RemoveOne
