"""Data models for robots service payloads."""

from pyrobots.models._base import RobotsBaseModel
from pyrobots.models.robot import DeleteConfirmation, Robot, RobotDraft

__all__ = [
    "DeleteConfirmation",
    "Robot",
    "RobotDraft",
    "RobotsBaseModel",
]
