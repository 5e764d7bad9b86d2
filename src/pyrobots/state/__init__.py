"""State/store layer.

This package holds the single, explicitly constructed robot collection
and the commands that are allowed to change it.
"""

from pyrobots.state.commands import RemoveOne, ReplaceAll, StoreCommand, UpsertOne
from pyrobots.state.store import RobotStore

__all__ = [
    "RemoveOne",
    "ReplaceAll",
    "RobotStore",
    "StoreCommand",
    "UpsertOne",
]
