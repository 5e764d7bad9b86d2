"""pyrobots - Async Python client keeping a local robot collection in sync with a REST service."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyrobots")
except PackageNotFoundError:
    __version__ = "0+local"
from pyrobots.client import RobotsClient
from pyrobots.config import RobotsConfig
from pyrobots.exceptions import (
    RobotsApiError,
    RobotsConfigError,
    RobotsDecodeError,
    RobotsError,
    RobotsNotFoundError,
    RobotsTransportError,
)
from pyrobots.models import DeleteConfirmation, Robot, RobotDraft
from pyrobots.state import RemoveOne, ReplaceAll, RobotStore, UpsertOne
from pyrobots.sync import RobotsApi, RobotSync

__all__ = [
    "__version__",
    "DeleteConfirmation",
    "RemoveOne",
    "ReplaceAll",
    "Robot",
    "RobotDraft",
    "RobotStore",
    "RobotSync",
    "RobotsApi",
    "RobotsApiError",
    "RobotsClient",
    "RobotsConfig",
    "RobotsConfigError",
    "RobotsDecodeError",
    "RobotsError",
    "RobotsNotFoundError",
    "RobotsTransportError",
    "UpsertOne",
]
