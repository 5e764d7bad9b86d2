"""Robots resource endpoints: ``/robots`` and ``/robots/{id}``.

Each function issues one request and runs the decode step specific to
its endpoint.  Envelopes differ per endpoint (only ``POST`` nests the
record under ``newRobot``), so no uniform envelope is assumed.
"""

from __future__ import annotations

import logging

from pyrobots._api._common import decode_robot, require_list, require_object, unwrap_envelope, validate_model
from pyrobots._constants import CREATE_ENVELOPE_KEY
from pyrobots._transport import Transport
from pyrobots.config import RobotsConfig
from pyrobots.exceptions import RobotsNotFoundError, RobotsTransportError
from pyrobots.models.robot import DeleteConfirmation, Robot, RobotDraft

_logger = logging.getLogger(__name__)


def _require_id(robot_id: str, operation: str) -> str:
    if not robot_id:
        raise ValueError(f"{operation} requires a robot id")
    return robot_id


async def _request_robot(
    config: RobotsConfig,
    transport: Transport,
    method: str,
    robot_id: str,
    payload: dict[str, object] | None = None,
) -> object:
    path = config.robot_path(robot_id)
    try:
        return await transport.request(method, path, payload)
    except RobotsTransportError as exc:
        if exc.status_code != 404:
            raise
        raise RobotsNotFoundError(
            f"Robot {robot_id} not found ({exc.endpoint})",
            robot_id=robot_id,
            endpoint=exc.endpoint,
        ) from exc


async def fetch_robot_list(config: RobotsConfig, transport: Transport) -> list[Robot]:
    """``GET /robots``: every robot, in the order the service returned them."""
    path = config.robot_path()
    endpoint = f"GET {path}"
    items = require_list(await transport.request("GET", path), endpoint=endpoint)
    robots = [decode_robot(item, endpoint=endpoint) for item in items]
    _logger.debug("Fetched %d robot(s)", len(robots))
    return robots


async def fetch_robot(config: RobotsConfig, transport: Transport, robot_id: str) -> Robot:
    """``GET /robots/{id}``: a single robot."""
    _require_id(robot_id, "get_by_id")
    payload = await _request_robot(config, transport, "GET", robot_id)
    return decode_robot(payload, endpoint=f"GET {config.robot_path(robot_id)}")


async def create_robot(config: RobotsConfig, transport: Transport, draft: RobotDraft) -> Robot:
    """``POST /robots``: create a robot; the service assigns the id.

    The created record comes back wrapped as ``{"newRobot": {...}}``.
    """
    path = config.robot_path()
    endpoint = f"POST {path}"
    body = RobotDraft.model_validate(draft.model_dump(exclude={"id"})).to_payload()
    response = await transport.request("POST", path, body)
    robot = decode_robot(unwrap_envelope(response, CREATE_ENVELOPE_KEY, endpoint=endpoint), endpoint=endpoint)
    _logger.debug("Created robot %s", robot.id)
    return robot


async def update_robot(config: RobotsConfig, transport: Transport, robot: Robot) -> Robot:
    """``PUT /robots/{id}``: replace a robot with the full record given."""
    robot_id = _require_id(robot.id, "update")
    payload = await _request_robot(config, transport, "PUT", robot_id, robot.to_payload())
    return decode_robot(payload, endpoint=f"PUT {config.robot_path(robot_id)}")


async def delete_robot(config: RobotsConfig, transport: Transport, robot_id: str) -> DeleteConfirmation:
    """``DELETE /robots/{id}``: returns the service acknowledgement, not the record."""
    _require_id(robot_id, "remove")
    endpoint = f"DELETE {config.robot_path(robot_id)}"
    payload = await _request_robot(config, transport, "DELETE", robot_id)
    if payload is None:
        # 204 No Content
        return DeleteConfirmation()
    return validate_model(DeleteConfirmation, require_object(payload, endpoint=endpoint), endpoint=endpoint)
