"""Shared decode helpers for robots endpoint modules.

Every endpoint decodes its response through these functions so that a
malformed payload always surfaces as :class:`RobotsDecodeError` and is
never silently coerced.

It is internal to pyrobots and may change at any time.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from pyrobots.exceptions import RobotsDecodeError
from pyrobots.models.robot import Robot

M = TypeVar("M", bound=BaseModel)


def require_object(payload: Any, *, endpoint: str) -> dict[str, Any]:
    """Return *payload* if it is a JSON object, else raise."""
    if not isinstance(payload, dict):
        raise RobotsDecodeError(
            f"{endpoint} returned {type(payload).__name__}, expected an object",
            endpoint=endpoint,
        )
    return payload


def require_list(payload: Any, *, endpoint: str) -> list[Any]:
    """Return *payload* if it is a JSON array, else raise."""
    if not isinstance(payload, list):
        raise RobotsDecodeError(
            f"{endpoint} returned {type(payload).__name__}, expected an array",
            endpoint=endpoint,
        )
    return payload


def validate_model(model: type[M], payload: Any, *, endpoint: str) -> M:
    """Validate *payload* into *model*, mapping validation errors to decode errors."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise RobotsDecodeError(
            f"{endpoint} returned a malformed {model.__name__}: {exc.error_count()} error(s)",
            endpoint=endpoint,
        ) from exc


def decode_robot(payload: Any, *, endpoint: str) -> Robot:
    """Decode one persisted robot record.

    Records coming back from the service must carry an identifier; a
    record without one cannot be reconciled into the collection.
    """
    robot = validate_model(Robot, require_object(payload, endpoint=endpoint), endpoint=endpoint)
    if not robot.is_persisted:
        raise RobotsDecodeError(f"{endpoint} returned a robot without id", endpoint=endpoint)
    return robot


def unwrap_envelope(payload: Any, key: str, *, endpoint: str) -> Any:
    """Return the value nested under *key* in an enveloped response."""
    body = require_object(payload, endpoint=endpoint)
    if key not in body:
        raise RobotsDecodeError(f"{endpoint} response is missing '{key}'", endpoint=endpoint)
    return body[key]
