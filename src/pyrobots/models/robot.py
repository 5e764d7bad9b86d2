"""Robot record models."""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator

from pyrobots._constants import ID_KEYS
from pyrobots.models._base import RobotsBaseModel


class RobotDraft(RobotsBaseModel):
    """A robot that has not been persisted yet (no identifier).

    This is the body sent on ``POST /robots``.
    """

    name: str
    """Display name."""
    image: str
    """Image URI or placeholder (``"#"``)."""
    creation_date: str
    """Creation date as sent by the service. Opaque, never parsed."""
    speed: int | float
    """Speed attribute. Integers stay integers on the wire."""
    endurance: int | float
    """Endurance attribute."""


class Robot(RobotDraft):
    """A robot record as held by the service.

    The identifier is assigned by the service on creation and accepted
    on input as either ``id`` or ``_id``.  An empty ``id`` marks a
    record that is not persisted yet.
    """

    id: str = Field(
        default="",
        validation_alias=AliasChoices(*ID_KEYS),
        serialization_alias="id",
    )
    """Service-assigned identifier."""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        # Numeric ids from SQL-backed services are accepted as strings.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def is_persisted(self) -> bool:
        """Whether the service has assigned an identifier to this record."""
        return bool(self.id)

    def draft(self) -> RobotDraft:
        """Return the record without its identifier."""
        return RobotDraft.model_validate(self.model_dump(exclude={"id"}))


class DeleteConfirmation(RobotsBaseModel):
    """Acknowledgement returned by ``DELETE /robots/{id}``.

    The service answers with a human readable message, not the deleted
    record, e.g. ``"Succesfully deleted the robot with ID 1"``.
    """

    message: str = ""
