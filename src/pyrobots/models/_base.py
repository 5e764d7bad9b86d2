"""Base model for robots service payloads.

Every wire model inherits from :class:`RobotsBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase API keys map
  automatically to snake_case fields.
* ``frozen=True`` so records handed out to consumers are read-only.
* ``extra="ignore"`` so bookkeeping keys added by the service
  (``__v``, timestamps) do not break decoding.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RobotsBaseModel(BaseModel):
    """Base for robots service models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialise to the camelCase JSON body the service expects."""
        return self.model_dump(mode="json", by_alias=True)
