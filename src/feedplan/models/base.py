"""Shared base model for serialised value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ValueModel(BaseModel):
    """Frozen model exchanged with host applications using camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_payload(self) -> dict:
        """Return a JSON-ready dict using the host-facing camelCase keys."""

        return self.model_dump(mode="json", by_alias=True)
