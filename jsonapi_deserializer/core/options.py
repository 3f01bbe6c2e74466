"""Deserializer configuration."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class DeserializerOptions(BaseModel):
    """Per-instance deserializer options."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    skip_unknown_entities: bool = Field(
        default=False,
        description=(
            "Skip entities of unregistered types and unresolved relationships "
            "instead of raising."
        ),
    )

    @classmethod
    def coerce(
        cls, options: DeserializerOptions | Mapping[str, Any] | None = None, **overrides: Any
    ) -> DeserializerOptions:
        """Build options from an instance, a mapping and/or keyword overrides."""
        if options is None:
            values: dict[str, Any] = {}
        elif isinstance(options, DeserializerOptions):
            values = options.model_dump()
        else:
            values = dict(options)
        values.update(overrides)
        return cls.model_validate(values)
