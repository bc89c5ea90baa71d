"""Base models for nexus-migrator."""

from pydantic import BaseModel, ConfigDict


class MigratorBaseModel(BaseModel):
    """Base model for all nexus-migrator domain models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=True,  # Shared across worker threads, never mutated
        populate_by_name=True,  # Accept both field names and wire aliases
    )


__all__ = ["MigratorBaseModel"]
