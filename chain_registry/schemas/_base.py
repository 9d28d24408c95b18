"""Base model for registry JSON documents."""

from pydantic import BaseModel, ConfigDict


class RegistryModel(BaseModel):
    """Base for every model parsed from the registry.

    Unknown keys are rejected so that a registry revision whose schema has
    drifted from these models fails loudly instead of silently dropping data.
    Missing keys fall back to empty defaults.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
