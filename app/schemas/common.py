"""Common schema helpers."""

from pydantic import BaseModel, ConfigDict


class FrozenSchema(BaseModel):
    """Base schema for values that must not change once built."""

    model_config = ConfigDict(frozen=True)
