"""Reusable, strict base models."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Fields are validated without coercion: an integer field rejects `"1"`,
    a string field rejects `1`. Instances cannot be mutated after creation.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )
