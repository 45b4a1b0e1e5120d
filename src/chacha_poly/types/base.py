"""Base model for the package's pydantic containers."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic model.

    Unknown fields are rejected, fields cannot be reassigned, and inputs are
    not coerced (a `str` is never accepted where `bytes` is expected). Bytes
    fields travel as hex strings in JSON.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        ser_json_bytes="hex",
        val_json_bytes="hex",
    )
