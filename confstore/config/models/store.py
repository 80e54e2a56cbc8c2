"""Store configuration model."""

import codecs

from pydantic import BaseModel, Field, field_validator


class StoreConfig(BaseModel):
    """Configuration for the key-value store created at bootstrap."""

    path: str | None = Field(
        default=None,
        description="File loaded into the store at bootstrap",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used to read and write store files",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings Python has no codec for."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v
