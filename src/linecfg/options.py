"""Loader options."""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = ["LoaderOptions"]


class LoaderOptions(BaseModel):
    """Settings applied while reading a configuration file.

    Attributes:
        encoding: Text encoding used to decode the file.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
