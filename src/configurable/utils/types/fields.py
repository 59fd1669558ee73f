"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictStr

type JsonValue = dict[str, object] | list[object] | str | int | float | bool | None

# A single path component: no separators, no surrounding whitespace
PathSegment = Annotated[
    StrictStr,
    Field(
        min_length=1,
        pattern=r"^[^/\\\s](?:[^/\\]*[^/\\\s])?$",
        frozen=True,
        description="Name usable as a single filesystem path segment",
    ),
]

__all__ = [
    "JsonValue",
    "PathSegment",
]
