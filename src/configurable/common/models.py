"""Error models shared by the path resolver and the stores."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class PersistenceWriteError(BaseModel):
    """Creating a directory or writing a file failed."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class PersistenceReadError(BaseModel):
    """The file is missing or could not be read."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class PersistenceDeserializeError(BaseModel):
    """The file was read but its content does not decode into the model."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    field: str | None = None
    message: str


class PersistenceSerializeError(BaseModel):
    """The value could not be encoded."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


type PersistenceError = (
    PersistenceWriteError | PersistenceReadError | PersistenceDeserializeError | PersistenceSerializeError
)
