"""Store protocol."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import BaseModel
from result import Result

from configurable.common import PersistenceError

from .models import LoadState


@runtime_checkable
class Store[T: BaseModel](Protocol):
    """Protocol for persisting a single model value."""

    def directory(self) -> Result[Path, PersistenceError]: ...

    def file_path(self) -> Result[Path, PersistenceError]: ...

    def load(self) -> Result[T, PersistenceError]: ...

    def save(self, value: T) -> Result[None, PersistenceError]: ...

    def load_or_default(self) -> Result[LoadState[T], PersistenceError]: ...
