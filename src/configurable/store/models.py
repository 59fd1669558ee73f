"""Load outcomes returned by ``load_or_default``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class Loaded[T]:
    """The value was read from an existing file."""

    value: T

    @property
    def is_loaded(self) -> Literal[True]:
        return True

    @property
    def is_defaulted(self) -> Literal[False]:
        return False


@dataclass(frozen=True, slots=True)
class Defaulted[T]:
    """No file existed; the value is a fresh default that has not been written."""

    value: T

    @property
    def is_loaded(self) -> Literal[False]:
        return False

    @property
    def is_defaulted(self) -> Literal[True]:
        return True


type LoadState[T] = Loaded[T] | Defaulted[T]
