"""Common models and helpers shared across configurable modules."""

from .logging import create_logger, disable_library_logging, enable_library_logging
from .models import (
    PersistenceDeserializeError,
    PersistenceError,
    PersistenceReadError,
    PersistenceSerializeError,
    PersistenceWriteError,
)

__all__ = [
    "PersistenceDeserializeError",
    "PersistenceError",
    "PersistenceReadError",
    "PersistenceSerializeError",
    "PersistenceWriteError",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
]
