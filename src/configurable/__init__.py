"""configurable - load and save models in OS-appropriate config and data directories.

By default, the library's internal logging is disabled.
Call configurable.enable_logging() to see what the stores are doing.
"""

from configurable.common import (
    PersistenceDeserializeError,
    PersistenceError,
    PersistenceReadError,
    PersistenceSerializeError,
    PersistenceWriteError,
    disable_library_logging,
    enable_library_logging,
)
from configurable.configurable import Configurable
from configurable.directories import DirectoryKind, StoreIdentity, project_dir, resolve_dir
from configurable.env import EnvOverlay, get_env
from configurable.store import Defaulted, FileStore, LoadState, Loaded, Store

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "Configurable",
    "Defaulted",
    "DirectoryKind",
    "EnvOverlay",
    "FileStore",
    "LoadState",
    "Loaded",
    "PersistenceDeserializeError",
    "PersistenceError",
    "PersistenceReadError",
    "PersistenceSerializeError",
    "PersistenceWriteError",
    "Store",
    "StoreIdentity",
    "enable_logging",
    "get_env",
    "project_dir",
    "resolve_dir",
]
