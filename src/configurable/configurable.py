"""Models that know where they are stored.

```python
from configurable import Configurable, StoreIdentity, Loaded, Defaulted


class MyConfig(Configurable):
    store_identity = StoreIdentity(organization="museun", application="foobar", name="config.toml")

    name: str = "Foobar"
    attempts: int = 3


match MyConfig.load_or_default().unwrap():
    case Loaded(config):
        ...
    case Defaulted(config):
        config.save()
```
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Self

from pydantic import BaseModel
from result import Result

from configurable.common import PersistenceError
from configurable.directories import StoreIdentity
from configurable.store import FileStore, LoadState, Store


class Configurable(BaseModel):
    """Base model whose subclasses persist themselves through a ``FileStore``.

    Subclasses set ``store_identity`` and give every field a default.
    """

    store_identity: ClassVar[StoreIdentity]

    @classmethod
    def store(cls) -> Store[Self]:
        identity = getattr(cls, "store_identity", None)
        if identity is None:
            raise TypeError(f"{cls.__name__} must define 'store_identity' to be persisted")
        return FileStore(cls, identity)

    @classmethod
    def directory(cls) -> Result[Path, PersistenceError]:
        return cls.store().directory()

    @classmethod
    def file_path(cls) -> Result[Path, PersistenceError]:
        return cls.store().file_path()

    @classmethod
    def load(cls) -> Result[Self, PersistenceError]:
        return cls.store().load()

    @classmethod
    def load_or_default(cls) -> Result[LoadState[Self], PersistenceError]:
        return cls.store().load_or_default()

    def save(self) -> Result[None, PersistenceError]:
        return type(self).store().save(self)
