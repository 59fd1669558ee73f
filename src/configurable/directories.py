"""Per-application directory resolution.

Maps a (qualifier, organization, application) identity onto the directory the
host OS reserves for that application's configuration or data:

- Linux and other Unix: ``$XDG_CONFIG_HOME/foobar`` or ``$XDG_DATA_HOME/foobar``
- macOS: ``~/Library/Application Support/com.github.museun.foobar``
- Windows: ``%APPDATA%\\museun\\foobar\\config`` or ``...\\data``

The base directories come from ``platformdirs``; only the per-application
segment is computed here.
"""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

import platformdirs
from pydantic import Field
from pydantic.dataclasses import dataclass
from result import Err, Ok, Result

from configurable.common import PersistenceWriteError, create_logger
from configurable.settings import get_settings
from configurable.utils.types import PathSegment

logger = create_logger("directories")


class DirectoryKind(str, Enum):
    """Which OS base directory a store lives under."""

    CONFIG = "config"
    DATA = "data"


_HOME_FALLBACKS = {
    DirectoryKind.CONFIG: Path(".config"),
    DirectoryKind.DATA: Path(".local") / "share",
}


@dataclass(kw_only=True, frozen=True)
class StoreIdentity:
    """Where a persisted value lives.

    Will produce ``<base>/<qualifier>.<organization>.<application>/<name>``,
    with the middle segment spelled the way the host OS expects.

    Attributes:
        organization: Vendor or owner, e.g. ``"museun"``
        application: Application name, e.g. ``"foobar"``
        name: File name including its extension, e.g. ``"config.toml"``
        qualifier: Reverse-domain qualifier, defaults to ``"com.github"``
        kind: Config or data base directory
    """

    organization: PathSegment
    application: PathSegment
    name: PathSegment
    qualifier: PathSegment = Field(default_factory=lambda: get_settings().qualifier)
    kind: DirectoryKind = DirectoryKind.CONFIG


def project_segment(identity: StoreIdentity, platform: str | None = None) -> Path:
    platform = platform or sys.platform
    if platform == "darwin":
        parts = (identity.qualifier, identity.organization, identity.application)
        return Path(".".join(part.strip().replace(" ", "-") for part in parts))
    if platform == "win32":
        return Path(identity.organization.strip()) / identity.application.strip()
    return Path(identity.application.strip().lower().replace(" ", ""))


def project_dir(
    identity: StoreIdentity,
    kind: DirectoryKind | None = None,
    platform: str | None = None,
) -> Path:
    """Compute the application directory without touching the filesystem.

    Raises:
        RuntimeError: The host has no resolvable home directory.
    """
    kind = kind or identity.kind
    platform = platform or sys.platform

    base = _base_dir(kind)
    if not base.is_absolute():
        # relative XDG_* values are invalid and ignored
        logger.warning("Ignoring relative base directory", base=str(base), kind=kind.value)
        base = _home_dir() / _HOME_FALLBACKS[kind]

    directory = base / project_segment(identity, platform)
    if platform == "win32":
        directory = directory / kind.value
    return directory


def resolve_dir(
    identity: StoreIdentity,
    kind: DirectoryKind | None = None,
) -> Result[Path, PersistenceWriteError]:
    """Resolve the application directory and make sure it exists."""
    directory = project_dir(identity, kind)

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Directory creation failed", path=str(directory), error=str(exc))
        return Err(PersistenceWriteError(path=directory, message=str(exc)))

    logger.debug("Directory resolved", path=str(directory), kind=(kind or identity.kind).value)
    return Ok(directory)


def _home_dir() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise RuntimeError("system must have a valid home directory") from exc
    if not home.is_absolute():
        raise RuntimeError(f"system must have a valid home directory (got '{home}')")
    return home


def _base_dir(kind: DirectoryKind) -> Path:
    match kind:
        case DirectoryKind.CONFIG:
            return platformdirs.user_config_path(roaming=True)
        case DirectoryKind.DATA:
            return platformdirs.user_data_path(roaming=True)
        case _:
            raise ValueError(f"Unexpected directory kind: {kind}")


__all__ = [
    "DirectoryKind",
    "StoreIdentity",
    "project_dir",
    "project_segment",
    "resolve_dir",
]
