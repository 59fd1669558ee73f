"""Environment variable lookups overridden by a local ``.env`` file.

Values in the overlay file win over variables already set in the process.
Reading the overlay never touches ``os.environ``; call ``EnvOverlay.apply()``
to copy it in, and only do so during single-threaded startup.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, MutableMapping
from pathlib import Path

from dotenv import dotenv_values

from configurable.common import create_logger
from configurable.settings import get_settings

logger = create_logger("env")


class EnvOverlay:
    """Environment lookups with ``KEY=VALUE`` overrides from a local file.

    The file holds one ``KEY=VALUE`` pair per line. Whitespace around the key,
    the ``=`` and the value is ignored and the value may be quoted. Lines
    starting with ``#`` are comments. Lines without ``=`` or with an empty key
    or value are skipped.
    """

    def __init__(self, path: Path | str | None = None, environ: Mapping[str, str] | None = None) -> None:
        self.path = Path(path if path is not None else get_settings().env_file)
        self._environ = environ if environ is not None else os.environ

    def load(self) -> dict[str, str]:
        """Read the overlay file.

        Returns the parsed pairs, or a snapshot of the process environment
        when the file does not exist or cannot be read.
        """
        overlay = self._read()
        if overlay is None:
            return dict(self._environ)
        return overlay

    def get(self, key: str) -> str | None:
        value = self.load().get(key)
        if value is None:
            return self._environ.get(key)
        return value

    def merged(self) -> dict[str, str]:
        """Process environment with the overlay applied on top."""
        return {**self._environ, **self.load()}

    def apply(self, target: MutableMapping[str, str] | None = None) -> dict[str, str]:
        """Copy the overlay into ``target`` (``os.environ`` by default).

        Mutates process-wide state: call it during single-threaded startup only.
        """
        target = target if target is not None else os.environ
        overlay = self._read() or {}
        target.update(overlay)
        return overlay

    def _read(self) -> dict[str, str] | None:
        try:
            with self.path.open(encoding="utf-8") as stream:
                values = dotenv_values(stream=stream, interpolate=False)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Overlay file unavailable", path=str(self.path), error=str(exc))
            return None

        overlay = {key: value for key, value in values.items() if key and value}
        logger.debug("Overlay loaded", path=str(self.path), keys=sorted(overlay))
        return overlay


def get_env(key: str, path: Path | str | None = None) -> str | None:
    """Look ``key`` up in the overlay file, then in the process environment."""
    return EnvOverlay(path).get(key)


__all__ = ["EnvOverlay", "get_env"]
