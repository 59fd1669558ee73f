"""File-based store implementation."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from pydantic import BaseModel, ValidationError
from result import Err, Ok, Result, is_err

from configurable.common import (
    PersistenceDeserializeError,
    PersistenceError,
    PersistenceReadError,
    PersistenceSerializeError,
    PersistenceWriteError,
    create_logger,
)
from configurable.directories import StoreIdentity, resolve_dir

from .codec import Codec, codec_for
from .models import Defaulted, LoadState, Loaded

logger = create_logger("store")


class FileStore[T: BaseModel]:
    """Persists one ``model_cls`` value to the file named by ``identity``.

    Nothing is cached: every call resolves (and creates) the directory again.
    """

    def __init__(self, model_cls: type[T], identity: StoreIdentity, codec: Codec | None = None) -> None:
        self.model_cls = model_cls
        self.identity = identity
        self.codec = codec or codec_for(identity.name)

    def directory(self) -> Result[Path, PersistenceError]:
        return resolve_dir(self.identity)

    def file_path(self) -> Result[Path, PersistenceError]:
        return self.directory().map(lambda directory: directory / self.identity.name)

    def load(self) -> Result[T, PersistenceError]:
        path_result = self.file_path()
        if is_err(path_result):
            return path_result

        path = path_result.unwrap()
        logger.debug("Loading file", path=str(path))

        try:
            raw_text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            return Err(PersistenceReadError(path=path, message=str(exc)))

        return self._decode(path, raw_text)

    def save(self, value: T) -> Result[None, PersistenceError]:
        path_result = self.file_path()
        if is_err(path_result):
            return path_result

        path = path_result.unwrap()

        try:
            data = self.codec.encode(value).encode("utf-8")
        except (TypeError, ValueError) as exc:
            logger.error("Serialization failed", path=str(path), error=str(exc))
            return Err(PersistenceSerializeError(path=path, message=str(exc)))

        try:
            _write_atomic(path, data)
        except OSError as exc:
            logger.error("File write failed", path=str(path), error=str(exc))
            return Err(PersistenceWriteError(path=path, message=str(exc)))

        logger.debug("File saved", path=str(path))
        return Ok(None)

    def load_or_default(self) -> Result[LoadState[T], PersistenceError]:
        """Load the value, or build a default one when there is no file to read.

        Only a read failure falls back to the default, and the default is not
        written to disk. Every other error is returned as is.
        """
        result = self.load()
        if is_err(result):
            error = result.unwrap_err()
            if isinstance(error, PersistenceReadError):
                logger.debug("File unavailable, using defaults", path=str(error.path))
                return Ok(Defaulted(self.model_cls()))
            return Err(error)

        return Ok(Loaded(result.unwrap()))

    def exists(self) -> Result[bool, PersistenceError]:
        return self.file_path().map(lambda path: path.is_file())

    def delete(self) -> Result[None, PersistenceError]:
        path_result = self.file_path()
        if is_err(path_result):
            return path_result

        path = path_result.unwrap()
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            return Err(PersistenceWriteError(path=path, message=str(exc)))
        return Ok(None)

    def _decode(self, path: Path, raw_text: str) -> Result[T, PersistenceError]:
        try:
            data = self.codec.decode(raw_text)
        except ValueError as exc:
            line = getattr(exc, "lineno", None)
            column = getattr(exc, "colno", None)
            logger.error("File parse error", path=str(path), line=line, column=column, error=str(exc))
            return Err(PersistenceDeserializeError(path=path, line=line, column=column, message=str(exc)))

        if not isinstance(data, dict):
            return Err(
                PersistenceDeserializeError(
                    path=path,
                    message="File root must be a mapping of keys to values.",
                )
            )

        try:
            return Ok(self.model_cls.model_validate(data))
        except ValidationError as exc:
            error_details = exc.errors()
            field = None
            message = str(exc)
            if error_details:
                first = error_details[0]
                loc = first.get("loc") or ()
                field = ".".join(str(part) for part in loc) or None
                message = first.get("msg", message)
            logger.error("File validation error", path=str(path), field=field, error=message)
            return Err(PersistenceDeserializeError(path=path, field=field, message=message))


def _write_atomic(path: Path, data: bytes) -> None:
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _target_mode(path: Path) -> int:
    """Mode the saved file should end up with: the existing file's, or 0o666 minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~_current_umask()


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
