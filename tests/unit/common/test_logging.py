from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import platformdirs
import pytest
from loguru import logger

from configurable.common import create_logger, disable_library_logging, enable_library_logging
from configurable.directories import StoreIdentity, resolve_dir


@pytest.fixture
def handler_ids() -> Iterator[list[int]]:
    ids: list[int] = []
    yield ids
    for handler_id in ids:
        logger.remove(handler_id)
    disable_library_logging()


def test_library_logging_is_disabled_by_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, handler_ids: list[int]
) -> None:
    messages: list[str] = []
    handler_ids.append(logger.add(messages.append, level="DEBUG"))
    monkeypatch.setattr(platformdirs, "user_config_path", lambda **kwargs: tmp_path)

    resolve_dir(StoreIdentity(organization="museun", application="foobar", name="config.toml"))

    assert messages == []


def test_enable_library_logging_writes_to_stderr(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    handler_ids: list[int],
) -> None:
    monkeypatch.setattr(platformdirs, "user_config_path", lambda **kwargs: tmp_path)
    handler_ids.append(enable_library_logging("DEBUG"))

    resolve_dir(StoreIdentity(organization="museun", application="foobar", name="config.toml"))

    captured = capsys.readouterr().err
    assert "Directory resolved" in captured
    assert "'scope': 'directories'" in captured


def test_create_logger_binds_scope(handler_ids: list[int]) -> None:
    messages: list[str] = []
    handler_ids.append(logger.add(messages.append, format="{extra[scope]}: {message}"))

    create_logger("tests").info("hello")

    assert messages == ["tests: hello\n"]
