from __future__ import annotations

import tomllib
from pathlib import Path

import platformdirs
import pytest
from result import is_err, is_ok

from configurable import Configurable, Defaulted, DirectoryKind, Loaded, StoreIdentity
from configurable.common import PersistenceDeserializeError, PersistenceReadError
from configurable.store import Store


class MyConfiguration(Configurable):
    store_identity = StoreIdentity(organization="museun", application="foobar", name="config.toml")

    name: str = "Foobar"
    attempts: int = 3
    force: bool = False


class MyData(Configurable):
    store_identity = StoreIdentity(
        organization="museun",
        application="foobar",
        name="data.json",
        kind=DirectoryKind.DATA,
    )

    data: dict[str, str] = {}


class Unplaced(Configurable):
    value: int = 0


@pytest.fixture(autouse=True)
def base_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    config_base = tmp_path / "config-base"
    data_base = tmp_path / "data-base"
    monkeypatch.setattr(platformdirs, "user_config_path", lambda **kwargs: config_base)
    monkeypatch.setattr(platformdirs, "user_data_path", lambda **kwargs: data_base)
    return config_base, data_base


def test_store_identity_is_not_a_field() -> None:
    assert "store_identity" not in MyConfiguration.model_fields
    assert MyConfiguration().model_dump() == {"name": "Foobar", "attempts": 3, "force": False}


def test_load_or_default_returns_defaults_first_time() -> None:
    state = MyConfiguration.load_or_default().unwrap()

    assert state == Defaulted(MyConfiguration())
    assert not MyConfiguration.file_path().unwrap().exists()


def test_save_then_load_or_default_returns_loaded() -> None:
    config = MyConfiguration(name="custom", attempts=5)

    assert is_ok(config.save())

    match MyConfiguration.load_or_default().unwrap():
        case Loaded(loaded):
            assert loaded == config
        case Defaulted():
            pytest.fail("expected the saved configuration to be loaded")


def test_save_writes_toml_into_config_directory(base_dirs: tuple[Path, Path]) -> None:
    config_base, _ = base_dirs

    MyConfiguration(force=True).save()

    path = MyConfiguration.file_path().unwrap()
    assert path.parent == MyConfiguration.directory().unwrap()
    assert path.is_relative_to(config_base)
    assert tomllib.loads(path.read_text(encoding="utf-8"))["force"] is True


def test_data_model_uses_data_directory_and_json(base_dirs: tuple[Path, Path]) -> None:
    _, data_base = base_dirs

    MyData(data={"key": "value"}).save()

    path = MyData.file_path().unwrap()
    assert path.is_relative_to(data_base)
    assert path.read_text(encoding="utf-8").startswith("{\n")
    assert MyData.load().unwrap() == MyData(data={"key": "value"})


def test_load_reports_missing_file() -> None:
    result = MyConfiguration.load()

    assert is_err(result)
    assert isinstance(result.unwrap_err(), PersistenceReadError)


def test_load_reports_corrupt_file() -> None:
    MyConfiguration.file_path().unwrap().write_text("attempts = = 3", encoding="utf-8")

    result = MyConfiguration.load_or_default()

    assert is_err(result)
    assert isinstance(result.unwrap_err(), PersistenceDeserializeError)


def test_store_satisfies_store_protocol() -> None:
    assert isinstance(MyConfiguration.store(), Store)


def test_model_without_identity_cannot_be_stored() -> None:
    with pytest.raises(TypeError, match="store_identity"):
        Unplaced.load()
