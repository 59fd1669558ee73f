"""Structured text formats a store can persist to."""

from __future__ import annotations

import json
import tomllib
from pathlib import PurePath
from typing import Protocol

import tomli_w
from pydantic import BaseModel

from configurable.utils.types import JsonValue


class Codec(Protocol):
    """Converts between a model and file text.

    ``decode`` raises ``ValueError`` (or a subclass) on malformed input and
    ``encode`` raises ``TypeError`` or ``ValueError`` on values the format
    cannot represent.
    """

    suffixes: tuple[str, ...]

    def encode(self, value: BaseModel) -> str: ...

    def decode(self, text: str) -> JsonValue: ...


class TomlCodec:
    """TOML, which has no null.

    A ``None`` field is left out of the file and reloads as its default, so
    it is only accepted where that default is itself ``None``. ``None``
    anywhere else (list items, mapping values, fields defaulting to something
    else) raises ``ValueError``.
    """

    suffixes = (".toml",)

    def encode(self, value: BaseModel) -> str:
        _check_none(value, type(value).__name__)
        return tomli_w.dumps(_drop_none(value.model_dump(mode="json"), type(value).__name__))

    def decode(self, text: str) -> JsonValue:
        return tomllib.loads(text)


class JsonCodec:
    suffixes = (".json",)

    def encode(self, value: BaseModel) -> str:
        return json.dumps(value.model_dump(mode="json"), indent=2) + "\n"

    def decode(self, text: str) -> JsonValue:
        return json.loads(text)


_CODECS: tuple[Codec, ...] = (TomlCodec(), JsonCodec())


def codec_for(file_name: str) -> Codec:
    """Pick the codec matching the file extension, TOML when nothing matches."""
    suffix = PurePath(file_name).suffix.lower()
    for codec in _CODECS:
        if suffix in codec.suffixes:
            return codec
    return _CODECS[0]


def _check_none(value: object, location: str) -> None:
    if isinstance(value, BaseModel):
        for name, field in type(value).model_fields.items():
            item = getattr(value, name)
            item_location = f"{location}.{name}"
            if item is None:
                default = field.get_default(call_default_factory=True)
                if default is not None:
                    raise ValueError(
                        f"{item_location} is None but TOML cannot store null and its default is {default!r}"
                    )
            else:
                _check_none(item, item_location)
    elif isinstance(value, dict):
        for key, item in value.items():
            _check_item(item, f"{location}.{key}")
    elif isinstance(value, (list, tuple, set, frozenset)):
        for index, item in enumerate(value):
            _check_item(item, f"{location}[{index}]")


def _check_item(item: object, location: str) -> None:
    if item is None:
        raise ValueError(f"{location} is None but TOML cannot store null")
    _check_none(item, location)


def _drop_none(value: JsonValue, location: str) -> JsonValue:
    if isinstance(value, dict):
        return {key: _drop_none(item, f"{location}.{key}") for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [_check_list_item(item, f"{location}[{index}]") for index, item in enumerate(value)]
    return value


def _check_list_item(item: JsonValue, location: str) -> JsonValue:
    if item is None:
        raise ValueError(f"{location} is None but TOML cannot store null")
    return _drop_none(item, location)


__all__ = ["Codec", "JsonCodec", "TomlCodec", "codec_for"]
