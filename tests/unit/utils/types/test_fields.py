from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from configurable.utils.types import PathSegment

segment_adapter = TypeAdapter(PathSegment)


@pytest.mark.parametrize("value", ["foobar", "com.github", "Foo Bar", "config.toml", "a"])
def test_path_segment_accepts_names(value: str) -> None:
    assert segment_adapter.validate_python(value) == value


@pytest.mark.parametrize("value", ["", " lead", "trail ", "a/b", "a\\b", 42])
def test_path_segment_rejects_invalid_values(value: object) -> None:
    with pytest.raises(ValidationError):
        segment_adapter.validate_python(value)
