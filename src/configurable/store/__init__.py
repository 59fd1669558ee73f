"""Load, save and default a model value in its application directory."""

from .codec import Codec, JsonCodec, TomlCodec, codec_for
from .file import FileStore
from .models import Defaulted, LoadState, Loaded
from .protocol import Store

__all__ = [
    "Codec",
    "Defaulted",
    "FileStore",
    "JsonCodec",
    "LoadState",
    "Loaded",
    "Store",
    "TomlCodec",
    "codec_for",
]
