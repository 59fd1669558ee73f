from .types import JsonValue, PathSegment

__all__ = ["JsonValue", "PathSegment"]
