from .fields import JsonValue, PathSegment

__all__ = ["JsonValue", "PathSegment"]
