"""
Streaming Domain Layer.

Contains pure business logic and domain models for range streaming.
No external dependencies - only Python standard library and domain concepts.
"""

from .models import MediaResource, RangeRequest, ByteRange, StreamResult
from .interfaces import MediaStorage
from .exceptions import StreamingError, ResourceNotFound, RangeNotSatisfiable, MalformedRange, StreamingInternalError

__all__ = [
    "MediaResource",
    "RangeRequest",
    "ByteRange",
    "StreamResult",
    "MediaStorage",
    "StreamingError",
    "ResourceNotFound",
    "RangeNotSatisfiable",
    "MalformedRange",
    "StreamingInternalError",
]
