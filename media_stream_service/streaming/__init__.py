"""
Streaming Module for the Media Stream Service.

This module serves stored media files over HTTP with single byte-range
support, following clean architecture principles.
"""

from .domain.models import MediaResource, RangeRequest, ByteRange, StreamResult
from .domain.exceptions import StreamingError, ResourceNotFound, RangeNotSatisfiable, MalformedRange, StreamingInternalError
from .application.streaming_service import StreamingService
from .integration import StreamingModule, create_streaming_module

__all__ = [
    "MediaResource",
    "RangeRequest",
    "ByteRange",
    "StreamResult",
    "StreamingError",
    "ResourceNotFound",
    "RangeNotSatisfiable",
    "MalformedRange",
    "StreamingInternalError",
    "StreamingService",
    "StreamingModule",
    "create_streaming_module",
]
