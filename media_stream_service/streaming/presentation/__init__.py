"""
Streaming Presentation Layer.

Contains HTTP controllers, response models, and API route definitions.
"""

from .controllers import StreamingController
from .schemas import StreamingInfoResponse
from .routes import create_streaming_routes, create_info_routes

__all__ = [
    "StreamingController",
    "StreamingInfoResponse",
    "create_streaming_routes",
    "create_info_routes",
]
