"""
Streaming Module Integration.

Handles dependency injection and service composition for the streaming
module.
"""

import logging
from typing import List

from fastapi import APIRouter

from ..core.config import Config
from .domain.interfaces import MediaStorage
from .infrastructure.storage import FileSystemMediaStorage
from .application.streaming_service import StreamingService
from .presentation.controllers import StreamingController
from .presentation.routes import create_streaming_routes, create_info_routes


class StreamingModule:
    """
    Composition root for the streaming functionality.

    Creates and wires storage, service and controller from one Config, so
    nothing in the module lives at import scope.
    """

    def __init__(self, config: Config):
        self.config = config
        self.logger = logging.getLogger(__name__)

        self._initialize_services()

        self.logger.info(f"Streaming module initialized (root={self.media_storage.root}, prefix={config.streaming.route_prefix})")

    def _initialize_services(self):
        # Infrastructure layer
        self.media_storage = self._create_media_storage()

        # Application layer
        self.streaming_service = StreamingService(
            media_storage=self.media_storage,
            streaming_config=self.config.streaming
        )

        # Presentation layer
        self.streaming_controller = StreamingController(self.streaming_service)

    def _create_media_storage(self) -> MediaStorage:
        return FileSystemMediaStorage(
            storage_config=self.config.storage,
            content_type=self.config.streaming.content_type
        )

    def get_api_routes(self) -> List[APIRouter]:
        """Get FastAPI routers for streaming functionality"""
        return [
            create_streaming_routes(self.streaming_controller, self.config.streaming.route_prefix),
            create_info_routes(self.streaming_controller),
        ]

    def get_module_status(self) -> dict:
        """Get status information about the streaming module"""
        return {
            "media_storage": type(self.media_storage).__name__,
            "storage_root": str(self.media_storage.root),
            "route_prefix": self.config.streaming.route_prefix,
            "content_type": self.config.streaming.content_type,
            "chunk_size_bytes": self.config.streaming.chunk_size_bytes,
            "internal_errors": self.streaming_controller.error_tracker.error_count
        }


def create_streaming_module(config: Config) -> StreamingModule:
    """Factory function to create a configured streaming module"""
    return StreamingModule(config=config)
