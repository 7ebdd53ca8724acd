"""
Media Streaming Application Service.

Handles the streaming use case: resolve a resource, interpret an optional
Range header and build a full or partial-content result.
"""

import logging
from typing import Dict, Optional

from ..domain.interfaces import MediaStorage
from ..domain.models import ByteRange, MediaResource, RangeRequest, StreamResult
from ...core.config import StreamingConfig


class StreamingService:
    """Application service for range-addressable media streaming"""

    def __init__(self, media_storage: MediaStorage, streaming_config: Optional[StreamingConfig] = None):
        self.media_storage = media_storage
        self.streaming_config = streaming_config or StreamingConfig()
        self.logger = logging.getLogger(__name__)

    async def serve(self, resource_key: str, range_header: Optional[str] = None) -> StreamResult:
        """
        Serve a resource, whole or as a single byte range.

        Raises:
            ResourceNotFound: key does not resolve under the storage root
            RangeNotSatisfiable: header is malformed or outside the resource
            StreamingInternalError: the resource could not be statted
        """
        resource = await self.media_storage.resolve(resource_key)

        if range_header is None:
            self.logger.debug(f"Serving {resource_key} in full ({resource.size_bytes} bytes)")
            return StreamResult(
                status_code=200,
                resource=resource,
                headers=self._build_headers(resource),
                body=self.media_storage.iter_range(resource, None, self.streaming_config.chunk_size_bytes),
            )

        byte_range = self.resolve_range(range_header, resource.size_bytes)
        self.logger.debug(f"Serving {resource_key} {byte_range.content_range}")

        return StreamResult(
            status_code=206,
            resource=resource,
            headers=self._build_headers(resource, byte_range),
            body=self.media_storage.iter_range(resource, byte_range, self.streaming_config.chunk_size_bytes),
            byte_range=byte_range,
        )

    async def get_resource_info(self, resource_key: str) -> MediaResource:
        """Resolve a resource without opening it"""
        return await self.media_storage.resolve(resource_key)

    def resolve_range(self, range_header: str, total_size: int) -> ByteRange:
        """Parse and validate a Range header against a file size"""
        return RangeRequest.from_header(range_header, total_size).resolve(total_size)

    def _build_headers(self, resource: MediaResource, byte_range: Optional[ByteRange] = None) -> Dict[str, str]:
        headers = {
            "Content-Type": resource.content_type,
            "Accept-Ranges": "bytes",
        }
        if self.streaming_config.cache_control:
            headers["Cache-Control"] = self.streaming_config.cache_control

        if byte_range is None:
            headers["Content-Length"] = str(resource.size_bytes)
        else:
            headers["Content-Range"] = byte_range.content_range
            headers["Content-Length"] = str(byte_range.chunk_size)

        return headers
