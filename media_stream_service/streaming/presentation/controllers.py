"""
Streaming HTTP Controllers.

Handle HTTP requests and responses for media streaming and map the
streaming error taxonomy onto HTTP statuses.
"""

import logging
from typing import AsyncIterator

from fastapi import HTTPException, Request, Response
from fastapi.responses import PlainTextResponse, StreamingResponse

from ..application.streaming_service import StreamingService
from ..domain.exceptions import RangeNotSatisfiable, ResourceNotFound, StreamingInternalError
from ..domain.models import StreamResult
from ...core.logging_config import get_error_tracker
from .schemas import StreamingInfoResponse


class StreamingController:
    """Controller for media streaming operations"""

    def __init__(self, streaming_service: StreamingService):
        self.streaming_service = streaming_service
        self.logger = logging.getLogger(__name__)
        self.error_tracker = get_error_tracker("streaming")

    async def stream_media(self, resource_key: str, request: Request) -> Response:
        """Stream a resource with single byte-range support"""
        range_header = request.headers.get("range")

        try:
            result = await self.streaming_service.serve(resource_key, range_header)
        except ResourceNotFound as e:
            self.logger.info(str(e))
            return PlainTextResponse("Video not found", status_code=404)
        except RangeNotSatisfiable as e:
            self.logger.info(f"Range not satisfiable for {resource_key}: {e}")
            return Response(status_code=416, headers={"Content-Range": e.content_range, "Accept-Ranges": "bytes"})
        except StreamingInternalError as e:
            self.error_tracker.log_error(e, "serve", {"resource_key": resource_key, "range": range_header})
            return PlainTextResponse("Internal server error", status_code=500)

        if request.method == "HEAD":
            # The body iterator has not started, so no file handle is open
            await result.body.aclose()
            return Response(status_code=result.status_code, headers=result.headers)

        return StreamingResponse(self._stream_body(result), status_code=result.status_code, headers=result.headers)

    async def get_streaming_info(self, resource_key: str) -> StreamingInfoResponse:
        """Get streaming information for a resource"""
        try:
            resource = await self.streaming_service.get_resource_info(resource_key)
        except ResourceNotFound:
            raise HTTPException(status_code=404, detail="Video not found")
        except StreamingInternalError as e:
            self.error_tracker.log_error(e, "info", {"resource_key": resource_key})
            raise HTTPException(status_code=500, detail="Internal server error")

        return StreamingInfoResponse(
            resource_key=resource_key,
            file_size_bytes=resource.size_bytes,
            content_type=resource.content_type,
            supports_range_requests=True,
            chunk_size_bytes=self.streaming_service.streaming_config.chunk_size_bytes
        )

    async def _stream_body(self, result: StreamResult) -> AsyncIterator[bytes]:
        # Headers are already sent once the body starts; a failure can only abort the response
        try:
            async for chunk in result.body:
                yield chunk
        except StreamingInternalError as e:
            self.error_tracker.log_error(e, "stream", {"resource_key": result.resource.key})
            raise
        finally:
            await result.body.aclose()
