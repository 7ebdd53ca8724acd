"""
Streaming API Routes.

FastAPI route definitions for media streaming.
"""

from fastapi import APIRouter, Request

from .controllers import StreamingController
from .schemas import StreamingInfoResponse


def create_streaming_routes(streaming_controller: StreamingController, route_prefix: str = "/api/videos") -> APIRouter:
    """Create media streaming routes with dependency injection"""

    router = APIRouter(prefix=route_prefix, tags=["videos"])

    @router.api_route("/{resource_key:path}", methods=["GET", "HEAD"])
    async def stream_media(resource_key: str, request: Request):
        """
        Stream a stored video with HTTP range request support.

        Supports:
        - **Range requests**: a single `bytes=start-end`, `bytes=start-` or `bytes=-suffix`
        - **Partial content**: 206 responses carrying `Content-Range`
        - **Unsatisfiable ranges**: 416 responses carrying `Content-Range: bytes */size`
        - **HEAD**: headers only, for size and range discovery

        Usage in HTML5:
        ```html
        <video controls>
            <source src="/api/videos/{resource_key}" type="video/mp4">
        </video>
        ```
        """
        return await streaming_controller.stream_media(resource_key, request)

    return router


def create_info_routes(streaming_controller: StreamingController) -> APIRouter:
    """Create streaming information routes"""

    router = APIRouter(prefix="/streaming", tags=["streaming"])

    @router.get("/info/{resource_key:path}", response_model=StreamingInfoResponse)
    async def get_streaming_info(resource_key: str):
        """
        Get streaming information for a video.

        Returns file size, content type, range support and the chunk size
        used for the response body.
        """
        return await streaming_controller.get_streaming_info(resource_key)

    return router
