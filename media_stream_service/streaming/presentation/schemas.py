"""
Streaming API Request/Response Schemas.

Pydantic models for API serialization and validation.
"""

from pydantic import BaseModel, ConfigDict, Field


class StreamingInfoResponse(BaseModel):
    """Streaming information response"""
    resource_key: str = Field(..., description="Resource key as requested")
    file_size_bytes: int = Field(..., description="Total file size")
    content_type: str = Field(..., description="MIME content type")
    supports_range_requests: bool = Field(..., description="Whether range requests are supported")
    chunk_size_bytes: int = Field(..., description="Chunk size used when streaming the body")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "resource_key": "My_first_video_1718000000000.mp4",
                "file_size_bytes": 52428800,
                "content_type": "video/mp4",
                "supports_range_requests": True,
                "chunk_size_bytes": 65536
            }
        }
    )
