"""
Data models for the Media Stream Service API.

This module defines Pydantic models for the service-level endpoints.
"""

from typing import Any, Dict

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Generic success response"""

    success: bool = True
    message: str


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    timestamp: str


class SystemStatusResponse(BaseModel):
    """Service status response"""

    uptime_seconds: float
    streaming: Dict[str, Any]
