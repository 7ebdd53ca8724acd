"""
FastAPI Server for the Media Stream Service.

This module assembles the FastAPI application and runs it under uvicorn.
"""

import logging
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.config import Config
from ..streaming.integration import StreamingModule
from .models import HealthResponse, SuccessResponse, SystemStatusResponse


class APIServer:
    """FastAPI server for the Media Stream Service"""

    def __init__(self, config: Config, streaming_module: StreamingModule):
        self.config = config
        self.streaming_module = streaming_module
        self.logger = logging.getLogger(__name__)

        self.app = FastAPI(title="Media Stream Service API", description="Byte-range streaming of stored videos", version="1.0.0")

        # Server state
        self.server_start_time = datetime.now()
        self._server: Optional[uvicorn.Server] = None

        # The web front-end is served from another origin
        self.app.add_middleware(CORSMiddleware, allow_origins=config.system.cors_origins, allow_methods=["GET", "HEAD"], allow_headers=["Range"], expose_headers=["Content-Range", "Accept-Ranges", "Content-Length"])

        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes"""

        @self.app.get("/", response_model=SuccessResponse)
        async def root():
            return SuccessResponse(message="Media Stream Service API")

        @self.app.get("/health", response_model=HealthResponse)
        async def health_check():
            return HealthResponse(status="healthy", timestamp=datetime.now().isoformat())

        @self.app.get("/system/status", response_model=SystemStatusResponse)
        async def get_system_status():
            """Get service status"""
            uptime = (datetime.now() - self.server_start_time).total_seconds()
            return SystemStatusResponse(uptime_seconds=uptime, streaming=self.streaming_module.get_module_status())

        for router in self.streaming_module.get_api_routes():
            self.app.include_router(router)

    def run(self) -> None:
        """Run the uvicorn server until it is asked to exit"""
        uvicorn_config = uvicorn.Config(self.app, host=self.config.system.api_host, port=self.config.system.api_port, log_level="info", log_config=None)
        self._server = uvicorn.Server(uvicorn_config)

        self.logger.info(f"Starting API server on {self.config.system.api_host}:{self.config.system.api_port}")
        try:
            self._server.run()
        finally:
            self._server = None
            self.logger.info("API server stopped")

    def stop(self) -> None:
        """Ask a running server to shut down gracefully"""
        if self._server is None:
            return

        self.logger.info("Stopping API server...")
        self._server.should_exit = True

