"""
Main Application Coordinator for the Media Stream Service.

This module wires configuration, logging, the streaming module and the API
server together and provides the command line entry point.
"""

import logging
import sys
from typing import Optional

from .core.config import Config
from .core.logging_config import setup_logging
from .streaming.integration import create_streaming_module
from .api.server import APIServer


class MediaStreamService:
    """Main application coordinator for the Media Stream Service"""

    def __init__(self, config_file: Optional[str] = None, config: Optional[Config] = None):
        # Load configuration first (basic logging will be used initially)
        self.config = config or Config(config_file)

        setup_logging(log_level=self.config.system.log_level, log_file=self.config.system.log_file)
        self.logger = logging.getLogger(__name__)

        self.streaming_module = create_streaming_module(self.config)
        self.api_server = APIServer(self.config, self.streaming_module)

        self.logger.info("Media Stream Service initialized")

    @property
    def app(self):
        """The ASGI application"""
        return self.api_server.app

    def run(self) -> None:
        """Serve until interrupted; uvicorn handles SIGINT/SIGTERM"""
        self.logger.info("Starting Media Stream Service...")
        self.api_server.run()
        self.logger.info("Media Stream Service stopped")

    def stop(self) -> None:
        self.api_server.stop()


def main():
    """Main entry point for the application"""
    import argparse

    parser = argparse.ArgumentParser(description="Media Stream Service")
    parser.add_argument("--config", type=str, help="Path to configuration file", default="config.json")
    parser.add_argument("--log-level", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Override log level", default=None)
    parser.add_argument("--host", type=str, help="Override API host", default=None)
    parser.add_argument("--port", type=int, help="Override API port", default=None)
    parser.add_argument("--storage", type=str, help="Override storage root directory", default=None)
    parser.add_argument("--write-config", action="store_true", help="Write the effective configuration to --config and exit")

    args = parser.parse_args()

    try:
        config = Config(args.config)
    except (TypeError, ValueError) as e:
        print(f"Invalid configuration in {args.config}: {e}", file=sys.stderr)
        sys.exit(2)

    # Command line overrides
    if args.log_level:
        config.system.log_level = args.log_level
    if args.host:
        config.system.api_host = args.host
    if args.port:
        config.system.api_port = args.port
    if args.storage:
        config.storage.base_path = args.storage

    if args.write_config:
        config.save_config()
        return

    service = MediaStreamService(config=config)

    try:
        service.run()
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
