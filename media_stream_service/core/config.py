"""
Configuration management for the Media Stream Service.

This module handles all configuration settings including the storage root,
streaming parameters and API server settings.
"""

import json
import logging
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import List, Optional


@dataclass
class StorageConfig:
    """Storage configuration"""

    base_path: str = "videos"
    create_if_missing: bool = True


@dataclass
class StreamingConfig:
    """Streaming configuration"""

    route_prefix: str = "/api/videos"
    content_type: str = "video/mp4"
    chunk_size_bytes: int = 64 * 1024  # Read size per body chunk
    cache_control: Optional[str] = "public, max-age=3600"

    def __post_init__(self):
        if not self.route_prefix.startswith("/"):
            raise ValueError(f"route_prefix must start with '/': {self.route_prefix!r}")
        self.route_prefix = self.route_prefix.rstrip("/")
        if not self.route_prefix:
            raise ValueError("route_prefix cannot be the root path")
        if self.chunk_size_bytes <= 0:
            raise ValueError("chunk_size_bytes must be positive")


@dataclass
class SystemConfig:
    """System-wide configuration"""

    log_level: str = "INFO"
    log_file: Optional[str] = None
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


class Config:
    """Main configuration manager"""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or "config.json"
        self.logger = logging.getLogger(__name__)

        # Default configurations
        self.storage = StorageConfig()
        self.streaming = StreamingConfig()
        self.system = SystemConfig()

        # Load configuration
        self.load_config()

    def load_config(self) -> None:
        """Load configuration from file, keeping defaults for missing sections"""
        config_path = Path(self.config_file)

        if not config_path.exists():
            self.logger.info(f"Config file {config_path} not found, using defaults")
            return

        try:
            with open(config_path, "r") as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.error(f"Error loading config from {config_path}: {e}")
            return

        # Invalid values raise; only an unreadable file falls back to defaults
        if "storage" in config_data:
            self.storage = StorageConfig(**config_data["storage"])

        if "streaming" in config_data:
            self.streaming = StreamingConfig(**config_data["streaming"])

        if "system" in config_data:
            self.system = SystemConfig(**config_data["system"])

        self.logger.info(f"Configuration loaded from {config_path}")

    def save_config(self) -> None:
        """Save current configuration to file"""
        config_data = {"storage": asdict(self.storage), "streaming": asdict(self.streaming), "system": asdict(self.system)}

        try:
            with open(self.config_file, "w") as f:
                json.dump(config_data, f, indent=2)
            self.logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            self.logger.error(f"Error saving config to {self.config_file}: {e}")
            raise
