"""
Core module for the Media Stream Service.

This module contains configuration and logging setup.
"""

from .config import Config, StorageConfig, StreamingConfig, SystemConfig
from .logging_config import setup_logging, get_error_tracker

__all__ = ["Config", "StorageConfig", "StreamingConfig", "SystemConfig", "setup_logging", "get_error_tracker"]
