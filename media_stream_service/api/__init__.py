"""
API module for the Media Stream Service.

This module provides the HTTP surface: health, status and streaming routes.
"""

from .server import APIServer

__all__ = ["APIServer"]
