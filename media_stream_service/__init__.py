"""
Media Stream Service

Serves stored videos over HTTP with single byte-range support so browser
players can seek and play progressively.
"""

__version__ = "1.0.0"
__author__ = "Media Stream Team"

from .main import MediaStreamService

__all__ = ["MediaStreamService"]
