"""
Streaming Infrastructure Layer.

Contains implementations of domain interfaces using external dependencies
like the file system and aiofiles.
"""

from .storage import FileSystemMediaStorage

__all__ = [
    "FileSystemMediaStorage",
]
