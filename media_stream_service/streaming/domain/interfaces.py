"""
Streaming Domain Interfaces.

Abstract interfaces that define contracts for media storage.
These interfaces allow dependency inversion - domain logic doesn't depend on infrastructure.
"""

from abc import ABC, abstractmethod
from typing import AsyncGenerator, Optional

from .models import ByteRange, MediaResource


class MediaStorage(ABC):
    """Abstract read-only storage backend for media resources"""

    @abstractmethod
    async def resolve(self, resource_key: str) -> MediaResource:
        """
        Resolve a key to a stored resource and its current size.

        Raises ResourceNotFound for unknown keys or keys escaping the storage
        root, StreamingInternalError if the size cannot be determined.
        """
        pass

    @abstractmethod
    async def exists(self, resource_key: str) -> bool:
        """Check if a resource exists"""
        pass

    @abstractmethod
    def iter_range(
        self,
        resource: MediaResource,
        byte_range: Optional[ByteRange] = None,
        chunk_size: int = 64 * 1024
    ) -> AsyncGenerator[bytes, None]:
        """
        Yield the bytes of byte_range (or the whole resource when None).

        Nothing is opened until the first chunk is requested, and the
        underlying handle is released when iteration stops for any reason.
        """
        pass
