"""
Media Storage Implementations.

File system-based implementation of the media storage interface.
"""

import errno
import logging
import os
import stat
from pathlib import Path
from typing import AsyncGenerator, Optional

import aiofiles
import aiofiles.os

from ..domain.exceptions import ResourceNotFound, StreamingInternalError
from ..domain.interfaces import MediaStorage
from ..domain.models import ByteRange, MediaResource
from ...core.config import StorageConfig

# Keys that cannot name a file under the root, rather than storage failures
_NOT_FOUND_ERRNOS = (errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG, errno.ELOOP)

_realpath = aiofiles.os.wrap(os.path.realpath)


class FileSystemMediaStorage(MediaStorage):
    """File system implementation of media storage, confined to one root directory"""

    def __init__(self, storage_config: StorageConfig, content_type: str = "video/mp4"):
        self.storage_config = storage_config
        self.content_type = content_type
        self.logger = logging.getLogger(__name__)

        base_path = Path(storage_config.base_path)
        if storage_config.create_if_missing:
            base_path.mkdir(parents=True, exist_ok=True)
        self.root = base_path.resolve()

        if not self.root.is_dir():
            self.logger.warning(f"Storage root {self.root} does not exist; every key will be not found")

    async def resolve(self, resource_key: str) -> MediaResource:
        """Resolve a key to a regular file under the root and stat it"""
        path = await self._safe_path(resource_key)

        try:
            stat_result = await aiofiles.os.stat(path)
        except OSError as e:
            if e.errno in _NOT_FOUND_ERRNOS:
                raise ResourceNotFound(resource_key, e.strerror)
            self.logger.error(f"Error statting {path}: {e}")
            raise StreamingInternalError(resource_key, str(e)) from e

        if not stat.S_ISREG(stat_result.st_mode):
            raise ResourceNotFound(resource_key, "not a regular file")

        return MediaResource(
            key=resource_key,
            path=path,
            size_bytes=stat_result.st_size,
            content_type=self.content_type
        )

    async def exists(self, resource_key: str) -> bool:
        """Check if a resource exists"""
        try:
            await self.resolve(resource_key)
            return True
        except ResourceNotFound:
            return False

    async def iter_range(
        self,
        resource: MediaResource,
        byte_range: Optional[ByteRange] = None,
        chunk_size: int = 64 * 1024
    ) -> AsyncGenerator[bytes, None]:
        """Read the requested window in chunks; the file is opened on first iteration"""
        offset = byte_range.start if byte_range else 0
        remaining = byte_range.chunk_size if byte_range else resource.size_bytes

        try:
            async with aiofiles.open(resource.path, "rb") as f:
                await f.seek(offset)
                while remaining > 0:
                    chunk = await f.read(min(chunk_size, remaining))
                    if not chunk:
                        # File shrank after it was statted
                        raise StreamingInternalError(resource.key, f"unexpected end of file, {remaining} bytes outstanding")
                    remaining -= len(chunk)
                    yield chunk
        except OSError as e:
            self.logger.error(f"Error reading range of {resource.key}: {e}")
            raise StreamingInternalError(resource.key, str(e)) from e

    async def _safe_path(self, resource_key: str) -> Path:
        """Canonicalize a key and reject anything that lands outside the root"""
        if not resource_key or "\x00" in resource_key:
            raise ResourceNotFound(resource_key, "invalid key")

        candidate = Path(resource_key)
        if candidate.is_absolute():
            raise ResourceNotFound(resource_key, "absolute keys are not allowed")

        try:
            resolved = Path(await _realpath(self.root / candidate))
        except (OSError, ValueError) as e:
            raise ResourceNotFound(resource_key, f"unresolvable key: {e}")

        if resolved == self.root or self.root not in resolved.parents:
            self.logger.warning(f"Rejected key outside storage root: {resource_key!r}")
            raise ResourceNotFound(resource_key, "outside storage root")

        return resolved
