"""
Streaming Domain Models.

Pure value objects for range-addressable media streaming.
These models contain no external dependencies and carry no I/O.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import AsyncGenerator, Dict, Optional

from .exceptions import MalformedRange, RangeNotSatisfiable

# Single byte range only; a comma-separated list will not match.
_RANGE_HEADER_PATTERN = re.compile(r"bytes=([0-9]*)-([0-9]*)", re.IGNORECASE)


def _parse_offset(digits: str, total_size: int) -> int:
    """
    Convert a digit run to an offset, capped at total_size.

    Every offset at or past total_size resolves the same way (start is not
    satisfiable, end and suffix length are clamped), so longer digit runs
    are never handed to int().
    """
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(total_size)):
        return total_size
    return min(int(digits), total_size)


@dataclass(frozen=True)
class MediaResource:
    """A stored media file as seen at request time"""
    key: str
    path: Path
    size_bytes: int
    content_type: str = "video/mp4"

    def __post_init__(self):
        if not self.key:
            raise ValueError("Resource key cannot be empty")
        if self.size_bytes < 0:
            raise ValueError("File size cannot be negative")


@dataclass(frozen=True)
class RangeRequest:
    """HTTP Range header value object, not yet checked against a file size"""
    start: Optional[int] = None
    end: Optional[int] = None
    unit: str = "bytes"

    def __post_init__(self):
        if self.unit != "bytes":
            raise ValueError(f"Unsupported range unit: {self.unit}")
        if self.start is None and self.end is None:
            raise ValueError("Range needs a start or an end")
        if (self.start is not None and self.start < 0) or (self.end is not None and self.end < 0):
            raise ValueError("Range offsets cannot be negative")

    @property
    def is_suffix(self) -> bool:
        """True for ``bytes=-N`` (last N bytes)"""
        return self.start is None

    @classmethod
    def from_header(cls, range_header: str, total_size: int) -> "RangeRequest":
        """Parse a ``Range`` header, raising MalformedRange on anything but one byte range"""
        match = _RANGE_HEADER_PATTERN.fullmatch(range_header.strip())
        if not match:
            raise MalformedRange(total_size, range_header)

        start_str, end_str = match.groups()
        if not start_str and not end_str:
            raise MalformedRange(total_size, range_header)

        return cls(
            start=_parse_offset(start_str, total_size) if start_str else None,
            end=_parse_offset(end_str, total_size) if end_str else None,
        )

    def resolve(self, total_size: int) -> "ByteRange":
        """
        Resolve against a concrete file size.

        An explicit end past the last byte is clamped. A start at or past
        the end of the file, or after the requested end, is not satisfiable.
        """
        if self.start is None:
            # Suffix range, e.g. "-500" means last 500 bytes
            if self.end == 0 or total_size == 0:
                raise RangeNotSatisfiable(total_size, "empty suffix range")
            return ByteRange(start=max(0, total_size - self.end), end=total_size - 1, total_size=total_size)

        if self.start >= total_size:
            raise RangeNotSatisfiable(total_size, f"start {self.start} beyond end of resource")
        if self.end is not None and self.end < self.start:
            raise RangeNotSatisfiable(total_size, f"start {self.start} after end {self.end}")

        end = total_size - 1 if self.end is None else min(self.end, total_size - 1)
        return ByteRange(start=self.start, end=end, total_size=total_size)


@dataclass(frozen=True)
class ByteRange:
    """Resolved, inclusive byte window of a resource"""
    start: int
    end: int
    total_size: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end <= self.total_size - 1:
            raise ValueError(f"Invalid byte range {self.start}-{self.end} for size {self.total_size}")

    @property
    def chunk_size(self) -> int:
        """Number of bytes in the window"""
        return self.end - self.start + 1

    @property
    def content_range(self) -> str:
        """Content-Range header value"""
        return f"bytes {self.start}-{self.end}/{self.total_size}"


@dataclass
class StreamResult:
    """Outcome of a successful serve call: status, framing headers and a lazy body"""
    status_code: int
    resource: MediaResource
    headers: Dict[str, str]
    body: AsyncGenerator[bytes, None] = field(repr=False)
    byte_range: Optional[ByteRange] = None

    @property
    def is_partial(self) -> bool:
        return self.byte_range is not None

    @property
    def content_length(self) -> int:
        return self.byte_range.chunk_size if self.byte_range else self.resource.size_bytes
