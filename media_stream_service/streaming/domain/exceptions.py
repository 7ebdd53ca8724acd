"""
Streaming Domain Exceptions.

Error taxonomy for media streaming. The presentation layer maps each
exception to an HTTP status.
"""

from typing import Optional


class StreamingError(Exception):
    """Base class for all streaming errors"""


class ResourceNotFound(StreamingError):
    """Resource key does not resolve to a file under the storage root"""

    def __init__(self, resource_key: str, reason: Optional[str] = None):
        self.resource_key = resource_key
        self.reason = reason
        message = f"Resource not found: {resource_key!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class RangeNotSatisfiable(StreamingError):
    """Requested byte window cannot be served for a resource of total_size bytes"""

    def __init__(self, total_size: int, reason: str = "range not satisfiable"):
        self.total_size = total_size
        self.reason = reason
        super().__init__(f"{reason} (resource size {total_size})")

    @property
    def content_range(self) -> str:
        """Content-Range value advertising the valid size"""
        return f"bytes */{self.total_size}"


class MalformedRange(RangeNotSatisfiable):
    """Range header does not match the single byte-range grammar"""

    def __init__(self, total_size: int, header_value: str):
        self.header_value = header_value
        super().__init__(total_size, f"malformed range header {header_value!r}")


class StreamingInternalError(StreamingError):
    """I/O failure while statting or reading an already-resolved resource"""

    def __init__(self, resource_key: str, message: str):
        self.resource_key = resource_key
        super().__init__(f"Error reading {resource_key!r}: {message}")
