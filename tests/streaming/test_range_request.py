"""
Tests for Range header parsing and resolution.
"""

import pytest

from media_stream_service.streaming.domain.exceptions import MalformedRange, RangeNotSatisfiable
from media_stream_service.streaming.domain.models import ByteRange, RangeRequest


def resolve(header, total_size=1000):
    return RangeRequest.from_header(header, total_size).resolve(total_size)


def test_explicit_range():
    byte_range = resolve("bytes=200-499")
    assert (byte_range.start, byte_range.end) == (200, 499)
    assert byte_range.chunk_size == 300
    assert byte_range.content_range == "bytes 200-499/1000"


def test_open_ended_range_runs_to_last_byte():
    byte_range = resolve("bytes=100-")
    assert (byte_range.start, byte_range.end) == (100, 999)


def test_end_past_file_is_clamped():
    byte_range = resolve("bytes=900-2000")
    assert (byte_range.start, byte_range.end) == (900, 999)
    assert byte_range.chunk_size == 100


def test_single_byte_ranges():
    assert resolve("bytes=0-0").chunk_size == 1
    assert resolve("bytes=999-999").content_range == "bytes 999-999/1000"


def test_suffix_range():
    byte_range = resolve("bytes=-200")
    assert (byte_range.start, byte_range.end) == (800, 999)


def test_suffix_longer_than_file_covers_whole_file():
    byte_range = resolve("bytes=-5000")
    assert (byte_range.start, byte_range.end) == (0, 999)


def test_unit_is_case_insensitive_and_whitespace_tolerated():
    assert resolve("  Bytes=1-2 ").content_range == "bytes 1-2/1000"


@pytest.mark.parametrize("header", ["bytes=1000-1050", "bytes=1000-", "bytes=5000-6000"])
def test_start_at_or_past_end_is_not_satisfiable(header):
    with pytest.raises(RangeNotSatisfiable) as exc_info:
        resolve(header)
    assert not isinstance(exc_info.value, MalformedRange)
    assert exc_info.value.content_range == "bytes */1000"


def test_start_after_end_is_not_satisfiable():
    with pytest.raises(RangeNotSatisfiable):
        resolve("bytes=500-100")


def test_zero_length_suffix_is_not_satisfiable():
    with pytest.raises(RangeNotSatisfiable):
        resolve("bytes=-0")


def test_any_range_against_empty_resource_is_not_satisfiable():
    for header in ("bytes=0-", "bytes=0-10", "bytes=-10"):
        with pytest.raises(RangeNotSatisfiable) as exc_info:
            resolve(header, total_size=0)
        assert exc_info.value.content_range == "bytes */0"


@pytest.mark.parametrize(
    "header",
    [
        "bytes=-",
        "bytes=0-10,20-30",
        "items=0-10",
        "bytes 0-10",
        "bytes=abc-def",
        "bytes=-5-10",
        "bytes=1.5-2",
        "0-10",
        "",
    ],
)
def test_malformed_headers(header):
    with pytest.raises(MalformedRange) as exc_info:
        RangeRequest.from_header(header, 1000)
    assert exc_info.value.content_range == "bytes */1000"


def test_malformed_range_is_a_range_not_satisfiable():
    assert issubclass(MalformedRange, RangeNotSatisfiable)


def test_range_request_invariants():
    with pytest.raises(ValueError):
        RangeRequest()
    with pytest.raises(ValueError):
        RangeRequest(start=-1)
    with pytest.raises(ValueError):
        RangeRequest(start=0, unit="items")
    assert RangeRequest(end=10).is_suffix


def test_byte_range_invariants():
    with pytest.raises(ValueError):
        ByteRange(start=5, end=4, total_size=10)
    with pytest.raises(ValueError):
        ByteRange(start=0, end=10, total_size=10)
    with pytest.raises(ValueError):
        ByteRange(start=0, end=0, total_size=0)
    assert ByteRange(start=0, end=9, total_size=10).chunk_size == 10


HUGE = "9" * 5000


def test_huge_start_is_not_satisfiable():
    with pytest.raises(RangeNotSatisfiable) as exc_info:
        resolve(f"bytes={HUGE}-")
    assert not isinstance(exc_info.value, MalformedRange)
    assert exc_info.value.content_range == "bytes */1000"

    with pytest.raises(RangeNotSatisfiable):
        resolve(f"bytes={HUGE}-{HUGE}")


def test_huge_end_is_clamped():
    byte_range = resolve(f"bytes=10-{HUGE}")
    assert (byte_range.start, byte_range.end) == (10, 999)


def test_huge_suffix_covers_whole_file():
    byte_range = resolve(f"bytes=-{HUGE}")
    assert (byte_range.start, byte_range.end) == (0, 999)


def test_offsets_just_past_the_size_and_leading_zeros():
    assert resolve("bytes=0000200-0000499").content_range == "bytes 200-499/1000"
    assert resolve("bytes=999-1000").content_range == "bytes 999-999/1000"
    assert resolve("bytes=0-99999999999999999999").content_range == "bytes 0-999/1000"
    with pytest.raises(RangeNotSatisfiable):
        resolve("bytes=00001000-")
    with pytest.raises(RangeNotSatisfiable):
        resolve("bytes=-000")
