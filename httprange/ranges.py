from typing import Iterable, List

from .datastructures import ByteRange
from .exceptions import ParseError
from .grammar import tokenize
from .resolver import check_total_size, resolve, resolve_all


def parse_ranges(
    header: str, total_size: int, *, strict: bool = True
) -> List[ByteRange]:
    """
    Parse a `Range` header value and resolve it against a representation of
    `total_size` bytes.

    ```
    >>> parse_ranges("bytes=0-9,20-29", 200)
    [<ByteRange: offset=0 length=10>, <ByteRange: offset=20 length=10>]
    ```
    """
    return resolve_all(tokenize(header), total_size, strict=strict)


def parse_range(header: str, total_size: int) -> ByteRange:
    """
    Same as `parse_ranges`, for callers that only serve a single part. A header
    with more than one range raises `ParseError`.
    """
    specs = tokenize(header)
    if len(specs) != 1:
        raise ParseError("Range header: expected a single range")
    return resolve(specs[0], total_size)


def coalesce_ranges(ranges: Iterable[ByteRange]) -> List[ByteRange]:
    """
    Sort ranges by offset and merge the ones that overlap or touch, so that a
    multipart response never sends the same byte twice.
    """
    result: List[ByteRange] = []
    for byte_range in sorted(ranges):
        if result and byte_range.offset <= result[-1].end:
            previous = result[-1]
            result[-1] = ByteRange(
                previous.offset, max(previous.end, byte_range.end) - previous.offset
            )
        else:
            result.append(byte_range)
    return result


def content_range(byte_range: ByteRange, total_size: int) -> str:
    """
    `Content-Range` field value for one part of a 206 response.
    """
    check_total_size(total_size)
    if byte_range.length < 1 or byte_range.end > total_size:
        raise ValueError(
            f"{byte_range!r} is outside a {total_size} byte representation"
        )
    return f"bytes {byte_range.offset}-{byte_range.last}/{total_size}"
