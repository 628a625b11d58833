from typing import List, Sequence

from .datastructures import U64_MAX, ByteRange, Closed, OpenEnded, RawRangeSpec, Suffix
from .exceptions import InvalidRange, ParseError, Unsatisfiable


def check_total_size(total_size: int) -> None:
    if isinstance(total_size, bool) or not isinstance(total_size, int):
        raise TypeError(f"total_size must be an int, not {type(total_size).__name__}")
    if not (0 <= total_size <= U64_MAX):
        raise ValueError(f"total_size must be in [0, {U64_MAX}], got {total_size}")


def resolve(spec: RawRangeSpec, total_size: int) -> ByteRange:
    """
    Convert a raw range specifier into absolute `(offset, length)` within a
    representation of `total_size` bytes.

    Positions past the end are clamped, a `first-last` range with
    `first > last` raises `InvalidRange`, and a range that selects no byte
    of the representation raises `Unsatisfiable`.
    """
    check_total_size(total_size)

    if isinstance(spec, Closed):
        if spec.first > spec.last:
            raise InvalidRange()
        if spec.first >= total_size:
            raise Unsatisfiable(total_size)
        last = min(spec.last, total_size - 1)
        return ByteRange(spec.first, last - spec.first + 1)
    elif isinstance(spec, OpenEnded):
        if spec.first >= total_size:
            raise Unsatisfiable(total_size)
        return ByteRange(spec.first, total_size - spec.first)
    elif isinstance(spec, Suffix):
        if spec.length == 0 or total_size == 0:
            raise Unsatisfiable(total_size)
        if spec.length >= total_size:
            return ByteRange(0, total_size)
        return ByteRange(total_size - spec.length, spec.length)
    raise TypeError(f"Unsupported range specifier: {spec!r}")


def resolve_all(
    specs: Sequence[RawRangeSpec], total_size: int, *, strict: bool = True
) -> List[ByteRange]:
    """
    Resolve every specifier independently, in order. Overlapping ranges are
    neither merged nor deduplicated.

    With `strict=False`, unsatisfiable specifiers are dropped and
    `Unsatisfiable` is raised only when none of them can be satisfied.
    `InvalidRange` is raised in both modes.
    """
    check_total_size(total_size)
    if len(specs) == 0:
        raise ParseError("Range header: range must be requested")

    result: List[ByteRange] = []
    for spec in specs:
        try:
            result.append(resolve(spec, total_size))
        except Unsatisfiable:
            if strict:
                raise
    if not result:
        raise Unsatisfiable(total_size)
    return result
