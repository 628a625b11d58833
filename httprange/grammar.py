import re
from typing import List

from .datastructures import U64_MAX, Closed, OpenEnded, RawRangeSpec, Suffix
from .exceptions import ParseError

UNIT_PREFIX = "bytes="

# RFC 7230 OWS
_OWS = " \t"

_SPEC_RE = re.compile(r"([0-9]*)-([0-9]*)")
_U64_DIGITS = len(str(U64_MAX))


def _to_u64(digits: str) -> int:
    significant = digits.lstrip("0")
    if len(significant) > _U64_DIGITS or int(significant or "0") > U64_MAX:
        raise ParseError(f"Range header: {digits} does not fit in 64 bits")
    return int(significant or "0")


def tokenize_spec(spec: str) -> RawRangeSpec:
    """
    Parse one byte-range-spec or suffix-byte-range-spec, without surrounding
    whitespace.
    """
    match = _SPEC_RE.fullmatch(spec)
    if match is None:
        raise ParseError(f"Range header: invalid range {spec!r}")
    first, last = match.groups()
    if first and last:
        return Closed(_to_u64(first), _to_u64(last))
    elif first:
        return OpenEnded(_to_u64(first))
    elif last:
        return Suffix(_to_u64(last))
    raise ParseError("Range header: range must have a start or a suffix length")


def tokenize(header: str) -> List[RawRangeSpec]:
    """
    Split a `Range` header value into raw range specifiers, keeping the order
    in which they were written.

    ```
    >>> tokenize("bytes=0-9, 20-, -5")
    [Closed(first=0, last=9), OpenEnded(first=20), Suffix(length=5)]
    ```
    """
    header = header.strip(_OWS)
    if not header.startswith(UNIT_PREFIX):
        raise ParseError("Only support bytes range")

    ranges_str = header[len(UNIT_PREFIX) :]
    if not ranges_str.strip(_OWS):
        raise ParseError("Range header: range must be requested")

    specs: List[RawRangeSpec] = []
    for element in ranges_str.split(","):
        element = element.strip(_OWS)
        if not element:
            raise ParseError("Range header: empty range in list")
        specs.append(tokenize_spec(element))
    return specs
