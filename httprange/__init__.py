from .__version__ import __version__
from .datastructures import U64_MAX, ByteRange, Closed, OpenEnded, RawRangeSpec, Suffix
from .exceptions import (
    InvalidRange,
    MalformedRange,
    ParseError,
    RangeError,
    Unsatisfiable,
)
from .grammar import tokenize
from .ranges import coalesce_ranges, content_range, parse_range, parse_ranges
from .resolver import resolve, resolve_all

__all__ = [
    "__version__",
    "U64_MAX",
    "ByteRange",
    "Closed",
    "OpenEnded",
    "Suffix",
    "RawRangeSpec",
    "RangeError",
    "ParseError",
    "InvalidRange",
    "Unsatisfiable",
    "MalformedRange",
    "tokenize",
    "resolve",
    "resolve_all",
    "parse_ranges",
    "parse_range",
    "coalesce_ranges",
    "content_range",
]
