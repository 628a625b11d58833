import typing
from dataclasses import dataclass

__all__ = [
    "U64_MAX",
    "Closed",
    "OpenEnded",
    "Suffix",
    "RawRangeSpec",
    "ByteRange",
]

# Every number in a byte-range-spec must fit an unsigned 64-bit integer.
U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Closed:
    """
    `first-last`, both positions inclusive.
    """

    first: int
    last: int


@dataclass(frozen=True)
class OpenEnded:
    """
    `first-`, from `first` to the end of the representation.
    """

    first: int


@dataclass(frozen=True)
class Suffix:
    """
    `-length`, the final `length` bytes of the representation.
    """

    length: int


RawRangeSpec = typing.Union[Closed, OpenEnded, Suffix]


class ByteRange(typing.NamedTuple):
    offset: int
    length: int

    @property
    def end(self) -> int:
        """
        Exclusive end offset, suitable for slicing or `seek`/`read` loops.
        """
        return self.offset + self.length

    @property
    def last(self) -> int:
        """
        Inclusive position of the final byte, as written in `Content-Range`.
        """
        return self.end - 1

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__qualname__}: "
            f"offset={self.offset} length={self.length}>"
        )
