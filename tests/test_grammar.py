import pytest

from httprange.datastructures import U64_MAX, Closed, OpenEnded, Suffix
from httprange.exceptions import ParseError
from httprange.grammar import tokenize, tokenize_spec


@pytest.mark.parametrize(
    "header,specs",
    [
        ("bytes=10-100", [Closed(10, 100)]),
        ("bytes=0-0", [Closed(0, 0)]),
        ("bytes=10-", [OpenEnded(10)]),
        ("bytes=-100", [Suffix(100)]),
        ("bytes=-0", [Suffix(0)]),
        ("bytes=100-10", [Closed(100, 10)]),
        (
            "bytes=0-49,100-149,200-249",
            [Closed(0, 49), Closed(100, 149), Closed(200, 249)],
        ),
        ("bytes=0-0,-1", [Closed(0, 0), Suffix(1)]),
        ("bytes=20-29,0-9", [Closed(20, 29), Closed(0, 9)]),
        (f"bytes=0-{U64_MAX}", [Closed(0, U64_MAX)]),
        ("bytes=007-010", [Closed(7, 10)]),
    ],
)
def test_tokenize(header, specs):
    assert tokenize(header) == specs


@pytest.mark.parametrize(
    "header,specs",
    [
        ("bytes= 0-499 ", [Closed(0, 499)]),
        ("bytes=0-49, 50-99", [Closed(0, 49), Closed(50, 99)]),
        (
            "bytes= 0-49 , 100-149 ,\t-50 ",
            [Closed(0, 49), Closed(100, 149), Suffix(50)],
        ),
        ("  bytes=10-\t", [OpenEnded(10)]),
    ],
)
def test_tokenize_whitespace(header, specs):
    assert tokenize(header) == specs


@pytest.mark.parametrize(
    "header",
    [
        "",
        "10-100",
        "bytes",
        "bytes=",
        "bytes= ",
        "bytes=-",
        "bytes=,",
        "bytes=0-49,",
        "bytes=,0-49",
        "bytes=0-49,,100-149",
        "bytes=0-49,invalid,100-149",
        "bytes=abc-def",
        "bytes=0-abc",
        "bytes=0--100",
        "bytes=0:100",
        "bytes=+1-2",
        "bytes=1-+2",
        "bytes=1 -2",
        "bytes=1- 2",
        "bytes=1 0-20",
        "bytes=0x10-0x20",
        "bytes=１-２",
        "BYTES=0-499",
        "Bytes=0-499",
        "byte=0-10",
        "items=0-10",
        "bytes:0-10",
        f"bytes=0-{U64_MAX + 1}",
        f"bytes={U64_MAX + 1}-",
        f"bytes=-{U64_MAX + 1}",
        "bytes=99999999999999999999999999999-",
    ],
)
def test_tokenize_malformed(header):
    with pytest.raises(ParseError):
        tokenize(header)


def test_tokenize_spec_variants():
    assert type(tokenize_spec("5-")) is OpenEnded
    assert type(tokenize_spec("-5")) is Suffix
    assert tokenize_spec("5-") != tokenize_spec("-5")

    with pytest.raises(ParseError, match="start or a suffix length"):
        tokenize_spec("-")


def test_tokenize_is_repeatable():
    header = "bytes=0-9, 20-, -5"
    assert tokenize(header) == tokenize(header)


def test_tokenize_long_numbers():
    assert tokenize("bytes=" + "0" * 5000 + "1-") == [OpenEnded(1)]

    with pytest.raises(ParseError, match="64 bits"):
        tokenize("bytes=" + "9" * 5000 + "-")
