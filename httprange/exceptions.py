from http import HTTPStatus
from typing import Mapping, Optional


class RangeError(Exception):
    """
    Base Range Exception
    """

    def __init__(
        self,
        status_code: int = 400,
        content: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.status_code = status_code
        self.headers = headers
        self.content = content
        if content is not None:
            status_description = repr(content)
        else:
            status_description = HTTPStatus(status_code).description
        super().__init__(status_code, status_description)


class ParseError(RangeError):
    """
    400 Bad Request: the header does not match the `bytes` range grammar
    """

    def __init__(self, message: str = "Malformed Range header") -> None:
        super().__init__(content=message)


class InvalidRange(RangeError):
    """
    400 Bad Request: last-byte-pos is less than first-byte-pos
    """

    def __init__(
        self, message: str = "Range start must not exceed range end"
    ) -> None:
        super().__init__(content=message)


class Unsatisfiable(RangeError):
    """
    416 Range Not Satisfiable
    """

    def __init__(self, total_size: int) -> None:
        self.total_size = total_size
        super().__init__(416, headers={"Content-Range": f"bytes */{total_size}"})


# Both are answered with 400, or by ignoring the Range header entirely.
MalformedRange = (ParseError, InvalidRange)
