"""Request and response state shared by the request handling code."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

OK = 200
NOT_FOUND = 404
MAX_INT = 2147483647


class RequestType(IntEnum):
    """HTTP methods the server recognises."""

    GET = -2147483647
    POST = -2147483646
    DELETE = -2147483645

    @classmethod
    def from_request(cls, request: str) -> RequestType | None:
        """Return the method a raw request starts with, or None if unknown."""
        for member in cls:
            if request.startswith(f"{member.name} "):
                return member
        return None


@dataclass
class Response:
    """What was learned about a request and what should be sent back."""

    request_type: RequestType | None = None
    response_code: int = -1
    content: bytes = b""
    file: str = ""
    is_cgi: bool = False
    content_type_for_post: str = ""