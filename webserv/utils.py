"""Parsing of raw requests and loading of the files they ask for."""

from __future__ import annotations

from pathlib import Path

from .response import NOT_FOUND, OK, RequestType, Response

NOT_FOUND_PAGE = "notFound.html"
DEFAULT_NOT_FOUND_BODY = b"<h1>404 Not Found</h1>"
INDEX_FILE = "index.html"
CGI_PREFIX = "cgi-bin"


def read_file(file_name: str, response: Response, code: int = OK) -> bytes:
    """Load the requested file and record the outcome on ``response``.

    A missing path without an extension yields the not-found page and a 404.
    A missing path with an extension yields an empty body with ``code``.
    An existing path under ``cgi-bin`` is flagged as a CGI script.
    """
    try:
        data = Path(file_name).read_bytes() if file_name else None
    except OSError:
        data = None

    if data is None:
        if "." not in file_name:
            response.response_code = NOT_FOUND
            try:
                return Path(NOT_FOUND_PAGE).read_bytes()
            except OSError:
                return DEFAULT_NOT_FOUND_BODY
        response.response_code = code
        return b""

    if file_name.startswith(CGI_PREFIX):
        response.is_cgi = True
        response.response_code = code
        return b""

    response.response_code = code
    return data


def get_content_type(http_buffer: str) -> str:
    """Return the text after the first ``Content-Type:`` header, or ``""``."""
    marker = "Content-Type:"
    for line in http_buffer.split("\n"):
        pos = line.find(marker)
        if pos != -1:
            return line[pos + len(marker) + 1:]
    return ""


def get_file_name(request: str) -> str:
    """Extract the requested path from the request line.

    ``/`` maps to the index file and a leading slash is dropped.
    """
    _, sep, rest = request.partition(" ")
    if not sep:
        return ""
    path, sep, _ = rest.partition(" ")
    if not sep:
        return ""
    if path == "/":
        return INDEX_FILE
    return path.removeprefix("/")


def parse_content(buffer: bytes | str) -> Response:
    """Parse a raw request into a ``Response`` describing how to answer it."""
    if isinstance(buffer, bytes):
        buffer = buffer.split(b"\0", 1)[0].decode("latin-1")
    request = buffer.split("\0", 1)[0]

    response = Response()
    response.file = get_file_name(request)
    response.content = read_file(response.file, response)
    response.content_type_for_post = get_content_type(request)
    response.request_type = RequestType.from_request(request)
    return response