"""A small poll-driven HTTP server that serves files and runs CGI scripts."""

from __future__ import annotations

import logging
import selectors
import socket
import subprocess
import sys

from .response import RequestType, Response
from .utils import parse_content

log = logging.getLogger(__name__)

READ_SIZE = 5555


class ServerError(Exception):
    """Raised when the server cannot be set up or polled."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"{reason}: Couldn't create the server!")
        self.reason = reason


def build_http_response(body: bytes | str) -> bytes:
    """Wrap ``body`` in a ``200 OK`` HTML response."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    header = (
        "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n"
        f"Content-Length: {len(body)}\r\n\r\n"
    )
    return header.encode("ascii") + body


class WebServer:
    """Listening socket plus the connections waiting to be answered."""

    interpreter: str = sys.executable

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self._closed = False

        try:
            infos = socket.getaddrinfo(
                host, str(port), socket.AF_INET, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
            )
        except socket.gaierror as exc:
            raise ServerError("getaddrinfo Error") from exc
        family, socktype, proto, _, sockaddr = infos[0]

        try:
            sock = socket.socket(family, socktype, proto)
        except OSError as exc:
            raise ServerError("Socket Error") from exc

        steps = (
            ("Setsockopt Error", lambda: sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)),
            ("Bind Error", lambda: sock.bind(sockaddr)),
            ("Listen Error", lambda: sock.listen(socket.SOMAXCONN)),
            ("Fcntl Error", lambda: sock.setblocking(False)),
        )
        for reason, step in steps:
            try:
                step()
            except OSError as exc:
                sock.close()
                raise ServerError(reason) from exc

        self._server = sock
        self.address = sock.getsockname()
        self._selector = selectors.DefaultSelector()
        self._selector.register(sock, selectors.EVENT_READ)

    def __enter__(self) -> WebServer:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def start(self) -> None:
        """Serve requests until interrupted."""
        print(f"Server listening on {self.host}:{self.port}...", flush=True)
        while True:
            self.poll_once(None)

    def poll_once(self, timeout: float | None = None) -> int:
        """Wait for activity once, handle it, and return the number of events."""
        try:
            events = self._selector.select(timeout)
        except OSError as exc:
            raise ServerError("Poll Error") from exc
        log.debug("event: %d", len(events))
        for key, _ in events:
            if key.fileobj is self._server:
                self._accept()
            else:
                self._serve(key.fileobj)
        return len(events)

    def close(self) -> None:
        """Close the listening socket and every open connection."""
        if self._closed:
            return
        self._closed = True
        for key in list(self._selector.get_map().values()):
            self._selector.unregister(key.fileobj)
            key.fileobj.close()
        self._selector.close()
        self._server.close()

    def _accept(self) -> None:
        try:
            conn, _ = self._server.accept()
        except OSError:
            return
        log.debug("New client connected: %d", conn.fileno())
        conn.setblocking(False)
        self._selector.register(conn, selectors.EVENT_READ)

    def _serve(self, conn: socket.socket) -> None:
        self._selector.unregister(conn)
        with conn:
            try:
                data = conn.recv(READ_SIZE)
            except OSError:
                data = b""
            if not data:
                return
            response = parse_content(data)
            if response.is_cgi:
                payload = self._run_cgi(response)
            else:
                payload = build_http_response(response.content)
            conn.setblocking(True)
            try:
                conn.sendall(payload)
            except OSError as exc:
                log.debug("send failed: %s", exc)
        log.info("Response : %s Response code: %d", response.file, response.response_code)

    def _run_cgi(self, response: Response) -> bytes:
        body = response.content_type_for_post
        feed = body.encode("latin-1") if response.request_type is RequestType.POST else None
        try:
            result = subprocess.run(
                [self.interpreter, response.file],
                input=feed,
                stdout=subprocess.PIPE,
                stdin=None if feed is not None else subprocess.DEVNULL,
                check=False,
            )
            output = result.stdout
        except OSError as exc:
            log.error("CGI failed: %s", exc)
            output = b""
        return build_http_response(output)