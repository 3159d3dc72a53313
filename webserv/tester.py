"""Load generator that fires random requests at a running server."""

from __future__ import annotations

import argparse
import random
import socket
import sys
import threading
import time

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3131
CLIENT_COUNT = 5
REQUESTS_PER_CLIENT = 5
METHODS = ("GET", "POST", "DELETE")
PATHS = ("/",)
RECV_SIZE = 1023


def build_request(method: str, path: str, host: str = DEFAULT_HOST, body: str = "") -> str:
    """Build a raw HTTP/1.1 request, adding body headers only when there is a body."""
    lines = [
        f"{method} {path} HTTP/1.1\r\n",
        f"Host: {host}\r\n",
        "Connection: keep-alive\r\n",
    ]
    if body:
        lines.append(f"Content-Length: {len(body.encode('utf-8'))}\r\n")
        lines.append("Content-Type: text/plain\r\n")
    lines.append("\r\n" + body)
    return "".join(lines)


def send_request(
    client_id: int,
    method: str,
    path: str,
    body: str = "",
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> str | None:
    """Send one request and return the first chunk of the reply, or None."""
    try:
        sock = socket.create_connection((host, port), timeout=10)
    except OSError:
        print(f"[Client {client_id}] Connection error!", file=sys.stderr)
        return None
    with sock:
        try:
            sock.sendall(build_request(method, path, host, body).encode("utf-8"))
            data = sock.recv(RECV_SIZE)
        except OSError:
            return None
    if not data:
        return None
    text = data.decode("utf-8", errors="replace")
    print(f"[Client {client_id}] Response:\n{text}")
    return text


def run_client(
    client_id: int,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    requests: int = REQUESTS_PER_CLIENT,
) -> list[str | None]:
    """Send ``requests`` random requests with random pauses; return the replies."""
    print(f"[Client {client_id}] Connecting to server...")
    replies = []
    for _ in range(requests):
        method = random.choice(METHODS)
        path = random.choice(PATHS)
        body = f"Client {client_id} sent data." if method == "POST" else ""
        replies.append(send_request(client_id, method, path, body, host, port))
        time.sleep(random.randint(100, 500) / 1000)
    return replies


def main(argv: list[str] | None = None) -> int:
    """Run several clients concurrently against the server."""
    parser = argparse.ArgumentParser(description="Send concurrent random requests.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--clients", type=int, default=CLIENT_COUNT)
    parser.add_argument("--requests", type=int, default=REQUESTS_PER_CLIENT)
    args = parser.parse_args(argv)

    threads = [
        threading.Thread(target=run_client, args=(i + 1, args.host, args.port, args.requests))
        for i in range(args.clients)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print("All clients finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())