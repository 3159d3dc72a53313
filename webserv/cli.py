"""Command line entry point that runs the server on its fixed address."""

from __future__ import annotations

import sys

from .server import ServerError, WebServer

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5533
USAGE = "Please try : ./webserv [configuration file]"


def main(argv: list[str] | None = None) -> int:
    """Run the server; any argument is rejected with a usage message."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        server = WebServer(DEFAULT_HOST, DEFAULT_PORT)
    except ServerError as exc:
        print(exc)
        return 1
    with server:
        try:
            server.start()
        except ServerError as exc:
            print(exc)
            return 1
        except KeyboardInterrupt:
            print("\nServer Killed!")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())