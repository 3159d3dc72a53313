"""A small selector-driven HTTP server with Python CGI support and a load-testing client."""

__version__ = "0.1.0"
__all__ = ["cli", "response", "server", "tester", "utils"]