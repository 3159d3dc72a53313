# webserv

A small HTTP server built on a selector loop. It serves files from the
current working directory, runs Python CGI scripts found under `cgi-bin/`,
and answers every request with `HTTP/1.1 200 OK`. A load-testing client that
sends concurrent random requests to a running server is included.

## Installation

```
pip install .
```

For development and tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
webserv
```

The server listens on `127.0.0.1:5533`. If you pass any argument, it prints
`Please try : ./webserv [configuration file]` to standard error and exits
with status 1. Press Ctrl-C to stop it. It then prints `Server Killed!` and
exits with status 1. If the server cannot be set up, for example because the
port is in use, it prints the error and exits with status 1.

### How a request is handled

The server reads up to 5555 bytes from each connection. It answers once and
then closes the connection.

- The path is taken from the request line. `/` maps to `index.html`. Any
  other path loses its leading `/` and is resolved relative to the working
  directory.
- If the file exists, its contents are the response body.
- If the file does not exist and the path contains no `.`, the body is
  `notFound.html` from the working directory. If that file is missing too,
  the body is `<h1>404 Not Found</h1>`.
- If the file does not exist and the path contains a `.`, the body is empty.
- If the file exists and the path starts with `cgi-bin`, the file is run with
  the same Python interpreter that runs the server
  (`WebServer.interpreter`). The script's standard output becomes the body.
  For `POST` requests, the value of the request's `Content-Type` header is
  written to the script's standard input.

Every reply carries `Content-Type: text/html` and a `Content-Length` header.
The response code that was worked out is recorded in the log, but it is not
sent to the client.

## Load testing

```
webserv-tester --port 5533
```

This command starts several client threads. Each thread sends randomly
chosen `GET`, `POST` and `DELETE` requests for `/`. `POST` requests carry a
short text body. Each thread waits a random 100–500 ms between requests and
prints the first part of every reply. The options are:

- `--host`: the server address. Default: `127.0.0.1`.
- `--port`: the server port. Default: `3131`. Use `5533` to reach a server
  started with `webserv`.
- `--clients`: the number of concurrent clients. Default: `5`.
- `--requests`: the number of requests each client sends. Default: `5`.

## Library use

```python
from webserv.server import WebServer, build_http_response

with WebServer("127.0.0.1", 5533) as server:
    server.poll_once(1.0)   # wait up to one second, handle what arrived

build_http_response(b"<p>hi</p>")  # a complete 200 OK reply as bytes
```

- `webserv.utils.parse_content(raw)` turns raw request bytes or text into a
  `webserv.response.Response`. The result holds the requested `file`, its
  `content`, the `request_type` (a `RequestType`, or `None` for other
  methods), the `response_code`, the `is_cgi` flag and
  `content_type_for_post`.
- `webserv.utils.get_file_name`, `get_content_type` and `read_file` each
  perform one of these steps on its own.
- `webserv.tester.build_request`, `send_request` and `run_client` can be used
  to drive a server from code.
- `webserv.server.ServerError` is raised when the socket cannot be resolved,
  created, bound or listened on, or when polling fails.

## What it does not do

- It reads no configuration file. The host and port are fixed.
- `POST` and `DELETE` are recognised but not acted on. They are served
  exactly like `GET`, apart from the CGI input described above.
- Requests larger than 5555 bytes are cut off. Keep-alive is not supported.