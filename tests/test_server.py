import socket
import sys

import pytest

from webserv.server import ServerError, WebServer, build_http_response


def _exchange(server, request):
    with socket.create_connection(server.address, timeout=5) as client:
        client.sendall(request)
        server.poll_once(5)
        server.poll_once(5)
        chunks = []
        while chunk := client.recv(4096):
            chunks.append(chunk)
    return b"".join(chunks)


@pytest.fixture
def server(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with WebServer("127.0.0.1", 0) as srv:
        yield srv


def test_build_http_response_bytes():
    assert build_http_response(b"abc") == (
        b"HTTP/1.1 200 OK\r\nContent-Type: text/html\r\nContent-Length: 3\r\n\r\nabc"
    )


def test_build_http_response_empty_text():
    assert build_http_response("").endswith(b"Content-Length: 0\r\n\r\n")


def test_server_error_message():
    err = ServerError("Bind Error")
    assert str(err) == "Bind Error: Couldn't create the server!"
    assert err.reason == "Bind Error"


def test_serves_index(server, tmp_path):
    (tmp_path / "index.html").write_bytes(b"<p>hi</p>")
    reply = _exchange(server, b"GET / HTTP/1.1\r\nHost: x\r\n\r\n")
    assert reply == build_http_response(b"<p>hi</p>")


def test_missing_page_without_extension(server):
    reply = _exchange(server, b"GET /nothing HTTP/1.1\r\n\r\n")
    assert reply == build_http_response(b"<h1>404 Not Found</h1>")


def test_missing_file_with_extension_is_empty(server):
    reply = _exchange(server, b"GET /gone.txt HTTP/1.1\r\n\r\n")
    assert reply == build_http_response(b"")


def test_cgi_get(server, tmp_path):
    (tmp_path / "cgi-bin").mkdir()
    (tmp_path / "cgi-bin" / "hello.py").write_text("print('from script')\n")
    reply = _exchange(server, b"GET /cgi-bin/hello.py HTTP/1.1\r\n\r\n")
    expected = ("from script" + ("\r\n" if sys.platform == "win32" else "\n")).encode()
    assert reply == build_http_response(expected)


def test_cgi_post_receives_content_type(server, tmp_path):
    (tmp_path / "cgi-bin").mkdir()
    (tmp_path / "cgi-bin" / "echo.py").write_text(
        "import sys\nsys.stdout.buffer.write(sys.stdin.buffer.read())\n"
    )
    reply = _exchange(
        server, b"POST /cgi-bin/echo.py HTTP/1.1\r\nContent-Type: text/plain\r\n\r\n"
    )
    assert reply == build_http_response(b"text/plain\r")


def test_silent_client_is_dropped(server, tmp_path):
    (tmp_path / "index.html").write_bytes(b"ok")
    quiet = socket.create_connection(server.address, timeout=5)
    quiet.close()
    server.poll_once(5)
    server.poll_once(5)
    assert _exchange(server, b"GET / HTTP/1.1\r\n\r\n") == build_http_response(b"ok")


def test_bind_error_when_port_taken(server):
    with pytest.raises(ServerError, match="Bind Error: Couldn't create the server!"):
        WebServer("127.0.0.1", server.address[1])


def test_close_refuses_connections(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with WebServer("127.0.0.1", 0) as srv:
        address = srv.address
    with pytest.raises(ConnectionRefusedError):
        socket.create_connection(address, timeout=5)