import socket

from webserv.cli import DEFAULT_HOST, DEFAULT_PORT, USAGE, main


def test_argument_prints_usage(capsys):
    assert main(["server.conf"]) == 1
    assert USAGE in capsys.readouterr().err


def test_several_arguments_print_usage(capsys):
    assert main(["a", "b"]) == 1
    assert capsys.readouterr().err.strip() == USAGE


def test_port_in_use_reports_bind_error(capsys):
    blocker = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        try:
            blocker.bind((DEFAULT_HOST, DEFAULT_PORT))
            blocker.listen(1)
        except OSError:
            pass
        assert main([]) == 1
    finally:
        blocker.close()
    assert "Bind Error: Couldn't create the server!" in capsys.readouterr().out