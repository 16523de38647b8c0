import socket
from unittest.mock import patch

import pytest

from netlab.ports import UsageError
from netlab.quote import build_reply
from netlab.udp_server import handle_datagram, main, parse_args


def test_parse_args_default_port():
    with patch("netlab.ports.socket.getservbyname", return_value=17):
        assert parse_args([]) == 17


def test_parse_args_explicit_port():
    assert parse_args(["-p", "8017"]) == 8017


def test_parse_args_bad_option():
    with pytest.raises(UsageError, match="La opcion no es valida"):
        parse_args(["-x", "8017"])


@pytest.mark.parametrize("argv", [["-p"], ["-p", "1", "2"]])
def test_parse_args_wrong_count(argv):
    with pytest.raises(UsageError, match="La composicion del comando no es correcta"):
        parse_args(argv)


def test_handle_datagram_replies_with_quote():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as server, socket.socket(
        socket.AF_INET, socket.SOCK_DGRAM
    ) as client:
        server.bind(("127.0.0.1", 0))
        server.settimeout(5)
        client.bind(("127.0.0.1", 0))
        client.settimeout(5)
        client.sendto(b"hola", server.getsockname())
        peer = handle_datagram(server, lambda: "Be kind.\n")
        data, _ = client.recvfrom(500)
        assert peer == client.getsockname()
        assert data == build_reply("Be kind.\n")


def test_handle_datagram_asks_for_new_quote_each_time():
    quotes = iter(["first\n", "second\n"])
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as server, socket.socket(
        socket.AF_INET, socket.SOCK_DGRAM
    ) as client:
        server.bind(("127.0.0.1", 0))
        server.settimeout(5)
        client.settimeout(5)
        replies = []
        for _ in range(2):
            client.sendto(b"hola", server.getsockname())
            handle_datagram(server, lambda: next(quotes))
            replies.append(client.recvfrom(500)[0])
        assert replies == [build_reply("first\n"), build_reply("second\n")]


def test_main_usage_error(capsys):
    assert main(["-x", "1"]) == 1
    assert "La opcion no es valida" in capsys.readouterr().out