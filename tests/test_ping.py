import io
import socket
import struct
from unittest import mock

import pytest

from netlab.icmp import EchoRequest, EchoResponse, internet_checksum
from netlab.ping import build_request, main, parse_args, ping, report_response
from netlab.ports import UsageError


def _reply_bytes(icmp_type=0, code=0, identifier=1234, ttl=64):
    ip = struct.pack(
        "!BBHHHBBH4s4s",
        0x45,
        0,
        92,
        1,
        0,
        ttl,
        1,
        0,
        socket.inet_aton("127.0.0.1"),
        socket.inet_aton("127.0.0.1"),
    )
    icmp = EchoRequest(identifier=identifier, icmp_type=icmp_type, code=code).pack()
    return ip + icmp


def test_parse_args_address_only():
    assert parse_args(["127.0.0.1"]) == ("127.0.0.1", False)


def test_parse_args_verbose():
    assert parse_args(["127.0.0.1", "-v"]) == ("127.0.0.1", True)


def test_parse_args_bad_option():
    with pytest.raises(UsageError, match="Opcion no valida"):
        parse_args(["127.0.0.1", "-x"])


def test_parse_args_bad_address():
    with pytest.raises(UsageError, match="Direccion IP no valida"):
        parse_args(["not-an-ip"])


@pytest.mark.parametrize("argv", [[], ["127.0.0.1", "-v", "extra"]])
def test_parse_args_wrong_count(argv):
    with pytest.raises(UsageError, match="miping direccion-ip"):
        parse_args(argv)


def test_build_request_quiet():
    out = io.StringIO()
    request = build_request(1234, verbose=False, out=out)
    assert out.getvalue() == ""
    assert request.identifier == 1234
    assert request.sequence == 0
    assert internet_checksum(request.pack()) == 0


def test_build_request_verbose():
    out = io.StringIO()
    request = build_request(1234, verbose=True, out=out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "-> Generando cabecera ICMP"
    assert "-> Type: 8" in lines
    assert "-> Code: 0" in lines
    assert "-> Identifier (pid): 1234" in lines
    assert "-> Seq. number: 0" in lines
    assert "-> Cadena a enviar: PAYLOAD" in lines
    assert f"-> Checksum: {request.checksum():x}" in lines
    assert lines[-1] == "-> Tamaño total de paquete ICMP 72"


def test_build_request_truncates_identifier():
    assert build_request(0x12345, out=io.StringIO()).identifier == 0x2345


def test_report_echo_reply_verbose():
    out = io.StringIO()
    report_response(EchoResponse.parse(_reply_bytes(ttl=57)), verbose=True, out=out)
    lines = out.getvalue().splitlines()
    assert "-> Cadena recibida: PAYLOAD" in lines
    assert "-> Identifier (pid): 1234" in lines
    assert "-> TTL: 57" in lines
    assert lines[-1] == "Descripcion de la respuesta: Echo reply (Type 0, Code 0)"


def test_report_unreachable():
    out = io.StringIO()
    report_response(EchoResponse.parse(_reply_bytes(icmp_type=3, code=1)), verbose=True, out=out)
    assert out.getvalue().splitlines() == [
        "Destination Unreachable",
        "Destination host unreachable (Type 3, Code 1)",
    ]


def test_report_unknown_type_is_silent():
    out = io.StringIO()
    report_response(EchoResponse.parse(_reply_bytes(icmp_type=42)), out=out)
    assert out.getvalue() == ""


@mock.patch("netlab.ping.socket")
def test_ping_sends_and_reports(socket_module):
    fake = socket_module.socket.return_value
    fake.recvfrom.return_value = (_reply_bytes(), ("127.0.0.1", 0))
    out = io.StringIO()
    response = ping("127.0.0.1", verbose=False, out=out)
    assert response.icmp_type == 0
    sent, destination = fake.sendto.call_args[0]
    assert destination == ("127.0.0.1", 0)
    assert internet_checksum(sent) == 0
    assert sent[:2] == b"\x08\x00"
    assert out.getvalue().splitlines() == [
        "Paquete ICMP enviado a 127.0.0.1",
        "Respuesta recibida desde 127.0.0.1",
        "Descripcion de la respuesta: Echo reply (Type 0, Code 0)",
    ]
    assert fake.close.called


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert "miping direccion-ip [-v]" in capsys.readouterr().out


@mock.patch("netlab.ping.socket")
def test_main_socket_error(socket_module, capsys):
    socket_module.socket.side_effect = PermissionError(1, "Operation not permitted")
    assert main(["127.0.0.1"]) == 1
    assert "Operation not permitted" in capsys.readouterr().err