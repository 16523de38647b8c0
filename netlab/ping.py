"""Send one ICMP echo request and report the answer."""

import contextlib
import os
import socket
import sys

from netlab.icmp import (
    ECHO_REPLY,
    ECHO_REQUEST_SIZE,
    ECHO_RESPONSE_SIZE,
    RECV_SIZE,
    EchoRequest,
    EchoResponse,
    describe,
)
from netlab.ports import UsageError, parse_address

USAGE = "La composicion no es correcta: miping direccion-ip [-v]"
BAD_ADDRESS = "Direccion IP no valida. Pruebe con una direccion valida."
BAD_OPTION = "Opcion no valida. Inserte una opcion valida."


def parse_args(argv):
    """Return ``(address, verbose)`` from ``address [-v]``."""
    if len(argv) not in (1, 2):
        raise UsageError(USAGE)
    try:
        address = parse_address(argv[0])
    except UsageError as exc:
        raise UsageError(BAD_ADDRESS) from exc
    if len(argv) == 2 and argv[1] != "-v":
        raise UsageError(BAD_OPTION)
    return address, len(argv) == 2


def build_request(identifier, verbose=False, out=None):
    """Return the echo request to send, describing it on *out* when verbose."""
    out = sys.stdout if out is None else out
    if verbose:
        print("-> Generando cabecera ICMP", file=out)
    request = EchoRequest(identifier=identifier & 0xFFFF, sequence=0)
    if verbose:
        print(f"-> Type: {request.icmp_type}", file=out)
        print(f"-> Code: {request.code}", file=out)
        print(f"-> Identifier (pid): {request.identifier}", file=out)
        print(f"-> Seq. number: {request.sequence}", file=out)
        print(f"-> Cadena a enviar: {request.payload.decode('ascii')}", file=out)
        print(f"-> Checksum: {request.checksum():x}", file=out)
        print(f"-> Tamaño total de paquete ICMP {ECHO_REQUEST_SIZE}", file=out)
    return request


def report_response(response, verbose=False, out=None):
    """Write what the received datagram means to *out*."""
    out = sys.stdout if out is None else out
    if verbose and response.icmp_type == ECHO_REPLY:
        print(f"-> Tamaño de la respuest {ECHO_RESPONSE_SIZE}", file=out)
        print(f"-> Cadena recibida: {response.payload_text}", file=out)
        print(f"-> Identifier (pid): {response.identifier}", file=out)
        print(f"-> TTL: {response.ip_header.ttl}", file=out)
    for line in describe(response.icmp_type, response.code):
        print(line, file=out)


def ping(address, verbose=False, out=None):
    """Send one echo request to *address* and return the parsed answer.

    Needs permission to open a raw ICMP socket.
    """
    out = sys.stdout if out is None else out
    request = build_request(os.getpid(), verbose, out)
    with contextlib.closing(
        socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
    ) as sock:
        sock.sendto(request.pack(), (address, 0))
        print(f"Paquete ICMP enviado a {address}", file=out)
        data, _ = sock.recvfrom(RECV_SIZE)
    print(f"Respuesta recibida desde {address}", file=out)
    response = EchoResponse.parse(data)
    report_response(response, verbose, out)
    return response


def main(argv=None):
    """Ping the address on the command line; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        address, verbose = parse_args(argv)
    except UsageError as exc:
        print(exc)
        return 1
    try:
        ping(address, verbose)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0