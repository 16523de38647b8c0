"""QOTD server over UDP."""

import socket
import sys

from netlab.ports import UsageError, default_port, parse_port
from netlab.quote import build_reply, fetch_quote

USAGE = "La composicion del comando no es correcta.\n./qot-server [-p server-port]."
BUFFER_SIZE = 500


def parse_args(argv):
    """Return the port to listen on from ``[-p port]``."""
    if not argv:
        return default_port("udp")
    if len(argv) == 2:
        if argv[0] != "-p":
            raise UsageError("La opcion no es valida. Inserte una opcion valida.")
        return parse_port(argv[1])
    raise UsageError(USAGE)


def handle_datagram(sock, quote_source=fetch_quote):
    """Answer one incoming datagram with a fresh quote; return the client address."""
    _, client = sock.recvfrom(BUFFER_SIZE)
    sock.sendto(build_reply(quote_source()), client)
    return client


def serve(port, quote_source=fetch_quote):
    """Answer datagrams on *port* forever."""
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("", port))
        while True:
            handle_datagram(sock, quote_source)


def main(argv=None):
    """Run the server; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        port = parse_args(argv)
    except UsageError as exc:
        print(exc)
        return 1
    try:
        serve(port)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0