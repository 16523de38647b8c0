"""QOTD server over TCP, one worker per connection."""

import os
import socketserver
import sys

from netlab.ports import UsageError, default_port, parse_port
from netlab.quote import build_reply, fetch_quote

USAGE = "La composicion del comando no es correcta.\n./qot-server [-p server-port]."
BACKLOG = 5

_ConcurrencyMixIn = (
    socketserver.ForkingMixIn if hasattr(os, "fork") else socketserver.ThreadingMixIn
)


class _QuoteHandler(socketserver.BaseRequestHandler):
    """Send one quote to the connected client, then let the connection close."""

    def handle(self):
        self.request.sendall(build_reply(self.server.quote_source()))


class QuoteTCPServer(_ConcurrencyMixIn, socketserver.TCPServer):
    """TCP server that answers every connection with a quote of the day.

    Each connection is served by a child process where the platform can
    fork, and by a thread otherwise.
    """

    allow_reuse_address = True
    request_queue_size = BACKLOG

    def __init__(self, server_address, quote_source=fetch_quote):
        self.quote_source = quote_source
        super().__init__(server_address, _QuoteHandler)


def parse_args(argv):
    """Return the port to listen on from ``[-p port]``."""
    if not argv:
        return default_port("tcp")
    if len(argv) == 2:
        if argv[0] != "-p":
            raise UsageError("La opcion no es valida. Inserte una opcion valida.")
        return parse_port(argv[1])
    raise UsageError(USAGE)


def make_server(port, quote_source=fetch_quote):
    """Bind and listen on *port* on every interface; return the server."""
    return QuoteTCPServer(("", port), quote_source)


def serve(port, quote_source=fetch_quote):
    """Accept connections on *port* forever."""
    with make_server(port, quote_source) as server:
        server.serve_forever()


def main(argv=None):
    """Run the server until interrupted; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        port = parse_args(argv)
    except UsageError as exc:
        print(exc)
        return 1
    try:
        serve(port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0