"""QOTD client over UDP."""

import socket
import sys

from netlab.ports import UsageError, default_port, parse_address, parse_port

USAGE = "Composicion del comando incorrecta: ./qotd-udp-client direccionIP [-p puerto-server]."
REQUEST = b"hola"
BUFFER_SIZE = 500


def parse_args(argv):
    """Return ``(address, port)`` from ``address [-p port]``."""
    if len(argv) == 1:
        return parse_address(argv[0]), default_port("udp")
    if len(argv) == 3:
        address = parse_address(argv[0])
        if argv[1] != "-p":
            raise UsageError("Opcion no valida. Inserte una opcion valida.")
        return address, parse_port(argv[2])
    raise UsageError(USAGE)


def request_quote(address, port, message=REQUEST, bufsize=BUFFER_SIZE):
    """Send *message* to the server and return the datagram it answers with."""
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("", 0))
        try:
            sock.sendto(message, (address, port))
        except OSError as exc:
            raise OSError(exc.errno, f"Fallo al enviar el mensage al servidor: {exc.strerror}") from exc
        try:
            data, _ = sock.recvfrom(bufsize)
        except OSError as exc:
            raise OSError(exc.errno, f"Fallo al recibir el mensaje: {exc.strerror}") from exc
    return data


def main(argv=None):
    """Fetch one quote and print it; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        address, port = parse_args(argv)
    except UsageError as exc:
        print(exc)
        return 1
    try:
        data = request_quote(address, port)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    text = data.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    sys.stdout.write(text)
    sys.stdout.flush()
    return 0