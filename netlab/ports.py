"""Command-line address and port parsing shared by the QOTD tools."""

import re
import socket

QOTD_SERVICE = "qotd"
QOTD_FALLBACK_PORT = 17

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """Raised when the command line is not well formed."""


def default_port(protocol):
    """Return the QOTD port for *protocol* from the services database.

    Falls back to the well-known port 17 when the database has no entry.
    """
    try:
        return socket.getservbyname(QOTD_SERVICE, protocol)
    except OSError:
        return QOTD_FALLBACK_PORT


def parse_address(text):
    """Validate an IPv4 address the way ``inet_aton`` does and return it dotted."""
    try:
        packed = socket.inet_aton(text)
    except (OSError, ValueError) as exc:
        raise UsageError(
            "Direccion IP no valida. Pruebe con una IP valida."
        ) from exc
    return socket.inet_ntoa(packed)


def parse_port(text):
    """Read a leading decimal integer as a 16-bit port number.

    Text without a leading integer yields 0; values outside the 16-bit
    range wrap around, as a network-order conversion would.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1)) & 0xFFFF