"""ICMP echo datagrams, the IPv4 header that carries them, and their meaning."""

import socket
import struct
from dataclasses import dataclass

REQ_DATASIZE = 64
ECHO_REPLY = 0
ECHO_REQUEST = 8
IP_HEADER_SIZE = 20
ICMP_HEADER_SIZE = 4
ECHO_HEADER_SIZE = ICMP_HEADER_SIZE + 4
ECHO_REQUEST_SIZE = ECHO_HEADER_SIZE + REQ_DATASIZE
ECHO_RESPONSE_SIZE = IP_HEADER_SIZE + ECHO_REQUEST_SIZE
RECV_SIZE = 516

_IP_FORMAT = struct.Struct("!BBHHHBBH4s4s")
_ECHO_FORMAT = struct.Struct("!BBHHH")

_DESCRIPTIONS = {
    0: ("Descripcion de la respuesta: Echo reply (Type 0, Code 0)", {}),
    3: (
        "Destination Unreachable",
        {
            0: "Destination network unreachable (Type 3, Code 0)",
            1: "Destination host unreachable (Type 3, Code 1)",
            2: "Destination protocol unreachable (Type 3, Code 2)",
            3: "Destination port unreachable (Type 3, Code 3)",
            4: "Fragmentation required, and DF flag set (Type 3, Code 4)",
            5: "Source route failed (Type 3, Code 5)",
            6: "Destination network unknown (Type 3, Code 6)",
            7: "Destination host unknown (Type 3, Code 7)",
            8: "Source host isolated (Type 3, Code 8)",
            9: "Network administratively prohibited (Type 3, Code 9)",
            10: "Host administratively prohibited (Type 3, Code 10)",
            11: "Network unreachable for ToS (Type 3, Code 11)",
            12: "Host unreachable for ToS (Type 3, Code 12)",
            13: "Communication administratively prohibited (Type 3, Code 13)",
            14: "Host Precedence Violation (Type 3, Code 14)",
            15: "Precedence cutoff in effect (Type 3, Code 15)",
        },
    ),
    5: (
        "Redirect Message",
        {
            0: "Redirect Datagram for the Network (Type 5, Code 0)",
            1: "Redirect Datagram for the Host (Type 5, Code 1)",
            2: "Redirect Datagram for the ToS & network (Type 5, Code 2)",
            3: "Redirect Datagram for the ToS & host (Type 5, Code 3)",
        },
    ),
    8: ("Echo request (used to ping) (Type 8, Code 0)", {}),
    9: ("Router Advertisement (Type 9, Code 0)", {}),
    10: ("Router discovery/selection/solicitation (Type 10, Code 0)", {}),
    11: (
        "Time Exceeded",
        {
            0: "TTL expired in transit (Type 11, Code 0)",
            1: "Fragment reassembly time exceeded (Type 11, Code 1)",
        },
    ),
    12: (
        "Parameter Problem: Bad IP header",
        {
            0: "Pointer indicates the error (Type 12, Code 0)",
            1: "Missing a required option (Type 12, Code 1)",
            2: "Bad length (Type 12, Code 2)",
        },
    ),
}


def internet_checksum(data):
    """Return the ones' complement of the ones' complement sum of 16-bit words.

    Data of odd length is padded with a zero byte.
    """
    data = bytes(data)
    if len(data) % 2:
        data += b"\0"
    total = sum(word for (word,) in struct.iter_unpack("!H", data))
    while total >> 16:
        total = (total >> 16) + (total & 0xFFFF)
    return ~total & 0xFFFF


def describe(icmp_type, code):
    """Return the human-readable lines for an ICMP type and code.

    Unknown types give no lines; unknown codes give only the type's line.
    """
    entry = _DESCRIPTIONS.get(icmp_type)
    if entry is None:
        return ()
    title, codes = entry
    detail = codes.get(code)
    return (title,) if detail is None else (title, detail)


@dataclass(frozen=True)
class IPHeader:
    """An IPv4 header without options."""

    version_ihl: int
    tos: int
    total_length: int
    identification: int
    flags_offset: int
    ttl: int
    protocol: int
    checksum: int
    source: str
    destination: str

    @property
    def version(self):
        return self.version_ihl >> 4

    @property
    def header_length(self):
        """Length of the header in bytes, as the IHL field states."""
        return (self.version_ihl & 0x0F) * 4

    @classmethod
    def parse(cls, data):
        """Read the fixed part of an IPv4 header from the start of *data*."""
        if len(data) < IP_HEADER_SIZE:
            raise ValueError(f"IPv4 header needs {IP_HEADER_SIZE} bytes, got {len(data)}")
        fields = _IP_FORMAT.unpack_from(data)
        return cls(
            *fields[:8],
            source=socket.inet_ntoa(fields[8]),
            destination=socket.inet_ntoa(fields[9]),
        )


@dataclass
class EchoRequest:
    """An ICMP echo datagram with a fixed-size payload."""

    identifier: int = 0
    sequence: int = 0
    payload: bytes = b"PAYLOAD"
    icmp_type: int = ECHO_REQUEST
    code: int = 0

    def _pack_with(self, checksum):
        if len(self.payload) > REQ_DATASIZE:
            raise ValueError(f"payload exceeds {REQ_DATASIZE} bytes")
        header = _ECHO_FORMAT.pack(
            self.icmp_type,
            self.code,
            checksum,
            self.identifier & 0xFFFF,
            self.sequence & 0xFFFF,
        )
        return header + self.payload.ljust(REQ_DATASIZE, b"\0")

    def checksum(self):
        """Return the checksum of the datagram taken with a zero checksum field."""
        return internet_checksum(self._pack_with(0))

    def pack(self):
        """Return the wire form of the datagram, checksum filled in."""
        return self._pack_with(self.checksum())


@dataclass(frozen=True)
class EchoResponse:
    """An ICMP datagram as received on a raw socket, IP header included."""

    ip_header: IPHeader
    icmp_type: int
    code: int
    checksum: int
    identifier: int
    sequence: int
    payload: bytes

    @property
    def payload_text(self):
        """The payload up to its first NUL byte, as text."""
        return self.payload.split(b"\0", 1)[0].decode("utf-8", errors="replace")

    @classmethod
    def parse(cls, data):
        """Read an IP header followed by an ICMP echo-format datagram."""
        ip_header = IPHeader.parse(data)
        offset = ip_header.header_length
        if offset < IP_HEADER_SIZE:
            raise ValueError(f"invalid IPv4 header length {offset}")
        if len(data) < offset + ECHO_HEADER_SIZE:
            raise ValueError("datagram too short for an ICMP header")
        icmp_type, code, checksum, identifier, sequence = _ECHO_FORMAT.unpack_from(data, offset)
        start = offset + ECHO_HEADER_SIZE
        return cls(
            ip_header=ip_header,
            icmp_type=icmp_type,
            code=code,
            checksum=checksum,
            identifier=identifier,
            sequence=sequence,
            payload=bytes(data[start:start + REQ_DATASIZE]),
        )