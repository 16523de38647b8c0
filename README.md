# netlab

Small command-line network tools built on plain sockets:

- a Quote of the Day (QOTD) client and server over UDP,
- a QOTD server over TCP that answers each connection in its own worker
  (a child process where the platform can fork, a thread otherwise),
- `miping`, which sends a single ICMP echo request and describes the answer.

The servers take their quotes from the output of `/usr/games/fortune -s`
(at most 499 bytes of it) and send them after a header line,
`Quote Of The Day from vm2520:`, followed by a terminating NUL byte. If the
fortune program cannot be started the quote is empty.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Commands

### qotd-udp-server

```
qotd-udp-server [-p PORT]
```

Listens for UDP datagrams on every interface and answers each one with a
quote. With no option it uses the `qotd/udp` port from the system's services
database, or 17 if there is no entry. An option other than `-p`, or the wrong
number of arguments, is reported and the command exits with status 1.

### qotd-udp-client

```
qotd-udp-client ADDRESS [-p PORT]
```

Sends the request `hola` to the QOTD server at the IPv4 address `ADDRESS` and
prints the quote it sends back. Without `-p` it uses the `qotd/udp` service
port (or 17). An invalid address, an option other than `-p` or the wrong
number of arguments is reported and the command exits with status 1; so does a
failure to send or receive.

### qotd-tcp-server

```
qotd-tcp-server [-p PORT]
```

Accepts TCP connections on every interface, sends each client one quote and
closes the connection. Without `-p` it uses the `qotd/tcp` service port (or
17). Stop it with Ctrl+C.

### miping

```
miping ADDRESS [-v]
```

Sends one ICMP echo request (type 8, payload `PAYLOAD`, identifier taken from
the process id) to `ADDRESS`, waits for one datagram and prints what it was:
an echo reply, or a destination-unreachable, redirect, router, time-exceeded
or parameter-problem message with its code. `-v` also shows the fields of the
request (type, code, identifier, sequence number, payload, checksum and size)
and, for an echo reply, its size, payload, identifier and TTL. Raw ICMP
sockets need administrator rights.

## Library use

The pieces behind the commands can be used directly:

```python
from netlab.icmp import EchoRequest, EchoResponse, internet_checksum, describe
from netlab.ports import parse_address, parse_port, default_port
from netlab.quote import build_reply, fetch_quote

request = EchoRequest(identifier=1234)
packet = request.pack()             # checksum filled in
assert internet_checksum(packet) == 0

print(describe(3, 1))
# ('Destination Unreachable', 'Destination host unreachable (Type 3, Code 1)')

print(build_reply("Carpe diem.\n", "localhost"))
# b'Quote Of The Day from localhost:\nCarpe diem.\n\x00'
```

`parse_address` and the `parse_args` functions raise `netlab.ports.UsageError`
on a malformed command line. `EchoResponse.parse` reads a raw datagram (IPv4
header included) and raises `ValueError` when it is too short.

`netlab.udp_client.request_quote`, `netlab.udp_server.serve` and
`netlab.udp_server.handle_datagram`, and `netlab.tcp_server.make_server` /
`netlab.tcp_server.serve` give the same behaviour as the commands without the
argument handling; the servers take a `quote_source` callable in place of
`fetch_quote`.

## What it does not do

There is no QOTD client for TCP; any TCP client that reads until the
connection closes can talk to `qotd-tcp-server`. `miping` sends a single
request and waits for a single answer, with no timeout, repetition or timing
statistics, and only IPv4 is supported throughout.