"""Quote of the Day client and servers over UDP and TCP, and a one-shot ICMP echo ping."""

__version__ = "0.1.0"