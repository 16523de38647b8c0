"""Producing the quote of the day and the reply sent to clients."""

import subprocess

FORTUNE_COMMAND = ("/usr/games/fortune", "-s")
BUFFER_SIZE = 500
QUOTE_LIMIT = BUFFER_SIZE - 1
DEFAULT_HOSTNAME = "vm2520"


def fetch_quote(command=FORTUNE_COMMAND, limit=QUOTE_LIMIT):
    """Run *command* and return at most *limit* bytes of its output as text.

    Output stops at the first NUL byte. A command that cannot be started
    yields an empty quote.
    """
    try:
        result = subprocess.run(
            list(command), stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, check=False
        )
    except OSError:
        return ""
    output = result.stdout[:limit].split(b"\0", 1)[0]
    return output.decode("utf-8", errors="replace")


def build_reply(quote, hostname=DEFAULT_HOSTNAME):
    """Return the wire form of a reply: header, quote and a terminating NUL."""
    text = f"Quote Of The Day from {hostname}:\n{quote}"
    return text.encode("utf-8") + b"\0"