"""Squid external ACL helper.

squid.conf::

    external_acl_type sigv4 ttl=0 %>{Authorization} /usr/local/bin/sigv4gate squid --policy /etc/sigv4gate/policy.yaml
    acl sigv4_allowed external sigv4
    http_access allow sigv4_allowed

Squid writes one URL-encoded header value per line (``-`` when the header is
absent) and expects ``OK`` or ``ERR`` back. With ``concurrency=N`` each line
starts with a channel ID that must be echoed in the reply.
"""

from __future__ import annotations

import logging
from typing import IO
from urllib.parse import quote, unquote

from sigv4gate.gate import decide_header
from sigv4gate.policy import PolicySource

log = logging.getLogger(__name__)

MISSING_VALUE = "-"


def _reply(channel: str, verdict: str) -> str:
    return f"{channel} {verdict}" if channel else verdict


def handle_line(line: str, source: PolicySource, *, channel_ids: bool = False) -> str:
    """Return squid's reply (without newline) for one helper request line."""
    line = line.strip()
    channel = ""
    if channel_ids:
        channel, _, line = line.partition(" ")
        line = line.strip()

    if not line or line == MISSING_VALUE:
        return _reply(channel, 'ERR message="Missing%20Authorization%20Header"')

    decision = decide_header(unquote(line), source)
    if decision.allowed:
        return _reply(channel, "OK")
    return _reply(channel, f'ERR message="{quote(decision.reason, safe="")}"')


def serve(
    stdin: IO[str],
    stdout: IO[str],
    source: PolicySource,
    *,
    channel_ids: bool = False,
) -> int:
    """Answer helper requests until EOF. Returns the number handled."""
    handled = 0
    for line in stdin:
        stdout.write(handle_line(line, source, channel_ids=channel_ids) + "\n")
        stdout.flush()
        handled += 1
    log.debug("squid helper exiting after %d requests", handled)
    return handled
