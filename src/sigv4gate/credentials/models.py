"""Credential data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class Credential:
    """The ``Credential`` component of a SigV4 ``Authorization`` header.

    Only built by :func:`sigv4gate.credentials.parser.parse`, which either
    returns a fully populated instance or raises.
    """

    access_key_id: str
    account_id: str  # 12 decimal characters, leading zeros kept
    date: date
    region: str
    service: str
