"""Recover the AWS account number packed into an access key ID.

An access key ID is a 4-character type prefix followed by a base32 payload.
The first 6 decoded bytes hold the account number between a reserved top
bit and 7 low bits of other key material:

    bit 47      bits 46..7        bits 6..0
    reserved    account number    discarded

The layout is reverse-engineered, not documented by AWS. Bytes 6..9 of the
decoded payload are never consulted.
"""

from __future__ import annotations

import base64

from sigv4gate.credentials.errors import (
    AccessKeyIDLengthError,
    AccountMissingFromAccessKeyId,
    Base32DecodeError,
)

ACCOUNT_MASK = 0x7FFF_FFFF_FF80
ACCOUNT_SHIFT = 7
PREFIX_LENGTH = 4
MIN_KEY_LENGTH = 13
DECODED_LENGTH = 10
ACCOUNT_ID_WIDTH = 12

_KEY_TYPES = {
    "ABIA": "AWS STS service bearer token",
    "ACCA": "context-specific credential",
    "AGPA": "user group",
    "AIDA": "IAM user",
    "AIPA": "Amazon EC2 instance profile",
    "AKIA": "access key",
    "ANPA": "managed policy",
    "ANVA": "version in a managed policy",
    "APKA": "public key",
    "AROA": "role",
    "ASCA": "certificate",
    "ASIA": "temporary (AWS STS) access key",
}


def account_number_from_bytes(buffer: bytes) -> int:
    """Extract the account number from a 10-byte decoded key payload."""
    if len(buffer) != DECODED_LENGTH:
        raise AccountMissingFromAccessKeyId(str(len(buffer)))
    value = int.from_bytes(buffer[:6], "big")
    return (value & ACCOUNT_MASK) >> ACCOUNT_SHIFT


def format_account_id(number: int) -> str:
    """Render *number* as a canonical 12-digit account id."""
    return f"{number:0{ACCOUNT_ID_WIDTH}d}"


def decode_key_tail(tail: str) -> bytes:
    """Base32-decode the part of an access key ID after its prefix."""
    try:
        return base64.b32decode(tail)
    except ValueError as exc:
        # binascii.Error is a ValueError; so is a non-ASCII str argument
        raise Base32DecodeError(str(exc)) from exc


def account_id_from_access_key_id(access_key_id: str) -> str:
    """Return the 12-digit account id that owns *access_key_id*."""
    if len(access_key_id) < MIN_KEY_LENGTH:
        raise AccessKeyIDLengthError(str(len(access_key_id)))

    decoded = decode_key_tail(access_key_id[PREFIX_LENGTH:])
    if len(decoded) != DECODED_LENGTH:
        raise AccountMissingFromAccessKeyId(str(len(decoded)))

    return format_account_id(account_number_from_bytes(decoded))


def key_type(access_key_id: str) -> str:
    """Describe the credential type named by the key's 4-character prefix."""
    return _KEY_TYPES.get(access_key_id[:PREFIX_LENGTH], "unknown")
