"""Credential extraction — parsing, account-ID recovery, errors."""

from sigv4gate.credentials.account import (
    account_id_from_access_key_id,
    account_number_from_bytes,
    format_account_id,
    key_type,
)
from sigv4gate.credentials.errors import (
    AccessKeyIDLengthError,
    AccountMissingFromAccessKeyId,
    AuthHeaderMissingParts,
    Base32DecodeError,
    CredentialComponentMissingParts,
    CredentialError,
    DateParseError,
)
from sigv4gate.credentials.models import Credential
from sigv4gate.credentials.parser import parse, parse_from_authorization_header

__all__ = [
    "AccessKeyIDLengthError",
    "AccountMissingFromAccessKeyId",
    "AuthHeaderMissingParts",
    "Base32DecodeError",
    "Credential",
    "CredentialComponentMissingParts",
    "CredentialError",
    "DateParseError",
    "account_id_from_access_key_id",
    "account_number_from_bytes",
    "format_account_id",
    "key_type",
    "parse",
    "parse_from_authorization_header",
]
