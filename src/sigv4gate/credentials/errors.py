"""Credential extraction errors — one class per failure, each with a payload."""

from __future__ import annotations


class CredentialError(Exception):
    """Base class for failures while extracting a SigV4 credential.

    ``detail`` is the diagnostic payload: the offending text, an observed
    length, or the underlying parser message.
    """

    template = "{detail}"

    def __init__(self, detail: str) -> None:
        self.detail = str(detail)
        super().__init__(self.template.format(detail=self.detail))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.detail == other.detail  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.detail))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.detail!r})"


class AccessKeyIDLengthError(CredentialError):
    template = "Access Key ID invalid length, expected more than 12 chars got: {detail}"


class AuthHeaderMissingParts(CredentialError):
    template = "Auth header missing parts: {detail}"


class AccountMissingFromAccessKeyId(CredentialError):
    template = "Could not find account id in access key: {detail}"


class Base32DecodeError(CredentialError):
    template = "Base32 Decode Error {detail}"


class CredentialComponentMissingParts(CredentialError):
    template = "Credential component missing parts: {detail}"


class DateParseError(CredentialError):
    template = "Could not parse date {detail}"
