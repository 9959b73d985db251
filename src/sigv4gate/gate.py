"""Fail-closed decision gate — extraction, policy snapshot, evaluation.

Hosting code (CLI, squid helper, proxies) calls :func:`decide_header` or
:func:`decide_credential` and acts on ``Decision.allowed``. Any extraction
or policy-load failure is a denial, with ``error`` naming which stage failed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from sigv4gate.credentials import Credential, CredentialError, parse, parse_from_authorization_header
from sigv4gate.output.redactor import redact
from sigv4gate.policy import PolicyError, PolicySource, explain, is_allowed

log = logging.getLogger(__name__)

ErrorKind = Literal["credential", "policy"]


@dataclass(frozen=True)
class Decision:
    """Outcome of one authorization decision."""

    allowed: bool
    reason: str
    credential: Optional[Credential] = None
    error: Optional[ErrorKind] = None


def _decide(text: str, extract: Callable[[str], Credential], source: PolicySource) -> Decision:
    try:
        credential = extract(text)
    except CredentialError as exc:
        log.warning("Denied: %s", exc)
        return Decision(allowed=False, reason=str(exc), error="credential")

    try:
        policy = source.snapshot()
    except PolicyError as exc:
        log.error("Denied account=%s: policy unavailable: %s", credential.account_id, exc)
        return Decision(allowed=False, reason=str(exc), credential=credential, error="policy")

    allowed = is_allowed(credential, policy)
    reason = explain(credential, policy)
    level = logging.INFO if allowed else logging.WARNING
    log.log(
        level,
        "%s key=%s account=%s region=%s service=%s: %s",
        "Allowed" if allowed else "Denied",
        redact(credential.access_key_id),
        credential.account_id,
        credential.region,
        credential.service,
        reason,
    )
    return Decision(allowed=allowed, reason=reason, credential=credential)


def decide_credential(credential: str, source: PolicySource) -> Decision:
    """Decide on a raw ``AKID/DATE/REGION/SERVICE/aws4_request`` string."""
    return _decide(credential, parse, source)


def decide_header(header: str, source: PolicySource) -> Decision:
    """Decide on a full SigV4 ``Authorization`` header value."""
    return _decide(header, parse_from_authorization_header, source)
