"""JSON reporter for scripting and CI."""

from __future__ import annotations

import json
from typing import Any, Dict

from sigv4gate.credentials import key_type
from sigv4gate.gate import Decision
from sigv4gate.output.redactor import redact


def to_dict(decision: Decision) -> Dict[str, Any]:
    """Convert a Decision to a JSON-serialisable dict."""
    cred = decision.credential
    return {
        "version": "1.0",
        "allowed": decision.allowed,
        "reason": decision.reason,
        "error": decision.error,
        "credential": None if cred is None else {
            "access_key_id": redact(cred.access_key_id),
            "key_type": key_type(cred.access_key_id),
            "account_id": cred.account_id,
            "date": cred.date.isoformat(),
            "region": cred.region,
            "service": cred.service,
        },
    }


def render(decision: Decision) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(decision), indent=2)
