"""Allow-list policy — model, loading, evaluation."""

from sigv4gate.policy.evaluator import explain, is_allowed
from sigv4gate.policy.loader import PolicySource, load_policy
from sigv4gate.policy.models import (
    WILDCARD,
    AccountPolicy,
    Policy,
    PolicyError,
    PolicyFormatError,
    PolicyIOError,
    RegionPolicy,
)

__all__ = [
    "WILDCARD",
    "AccountPolicy",
    "Policy",
    "PolicyError",
    "PolicyFormatError",
    "PolicyIOError",
    "PolicySource",
    "RegionPolicy",
    "explain",
    "is_allowed",
    "load_policy",
]
