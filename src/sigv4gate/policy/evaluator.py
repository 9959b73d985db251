"""Allow/deny evaluation of a credential against a policy snapshot."""

from __future__ import annotations

from typing import Optional, Tuple

from sigv4gate.credentials.models import Credential
from sigv4gate.policy.models import WILDCARD, AccountPolicy, Policy, RegionPolicy


def _resolve_account(credential: Credential, policy: Policy) -> Tuple[Optional[str], Optional[AccountPolicy]]:
    for key in (credential.account_id, WILDCARD):
        account = policy.accounts.get(key)
        if account is not None:
            return key, account
    return None, None


def _resolve_region(credential: Credential, account: AccountPolicy) -> Tuple[Optional[str], Optional[RegionPolicy]]:
    for key in (credential.region, WILDCARD):
        region = account.regions.get(key)
        if region is not None:
            return key, region
    return None, None


def _service_allowed(credential: Credential, region: RegionPolicy) -> bool:
    return credential.service in region.services or WILDCARD in region.services


def is_allowed(credential: Credential, policy: Policy) -> bool:
    """Return True if *policy* permits *credential*'s account/region/service.

    Each level is an exact, case-sensitive lookup with a fallback to the
    ``*`` entry. A miss at any level is a plain ``False``.
    """
    _, account = _resolve_account(credential, policy)
    if account is None:
        return False
    _, region = _resolve_region(credential, account)
    if region is None:
        return False
    return _service_allowed(credential, region)


def explain(credential: Credential, policy: Policy) -> str:
    """One-line reason for the outcome of :func:`is_allowed`."""
    account_key, account = _resolve_account(credential, policy)
    if account is None:
        return f"no policy for account {credential.account_id}"
    region_key, region = _resolve_region(credential, account)
    if region is None:
        return f"no policy for region {credential.region} in account {account_key}"
    if not _service_allowed(credential, region):
        return f"service {credential.service} not allowed in account={account_key} region={region_key}"
    return f"allowed by account={account_key} region={region_key}"
