"""Allow-list policy model — accounts → regions → services.

Document shape::

    accounts:
      "581039954779":
        regions:
          "us-east-1":
            services: ["s3", "ec2"]
      "*":
        regions:
          "*":
            services: ["sts"]

``*`` is an ordinary key or member here; only the evaluator gives it meaning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping

WILDCARD = "*"


class PolicyError(Exception):
    """Raised when a policy document cannot be loaded."""


class PolicyIOError(PolicyError):
    """The policy file could not be read."""


class PolicyFormatError(PolicyError):
    """The policy file was read but is not a valid policy document."""


@dataclass(frozen=True)
class RegionPolicy:
    services: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class AccountPolicy:
    regions: Mapping[str, RegionPolicy] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "regions", MappingProxyType(dict(self.regions)))


@dataclass(frozen=True)
class Policy:
    """An immutable snapshot of the allow-list."""

    accounts: Mapping[str, AccountPolicy] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "accounts", MappingProxyType(dict(self.accounts)))

    @classmethod
    def from_dict(cls, data: Any) -> "Policy":
        """Build a policy from a deserialized document. Raises PolicyFormatError."""
        if not isinstance(data, dict):
            raise PolicyFormatError("policy document must be a mapping with an 'accounts' key")
        accounts = _require_mapping(data, "accounts", "policy document")

        built: Dict[str, AccountPolicy] = {}
        for account_id, account in accounts.items():
            where = f"account {account_id!r}"
            _require_str_key(account_id, where)
            if not isinstance(account, dict):
                raise PolicyFormatError(f"{where} must be a mapping with a 'regions' key")
            regions = _require_mapping(account, "regions", where)

            built_regions: Dict[str, RegionPolicy] = {}
            for region, region_data in regions.items():
                region_where = f"{where}, region {region!r}"
                _require_str_key(region, region_where)
                if not isinstance(region_data, dict):
                    raise PolicyFormatError(
                        f"{region_where} must be a mapping with a 'services' key"
                    )
                services = region_data.get("services")
                if not isinstance(services, list) or not all(
                    isinstance(s, str) for s in services
                ):
                    raise PolicyFormatError(f"{region_where}: 'services' must be a list of strings")
                built_regions[region] = RegionPolicy(services=frozenset(services))

            built[account_id] = AccountPolicy(regions=built_regions)

        return cls(accounts=built)

    def to_dict(self) -> Dict[str, Any]:
        """Return the document shape, with services sorted."""
        return {
            "accounts": {
                account_id: {
                    "regions": {
                        region: {"services": sorted(rp.services)}
                        for region, rp in account.regions.items()
                    }
                }
                for account_id, account in self.accounts.items()
            }
        }


def _require_mapping(data: Dict[str, Any], key: str, where: str) -> Dict[Any, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise PolicyFormatError(f"{where}: '{key}' must be a mapping")
    return value


def _require_str_key(key: Any, where: str) -> None:
    # YAML reads unquoted 0123... as an octal int, so never coerce numbers
    if not isinstance(key, str):
        raise PolicyFormatError(f"{where}: keys must be quoted strings, got {type(key).__name__}")
