from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from calendar_relay.services.errors import ErrorKind, ScheduleError

CREDENTIAL_SUFFIXES = ("GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN")


@dataclass(frozen=True)
class CredentialSet:
    client_id: str
    client_secret: str = field(repr=False)
    refresh_token: str = field(repr=False)


@dataclass(frozen=True)
class CredentialResolution:
    credentials: Optional[CredentialSet] = None
    error: Optional[ScheduleError] = None

    @property
    def ok(self) -> bool:
        return self.credentials is not None


@dataclass(frozen=True)
class TenantRegistry:
    """Read-only view of the tenant table and its credential values.

    Built once at startup; request handling only reads from it.
    """

    prefixes: Mapping[str, str]
    values: Mapping[str, str]

    @classmethod
    def from_environ(
        cls,
        prefixes: Mapping[str, str],
        environ: Optional[Mapping[str, str]] = None,
    ) -> "TenantRegistry":
        source = os.environ if environ is None else environ
        snapshot: Dict[str, str] = {}
        for prefix in prefixes.values():
            for suffix in CREDENTIAL_SUFFIXES:
                name = f"{prefix}_{suffix}"
                if name in source:
                    snapshot[name] = source[name]
        return cls(
            prefixes=MappingProxyType(dict(prefixes)),
            values=MappingProxyType(snapshot),
        )

    def tenant_keys(self) -> List[str]:
        return list(self.prefixes)

    def prefix_for(self, tenant_key: Any) -> Optional[str]:
        # Keys arrive straight from JSON; only strings can name a tenant.
        if not isinstance(tenant_key, str):
            return None
        return self.prefixes.get(tenant_key)

    def value(self, name: str) -> str:
        return self.values.get(name, "")


class TenantCredentialResolver:
    """Maps a client key to the Google OAuth credentials configured for it."""

    def __init__(self, registry: TenantRegistry) -> None:
        self._registry = registry

    def resolve(self, tenant_key: Any) -> CredentialResolution:
        prefix = self._registry.prefix_for(tenant_key)
        if not prefix:
            return CredentialResolution(
                error=ScheduleError(ErrorKind.UNKNOWN_TENANT, f"Unknown clientKey: {as_text(tenant_key)}")
            )

        client_id, client_secret, refresh_token = (
            self._registry.value(f"{prefix}_{suffix}") for suffix in CREDENTIAL_SUFFIXES
        )
        if not client_id or not client_secret or not refresh_token:
            # Only the key and prefix go into the message, never the values.
            return CredentialResolution(
                error=ScheduleError(
                    ErrorKind.MISSING_CONFIGURATION,
                    f"Missing env vars for clientKey: {tenant_key} (prefix {prefix})",
                )
            )

        return CredentialResolution(
            credentials=CredentialSet(
                client_id=client_id,
                client_secret=client_secret,
                refresh_token=refresh_token,
            )
        )


def as_text(value: Any) -> str:
    """Render a JSON value the way it reads in a message (``42``, ``true``)."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (bool, dict)) or value is None:
        return json.dumps(value)
    if isinstance(value, list):
        return ",".join(as_text(item) for item in value)
    return str(value)
