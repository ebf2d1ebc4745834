from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from calendar_relay.adapters.calendar_client import CalendarClient
from calendar_relay.app.config import Settings, get_settings
from calendar_relay.services.scheduling import EventDefaults, SchedulingService
from calendar_relay.services.tenants import TenantCredentialResolver, TenantRegistry


@lru_cache(maxsize=1)
def get_tenant_registry() -> TenantRegistry:
    settings = get_settings()
    return TenantRegistry.from_environ(settings.tenant_prefixes)


@lru_cache(maxsize=1)
def get_calendar_client() -> CalendarClient:
    settings = get_settings()
    return CalendarClient(
        token_uri=settings.google_token_uri,
        scopes=tuple(settings.calendar_scopes),
    )


def get_credential_resolver(
    registry: TenantRegistry = Depends(get_tenant_registry),
) -> TenantCredentialResolver:
    return TenantCredentialResolver(registry)


def get_scheduling_service(
    settings: Settings = Depends(get_settings),
    resolver: TenantCredentialResolver = Depends(get_credential_resolver),
    calendar_client: CalendarClient = Depends(get_calendar_client),
) -> SchedulingService:
    return SchedulingService(
        resolver=resolver,
        calendar_client=calendar_client,
        defaults=EventDefaults(
            summary=settings.default_summary,
            description=settings.default_description,
            time_zone=settings.default_time_zone,
            calendar_id=settings.default_calendar_id,
        ),
        timeout_seconds=settings.provider_timeout_seconds,
    )
