from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from googleapiclient.errors import HttpError

from calendar_relay.adapters.calendar_client import CalendarClient
from calendar_relay.schemas.schedule import ScheduleRequest
from calendar_relay.services.errors import ErrorKind, ScheduleError
from calendar_relay.services.tenants import CredentialSet, TenantCredentialResolver

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class EventDefaults:
    summary: str = "Appointment"
    description: str = ""
    time_zone: str = "America/New_York"
    calendar_id: str = "primary"


@dataclass
class ScheduleOutcome:
    event_id: Optional[str] = None
    html_link: Optional[str] = None
    error: Optional[ScheduleError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SchedulingService:
    """Validates a scheduling request and creates the event for its tenant."""

    def __init__(
        self,
        resolver: TenantCredentialResolver,
        calendar_client: CalendarClient,
        defaults: EventDefaults = EventDefaults(),
        timeout_seconds: Optional[float] = None,
    ) -> None:
        self._resolver = resolver
        self._client = calendar_client
        self._defaults = defaults
        self._timeout = timeout_seconds

    async def handle(self, request: ScheduleRequest) -> ScheduleOutcome:
        error = self.validate(request)
        if error:
            return self._fail(error)

        resolution = self._resolver.resolve(request.client_key)
        if not resolution.ok:
            return self._fail(resolution.error)

        event_body = self.build_event(request)
        calendar_id = self._field(request, "calendar_id", self._defaults.calendar_id)

        try:
            created = await self._insert(resolution.credentials, calendar_id, event_body)
        except asyncio.TimeoutError as exc:
            # Socket timeouts share this type on 3.11+; only ours carry the configured bound.
            message = (
                f"Calendar provider did not respond within {self._timeout:g} seconds"
                if self._timeout
                else describe_failure(exc)
            )
            return self._fail(ScheduleError(ErrorKind.PROVIDER_FAILURE, message))
        except Exception as exc:
            return self._fail(ScheduleError(ErrorKind.PROVIDER_FAILURE, describe_failure(exc)))

        logger.info(
            "Created event %s for clientKey %s on calendar %s",
            created.get("id"),
            request.client_key,
            calendar_id,
        )
        return ScheduleOutcome(event_id=created.get("id"), html_link=created.get("htmlLink"))

    def validate(self, request: ScheduleRequest) -> Optional[ScheduleError]:
        return check_required(request.client_key, request.start_time, request.end_time)

    def build_event(self, request: ScheduleRequest) -> Dict[str, Any]:
        time_zone = self._field(request, "time_zone", self._defaults.time_zone)
        return {
            "summary": self._field(request, "summary", self._defaults.summary),
            "description": self._field(request, "description", self._defaults.description),
            "start": {"dateTime": request.start_time, "timeZone": time_zone},
            "end": {"dateTime": request.end_time, "timeZone": time_zone},
            "attendees": self._field(request, "attendees", []),
        }

    async def _insert(
        self, credentials: CredentialSet, calendar_id: str, body: Dict[str, Any]
    ) -> Dict[str, Any]:
        call = asyncio.to_thread(
            self._client.insert_event,
            credentials,
            calendar_id,
            body,
            conference_data_version=1,
        )
        if self._timeout:
            return await asyncio.wait_for(call, timeout=self._timeout)
        return await call

    def _field(self, request: ScheduleRequest, name: str, default: Any) -> Any:
        # An explicit null is forwarded as-is; only omitted fields take the default.
        if request.provided(name):
            return getattr(request, name)
        return default

    def _fail(self, error: ScheduleError) -> ScheduleOutcome:
        logger.error("Schedule error: %s (%s)", error.message, error.kind.value)
        return ScheduleOutcome(error=error)


def is_blank(value: Any) -> bool:
    """Missing by JavaScript rules: empty containers still count as present."""
    if isinstance(value, (list, dict)):
        return False
    if isinstance(value, float) and value != value:
        return True
    return not value


def check_required(client_key: Any, start_time: Any, end_time: Any) -> Optional[ScheduleError]:
    if is_blank(client_key):
        return ScheduleError(ErrorKind.MISSING_TENANT_KEY, "Missing clientKey")
    if is_blank(start_time) or is_blank(end_time):
        return ScheduleError(
            ErrorKind.MISSING_TIME_RANGE, "startTime and endTime are required ISO strings"
        )
    return None


def describe_failure(error: Exception) -> str:
    """Best human-readable message for a failed provider call."""
    if isinstance(error, HttpError):
        reason = getattr(error, "reason", None)
        if reason:
            return str(reason)
    if error.args and isinstance(error.args[0], str) and error.args[0]:
        return error.args[0]
    text = str(error)
    return text or UNKNOWN_ERROR
