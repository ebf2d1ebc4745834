from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScheduleRequest(BaseModel):
    """Inbound body of ``POST /schedule``.

    Fields accept any JSON value: presence checks belong to the scheduling
    service and everything else is left for Google Calendar to judge.
    Defaults are filled in only for fields the caller left out entirely
    (see ``model_fields_set``).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    client_key: Any = Field(default=None, alias="clientKey", description="Tenant identifier")
    summary: Any = Field(default=None)
    description: Any = Field(default=None)
    start_time: Any = Field(default=None, alias="startTime", description="ISO-8601 start")
    end_time: Any = Field(default=None, alias="endTime", description="ISO-8601 end")
    time_zone: Any = Field(default=None, alias="timeZone")
    calendar_id: Any = Field(default=None, alias="calendarId")
    attendees: Any = Field(default=None)

    def provided(self, name: str) -> bool:
        return name in self.model_fields_set


class ScheduleSuccess(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "success"
    event_id: Optional[str] = Field(default=None, alias="eventId")
    html_link: Optional[str] = Field(default=None, alias="htmlLink")


class ScheduleFailure(BaseModel):
    status: str = "error"
    message: str


class ClientError(BaseModel):
    error: str


class ServiceStatus(BaseModel):
    ok: bool = True
    service: str
    clients: List[str] = Field(default_factory=list)
