from __future__ import annotations

import json
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from calendar_relay.app.config import Settings
from calendar_relay.app.dependencies import get_scheduling_service, get_settings, get_tenant_registry
from calendar_relay.schemas.schedule import (
    ClientError,
    ScheduleFailure,
    ScheduleRequest,
    ScheduleSuccess,
    ServiceStatus,
)
from calendar_relay.services.errors import ScheduleError
from calendar_relay.services.scheduling import ScheduleOutcome, SchedulingService
from calendar_relay.services.tenants import TenantRegistry

router = APIRouter()

JSON_MEDIA_TYPE = "application/json"


async def _read_body(request: Request) -> Dict[str, Any]:
    """Return the JSON object body, or an empty dict for anything else.

    Bodies are only parsed when sent as ``application/json``.
    """
    media_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        return {}
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, ValueError):
        return {}
    return payload if isinstance(payload, dict) else {}


def _error_response(error: ScheduleError) -> JSONResponse:
    if error.kind.is_client_error:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ClientError(error=error.message).model_dump(),
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ScheduleFailure(message=error.message).model_dump(),
    )


def _outcome_response(outcome: ScheduleOutcome) -> JSONResponse:
    if outcome.error:
        return _error_response(outcome.error)
    success = ScheduleSuccess(event_id=outcome.event_id, html_link=outcome.html_link)
    return JSONResponse(status_code=status.HTTP_200_OK, content=success.model_dump(by_alias=True))


@router.get("/", status_code=status.HTTP_200_OK, response_model=ServiceStatus)
def service_status(
    settings: Settings = Depends(get_settings),
    registry: TenantRegistry = Depends(get_tenant_registry),
) -> ServiceStatus:
    return ServiceStatus(service=settings.app_name, clients=registry.tenant_keys())


@router.post("/schedule")
async def schedule(
    request: Request,
    service: SchedulingService = Depends(get_scheduling_service),
) -> JSONResponse:
    body = await _read_body(request)
    payload = ScheduleRequest.model_validate(body)
    outcome = await service.handle(payload)
    return _outcome_response(outcome)
