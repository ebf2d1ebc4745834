from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    MISSING_TENANT_KEY = "MISSING_TENANT_KEY"
    MISSING_TIME_RANGE = "MISSING_TIME_RANGE"
    UNKNOWN_TENANT = "UNKNOWN_TENANT"
    MISSING_CONFIGURATION = "MISSING_CONFIGURATION"
    PROVIDER_FAILURE = "PROVIDER_FAILURE"

    @property
    def is_client_error(self) -> bool:
        return self in _CLIENT_ERRORS


_CLIENT_ERRORS = frozenset({ErrorKind.MISSING_TENANT_KEY, ErrorKind.MISSING_TIME_RANGE})


@dataclass(frozen=True)
class ScheduleError:
    kind: ErrorKind
    message: str
