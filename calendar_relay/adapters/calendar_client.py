from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from calendar_relay.services.tenants import CredentialSet

DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"


@dataclass
class CalendarClient:
    token_uri: str = DEFAULT_TOKEN_URI
    scopes: tuple[str, ...] = ("https://www.googleapis.com/auth/calendar",)

    def authorize(self, credential_set: CredentialSet) -> Credentials:
        # No access token yet: google-auth refreshes from the refresh token on first use.
        return Credentials(
            token=None,
            refresh_token=credential_set.refresh_token,
            token_uri=self.token_uri,
            client_id=credential_set.client_id,
            client_secret=credential_set.client_secret,
            scopes=list(self.scopes),
        )

    def _service(self, credential_set: CredentialSet):
        return build(
            "calendar",
            "v3",
            credentials=self.authorize(credential_set),
            cache_discovery=False,
        )

    def insert_event(
        self,
        credential_set: CredentialSet,
        calendar_id: str,
        body: Dict[str, Any],
        conference_data_version: int = 1,
    ) -> Dict[str, Any]:
        service = self._service(credential_set)
        event = (
            service.events()
            .insert(calendarId=calendar_id, body=body, conferenceDataVersion=conference_data_version)
            .execute()
        )
        return event
