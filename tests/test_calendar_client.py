from __future__ import annotations

from calendar_relay.adapters import calendar_client as calendar_module
from calendar_relay.adapters.calendar_client import CalendarClient
from calendar_relay.services.tenants import CredentialSet


class FakeRequest:
    def __init__(self, response) -> None:
        self._response = response

    def execute(self):
        return self._response


class FakeEvents:
    def __init__(self) -> None:
        self.inserted = []

    def insert(self, **kwargs):
        self.inserted.append(kwargs)
        return FakeRequest({"id": "evt-9", "htmlLink": "https://calendar.google.com/event?eid=evt-9"})


class FakeService:
    def __init__(self) -> None:
        self.events_resource = FakeEvents()

    def events(self):
        return self.events_resource


def _credentials() -> CredentialSet:
    return CredentialSet(client_id="cid", client_secret="secret", refresh_token="refresh")


def test_authorize_defers_token_refresh_to_google_auth():
    client = CalendarClient(token_uri="https://oauth2.example.test/token", scopes=("scope-a",))

    credentials = client.authorize(_credentials())

    assert credentials.token is None
    assert credentials.refresh_token == "refresh"
    assert credentials.client_id == "cid"
    assert credentials.client_secret == "secret"
    assert credentials.token_uri == "https://oauth2.example.test/token"
    assert list(credentials.scopes) == ["scope-a"]


def test_insert_event_calls_calendar_v3(monkeypatch):
    service = FakeService()
    built = []

    def fake_build(name, version, credentials=None, cache_discovery=True):
        built.append((name, version, credentials, cache_discovery))
        return service

    monkeypatch.setattr(calendar_module, "build", fake_build)
    body = {"summary": "Appointment"}

    created = CalendarClient().insert_event(_credentials(), "primary", body)

    assert created["id"] == "evt-9"
    name, version, credentials, cache_discovery = built[0]
    assert (name, version, cache_discovery) == ("calendar", "v3", False)
    assert credentials.refresh_token == "refresh"
    assert service.events_resource.inserted == [
        {"calendarId": "primary", "body": body, "conferenceDataVersion": 1}
    ]
