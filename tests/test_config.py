from __future__ import annotations

from calendar_relay.app.config import Settings


def test_defaults_match_public_contract(monkeypatch):
    for name in ("TENANT_PREFIXES", "CLIENT_PREFIXES", "PORT", "APP_NAME", "PROVIDER_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_name == "google-calendar-mcp"
    assert settings.port == 8080
    assert settings.tenant_prefixes == {"demo-salon": "SALON", "demo-dentist": "DENTIST"}
    assert settings.default_time_zone == "America/New_York"
    assert settings.default_calendar_id == "primary"
    assert settings.provider_timeout_seconds is None


def test_tenants_and_port_come_from_environment(monkeypatch):
    monkeypatch.setenv("TENANT_PREFIXES", '{"acme-spa": "ACME", "demo-salon": "SALON"}')
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("PROVIDER_TIMEOUT_SECONDS", "12.5")

    settings = Settings(_env_file=None)

    assert list(settings.tenant_prefixes) == ["acme-spa", "demo-salon"]
    assert settings.tenant_prefixes["acme-spa"] == "ACME"
    assert settings.port == 9090
    assert settings.provider_timeout_seconds == 12.5


def test_client_prefixes_alias(monkeypatch):
    monkeypatch.delenv("TENANT_PREFIXES", raising=False)
    monkeypatch.setenv("CLIENT_PREFIXES", '{"demo-vet": "VET"}')

    settings = Settings(_env_file=None)

    assert settings.tenant_prefixes == {"demo-vet": "VET"}
