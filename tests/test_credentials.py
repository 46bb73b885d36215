import pytest
from pydantic import SecretStr

from weather_lookup.credentials import (
    EnvCredential,
    StaticCredential,
    credential_from_settings,
    resolve_credential,
)
from weather_lookup.errors import CredentialError
from weather_lookup.settings import WeatherSettings, get_settings


def test_static_credential_resolves_plaintext():
    assert StaticCredential("abc").resolve() == "abc"
    assert StaticCredential(SecretStr("xyz")).resolve() == "xyz"


def test_env_credential_reads_at_resolve_time(monkeypatch):
    credential = EnvCredential("MY_WEATHER_KEY")
    monkeypatch.setenv("MY_WEATHER_KEY", "from-env")
    assert credential.resolve() == "from-env"


def test_env_credential_missing(monkeypatch):
    monkeypatch.delenv("MY_WEATHER_KEY", raising=False)
    with pytest.raises(CredentialError) as exc_info:
        EnvCredential("MY_WEATHER_KEY").resolve()
    assert exc_info.value.code == "MISSING_CREDENTIAL"


def test_resolve_credential_wraps_foreign_errors():
    class Exploding:
        def resolve(self):
            raise KeyError("slot")

    with pytest.raises(CredentialError) as exc_info:
        resolve_credential(Exploding())
    assert exc_info.value.code == "CREDENTIAL_UNAVAILABLE"


def test_credential_from_settings_prefers_configured_key(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "configured")
    settings = get_settings()
    assert settings.openweather_api_key.get_secret_value() == "configured"
    assert "configured" not in repr(settings)
    credential = credential_from_settings(settings)
    assert isinstance(credential, StaticCredential)
    assert credential.resolve() == "configured"


def test_credential_from_settings_falls_back_to_env():
    settings = WeatherSettings(_env_file=None)
    credential = credential_from_settings(settings)
    assert isinstance(credential, EnvCredential)
    with pytest.raises(CredentialError):
        credential.resolve()


def test_settings_defaults(monkeypatch):
    monkeypatch.setenv("WEATHER_LOOKUP_DEFAULT_UNIT", "F")
    settings = WeatherSettings(_env_file=None)
    assert settings.default_unit == "F"
    assert settings.default_lang == "en"
    assert settings.request_timeout_s == 8.0
