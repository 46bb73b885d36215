import json

import pytest

from weather_lookup import cli

from conftest import StubProvider, make_raw


@pytest.fixture
def stub_provider(monkeypatch):
    provider = StubProvider(make_raw())
    monkeypatch.setattr("weather_lookup.lookup.default_provider", lambda: provider)
    monkeypatch.setenv("OPENWEATHER_API_KEY", "cli-key")
    return provider


def test_cli_prints_summary(stub_provider, capsys):
    assert cli.main(["--name", "London,UK"]) == 0
    assert capsys.readouterr().out.strip() == "London, clear sky, 20°C (19.5°C) ☀️"
    assert stub_provider.calls == [("name", "C", "en", "cli-key", "London,UK")]


def test_cli_json_by_coordinates(stub_provider, capsys):
    assert cli.main(["--lat", "51.5", "--lon", "-0.12", "--unit", "F", "--lang", "fr", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["temp"] == "20"
    assert stub_provider.calls == [("coordinates", "F", "fr", "cli-key", 51.5, -0.12)]


def test_cli_parse_error_exit_code(stub_provider, capsys):
    assert cli.main(["--lat", "north", "--lon", "0"]) == 1
    assert "parse error" in capsys.readouterr().err
    assert stub_provider.calls == []


def test_cli_missing_key(monkeypatch, capsys):
    monkeypatch.setattr("weather_lookup.lookup.default_provider", lambda: StubProvider(make_raw()))
    assert cli.main(["--name", "London"]) == 1
    assert "credential error" in capsys.readouterr().err


def test_cli_requires_lat_and_lon_together(stub_provider):
    with pytest.raises(SystemExit):
        cli.main(["--lat", "51.5"])
