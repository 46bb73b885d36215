import pytest

from weather_lookup.schemas import Condition, RawResponse
from weather_lookup.settings import get_settings


class StubProvider:
    """Records provider calls and returns a canned response."""

    def __init__(self, response: RawResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple] = []

    def query_by_coordinates(self, unit, lang, api_key, lat, lon):
        self.calls.append(("coordinates", unit, lang, api_key, lat, lon))
        return self._reply(unit)

    def query_by_name(self, unit, lang, api_key, name):
        self.calls.append(("name", unit, lang, api_key, name))
        return self._reply(unit)

    def _reply(self, unit):
        if self.error is not None:
            raise self.error
        return self.response


class CountingCredential:
    def __init__(self, value: str = "secret-key") -> None:
        self.value = value
        self.resolved = 0

    def resolve(self) -> str:
        self.resolved += 1
        return self.value


def make_raw(
    name: str = "London",
    description: str = "clear sky",
    icon: str = "01d",
    temp: float = 20.0,
    feels_like: float = 19.5,
    unit: str = "metric",
) -> RawResponse:
    return RawResponse(
        name=name,
        conditions=[Condition(description=description, icon=icon)],
        temp=temp,
        feels_like=feels_like,
        unit=unit,
    )


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # Keep a developer's real key out of the tests.
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    monkeypatch.delenv("WEATHER_LOOKUP_OPENWEATHER_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
