"""Weather lookup session.

A session bundles a credential capability with a unit and language
preference. Each fetch resolves the credential, makes one provider call
and normalizes the result; nothing is cached between calls.
"""

from __future__ import annotations

import math
import time
from typing import Callable, Protocol

from .adapters import OpenWeatherClient
from .credentials import Credential, resolve_credential
from .errors import ParseError, ProviderError, WeatherLookupError
from .logging import get_logger
from .normalize import normalize
from .schemas import RawResponse, Weather
from .settings import get_settings

logger = get_logger("lookup")


class WeatherProvider(Protocol):
    def query_by_coordinates(
        self, unit: str, lang: str, api_key: str, lat: float, lon: float
    ) -> RawResponse: ...

    def query_by_name(self, unit: str, lang: str, api_key: str, name: str) -> RawResponse: ...


def parse_coordinate(value: str, field: str) -> float:
    """Parse a decimal coordinate, rejecting anything ``float()`` is lenient about."""
    if not value.isascii() or value != value.strip() or "_" in value:
        raise ParseError("INVALID_COORDINATE", f"{field} is not a valid number: {value!r}", {field: value})
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError("INVALID_COORDINATE", f"{field} is not a valid number: {value!r}", {field: value}) from exc
    if not math.isfinite(number):
        raise ParseError("INVALID_COORDINATE", f"{field} must be finite: {value!r}", {field: value})
    return number


def default_provider() -> OpenWeatherClient:
    settings = get_settings()
    return OpenWeatherClient(base_url=settings.base_url, timeout_s=settings.request_timeout_s)


class WeatherLookup:
    def __init__(
        self,
        credential: Credential,
        unit: str = "C",
        lang: str = "en",
        provider: WeatherProvider | None = None,
    ) -> None:
        self._credential = credential
        self._unit = unit
        self._lang = lang
        self._provider = provider or default_provider()

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def lang(self) -> str:
        return self._lang

    def __repr__(self) -> str:
        return f"WeatherLookup(unit={self._unit!r}, lang={self._lang!r})"

    def fetch_by_coordinates(self, latitude: str, longitude: str) -> Weather:
        """Current weather at ``latitude``/``longitude`` (decimal strings)."""
        lat = parse_coordinate(latitude, "latitude")
        lon = parse_coordinate(longitude, "longitude")
        return self._fetch(
            "coordinates",
            lambda api_key: self._provider.query_by_coordinates(self._unit, self._lang, api_key, lat, lon),
        )

    def fetch_by_name(self, location_name: str) -> Weather:
        """Current weather for a free-text location such as ``"London,UK"``."""
        return self._fetch(
            "name",
            lambda api_key: self._provider.query_by_name(self._unit, self._lang, api_key, location_name),
        )

    def _fetch(self, query: str, call: Callable[[str], RawResponse]) -> Weather:
        start = time.time()
        try:
            api_key = resolve_credential(self._credential)
            try:
                raw = call(api_key)
            except WeatherLookupError:
                raise
            except Exception as exc:  # noqa: BLE001
                raise ProviderError("PROVIDER_FAILURE", f"Weather provider failed: {exc}") from exc
            weather = normalize(raw)
        except WeatherLookupError as exc:
            logger.info(
                "weather_lookup_error",
                extra={
                    "extra": {
                        "query": query,
                        "unit": self._unit,
                        "lang": self._lang,
                        "latency_ms": int((time.time() - start) * 1000),
                        "ok": False,
                        "stage": exc.stage,
                        "error_code": exc.code,
                    }
                },
            )
            raise
        logger.info(
            "weather_lookup",
            extra={
                "extra": {
                    "query": query,
                    "unit": self._unit,
                    "lang": self._lang,
                    "latency_ms": int((time.time() - start) * 1000),
                    "ok": True,
                }
            },
        )
        return weather


def configure(
    credential: Credential,
    unit: str = "C",
    lang: str = "en",
    provider: WeatherProvider | None = None,
) -> WeatherLookup:
    """Start a lookup session. Unit and language tokens are not validated."""
    return WeatherLookup(credential, unit=unit, lang=lang, provider=provider)
