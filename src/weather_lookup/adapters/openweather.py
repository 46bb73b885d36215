"""OpenWeather adapter.

Encapsulates upstream API details and error normalization.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from ..errors import ProviderError
from ..schemas import RawResponse

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"

# Unit tokens accepted from callers -> OpenWeather "units" parameter.
UNIT_PARAMS = {
    "C": "metric",
    "metric": "metric",
    "F": "imperial",
    "imperial": "imperial",
    "K": "standard",
    "kelvin": "standard",
}


def _raise_for_status(resp: httpx.Response, data: Any) -> None:
    cod = str(data.get("cod", "")) if isinstance(data, dict) else ""
    if resp.is_success and (not cod or cod == "200"):
        return
    message = data.get("message") if isinstance(data, dict) else None
    raise ProviderError(
        "UPSTREAM_ERROR",
        message or f"OpenWeather error: HTTP {resp.status_code}",
        {"status_code": resp.status_code, "code": cod or str(resp.status_code)},
    )


def _to_raw(data: dict, unit: str) -> RawResponse:
    try:
        return RawResponse.model_validate(
            {
                "name": data.get("name", ""),
                "conditions": data.get("weather") or [],
                "temp": data.get("main", {}).get("temp"),
                "feels_like": data.get("main", {}).get("feels_like"),
                "unit": unit,
            }
        )
    except (ValidationError, AttributeError) as exc:
        raise ProviderError("BAD_RESPONSE", f"Unexpected OpenWeather payload: {exc}") from exc


class OpenWeatherClient:
    """Current-weather client for the OpenWeatherMap REST API."""

    def __init__(
        self,
        *,
        base_url: str = OPENWEATHER_BASE_URL,
        timeout_s: float = 8.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self._transport = transport

    def query_by_coordinates(
        self, unit: str, lang: str, api_key: str, lat: float, lon: float
    ) -> RawResponse:
        return self._current(unit, lang, api_key, {"lat": lat, "lon": lon})

    def query_by_name(self, unit: str, lang: str, api_key: str, name: str) -> RawResponse:
        return self._current(unit, lang, api_key, {"q": name})

    def _current(
        self, unit: str, lang: str, api_key: str, location: dict[str, str | float]
    ) -> RawResponse:
        if not api_key:
            raise ProviderError("MISSING_API_KEY", "OpenWeather API key is empty")

        params: dict[str, str | float] = {"appid": api_key, "units": UNIT_PARAMS.get(unit, unit)}
        if lang:
            params["lang"] = lang
        params.update(location)

        url = f"{self.base_url}/weather"
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self._transport) as client:
                resp = client.get(url, params=params)
        except httpx.HTTPError as exc:
            # str(exc) of a request error can carry the URL, and the URL carries the key.
            raise ProviderError(
                "NETWORK_ERROR",
                f"OpenWeather request failed: {type(exc).__name__}",
            ) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            if not resp.is_success:
                raise ProviderError(
                    "UPSTREAM_ERROR",
                    f"OpenWeather error: HTTP {resp.status_code}",
                    {"status_code": resp.status_code, "code": str(resp.status_code)},
                ) from exc
            raise ProviderError("BAD_RESPONSE", "OpenWeather returned a non-JSON body") from exc

        _raise_for_status(resp, data)
        if not isinstance(data, dict):
            raise ProviderError("BAD_RESPONSE", "OpenWeather returned an unexpected body")
        return _to_raw(data, unit)
