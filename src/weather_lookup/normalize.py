"""Map a provider response onto the display-ready ``Weather`` shape."""

from __future__ import annotations

import math
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from .errors import ProviderError
from .schemas import RawResponse, Weather

UNIT_DISPLAY: Mapping[str, str] = MappingProxyType(
    {
        "metric": "°C",
        "C": "°C",
        "imperial": "°F",
        "F": "°F",
        "kelvin": "K",
        "K": "K",
    }
)

FALLBACK_ICON = "🤷"

ICONS: Mapping[str, str] = MappingProxyType(
    {
        "01d": "☀️",
        "01n": "🌙",
        "02d": "🌤️",
        "02n": "🌙️",
        "03d": "🌥️",
        "03n": "☁️",
        "04d": "☁️",
        "04n": "☁️",
        "09d": "🌧️",
        "09n": "🌧️",
        "10d": "🌧️",
        "10n": "🌧️",
        "11d": "🌩️",
        "11n": "🌩️",
        "13d": "❄️",
        "13n": "❄️",
        "50d": "🌫️",
        "50n": "🌫️",
    }
)

# Positional notation is used for decimal exponents in [-4, 6).
_MIN_EXP = -4
_MAX_EXP = 6


def display_unit(unit: str) -> str:
    """Unknown unit tokens pass through unchanged."""
    return UNIT_DISPLAY.get(unit, unit)


def icon_for(code: str) -> str:
    return ICONS.get(code, FALLBACK_ICON)


def format_number(value: float) -> str:
    """Render ``value`` with the shortest digits that round-trip.

    Mirrors a ``%g`` formatter without a precision: ``20.0 -> "20"``,
    ``19.5 -> "19.5"``, ``1e6 -> "1e+06"``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    exact = Decimal(repr(value))
    digits = len(exact.normalize().as_tuple().digits)
    exponent = exact.adjusted()
    if exponent < _MIN_EXP or exponent >= _MAX_EXP:
        return format(value, f".{digits - 1}e")
    return format(exact.normalize(), "f")


def compose_summary(
    location: str,
    description: str,
    temperature: str,
    unit: str,
    feels_like: str,
    icon: str,
) -> str:
    return f"{location}, {description}, {temperature}{unit} ({feels_like}{unit}) {icon}"


def normalize(raw: RawResponse) -> Weather:
    if not raw.conditions:
        raise ProviderError(
            "EMPTY_CONDITIONS",
            "Provider returned no weather conditions",
            {"location": raw.name},
        )

    condition = raw.conditions[0]
    unit = display_unit(raw.unit)
    icon = icon_for(condition.icon)
    temperature = format_number(raw.temp)
    feels_like = format_number(raw.feels_like)

    return Weather(
        temperature=temperature,
        unit=unit,
        description=condition.description,
        feels_like=feels_like,
        icon=icon,
        summary=compose_summary(
            raw.name, condition.description, temperature, unit, feels_like, icon
        ),
    )
