"""External API adapters."""

from __future__ import annotations

from .openweather import OpenWeatherClient

__all__ = ["OpenWeatherClient"]
