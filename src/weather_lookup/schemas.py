"""Shared weather schemas (single source of truth).

The provider adapter produces ``RawResponse`` and the normalizer turns it
into ``Weather``; both sides import these models to avoid drift.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Condition(BaseModel):
    """One entry of the provider's condition list."""
    description: str
    icon: str


class RawResponse(BaseModel):
    """Provider payload reduced to the fields a lookup needs."""
    name: str
    conditions: list[Condition] = Field(default_factory=list)
    temp: float
    feels_like: float
    unit: str


class Weather(BaseModel):
    """Display-ready current weather.

    Serialized keys match the historical JSON shape
    (``temp``, ``unit``, ``description``, ``feels_like``, ``summary``, ``icon``).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temperature: str = Field(alias="temp")
    unit: str
    description: str
    feels_like: str
    summary: str
    icon: str

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> "Weather":
        return cls.model_validate_json(data)


def to_json(weather: Weather) -> str:
    """Serialize a ``Weather`` into its flat JSON object."""
    return weather.to_json()
