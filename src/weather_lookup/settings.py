"""Weather lookup configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(ENV_FILE, override=False)


class WeatherSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WEATHER_LOOKUP_", env_file=str(ENV_FILE), extra="ignore")

    openweather_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENWEATHER_API_KEY", "WEATHER_LOOKUP_OPENWEATHER_API_KEY"),
    )
    base_url: str = "https://api.openweathermap.org/data/2.5"

    request_timeout_s: float = 8.0
    default_unit: str = "C"
    default_lang: str = "en"
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> WeatherSettings:
    return WeatherSettings()
