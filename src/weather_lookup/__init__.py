"""Current weather lookups with display-ready summaries."""

from .credentials import Credential, EnvCredential, StaticCredential
from .errors import CredentialError, ParseError, ProviderError, WeatherLookupError
from .lookup import WeatherLookup, configure
from .normalize import normalize
from .schemas import Condition, RawResponse, Weather, to_json

__all__ = [
    "Condition",
    "Credential",
    "CredentialError",
    "EnvCredential",
    "ParseError",
    "ProviderError",
    "RawResponse",
    "StaticCredential",
    "Weather",
    "WeatherLookup",
    "WeatherLookupError",
    "configure",
    "normalize",
    "to_json",
]
