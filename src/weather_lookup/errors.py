"""Error taxonomy for weather lookups.

Each error records the stage that failed so callers can tell a bad
coordinate from a missing key from an upstream outage.
"""

from __future__ import annotations


class WeatherLookupError(RuntimeError):
    stage = "lookup"

    def __init__(self, code: str, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        return {
            "stage": self.stage,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ParseError(WeatherLookupError):
    """Malformed coordinate input."""

    stage = "parse"


class CredentialError(WeatherLookupError):
    """The API key could not be resolved to plaintext."""

    stage = "credential"


class ProviderError(WeatherLookupError):
    """Any failure reported by, or while talking to, the weather service."""

    stage = "provider"
