"""Credential capabilities.

A credential is an opaque object with a single ``resolve()`` call that
returns the plaintext API key. The plaintext is handed straight to the
provider call and never stored on the session.
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from pydantic import SecretStr

from .errors import CredentialError
from .settings import WeatherSettings


@runtime_checkable
class Credential(Protocol):
    def resolve(self) -> str: ...


class StaticCredential:
    """Credential held in memory as a ``SecretStr``."""

    def __init__(self, secret: str | SecretStr) -> None:
        self._secret = secret if isinstance(secret, SecretStr) else SecretStr(secret)

    def resolve(self) -> str:
        value = self._secret.get_secret_value()
        if not value:
            raise CredentialError("EMPTY_CREDENTIAL", "API key is empty")
        return value

    def __repr__(self) -> str:
        return f"StaticCredential({self._secret!r})"


class EnvCredential:
    """Credential read from an environment variable at resolve time."""

    def __init__(self, var_name: str) -> None:
        self.var_name = var_name

    def resolve(self) -> str:
        value = os.environ.get(self.var_name)
        if not value:
            raise CredentialError(
                "MISSING_CREDENTIAL",
                f"{self.var_name} is not set",
                {"env": self.var_name},
            )
        return value

    def __repr__(self) -> str:
        return f"EnvCredential({self.var_name!r})"


def credential_from_settings(settings: WeatherSettings) -> Credential:
    if settings.openweather_api_key is not None:
        return StaticCredential(settings.openweather_api_key)
    return EnvCredential("OPENWEATHER_API_KEY")


def resolve_credential(credential: Credential) -> str:
    """Resolve ``credential``, reporting any failure as ``CredentialError``."""
    try:
        return credential.resolve()
    except CredentialError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise CredentialError(
            "CREDENTIAL_UNAVAILABLE",
            f"Unable to resolve credential: {exc}",
            {"credential": type(credential).__name__},
        ) from exc
