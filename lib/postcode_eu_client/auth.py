from __future__ import annotations

import base64

from .errors import ConfigurationError


def require_credentials(api_key: str | None, api_secret: str | None) -> None:
    if not api_key:
        raise ConfigurationError("api_key is required")
    if not api_secret:
        raise ConfigurationError("api_secret is required")


def derive_auth_token(api_key: str, api_secret: str) -> str:
    """base64 of the UTF-8 bytes of ``"<api_key>:<api_secret>"``."""
    require_credentials(api_key, api_secret)
    raw = f"{api_key}:{api_secret}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


class BasicCredentials:
    """Token derived once at construction and reused for every request."""

    __slots__ = ("_token",)

    def __init__(self, api_key: str, api_secret: str):
        self._token = derive_auth_token(api_key, api_secret)

    @property
    def token(self) -> str:
        return self._token

    @property
    def header_value(self) -> str:
        return f"Basic {self._token}"

    def __repr__(self) -> str:
        return "BasicCredentials(token=***)"
