from __future__ import annotations

from dataclasses import dataclass

from .auth import require_credentials

DEFAULT_BASE_URL = "https://api.postcode.eu"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    api_secret: str
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 15.0

    def __post_init__(self) -> None:
        require_credentials(self.api_key, self.api_secret)
        object.__setattr__(self, "base_url", (self.base_url or DEFAULT_BASE_URL).rstrip("/"))

    def __repr__(self) -> str:
        return f"ClientConfig(api_key={self.api_key!r}, api_secret='***', base_url={self.base_url!r}, timeout_s={self.timeout_s})"
