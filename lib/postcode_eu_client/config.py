from __future__ import annotations

import os
from typing import Mapping

from .config_types import DEFAULT_BASE_URL, ClientConfig
from .errors import ConfigurationError

ENV_API_KEY = "POSTCODE_EU_API_KEY"
ENV_API_SECRET = "POSTCODE_EU_API_SECRET"
ENV_BASE_URL = "POSTCODE_EU_BASE_URL"
ENV_TIMEOUT = "POSTCODE_EU_TIMEOUT_S"


def normalize_base_url(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return DEFAULT_BASE_URL
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value
    return f"https://{value}"


def load_config_from_env(environ: Mapping[str, str] | None = None) -> ClientConfig:
    env = os.environ if environ is None else environ
    timeout_raw = (env.get(ENV_TIMEOUT) or "").strip()
    kwargs = {}
    if timeout_raw:
        try:
            kwargs["timeout_s"] = float(timeout_raw)
        except ValueError as e:
            raise ConfigurationError(f"{ENV_TIMEOUT} must be a number, got {timeout_raw!r}") from e
    return ClientConfig(
        api_key=(env.get(ENV_API_KEY) or "").strip(),
        api_secret=(env.get(ENV_API_SECRET) or "").strip(),
        base_url=normalize_base_url(env.get(ENV_BASE_URL)),
        **kwargs,
    )
