import logging

from .client import AsyncPostcodeEuClient, PostcodeEuClient
from .config_types import DEFAULT_BASE_URL, ClientConfig
from .errors import ApiError, ConfigurationError, PostcodeEuClientError

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "PostcodeEuClient",
    "AsyncPostcodeEuClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "ApiError",
    "ConfigurationError",
    "PostcodeEuClientError",
]
