from __future__ import annotations

import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors_utils import normalize_error
from .request_builder import RequestDescriptor

logger = logging.getLogger(__name__)

USER_AGENT = "postcode-eu-client/0.1.0"


def _handle_response(descriptor: RequestDescriptor, r: httpx.Response) -> Any:
    logger.debug("%s %s -> %s", descriptor.method, descriptor.path_str, r.status_code)
    if not r.is_success:
        err = normalize_error(r.status_code, r.reason_phrase, r.content)
        logger.debug("api error: %r", err)
        raise err
    return r.json()


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.Client(
            timeout=cfg.timeout_s,
            headers={"User-Agent": USER_AGENT},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def request(self, descriptor: RequestDescriptor) -> Any:
        # httpx.RequestError is left to the caller; there is no response to normalize
        r = self._client.request(
            descriptor.method,
            descriptor.target(self._cfg.base_url),
            headers=descriptor.headers,
        )
        return _handle_response(descriptor, r)


class AsyncTransport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.AsyncClient(
            timeout=cfg.timeout_s,
            headers={"User-Agent": USER_AGENT},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(self, descriptor: RequestDescriptor) -> Any:
        r = await self._client.request(
            descriptor.method,
            descriptor.target(self._cfg.base_url),
            headers=descriptor.headers,
        )
        return _handle_response(descriptor, r)
