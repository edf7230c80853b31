from __future__ import annotations

import httpx

from .auth import BasicCredentials
from .config_types import ClientConfig
from .request_builder import (
    build_autocomplete_request,
    build_details_request,
    build_validate_request,
)
from .transport import AsyncTransport, Transport
from .models import (
    AddressDetails,
    AutocompleteResponse,
    BuildingListMode,
    ValidateParams,
    ValidationResponse,
)


def _resolve_config(
        cfg: ClientConfig | None,
        api_key: str | None,
        api_secret: str | None,
        base_url: str | None,
) -> ClientConfig:
    if cfg is not None:
        return cfg
    kwargs = {"api_key": api_key, "api_secret": api_secret}
    if base_url is not None:
        kwargs["base_url"] = base_url
    return ClientConfig(**kwargs)


def _validate_params(
        params: ValidateParams | None,
        *,
        postcode: str | None,
        locality: str | None,
        street: str | None,
        building: str | None,
        region: str | None,
        street_and_building: str | None,
) -> dict[str, str | None]:
    merged: dict[str, str | None] = dict(params or {})
    keyword_fields = {
        "postcode": postcode,
        "locality": locality,
        "street": street,
        "building": building,
        "region": region,
        "streetAndBuilding": street_and_building,
    }
    for name, value in keyword_fields.items():
        if value is not None:
            merged[name] = value
    return merged


class PostcodeEuClient:
    """Client for the Postcode.eu International Address API.

    Example:
        >>> client = PostcodeEuClient(api_key="key", api_secret="secret")
        >>> found = client.autocomplete("nld", "amsterdam kalver", "nl-NL", "paged")
        >>> details = client.get_details(found["matches"][0]["context"], "")
        >>> result = client.validate("nld", postcode="1012AB", street_and_building="Kalverstraat 1")
    """

    def __init__(
            self,
            cfg: ClientConfig | None = None,
            *,
            api_key: str | None = None,
            api_secret: str | None = None,
            base_url: str | None = None,
            transport: httpx.BaseTransport | None = None,
    ):
        self.config = _resolve_config(cfg, api_key, api_secret, base_url)
        self._credentials = BasicCredentials(self.config.api_key, self.config.api_secret)
        self._t = Transport(self.config, transport=transport)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> PostcodeEuClient:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def autocomplete(
            self,
            context: str,
            term: str,
            language: str,
            building_list_mode: BuildingListMode,
            *,
            session: str | None = None,
    ) -> AutocompleteResponse:
        """Address suggestions for ``term`` within ``context``.

        ``context`` is a country code (e.g. ``"nld"``) or the context of a
        previously selected match; on drilldown pass that match's ``value`` as
        ``term`` unchanged.
        """
        descriptor = build_autocomplete_request(
            self._credentials.header_value,
            context,
            term,
            language,
            building_list_mode,
            session=session,
        )
        return self._t.request(descriptor)

    def get_details(
            self,
            context: str,
            dispatch_country: str,
            *,
            session: str | None = None,
    ) -> AddressDetails:
        """Full address for a match with precision ``"Address"``.

        Pass ``""`` as ``dispatch_country`` to leave the country line out of
        ``mailLines``.
        """
        descriptor = build_details_request(
            self._credentials.header_value,
            context,
            dispatch_country,
            session=session,
        )
        return self._t.request(descriptor)

    def validate(
            self,
            country: str,
            params: ValidateParams | None = None,
            *,
            postcode: str | None = None,
            locality: str | None = None,
            street: str | None = None,
            building: str | None = None,
            region: str | None = None,
            street_and_building: str | None = None,
    ) -> ValidationResponse:
        """Validate and correct an address.

        ``country`` must be a lowercase ISO 3166-1 alpha-3 code. Matches are
        ordered best first; an empty ``matches`` list is a normal result.
        """
        merged = _validate_params(
            params,
            postcode=postcode,
            locality=locality,
            street=street,
            building=building,
            region=region,
            street_and_building=street_and_building,
        )
        descriptor = build_validate_request(self._credentials.header_value, country, merged)
        return self._t.request(descriptor)


class AsyncPostcodeEuClient:
    """Awaitable counterpart of :class:`PostcodeEuClient`."""

    def __init__(
            self,
            cfg: ClientConfig | None = None,
            *,
            api_key: str | None = None,
            api_secret: str | None = None,
            base_url: str | None = None,
            transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = _resolve_config(cfg, api_key, api_secret, base_url)
        self._credentials = BasicCredentials(self.config.api_key, self.config.api_secret)
        self._t = AsyncTransport(self.config, transport=transport)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> AsyncPostcodeEuClient:
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def autocomplete(
            self,
            context: str,
            term: str,
            language: str,
            building_list_mode: BuildingListMode,
            *,
            session: str | None = None,
    ) -> AutocompleteResponse:
        descriptor = build_autocomplete_request(
            self._credentials.header_value,
            context,
            term,
            language,
            building_list_mode,
            session=session,
        )
        return await self._t.request(descriptor)

    async def get_details(
            self,
            context: str,
            dispatch_country: str,
            *,
            session: str | None = None,
    ) -> AddressDetails:
        descriptor = build_details_request(
            self._credentials.header_value,
            context,
            dispatch_country,
            session=session,
        )
        return await self._t.request(descriptor)

    async def validate(
            self,
            country: str,
            params: ValidateParams | None = None,
            *,
            postcode: str | None = None,
            locality: str | None = None,
            street: str | None = None,
            building: str | None = None,
            region: str | None = None,
            street_and_building: str | None = None,
    ) -> ValidationResponse:
        merged = _validate_params(
            params,
            postcode=postcode,
            locality=locality,
            street=street,
            building=building,
            region=region,
            street_and_building=street_and_building,
        )
        descriptor = build_validate_request(self._credentials.header_value, country, merged)
        return await self._t.request(descriptor)
