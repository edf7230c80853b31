"""Request descriptors for the International Address API endpoints.

Every operation produces a fresh :class:`RequestDescriptor`; nothing here
touches the network.
"""
from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Mapping
from urllib.parse import quote, urlencode

from .errors import ConfigurationError

API_PREFIX = ("international", "v1")
SESSION_HEADER = "X-Autocomplete-Session"
BUILDING_LIST_MODES = frozenset({"short", "paged"})
VALIDATE_FIELDS = ("postcode", "locality", "street", "building", "region", "streetAndBuilding")

_ASCII_LETTERS = frozenset(string.ascii_letters)


def encode_segment(value: str) -> str:
    # "/" must not survive as a separator: "nld/amsterdam" -> "nld%2Famsterdam"
    # "." and ".." would be dropped as dot segments when the URL is normalized
    if value and value.strip(".") == "":
        return "%2E" * len(value)
    return quote(value, safe="")


@dataclass(frozen=True)
class RequestDescriptor:
    path: tuple[str, ...]
    query_params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    method: str = "GET"

    @property
    def path_str(self) -> str:
        return "/" + "/".join(self.path)

    def target(self, base_url: str) -> str:
        url = base_url.rstrip("/") + self.path_str
        if self.query_params:
            url += "?" + urlencode(self.query_params)
        return url


def validate_country_code(country: str | None) -> str:
    if not country:
        raise ConfigurationError("country is required")
    if len(country) != 3:
        raise ConfigurationError(f"country must be exactly 3 letters, got {len(country)}")
    if any(ch not in _ASCII_LETTERS for ch in country):
        raise ConfigurationError(f"country must contain only ASCII letters, got {country!r}")
    if country != country.lower():
        raise ConfigurationError(f"country must be lowercase, got {country!r}")
    return country


def _headers(auth_header: str, session: str | None) -> dict[str, str]:
    headers = {
        "Authorization": auth_header,
        "Accept": "application/json",
    }
    if session:
        headers[SESSION_HEADER] = session
    return headers


def _query(params: Mapping[str, str | None]) -> dict[str, str]:
    return {key: value for key, value in params.items() if value is not None}


def build_autocomplete_request(
        auth_header: str,
        context: str,
        term: str,
        language: str,
        building_list_mode: str,
        *,
        session: str | None = None,
) -> RequestDescriptor:
    """Build the autocomplete request.

    Only ``building_list_mode`` is checked here, because it goes into the path
    unencoded; ``context``, ``term`` and ``language`` are left to the remote
    service to reject.
    """
    if building_list_mode not in BUILDING_LIST_MODES:
        raise ConfigurationError(
            f"building_list_mode must be 'short' or 'paged', got {building_list_mode!r}"
        )
    path = (
        *API_PREFIX,
        "autocomplete",
        encode_segment(context),
        encode_segment(term),
        encode_segment(language),
        building_list_mode,
    )
    return RequestDescriptor(path=path, headers=_headers(auth_header, session))


def build_details_request(
        auth_header: str,
        context: str,
        dispatch_country: str,
        *,
        session: str | None = None,
) -> RequestDescriptor:
    path = (*API_PREFIX, "address", encode_segment(context), encode_segment(dispatch_country))
    return RequestDescriptor(path=path, headers=_headers(auth_header, session))


def build_validate_request(
        auth_header: str,
        country: str,
        params: Mapping[str, str | None] | None = None,
) -> RequestDescriptor:
    """Build the validate request.

    ``streetAndBuilding`` is meant to replace ``street``/``building``; sending
    both is left to the caller and the remote service decides. Field names
    outside the six wire fields are rejected; field values are not checked.
    """
    country = validate_country_code(country)
    params = params or {}
    unknown = set(params) - set(VALIDATE_FIELDS)
    if unknown:
        raise ConfigurationError(f"unknown validate fields: {', '.join(sorted(unknown))}")
    ordered = {name: params.get(name) for name in VALIDATE_FIELDS}
    return RequestDescriptor(
        path=(*API_PREFIX, "validate", encode_segment(country)),
        query_params=_query(ordered),
        headers=_headers(auth_header, None),
    )
