"""Response shapes of the International Address API.

Declarative only: bodies are returned as parsed JSON and never checked
against these definitions.
"""
from __future__ import annotations

from typing import Any, Literal, Optional, TypedDict

BuildingListMode = Literal["short", "paged"]
AutocompletePrecision = Literal["None", "Locality", "PostalCode", "Street", "Address"]
ValidationGrade = Literal["A", "B", "C", "D", "E", "F"]
ValidationLevel = Literal["Building", "BuildingPartial", "Street", "Locality", "None"]


class Country(TypedDict, total=False):
    iso3Code: str
    name: str


class Language(TypedDict, total=False):
    code: str
    name: str


class _AutocompleteMatchBase(TypedDict):
    value: str
    label: str
    context: str
    precision: AutocompletePrecision
    highlights: list[list[int]]


class AutocompleteMatch(_AutocompleteMatchBase, total=False):
    description: str


class _AutocompleteResponseBase(TypedDict):
    matches: list[AutocompleteMatch]


class AutocompleteResponse(_AutocompleteResponseBase, total=False):
    newContext: Optional[str]


class _AddressBase(TypedDict):
    country: str
    locality: str
    street: str
    postcode: str
    building: str


class Address(_AddressBase, total=False):
    buildingNumber: int
    buildingNumberAddition: str
    region: str
    sublocality: str


class _GeoLocationBase(TypedDict):
    latitude: float
    longitude: float


class GeoLocation(_GeoLocationBase, total=False):
    precision: str


class AddressDetails(TypedDict, total=False):
    language: Language
    address: Address
    mailLines: list[str]
    location: GeoLocation
    isPoBox: bool
    country: Country
    details: dict[str, Any]


class ValidationStatus(TypedDict):
    grade: ValidationGrade
    validationLevel: ValidationLevel
    isAmbiguous: bool


class _ValidationMatchBase(TypedDict):
    status: ValidationStatus


class ValidationMatch(_ValidationMatchBase, total=False):
    language: Language
    address: Address
    mailLines: list[str]
    location: GeoLocation
    isPoBox: bool
    country: Country
    details: dict[str, Any]


class _ValidationResponseBase(TypedDict):
    matches: list[ValidationMatch]


class ValidationResponse(_ValidationResponseBase, total=False):
    country: Country


class ValidateParams(TypedDict, total=False):
    # streetAndBuilding replaces street/building; not enforced locally
    postcode: str
    locality: str
    street: str
    building: str
    region: str
    streetAndBuilding: str


class _ApiErrorResponseBase(TypedDict):
    error: str
    message: str


class ApiErrorResponse(_ApiErrorResponseBase, total=False):
    details: dict[str, Any]
