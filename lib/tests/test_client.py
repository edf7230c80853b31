from __future__ import annotations

import httpx
import pytest

from postcode_eu_client import ApiError, ClientConfig, ConfigurationError, PostcodeEuClient

AUTOCOMPLETE_BODY = {
    "matches": [
        {
            "value": "Amsterdam",
            "label": "Amsterdam",
            "context": "nld/amsterdam",
            "precision": "Locality",
            "highlights": [[0, 9]],
        },
        {
            "value": "Amstelveen",
            "label": "Amstelveen",
            "context": "nld/amstelveen",
            "precision": "Locality",
            "highlights": [[0, 4]],
        },
    ],
    "newContext": None,
}

DETAILS_BODY = {
    "language": {"code": "nl", "name": "Dutch"},
    "address": {
        "country": "NLD",
        "locality": "Amsterdam",
        "street": "Kalverstraat",
        "postcode": "1012 PA",
        "building": "1",
    },
    "mailLines": ["Kalverstraat 1", "1012 PA Amsterdam", "Netherlands"],
    "location": {"latitude": 52.3728, "longitude": 4.8936},
    "isPoBox": False,
    "country": {"iso3Code": "nld", "name": "Netherlands"},
}

VALIDATE_BODY = {
    "country": {"iso3Code": "nld", "name": "Netherlands"},
    "matches": [
        {
            "status": {"grade": "A", "validationLevel": "Building", "isAmbiguous": False},
            "mailLines": ["Kalverstraat 1", "1012 NX Amsterdam"],
        }
    ],
}


class _Recorder:
    def __init__(self, status_code: int = 200, json_body=None, content: bytes | None = None) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _client(recorder: _Recorder, **kwargs) -> PostcodeEuClient:
    return PostcodeEuClient(
        api_key="test-key",
        api_secret="test-secret",
        transport=httpx.MockTransport(recorder),
        **kwargs,
    )


def test_constructor_requires_api_key() -> None:
    with pytest.raises(ConfigurationError, match="api_key is required"):
        PostcodeEuClient(api_key="", api_secret="secret")


def test_constructor_requires_api_secret() -> None:
    with pytest.raises(ConfigurationError, match="api_secret is required"):
        PostcodeEuClient(api_key="key", api_secret=None)


def test_custom_base_url_trailing_slash_stripped() -> None:
    rec = _Recorder(json_body=AUTOCOMPLETE_BODY)
    with _client(rec, base_url="https://custom.api.example.com/") as client:
        assert client.base_url == "https://custom.api.example.com"
        client.autocomplete("nld", "amst", "nl-NL", "paged")
    assert str(rec.last.url) == "https://custom.api.example.com/international/v1/autocomplete/nld/amst/nl-NL/paged"


def test_accepts_client_config() -> None:
    rec = _Recorder(json_body=AUTOCOMPLETE_BODY)
    cfg = ClientConfig(api_key="k", api_secret="s", base_url="http://localhost:9000/")
    client = PostcodeEuClient(cfg, transport=httpx.MockTransport(rec))
    client.autocomplete("nld", "a", "nl-NL", "short")
    assert rec.last.url.host == "localhost"
    assert rec.last.headers["Authorization"] == "Basic azpz"


def test_autocomplete_returns_body_and_sends_headers() -> None:
    rec = _Recorder(json_body=AUTOCOMPLETE_BODY)
    client = _client(rec)

    result = client.autocomplete("nld", "amst", "nl-NL", "paged")

    assert result == AUTOCOMPLETE_BODY
    assert result["matches"][0]["precision"] == "Locality"
    req = rec.last
    assert req.method == "GET"
    assert req.url.path == "/international/v1/autocomplete/nld/amst/nl-NL/paged"
    assert req.headers["Authorization"] == "Basic dGVzdC1rZXk6dGVzdC1zZWNyZXQ="
    assert req.headers["Accept"] == "application/json"
    assert "X-Autocomplete-Session" not in req.headers


def test_autocomplete_session_header() -> None:
    rec = _Recorder(json_body=AUTOCOMPLETE_BODY)
    _client(rec).autocomplete("nld", "test", "nl-NL", "short", session="abc123")
    assert rec.last.headers["X-Autocomplete-Session"] == "abc123"


def test_autocomplete_encodes_context_and_term() -> None:
    rec = _Recorder(json_body=AUTOCOMPLETE_BODY)
    _client(rec).autocomplete("nld/amsterdam", "kalver straat", "nl-NL", "paged")
    url = str(rec.last.url)
    assert "nld%2Famsterdam" in url
    assert "kalver%20straat" in url
    assert url.endswith("/nl-NL/paged")


def test_get_details() -> None:
    rec = _Recorder(json_body=DETAILS_BODY)
    result = _client(rec).get_details("nld/ctx", "bel", session="sess")
    assert result["mailLines"][-1] == "Netherlands"
    assert str(rec.last.url).endswith("/international/v1/address/nld%2Fctx/bel")
    assert rec.last.headers["X-Autocomplete-Session"] == "sess"


def test_get_details_empty_dispatch_country() -> None:
    rec = _Recorder(json_body=DETAILS_BODY)
    _client(rec).get_details("ctx", "")
    assert str(rec.last.url) == "https://api.postcode.eu/international/v1/address/ctx/"


def test_validate_query_params() -> None:
    rec = _Recorder(json_body=VALIDATE_BODY)
    result = _client(rec).validate("nld", postcode="1012AB", street_and_building="Kalverstraat 1")
    assert result["matches"][0]["status"]["grade"] == "A"
    url = str(rec.last.url)
    assert url.startswith("https://api.postcode.eu/international/v1/validate/nld?")
    assert "postcode=1012AB" in url
    assert "streetAndBuilding=Kalverstraat+1" in url
    assert "locality" not in url
    assert "X-Autocomplete-Session" not in rec.last.headers


def test_validate_accepts_params_mapping() -> None:
    rec = _Recorder(json_body=VALIDATE_BODY)
    _client(rec).validate("deu", {"locality": "Berlin", "region": "Berlin"}, postcode="10115")
    assert dict(rec.last.url.params) == {"postcode": "10115", "locality": "Berlin", "region": "Berlin"}


def test_validate_empty_matches_is_not_an_error() -> None:
    rec = _Recorder(json_body={"matches": []})
    result = _client(rec).validate("nld", postcode="0000XX")
    assert result == {"matches": []}


@pytest.mark.parametrize("country", ["", "NLD", "nl", "nldd", "nl1", "Nld"])
def test_validate_rejects_country_before_network(country: str) -> None:
    rec = _Recorder(json_body=VALIDATE_BODY)
    with pytest.raises(ConfigurationError):
        _client(rec).validate(country, postcode="1012AB")
    assert rec.requests == []


def test_api_error_from_json_body() -> None:
    rec = _Recorder(
        status_code=401,
        json_body={"error": "AuthenticationFailed", "message": "Invalid credentials"},
    )
    with pytest.raises(ApiError) as exc_info:
        _client(rec).autocomplete("nld", "test", "nl-NL", "paged")
    err = exc_info.value
    assert err.status_code == 401
    assert err.error_kind == "AuthenticationFailed"
    assert err.message == "Invalid credentials"
    assert err.raw_body == {"error": "AuthenticationFailed", "message": "Invalid credentials"}


def test_api_error_from_non_json_body() -> None:
    rec = _Recorder(status_code=500, content=b"Internal failure")
    with pytest.raises(ApiError) as exc_info:
        _client(rec).get_details("ctx", "")
    err = exc_info.value
    assert err.status_code == 500
    assert err.error_kind == "Unknown"
    assert err.message == "Internal Server Error"
    assert err.raw_body is None


def test_rate_limit_is_not_retried() -> None:
    rec = _Recorder(status_code=429, json_body={"error": "TooManyRequests", "message": "Slow down"})
    with pytest.raises(ApiError) as exc_info:
        _client(rec).validate("nld", postcode="1012AB")
    assert exc_info.value.status_code == 429
    assert len(rec.requests) == 1


def test_network_errors_propagate_unwrapped() -> None:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    client = PostcodeEuClient(api_key="k", api_secret="s", transport=httpx.MockTransport(_fail))
    with pytest.raises(httpx.ConnectError):
        client.autocomplete("nld", "x", "nl-NL", "short")


def test_same_inputs_give_identical_results() -> None:
    rec = _Recorder(json_body=VALIDATE_BODY)
    client = _client(rec)
    first = client.validate("nld", street="Damrak", postcode="1012LG")
    second = client.validate("nld", postcode="1012LG", street="Damrak")
    assert first == second
    assert str(rec.requests[0].url) == str(rec.requests[1].url)


def test_dot_only_term_keeps_its_path_segment() -> None:
    rec = _Recorder(json_body=AUTOCOMPLETE_BODY)
    _client(rec).autocomplete("nld", "..", "nl-NL", "short")
    assert rec.last.url.raw_path == b"/international/v1/autocomplete/nld/%2E%2E/nl-NL/short"
