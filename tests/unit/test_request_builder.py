"""Unit tests for the request builder."""

from urllib.parse import parse_qs, urlsplit

import pytest

from nexmo_client.endpoints import Endpoint
from nexmo_client.models import ClientConfig
from nexmo_client.utils.http import build_request, encode_parameters


@pytest.fixture
def config():
    return ClientConfig(api_key="key", api_secret="s3cr3t")


def test_get_puts_credentials_and_parameters_in_query(config):
    req = build_request(config, Endpoint.ACCOUNT_PRICING.path, {"country": "US"})

    parts = urlsplit(req.path)
    assert parts.path == "/account/get-pricing/outbound"
    assert parse_qs(parts.query) == {
        "api_key": ["key"],
        "api_secret": ["s3cr3t"],
        "country": ["US"],
    }
    assert req.body == b""
    assert "Content-Length" not in req.headers


def test_credentials_come_first(config):
    encoded = encode_parameters(config.credentials(), {"to": "447700900000"})
    assert encoded.startswith("api_key=key&api_secret=s3cr3t&")


def test_post_encodes_body_with_content_length(config):
    req = build_request(
        config,
        Endpoint.SMS.path,
        {"from": "Acme", "to": "447700900000", "text": "héllo & bye"},
        "POST",
    )

    assert req.path == "/sms/json"
    assert req.headers["Content-Length"] == str(len(req.body))
    fields = parse_qs(req.body.decode("utf-8"))
    assert fields["text"] == ["héllo & bye"]
    assert fields["api_secret"] == ["s3cr3t"]


def test_content_length_counts_bytes_not_characters(config):
    req = build_request(config, Endpoint.SMS.path, {"text": "ñ" * 5}, "POST")
    assert int(req.headers["Content-Length"]) == len(req.body)
    assert b"text=" + b"%C3%B1" * 5 in req.body


def test_headers_always_present(config):
    for method in ("GET", "POST"):
        req = build_request(config, Endpoint.ACCOUNT_GET_BALANCE.path, None, method)
        assert req.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert req.headers["Accept"] == "application/json"


def test_caller_cannot_override_credentials(config):
    req = build_request(
        config,
        Endpoint.ACCOUNT_GET_BALANCE.path,
        {"api_key": "evil", "api_secret": "evil", "x": "1"},
    )
    query = parse_qs(urlsplit(req.path).query)
    assert query["api_key"] == ["key"]
    assert query["api_secret"] == ["s3cr3t"]
    assert query["x"] == ["1"]


def test_none_values_skipped_and_lists_repeated(config):
    encoded = encode_parameters({}, {"ids": ["a", "b"], "pattern": None})
    assert encoded == "ids=a&ids=b"


def test_secure_transport_uses_port_443(config):
    req = build_request(config, Endpoint.ACCOUNT_NUMBERS.path)
    assert req.scheme == "https"
    assert req.port == 443
    assert req.url.startswith("https://rest.nexmo.com:443/account/numbers?")


def test_plaintext_transport_uses_port_80():
    config = ClientConfig(api_key="k", api_secret="s", use_secure_transport=False)
    req = build_request(config, Endpoint.ACCOUNT_NUMBERS.path)
    assert req.scheme == "http"
    assert req.port == 80


def test_to_httpx_keeps_body_only_for_post(config):
    get_req = build_request(config, Endpoint.ACCOUNT_NUMBERS.path).to_httpx()
    assert get_req.method == "GET"
    assert get_req.content == b""

    post_req = build_request(
        config, Endpoint.NUMBER_BUY.path, {"country": "US"}, "POST"
    ).to_httpx()
    assert post_req.method == "POST"
    assert b"country=US" in post_req.content


def test_fields_decodes_query_and_body(config):
    get_req = build_request(
        config, Endpoint.SEARCH_MESSAGES.path, {"ids": ["a", "b"]}
    )
    post_req = build_request(
        config, Endpoint.SMS.path, {"from": "Acme", "text": "a&b"}, "POST"
    )

    assert get_req.fields() == {
        "api_key": "key",
        "api_secret": "s3cr3t",
        "ids": ["a", "b"],
    }
    assert post_req.fields()["text"] == "a&b"
    assert post_req.fields()["from"] == "Acme"


def test_unsupported_method_rejected(config):
    with pytest.raises(ValueError):
        build_request(config, Endpoint.SMS.path, None, "DELETE")
