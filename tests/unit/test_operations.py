"""Tests for per-operation validation and request shaping."""

import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from nexmo_client import (
    NumberCallbackOptions,
    NumberSearchOptions,
    OutcomeKind,
    UnimplementedError,
    ValidationError,
    WapPushOptions,
)


def _form(request: httpx.Request):
    return parse_qs(request.content.decode())


@pytest.mark.asyncio
class TestValidation:
    """Validation failures short-circuit before any request is built."""

    @pytest.mark.parametrize("code", ["U", "USA", "", None])
    async def test_country_code_must_be_two_characters(
        self, make_client, captured, callback, callback_calls, code
    ):
        client = make_client()

        outcome = await client.get_pricing(code, callback=callback)

        assert outcome.kind is OutcomeKind.APPLICATION_ERROR
        assert callback_calls[0][0].code == "invalidCountryCode"
        assert captured == []

    async def test_two_character_country_code_accepted(self, make_client, captured):
        client = make_client()

        outcome = await client.get_pricing("US")

        assert outcome.ok
        assert captured[0].url.path == "/account/get-pricing/outbound"
        assert captured[0].url.params["country"] == "US"

    async def test_eleven_message_ids_rejected(
        self, make_client, captured, callback, callback_calls
    ):
        client = make_client()
        ids = [f"id-{i}" for i in range(11)]

        await client.search_messages_by_ids(ids, callback=callback)

        assert captured == []
        assert len(callback_calls) == 1
        assert callback_calls[0][0].code == "tooManyMessageId"

    async def test_empty_message_ids_rejected(self, make_client):
        client = make_client()

        with pytest.raises(ValidationError) as exc_info:
            await client.search_messages_by_ids([])

        assert exc_info.value.code == "invalidMessageId"

    @pytest.mark.parametrize(
        "call, code",
        [
            (lambda c, cb: c.send_text_message("A", "447700900000", "", callback=cb), "invalidTextMessage"),
            (lambda c, cb: c.send_binary_message("A", "447700900000", "", "05", callback=cb), "invalidBody"),
            (lambda c, cb: c.send_binary_message("A", "447700900000", "ff", "", callback=cb), "invalidUdh"),
            (lambda c, cb: c.send_wap_push_message("A", "447700900000", "", "http://x", callback=cb), "invalidTitle"),
            (lambda c, cb: c.send_wap_push_message("A", "447700900000", "T", "", callback=cb), "invalidUrl"),
            (lambda c, cb: c.send_tts_message("A", "447700900000", "", callback=cb), "invalidTextMessage"),
            (lambda c, cb: c.update_secret("", callback=cb), "invalidNewSecret"),
            (lambda c, cb: c.update_secret("123456789", callback=cb), "invalidNewSecret"),
            (lambda c, cb: c.update_mo_callback_url("", callback=cb), "invalidCallbackUrl"),
            (lambda c, cb: c.update_dr_callback_url(None, callback=cb), "invalidCallbackUrl"),
            (lambda c, cb: c.top_up("", callback=cb), "invalidTransactionId"),
            (lambda c, cb: c.search_numbers("GBR", callback=cb), "invalidCountryCode"),
            (lambda c, cb: c.buy_number("G", "447700900000", callback=cb), "invalidCountryCode"),
            (lambda c, cb: c.buy_number("GB", "4477", callback=cb), "invalidMsisdn"),
            (lambda c, cb: c.cancel_number("GB", "", callback=cb), "invalidMsisdn"),
            (lambda c, cb: c.search_message("", callback=cb), "invalidMessageId"),
            (lambda c, cb: c.search_messages_by_recipient("", "447700900000", callback=cb), "invalidDate"),
            (lambda c, cb: c.search_messages_by_recipient("2014-01-01", "", callback=cb), "invalidRecipient"),
            (lambda c, cb: c.search_rejections("", callback=cb), "invalidDate"),
        ],
    )
    async def test_validation_codes(
        self, make_client, captured, callback, callback_calls, call, code
    ):
        client = make_client()

        outcome = await call(client, callback)

        assert captured == []
        assert outcome.kind is OutcomeKind.APPLICATION_ERROR
        assert len(callback_calls) == 1
        error, result = callback_calls[0]
        assert isinstance(error, ValidationError)
        assert error.code == code
        assert result is None

    async def test_validation_without_continuation_raises(self, make_client, captured):
        client = make_client()

        with pytest.raises(ValidationError) as exc_info:
            await client.buy_number("GB", "123")

        assert exc_info.value.code == "invalidMsisdn"
        assert captured == []


@pytest.mark.asyncio
class TestRequestShapes:
    async def test_get_balance(self, make_client, captured, callback, callback_calls):
        client = make_client(lambda r: httpx.Response(200, json={"value": 10.5}))

        outcome = await client.get_balance(callback=callback)

        assert outcome.payload == {"value": 10.5}
        assert callback_calls == [(None, {"value": 10.5})]
        assert captured[0].method == "GET"
        assert captured[0].url.path == "/account/get-balance"
        assert captured[0].url.params["api_secret"] == "test-secret"

    async def test_get_numbers(self, make_client, captured):
        client = make_client()
        await client.get_numbers()
        assert captured[0].url.path == "/account/numbers"

    async def test_update_secret_posts_new_secret(self, make_client, captured):
        client = make_client()

        await client.update_secret("abc123")

        assert captured[0].method == "POST"
        assert captured[0].url.path == "/account/settings"
        assert _form(captured[0])["newSecret"] == ["abc123"]

    async def test_callback_urls_are_encoded_once(self, make_client, captured):
        client = make_client()

        await client.update_mo_callback_url("https://example.com/mo?x=1")
        await client.update_dr_callback_url("https://example.com/dr")

        assert _form(captured[0])["moCallBackUrl"] == ["https://example.com/mo?x=1"]
        assert _form(captured[1])["drCallBackUrl"] == ["https://example.com/dr"]

    async def test_top_up(self, make_client, captured):
        client = make_client()
        await client.top_up("trx-1")
        assert captured[0].url.path == "/account/top-up"
        assert _form(captured[0])["trx"] == ["trx-1"]

    async def test_search_numbers_with_options(self, make_client, captured):
        client = make_client()

        await client.search_numbers(
            "GB", NumberSearchOptions(pattern="4477", index=2, size=50)
        )

        params = captured[0].url.params
        assert captured[0].url.path == "/number/search"
        assert params["country"] == "GB"
        assert params["pattern"] == "4477"
        assert params["index"] == "2"
        assert params["size"] == "50"

    async def test_search_numbers_without_options(self, make_client, captured):
        client = make_client()

        await client.search_numbers("GB")

        params = captured[0].url.params
        assert "pattern" not in params
        assert "index" not in params

    async def test_buy_and_cancel_number(self, make_client, captured):
        client = make_client()

        await client.buy_number("GB", "447700900000")
        await client.cancel_number("GB", "447700900000")

        assert [r.url.path for r in captured] == ["/number/buy", "/number/cancel"]
        assert all(r.method == "POST" for r in captured)
        assert _form(captured[0])["msisdn"] == ["447700900000"]

    async def test_search_message(self, make_client, captured):
        client = make_client()
        await client.search_message("0A0000000123ABCD1")
        assert captured[0].url.path == "/search/message"
        assert captured[0].url.params["id"] == "0A0000000123ABCD1"

    async def test_search_messages_by_ids_repeats_key(self, make_client, captured):
        client = make_client()

        await client.search_messages_by_ids(["a", "b", "c"])

        assert captured[0].url.path == "/search/messages"
        assert captured[0].url.params.get_list("ids") == ["a", "b", "c"]

    async def test_search_messages_by_recipient(self, make_client, captured):
        client = make_client()
        await client.search_messages_by_recipient("2014-05-01", "447700900000")
        params = captured[0].url.params
        assert params["date"] == "2014-05-01"
        assert params["to"] == "447700900000"

    async def test_search_rejections_optional_recipient(self, make_client, captured):
        client = make_client()

        await client.search_rejections("2014-05-01")
        await client.search_rejections("2014-05-01", "447700900000")

        assert "to" not in captured[0].url.params
        assert captured[1].url.params["to"] == "447700900000"

    async def test_binary_message_fields(self, make_client, captured):
        client = make_client(lambda r: httpx.Response(200, json={"messages": [{"status": "0"}]}))

        await client.send_binary_message("Acme", "447700900000", "0011", "050003")

        form = _form(captured[0])
        assert form["type"] == ["binary"]
        assert form["body"] == ["0011"]
        assert form["udh"] == ["050003"]

    async def test_wap_push_default_validity(self, make_client, captured):
        client = make_client(lambda r: httpx.Response(200, json={"messages": [{"status": "0"}]}))

        await client.send_wap_push_message("Acme", "447700900000", "Title", "http://x.io/a b")
        await client.send_wap_push_message(
            "Acme", "447700900000", "Title", "http://x.io", WapPushOptions(validity=60000)
        )

        first, second = _form(captured[0]), _form(captured[1])
        assert first["type"] == ["wappush"]
        assert first["url"] == ["http://x.io/a b"]
        assert first["validity"] == ["172800000"]
        assert second["validity"] == ["60000"]

    async def test_update_number_callback_is_unimplemented(
        self, make_client, captured, callback, callback_calls
    ):
        client = make_client()

        outcome = await client.update_number_callback(
            "GB",
            "447700900000",
            NumberCallbackOptions(callback_url="https://example.com"),
            callback=callback,
        )

        assert captured == []
        assert isinstance(outcome.error, UnimplementedError)
        assert callback_calls[0][0] is outcome.error

    async def test_unimplemented_is_returned_without_continuation(self, make_client):
        client = make_client()

        outcome = await client.update_number_callback("GB", "447700900000")

        assert isinstance(outcome.error, UnimplementedError)
        assert outcome.error.code == "notImplemented"


@pytest.mark.asyncio
async def test_concurrent_calls_are_independent(make_client, captured):
    client = make_client(
        lambda r: httpx.Response(200, json={"path": r.url.path})
    )

    outcomes = await asyncio.gather(
        client.get_balance(), client.get_numbers(), client.search_message("x")
    )

    assert [o.payload["path"] for o in outcomes] == [
        "/account/get-balance",
        "/account/numbers",
        "/search/message",
    ]
    assert len(captured) == 3
