import json

import pytest

from api.connectors.hub.signature import compute_hub_signature
from api.connectors.hub.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    PayloadTooLargeError,
    decode_json_body,
    parse_webhook_request,
    read_signed_body,
)


async def _chunks(*parts: bytes):
    for part in parts:
        yield part


def test_parse_webhook_request_ok() -> None:
    secret = "secret"
    body = json.dumps({"entry": []}).encode("utf-8")
    signature = compute_hub_signature(secret, body)
    headers = {"x-hub-signature": signature}

    payload, result = parse_webhook_request(body, headers, signature)

    assert payload == {"entry": []}
    assert result.valid is True


def test_parse_webhook_request_invalid_signature() -> None:
    body = json.dumps({"entry": []}).encode("utf-8")
    headers = {"x-hub-signature": "sha1=deadbeef"}

    with pytest.raises(InvalidSignatureError, match="invalid_signature"):
        parse_webhook_request(body, headers, compute_hub_signature("secret", body))


def test_parse_webhook_request_missing_signature() -> None:
    body = b"{}"

    with pytest.raises(InvalidSignatureError, match="missing_signature"):
        parse_webhook_request(body, {}, compute_hub_signature("secret", body))


def test_parse_webhook_request_invalid_json_checked_before_signature() -> None:
    body = b"{invalid}"
    headers = {"x-hub-signature": "sha1=deadbeef"}

    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_webhook_request(body, headers, compute_hub_signature("secret", body))


def test_decode_json_body_accepts_object_and_array() -> None:
    assert decode_json_body(b'{"a": 1}') == {"a": 1}
    assert decode_json_body(b"[1, 2]") == [1, 2]


def test_decode_json_body_empty_is_empty_object() -> None:
    assert decode_json_body(b"") == {}


@pytest.mark.parametrize("body", [b" ", b"   ", b"  \n", b"\t"])
def test_decode_json_body_rejects_whitespace_only(body: bytes) -> None:
    with pytest.raises(InvalidJsonError, match="invalid_json"):
        decode_json_body(body)


@pytest.mark.parametrize(
    "body",
    [b'{"a": NaN}', b'{"a": Infinity}', b'{"a": -Infinity}', b"[NaN]"],
)
def test_decode_json_body_rejects_non_json_constants(body: bytes) -> None:
    with pytest.raises(InvalidJsonError, match="invalid_json"):
        decode_json_body(body)


@pytest.mark.parametrize("body", [b'{"a": 1e400}', b'{"a": -1e400}', b"[1.5e999]"])
def test_decode_json_body_rejects_overflowing_numbers(body: bytes) -> None:
    with pytest.raises(InvalidJsonError, match="number_out_of_range"):
        decode_json_body(body)


def test_decode_json_body_keeps_finite_floats() -> None:
    assert decode_json_body(b'{"a": 1.5e10, "b": -0.25}') == {"a": 1.5e10, "b": -0.25}


@pytest.mark.parametrize("body", [b"42", b'"text"', b"null", b"true"])
def test_decode_json_body_rejects_scalars(body: bytes) -> None:
    with pytest.raises(InvalidJsonError, match="payload_not_object"):
        decode_json_body(body)


def test_decode_json_body_rejects_invalid_utf8() -> None:
    with pytest.raises(InvalidJsonError):
        decode_json_body(b'{"a": "\xff"}')


@pytest.mark.asyncio
async def test_read_signed_body_hashes_exact_bytes() -> None:
    raw, signature = await read_signed_body(
        _chunks(b'{"a":', b" 1 ", b"}"),
        "secret",
        max_bytes=1024,
    )

    assert raw == b'{"a": 1 }'
    assert signature == compute_hub_signature("secret", b'{"a": 1 }')


@pytest.mark.asyncio
async def test_read_signed_body_enforces_limit() -> None:
    with pytest.raises(PayloadTooLargeError):
        await read_signed_body(_chunks(b"x" * 6, b"y" * 6), "secret", max_bytes=10)


@pytest.mark.asyncio
async def test_read_signed_body_accepts_exact_limit() -> None:
    raw, _ = await read_signed_body(_chunks(b"x" * 10), "secret", max_bytes=10)
    assert len(raw) == 10
