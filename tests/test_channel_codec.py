import json

import pytest

from libgit2dart_plugin.channel.codec import JsonMethodCodec, MethodCodec
from libgit2dart_plugin.channel.types import NOT_IMPLEMENTED, MethodCall, MethodResult, ResultKind
from libgit2dart_plugin.utils.exceptions import CodecError


@pytest.fixture
def codec() -> JsonMethodCodec:
    return JsonMethodCodec()


def test_codec_satisfies_protocol(codec):
    assert isinstance(codec, MethodCodec)


def test_encode_method_call_shape(codec):
    payload = json.loads(codec.encode_method_call(MethodCall(method="getPlatformVersion")))
    assert payload == {"method": "getPlatformVersion", "args": None}


def test_decode_method_call_accepts_str_and_bytes(codec):
    assert codec.decode_method_call('{"method": "foo", "args": {"x": 1}}') == MethodCall("foo", {"x": 1})
    assert codec.decode_method_call(b'{"method": "foo"}') == MethodCall("foo", None)


@pytest.mark.parametrize(
    "message",
    [None, b"", b"not json", b"[1, 2]", b'{"args": 1}', b'{"method": 3}', b'{"method": "\xff"}'],
)
def test_decode_method_call_rejects_malformed(codec, message):
    with pytest.raises(CodecError) as exc_info:
        codec.decode_method_call(message)
    assert exc_info.value.code == "MALFORMED_CALL"


def test_success_and_error_envelopes(codec):
    assert json.loads(codec.encode_success_envelope("macOS 14.4.1")) == ["macOS 14.4.1"]
    assert json.loads(codec.encode_error_envelope("E", "boom", {"k": 1})) == ["E", "boom", {"k": 1}]


def test_encode_result_not_implemented_is_empty_reply(codec):
    assert codec.encode_result(NOT_IMPLEMENTED) is None


def test_decode_envelope_variants(codec):
    assert codec.decode_envelope(None) is NOT_IMPLEMENTED
    assert codec.decode_envelope(b"") is NOT_IMPLEMENTED
    assert codec.decode_envelope(b'["Linux #1"]') == MethodResult.success("Linux #1")
    failure = codec.decode_envelope(b'["E", null, null]')
    assert failure.kind is ResultKind.ERROR
    assert failure.error.code == "E"
    assert failure.error.message is None


@pytest.mark.parametrize(
    "envelope",
    [b"{}", b"[]", b"[1, 2]", b'[1, "m", null]', b'["E", 5, null]', b"nope", b'["\xff"]'],
)
def test_decode_envelope_rejects_malformed(codec, envelope):
    with pytest.raises(CodecError) as exc_info:
        codec.decode_envelope(envelope)
    assert exc_info.value.code == "MALFORMED_ENVELOPE"


def test_non_ascii_survives_encoding(codec):
    encoded = codec.encode_result(MethodResult.success("Système 1.0"))
    assert codec.decode_envelope(encoded).value == "Système 1.0"


def test_invalid_utf8_is_a_codec_error(codec):
    with pytest.raises(CodecError) as exc_info:
        codec.decode_method_call(b'{"method": "\xff"}')
    assert "UTF-8" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
