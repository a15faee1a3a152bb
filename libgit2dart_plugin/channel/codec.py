"""JSON method codec for channel messages and reply envelopes."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

from libgit2dart_plugin.channel.types import NOT_IMPLEMENTED, MethodCall, MethodResult, ResultKind
from libgit2dart_plugin.utils.exceptions import CodecError


@runtime_checkable
class MethodCodec(Protocol):
    def encode_method_call(self, call: MethodCall) -> bytes: ...
    def decode_method_call(self, message: bytes | str | None) -> MethodCall: ...
    def encode_result(self, result: MethodResult) -> bytes | None: ...
    def decode_envelope(self, envelope: bytes | str | None) -> MethodResult: ...


def _loads(data: bytes | str, *, code: str) -> Any:
    try:
        text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else str(data)
        return json.loads(text)
    except UnicodeDecodeError as exc:
        raise CodecError(f"invalid UTF-8 at byte {exc.start}", code=code) from exc
    except json.JSONDecodeError as exc:
        raise CodecError(f"invalid JSON: {exc.msg}", code=code) from exc


def _dumps(payload: Any) -> bytes:
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


class JsonMethodCodec:
    """
    Encodes calls as ``{"method": ..., "args": ...}``.

    Replies are ``[result]`` on success, ``[code, message, details]`` on error,
    and an empty reply when the method is not implemented.
    """

    def encode_method_call(self, call: MethodCall) -> bytes:
        return _dumps({"method": call.method, "args": call.arguments})

    def decode_method_call(self, message: bytes | str | None) -> MethodCall:
        if message is None or len(message) == 0:
            raise CodecError("empty method call message")
        payload = _loads(message, code="MALFORMED_CALL")
        if not isinstance(payload, dict):
            raise CodecError("method call must be a JSON object", payload=payload)
        method = payload.get("method")
        if not isinstance(method, str):
            raise CodecError("method call is missing a string 'method'", payload=payload)
        return MethodCall(method=method, arguments=payload.get("args"))

    def encode_success_envelope(self, value: Any) -> bytes:
        return _dumps([value])

    def encode_error_envelope(self, code: str, message: str | None = None, details: Any = None) -> bytes:
        return _dumps([code, message, details])

    def encode_result(self, result: MethodResult) -> bytes | None:
        if result.kind is ResultKind.SUCCESS:
            return self.encode_success_envelope(result.value)
        if result.kind is ResultKind.ERROR and result.error is not None:
            return self.encode_error_envelope(result.error.code, result.error.message, result.error.details)
        return None

    def decode_envelope(self, envelope: bytes | str | None) -> MethodResult:
        if envelope is None or len(envelope) == 0:
            return NOT_IMPLEMENTED
        payload = _loads(envelope, code="MALFORMED_ENVELOPE")
        if not isinstance(payload, list):
            raise CodecError("envelope must be a JSON array", code="MALFORMED_ENVELOPE", payload=payload)
        if len(payload) == 1:
            return MethodResult.success(payload[0])
        if len(payload) == 3 and isinstance(payload[0], str):
            message = payload[1]
            if message is not None and not isinstance(message, str):
                raise CodecError("error message must be a string", code="MALFORMED_ENVELOPE", payload=payload)
            return MethodResult.failure(payload[0], message, payload[2])
        raise CodecError("envelope has an invalid shape", code="MALFORMED_ENVELOPE", payload=payload)
