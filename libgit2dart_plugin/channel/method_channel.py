"""Named method channel: decodes calls, runs the handler, encodes the single reply."""

from __future__ import annotations

from typing import Any

from loguru import logger

from libgit2dart_plugin.channel.codec import JsonMethodCodec, MethodCodec
from libgit2dart_plugin.channel.messenger import BinaryMessenger, Reply
from libgit2dart_plugin.channel.sink import CapturingResult, OneShotResult
from libgit2dart_plugin.channel.types import MethodCall, MethodCallHandler, MethodResult
from libgit2dart_plugin.utils.exceptions import CodecError, classify_exception, sanitize_error_message


class MethodChannel:
    """A method channel bound to one name on a messenger."""

    def __init__(self, name: str, messenger: BinaryMessenger, codec: MethodCodec | None = None):
        channel_name = str(name).strip()
        if not channel_name:
            raise ValueError("channel name is required")
        self.name = channel_name
        self.messenger = messenger
        self.codec: MethodCodec = codec or JsonMethodCodec()
        self._handler: MethodCallHandler | None = None

    def set_method_call_handler(self, handler: MethodCallHandler | None) -> None:
        if handler is not None and not callable(handler):
            raise ValueError("method call handler must be callable")
        self._handler = handler
        if handler is None:
            self.messenger.set_message_handler(self.name, None)
        else:
            self.messenger.set_message_handler(self.name, self._handle_message)

    def _handle_message(self, message: bytes | None, reply: Reply) -> None:
        handler = self._handler
        if handler is None:
            reply(None)
            return
        try:
            call = self.codec.decode_method_call(message)
        except CodecError as exc:
            logger.warning("Malformed call on channel {}: {}", self.name, exc.message)
            reply(self.codec.encode_result(MethodResult.failure(exc.code, exc.message, None)))
            return

        captured = CapturingResult()
        sink = OneShotResult(captured, method=call.method)
        try:
            handler(call, sink)
        except Exception as exc:
            failure = self._failure(call.method, exc)
            if not sink.submitted:
                reply(self.codec.encode_result(failure))
                return
        result = captured.result
        if result is None:
            logger.warning("Channel {} method {} returned without a result", self.name, call.method)
            result = MethodResult.failure("NO_RESULT", f"no result submitted for method: {call.method}")
        try:
            envelope = self.codec.encode_result(result)
        except (TypeError, ValueError) as exc:
            envelope = self.codec.encode_result(self._failure(call.method, exc))
        reply(envelope)

    def _failure(self, method: str, exc: Exception) -> MethodResult:
        code, category = classify_exception(exc)
        sanitized = sanitize_error_message(str(exc))
        logger.exception("Channel {} method {} failed with [{}]: {}", self.name, method, code, sanitized)
        return MethodResult.failure(code, sanitized, {"category": category.value})

    def invoke_method(self, method: str, arguments: Any = None) -> MethodResult:
        """Send a call on this channel and decode the reply."""
        message = self.codec.encode_method_call(MethodCall(method=method, arguments=arguments))
        envelope = self.messenger.send(self.name, message)
        return self.codec.decode_envelope(envelope)
