"""Registration hook contracts and the in-process registrar."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from loguru import logger

from libgit2dart_plugin.channel.messenger import BinaryMessenger
from libgit2dart_plugin.channel.method_channel import MethodChannel
from libgit2dart_plugin.channel.types import MethodCall, ResultCallback


@runtime_checkable
class MethodCallDelegate(Protocol):
    def handle(self, call: MethodCall, result: ResultCallback) -> None: ...


@runtime_checkable
class PluginRegistrar(Protocol):
    messenger: BinaryMessenger

    def add_method_call_delegate(self, delegate: MethodCallDelegate, channel: MethodChannel) -> None: ...


class Registrar:
    """Attaches plugin delegates to channels on one messenger."""

    def __init__(self, messenger: BinaryMessenger | None = None):
        self.messenger = messenger or BinaryMessenger()
        self.delegates: dict[str, Any] = {}

    def add_method_call_delegate(self, delegate: MethodCallDelegate, channel: MethodChannel) -> None:
        handle = getattr(delegate, "handle", None)
        if not callable(handle):
            raise ValueError("delegate must expose handle(call, result)")
        if channel.messenger is not self.messenger:
            raise ValueError(f"channel {channel.name} is bound to a different messenger")
        owner = self.delegates.get(channel.name)
        if owner is not None and owner is not delegate:
            logger.warning("Replacing delegate on channel {}", channel.name)
        channel.set_method_call_handler(handle)
        self.delegates[channel.name] = delegate
        logger.debug("Attached {} to channel {}", type(delegate).__name__, channel.name)

    def channel(self, name: str) -> MethodChannel:
        """Caller-side view of a channel on this registrar's messenger."""
        return MethodChannel(name, self.messenger)
