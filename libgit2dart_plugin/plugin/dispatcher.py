"""Command dispatcher for the libgit2dart channel."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from loguru import logger

from libgit2dart_plugin import CHANNEL_NAME
from libgit2dart_plugin.channel.method_channel import MethodChannel
from libgit2dart_plugin.channel.sink import CapturingResult, OneShotResult
from libgit2dart_plugin.channel.types import MethodCall, MethodResult, ResultCallback
from libgit2dart_plugin.plugin.commands import Command
from libgit2dart_plugin.plugin.platform_info import HostPlatform, platform_version
from libgit2dart_plugin.plugin.registrar import PluginRegistrar

if TYPE_CHECKING:
    from libgit2dart_plugin.config.schema import Config

HostProbe = Callable[[], HostPlatform]


class Libgit2dartPlugin:
    """Routes each call to one command handler and responds exactly once."""

    def __init__(self, probe: HostProbe | None = None):
        self._probe: HostProbe = probe or HostPlatform.current

    @classmethod
    def register(
        cls,
        registrar: PluginRegistrar,
        config: "Config | None" = None,
        *,
        probe: HostProbe | None = None,
    ) -> "Libgit2dartPlugin":
        name = config.channel.name if config is not None else CHANNEL_NAME
        channel = MethodChannel(name, registrar.messenger)
        instance = cls(probe=probe)
        registrar.add_method_call_delegate(instance, channel)
        return instance

    def handle(self, call: MethodCall, result: ResultCallback) -> None:
        respond = OneShotResult.wrap(result, method=call.method)
        command = Command.parse(call.method)
        logger.debug("Dispatching {} -> {}", call.method, command.name if command else "not implemented")
        match command:
            case Command.GET_PLATFORM_VERSION:
                respond.success(platform_version(self._probe()))
            case _:
                respond.not_implemented()

    dispatch = handle

    def invoke(self, call: MethodCall) -> MethodResult:
        """Dispatch and return the single result synchronously."""
        captured = CapturingResult()
        self.handle(call, captured)
        return captured.results[0]

    @staticmethod
    def methods() -> list[str]:
        return Command.names()


def register_with_registrar(
    registrar: PluginRegistrar,
    config: "Config | None" = None,
    *,
    probe: HostProbe | None = None,
) -> Libgit2dartPlugin:
    """Module-level registration hook."""
    return Libgit2dartPlugin.register(registrar, config=config, probe=probe)
