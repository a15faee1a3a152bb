import pytest

from libgit2dart_plugin import CHANNEL_NAME
from libgit2dart_plugin.channel.messenger import BinaryMessenger
from libgit2dart_plugin.channel.method_channel import MethodChannel
from libgit2dart_plugin.config.schema import ChannelConfig, Config
from libgit2dart_plugin.plugin.dispatcher import Libgit2dartPlugin, register_with_registrar
from libgit2dart_plugin.plugin.platform_info import HostPlatform
from libgit2dart_plugin.plugin.registrar import MethodCallDelegate, PluginRegistrar, Registrar


def test_registrar_satisfies_protocol(registrar):
    assert isinstance(registrar, PluginRegistrar)
    assert isinstance(Libgit2dartPlugin(), MethodCallDelegate)


def test_register_attaches_plugin_to_default_channel(registrar, macos_host):
    plugin = register_with_registrar(registrar, probe=lambda: macos_host)
    assert isinstance(plugin, Libgit2dartPlugin)
    assert registrar.delegates == {CHANNEL_NAME: plugin}
    assert registrar.messenger.channels() == [CHANNEL_NAME]

    channel = registrar.channel(CHANNEL_NAME)
    assert channel.invoke_method("getPlatformVersion").value == "macOS 14.4.1"
    assert channel.invoke_method("doSomethingElse", {"x": 1}).is_not_implemented


def test_register_uses_configured_channel_name(registrar, macos_host):
    config = Config(channel=ChannelConfig(name="libgit2dart/test"))
    Libgit2dartPlugin.register(registrar, config=config, probe=lambda: macos_host)
    assert registrar.messenger.channels() == ["libgit2dart/test"]
    assert registrar.channel(CHANNEL_NAME).invoke_method("getPlatformVersion").is_not_implemented
    assert registrar.channel("libgit2dart/test").invoke_method("getPlatformVersion").ok


def test_registrar_rejects_foreign_channel(registrar):
    foreign = MethodChannel(CHANNEL_NAME, BinaryMessenger())
    with pytest.raises(ValueError):
        registrar.add_method_call_delegate(Libgit2dartPlugin(), foreign)


def test_registrar_rejects_delegate_without_handle(registrar):
    with pytest.raises(ValueError):
        registrar.add_method_call_delegate(object(), registrar.channel(CHANNEL_NAME))


def test_reregistering_replaces_delegate(registrar):
    first = register_with_registrar(registrar)
    second = register_with_registrar(registrar)
    assert first is not second
    assert registrar.delegates[CHANNEL_NAME] is second


def test_register_passes_probe_to_instance(registrar):
    linux = HostPlatform(system="Linux", version="#1 SMP")
    register_with_registrar(registrar, probe=lambda: linux)
    assert registrar.channel(CHANNEL_NAME).invoke_method("getPlatformVersion").value == "Linux #1 SMP"
