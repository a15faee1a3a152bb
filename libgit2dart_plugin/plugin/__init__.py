"""Plugin side of the libgit2dart channel: commands, dispatcher and registration."""

from .commands import Command
from .dispatcher import Libgit2dartPlugin, register_with_registrar
from .platform_info import HostPlatform, platform_version
from .registrar import MethodCallDelegate, PluginRegistrar, Registrar

__all__ = [
    "Command",
    "HostPlatform",
    "Libgit2dartPlugin",
    "MethodCallDelegate",
    "PluginRegistrar",
    "Registrar",
    "platform_version",
    "register_with_registrar",
]
