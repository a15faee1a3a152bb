"""Pytest hooks and fixtures."""

import pytest

from libgit2dart_plugin.config.access import clear_config_cache
from libgit2dart_plugin.plugin.platform_info import HostPlatform
from libgit2dart_plugin.plugin.registrar import Registrar

MACOS_HOST = HostPlatform(system="Darwin", release="23.4.0", version="Darwin Kernel Version 23.4.0", mac_release="14.4.1")


@pytest.fixture
def macos_host() -> HostPlatform:
    return MACOS_HOST


@pytest.fixture
def pinned_host(monkeypatch) -> HostPlatform:
    """Make HostPlatform.current() report a fixed macOS host."""
    monkeypatch.setattr(HostPlatform, "current", classmethod(lambda cls: MACOS_HOST))
    return MACOS_HOST


@pytest.fixture
def registrar() -> Registrar:
    return Registrar()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config lookups away from the real home directory."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setattr("pathlib.Path.home", classmethod(lambda cls: tmp_path / "home"))
    for key in ("LIBGIT2DART_PLUGIN_CHANNEL__NAME", "LIBGIT2DART_PLUGIN_LOGGING__LEVEL"):
        monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()
