import pytest

from libgit2dart_plugin.plugin.platform_info import HostPlatform, platform_version


def test_macos_uses_product_version():
    host = HostPlatform(system="Darwin", release="23.4.0", mac_release="14.4.1")
    assert platform_version(host) == "macOS 14.4.1"


def test_macos_falls_back_to_kernel_release():
    assert platform_version(HostPlatform(system="Darwin", release="23.4.0")) == "macOS 23.4.0"


def test_linux_uses_uname_version():
    host = HostPlatform(
        system="Linux",
        release="6.8.0-31-generic",
        version="#31-Ubuntu SMP PREEMPT_DYNAMIC Sat Apr 20 00:40:06 UTC 2024",
    )
    assert platform_version(host) == "Linux #31-Ubuntu SMP PREEMPT_DYNAMIC Sat Apr 20 00:40:06 UTC 2024"


@pytest.mark.parametrize(
    ("version", "expected"),
    [
        ("10.0.22631", "Windows 10+"),
        ("10.0.19045", "Windows 10+"),
        ("6.3.9600", "Windows 8"),
        ("6.2.9200", "Windows 8"),
        ("6.1.7601", "Windows 7"),
        ("6.0.6002", "Windows"),
    ],
)
def test_windows_buckets(version, expected):
    assert platform_version(HostPlatform(system="Windows", release="", version=version)) == expected


def test_windows_falls_back_to_release():
    assert platform_version(HostPlatform(system="Windows", release="10")) == "Windows 10+"


def test_other_systems_use_release():
    assert platform_version(HostPlatform(system="FreeBSD", release="14.0-RELEASE")) == "FreeBSD 14.0-RELEASE"


def test_blank_system_is_unknown():
    assert platform_version(HostPlatform(system="")) == "Unknown"


def test_current_snapshot_reads_platform_module(monkeypatch):
    monkeypatch.setattr("platform.system", lambda: "Darwin")
    monkeypatch.setattr("platform.release", lambda: "23.4.0")
    monkeypatch.setattr("platform.version", lambda: "Darwin Kernel Version 23.4.0")
    monkeypatch.setattr("platform.mac_ver", lambda: ("14.4.1", ("", "", ""), "arm64"))
    host = HostPlatform.current()
    assert host == HostPlatform(
        system="Darwin",
        release="23.4.0",
        version="Darwin Kernel Version 23.4.0",
        mac_release="14.4.1",
    )
    assert platform_version(host) == "macOS 14.4.1"
