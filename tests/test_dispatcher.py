"""Platform dispatch (`get`) and platform detection."""

import os
import sys

import pytest

import machine_uuid
from machine_uuid import (
    MalformedOutputError,
    Platform,
    ProcessLaunchError,
    UnsupportedPlatformError,
    build_source,
    get,
    get_via_windows_shell,
    transform_windows_output,
)
from machine_uuid.adapters.sources import LinuxShellSource, MacOSShellSource, WindowsShellSource
from machine_uuid.core.services.machine_id import get_report, resolve_platform

WINDOWS_RAW = b"UUID                                  \r\r\n140EF834-2DB3-0F7A-27B4-4CEDFB73167C  \r\r\n\r\r\n"


class TestDetect:
    @pytest.mark.parametrize(
        "sys_platform, expected",
        [
            ("win32", Platform.WINDOWS),
            ("darwin", Platform.MACOS),
            ("linux", Platform.LINUX),
            ("freebsd14", Platform.LINUX),
        ],
    )
    def test_maps_host_to_platform(self, monkeypatch, sys_platform, expected):
        monkeypatch.setattr(sys, "platform", sys_platform)
        if sys_platform != "win32":
            monkeypatch.setattr(os, "name", "posix")
        assert Platform.detect() is expected

    def test_unknown_host_is_an_error(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "vms")
        monkeypatch.setattr(os, "name", "java")
        with pytest.raises(UnsupportedPlatformError) as excinfo:
            Platform.detect()
        assert excinfo.value.system == "vms"


def test_windows_get_equals_transformed_raw(fake_runner, settings):
    runner = fake_runner(WINDOWS_RAW)
    expected = transform_windows_output(get_via_windows_shell(runner=runner))

    assert get(platform=Platform.WINDOWS, runner=runner, settings=settings) == expected
    assert expected == "140EF834-2DB3-0F7A-27B4-4CEDFB73167C"


def test_linux_get_is_untrimmed(fake_runner, settings):
    runner = fake_runner(b"92cc698195f84d3b85f1cfb0a09e957f\n")
    assert get(platform=Platform.LINUX, runner=runner, settings=settings) == "92cc698195f84d3b85f1cfb0a09e957f\n"


def test_macos_get_is_untrimmed(fake_runner, settings):
    runner = fake_runner(b"F7FA2B78-F7D4-5B1B-A4E3-BACB1BBD95A1\n")
    assert get(platform=Platform.MACOS, runner=runner, settings=settings).endswith("\n")


def test_get_runs_exactly_one_command(fake_runner, settings):
    runner = fake_runner(b"value\n")
    get(platform=Platform.MACOS, runner=runner, settings=settings)
    assert len(runner.calls) == 1


def test_get_uses_detected_platform(monkeypatch, fake_runner, settings):
    monkeypatch.setattr(Platform, "detect", classmethod(lambda cls: Platform.WINDOWS))
    assert get(runner=fake_runner(WINDOWS_RAW), settings=settings) == "140EF834-2DB3-0F7A-27B4-4CEDFB73167C"


def test_platform_setting_overrides_detection(monkeypatch, fake_runner):
    monkeypatch.setenv("MACHINE_UUID_PLATFORM", "windows")
    monkeypatch.setattr(Platform, "detect", classmethod(lambda cls: Platform.LINUX))

    runner = fake_runner(WINDOWS_RAW)
    assert get(runner=runner) == "140EF834-2DB3-0F7A-27B4-4CEDFB73167C"
    assert runner.calls[0][0] == "cmd"


def test_explicit_platform_beats_setting(settings):
    forced = settings.model_copy(update={"platform": Platform.MACOS})
    assert resolve_platform(Platform.LINUX, forced) is Platform.LINUX
    assert resolve_platform(None, forced) is Platform.MACOS


def test_unsupported_host_propagates(monkeypatch, fake_runner, settings):
    def _unsupported(cls):
        raise UnsupportedPlatformError("vms")

    monkeypatch.setattr(Platform, "detect", classmethod(_unsupported))
    runner = fake_runner(b"ignored")
    with pytest.raises(UnsupportedPlatformError):
        get(runner=runner, settings=settings)
    assert runner.calls == []


def test_errors_propagate_from_selected_path(fake_runner, launch_error, settings):
    with pytest.raises(ProcessLaunchError):
        get(platform=Platform.LINUX, runner=fake_runner(error=launch_error), settings=settings)

    with pytest.raises(MalformedOutputError):
        get(platform=Platform.WINDOWS, runner=fake_runner(b"UUID\r\n"), settings=settings)


def test_repeated_get_is_idempotent(fake_runner, settings):
    runner = fake_runner(WINDOWS_RAW)
    first = get(platform=Platform.WINDOWS, runner=runner, settings=settings)
    assert get(platform=Platform.WINDOWS, runner=runner, settings=settings) == first


@pytest.mark.parametrize(
    "platform, source_cls",
    [
        (Platform.WINDOWS, WindowsShellSource),
        (Platform.MACOS, MacOSShellSource),
        (Platform.LINUX, LinuxShellSource),
    ],
)
def test_build_source_maps_every_platform(fake_runner, platform, source_cls):
    assert isinstance(build_source(platform, runner=fake_runner()), source_cls)


class TestReport:
    def test_linux_report_trims_value(self, fake_runner, settings):
        report = get_report(
            platform=Platform.LINUX,
            runner=fake_runner(b"92cc698195f84d3b85f1cfb0a09e957f\n"),
            settings=settings,
        )
        assert report.machine_id == "92cc698195f84d3b85f1cfb0a09e957f"
        assert report.raw == "92cc698195f84d3b85f1cfb0a09e957f\n"
        assert report.command == ["sh", "-c", "cat /etc/machine-id"]

    def test_windows_report_transforms_value(self, fake_runner, settings):
        report = get_report(platform=Platform.WINDOWS, runner=fake_runner(WINDOWS_RAW), settings=settings)
        assert report.platform is Platform.WINDOWS
        assert report.machine_id == "140EF834-2DB3-0F7A-27B4-4CEDFB73167C"
        assert report.raw.startswith("UUID")


def test_public_api_exports():
    for name in machine_uuid.__all__:
        assert hasattr(machine_uuid, name)


@pytest.mark.parametrize(
    "platform, stdout",
    [
        (Platform.WINDOWS, WINDOWS_RAW),
        (Platform.MACOS, b"F7FA2B78-F7D4-5B1B-A4E3-BACB1BBD95A1\n"),
        (Platform.LINUX, b"92cc698195f84d3b85f1cfb0a09e957f\n"),
    ],
)
def test_report_value_comes_from_the_source(fake_runner, settings, platform, stdout):
    report = get_report(platform=platform, runner=fake_runner(stdout), settings=settings)
    source = build_source(platform, runner=fake_runner(stdout))

    assert report.machine_id == source.normalize(source.fetch_raw())
    assert report.machine_id == source.fetch().strip()
