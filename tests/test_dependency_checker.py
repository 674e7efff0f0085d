"""Unit tests for the FFmpeg availability check and package-feed installation."""

import subprocess
from pathlib import Path
from typing import List

import pytest

from image_to_mvi.domain.exceptions import ToolUnavailableException
from image_to_mvi.utils import dependency_checker as checker_module
from image_to_mvi.utils.dependency_checker import DependencyChecker

FEED_LISTING = "ffmpeg-dev - 6.1 - headers\nffmpeg - 6.1 - FFmpeg tools\nlibx264 - 2023\n"


class FakeSystem:
    """Simulates PATH lookups and package manager commands."""

    def __init__(self, installed=(), feed=FEED_LISTING, install_rc=0, installs=True):
        self.installed = set(installed)
        self.feed = feed
        self.install_rc = install_rc
        self.installs = installs
        self.commands: List[List[str]] = []

    def which(self, name):
        return f"/usr/bin/{name}" if name in self.installed else None

    def run_cmd(self, cmd, show_cmd=False):
        self.commands.append(list(cmd))
        if cmd[1:] == ["list"]:
            return subprocess.CompletedProcess(cmd, 0, stdout=self.feed, stderr="")
        if cmd[1:2] == ["install"]:
            if self.install_rc == 0 and self.installs:
                self.installed.add("ffmpeg")
            return subprocess.CompletedProcess(cmd, self.install_rc, stdout="", stderr="install error")
        if cmd[1:] == ["-version"]:
            return subprocess.CompletedProcess(cmd, 0, stdout="ffmpeg version 6.1\nbuilt with gcc", stderr="")
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")


@pytest.fixture
def fake_system(monkeypatch: pytest.MonkeyPatch):
    system = FakeSystem()
    monkeypatch.setattr(checker_module.shutil, "which", system.which)
    monkeypatch.setattr(checker_module, "run_cmd", system.run_cmd)
    return system


def _checker() -> DependencyChecker:
    return DependencyChecker("ffmpeg", package="ffmpeg", package_manager="opkg", module_path=None)


def test_installed_tool_is_used_as_is(fake_system: FakeSystem) -> None:
    fake_system.installed = {"ffmpeg", "opkg"}

    assert _checker().ensure() == "/usr/bin/ffmpeg"
    assert ["opkg", "install", "ffmpeg"] not in fake_system.commands
    assert ["/usr/bin/ffmpeg", "-version"] in fake_system.commands


def test_missing_tool_is_installed_from_feed(fake_system: FakeSystem) -> None:
    fake_system.installed = {"opkg"}

    assert _checker().ensure() == "/usr/bin/ffmpeg"
    assert fake_system.commands[:3] == [
        ["opkg", "list"],
        ["opkg", "update"],
        ["opkg", "install", "ffmpeg"],
    ]


def test_package_missing_from_feed_is_fatal(fake_system: FakeSystem) -> None:
    fake_system.installed = {"opkg"}
    fake_system.feed = "ffmpeg-dev - 6.1 - headers\n"

    with pytest.raises(ToolUnavailableException, match="not available in the feed"):
        _checker().ensure()
    assert ["opkg", "install", "ffmpeg"] not in fake_system.commands


def test_failed_install_is_fatal(fake_system: FakeSystem) -> None:
    fake_system.installed = {"opkg"}
    fake_system.install_rc = 255

    with pytest.raises(ToolUnavailableException, match="failed to install"):
        _checker().ensure()


def test_install_that_leaves_no_executable_is_fatal(fake_system: FakeSystem) -> None:
    fake_system.installed = {"opkg"}
    fake_system.installs = False

    with pytest.raises(ToolUnavailableException, match="still not on PATH"):
        _checker().ensure()


def test_missing_package_manager_is_fatal(fake_system: FakeSystem) -> None:
    fake_system.installed = set()

    with pytest.raises(ToolUnavailableException, match="package manager 'opkg'"):
        _checker().ensure()
    assert fake_system.commands == []


def test_configured_directory_takes_priority(tmp_path: Path, fake_system: FakeSystem) -> None:
    fake_system.installed = {"ffmpeg"}
    executable = tmp_path / DependencyChecker().executable_name
    executable.write_text("#!/bin/sh\n")

    checker = DependencyChecker("ffmpeg", module_path=tmp_path)

    assert checker.find_executable() == str(executable)


def test_configured_directory_without_binary_falls_back_to_path(tmp_path: Path, fake_system: FakeSystem) -> None:
    fake_system.installed = {"ffmpeg"}

    checker = DependencyChecker("ffmpeg", module_path=tmp_path)

    assert checker.find_executable() == "/usr/bin/ffmpeg"
