"""Tests for LaunchDispatcher: lookup, argv per platform, failure results."""

import subprocess

from browserport.dispatcher import (
    CREATE_NEW_PROCESS_GROUP,
    DETACHED_PROCESS,
    LaunchDispatcher,
    command_for,
)
from browserport.directory import BrowserDirectory
from browserport.models import LaunchErrorKind

from tests.fakes import FakePopen, make_browser, scanned_directory


class TestChromeOnlyHost:
    """Directory holds only Chrome at /path/to/chrome."""

    def setup_method(self) -> None:
        self.directory = scanned_directory(make_browser("chrome", path="/path/to/chrome"))
        self.popen = FakePopen()
        self.dispatcher = LaunchDispatcher(self.directory, popen=self.popen, platform="linux")

    def test_directory_lists_exactly_chrome(self) -> None:
        browsers = self.directory.list()

        assert len(browsers) == 1
        assert browsers[0].id == "chrome"

    def test_unknown_browser_is_not_found_and_spawns_nothing(self) -> None:
        result = self.dispatcher.launch("firefox", "https://x.test")

        assert result.success is False
        assert result.error_kind == LaunchErrorKind.BROWSER_NOT_FOUND
        assert "firefox" in (result.error or "")
        assert self.popen.calls == []

    def test_known_browser_spawns_one_process_with_url(self) -> None:
        result = self.dispatcher.launch("chrome", "https://x.test")

        assert result.success is True
        assert result.error is None
        assert len(self.popen.calls) == 1
        cmd, kwargs = self.popen.calls[0]
        assert cmd == ["/path/to/chrome", "https://x.test"]
        assert kwargs["start_new_session"] is True
        assert kwargs["stdout"] is subprocess.DEVNULL

    def test_id_match_is_exact(self) -> None:
        result = self.dispatcher.launch("Chrome", "https://x.test")

        assert result.error_kind == LaunchErrorKind.BROWSER_NOT_FOUND
        assert self.popen.calls == []

    def test_repeated_launches_each_spawn(self) -> None:
        self.dispatcher.launch("chrome", "https://x.test")
        self.dispatcher.launch("chrome", "https://x.test")

        assert len(self.popen.calls) == 2


def test_url_is_passed_verbatim() -> None:
    url = 'https://x.test/a b?q="quoted"&x=%20;rm -rf /'
    popen = FakePopen()
    dispatcher = LaunchDispatcher(scanned_directory(make_browser("firefox")), popen=popen, platform="linux")

    dispatcher.launch("firefox", url)

    cmd, _ = popen.calls[0]
    assert cmd[-1] == url
    assert len(cmd) == 2


def test_spawn_failure_is_reported_not_raised() -> None:
    popen = FakePopen(error=FileNotFoundError(2, "No such file or directory"))
    dispatcher = LaunchDispatcher(scanned_directory(make_browser("chrome")), popen=popen, platform="linux")

    result = dispatcher.launch("chrome", "https://x.test")

    assert result.success is False
    assert result.error_kind == LaunchErrorKind.SPAWN_FAILED
    assert "/path/to/chrome" in (result.error or "")
    assert "No such file or directory" in (result.error or "")
    assert len(popen.calls) == 1  # no retry


def test_unrepresentable_url_is_reported_not_raised() -> None:
    popen = FakePopen(error=ValueError("embedded null byte"))
    dispatcher = LaunchDispatcher(scanned_directory(make_browser("chrome")), popen=popen, platform="linux")

    result = dispatcher.launch("chrome", "https://x.test/\x00y")

    assert result.success is False
    assert result.error_kind == LaunchErrorKind.SPAWN_FAILED
    assert "embedded null byte" in (result.error or "")


def test_launch_before_scan_finishes_is_not_found() -> None:
    popen = FakePopen()
    dispatcher = LaunchDispatcher(BrowserDirectory(prober=lambda: [make_browser("chrome")]), popen=popen)

    result = dispatcher.launch("chrome", "https://x.test")

    assert result.error_kind == LaunchErrorKind.BROWSER_NOT_FOUND
    assert popen.calls == []


def test_windows_launch_is_detached() -> None:
    exe = r"C:\Program Files\Google\Chrome\Application\chrome.exe"
    popen = FakePopen()
    dispatcher = LaunchDispatcher(scanned_directory(make_browser("chrome", path=exe)), popen=popen, platform="win32")

    dispatcher.launch("chrome", "https://x.test")

    cmd, kwargs = popen.calls[0]
    assert cmd == [exe, "https://x.test"]
    assert kwargs["creationflags"] == DETACHED_PROCESS | CREATE_NEW_PROCESS_GROUP
    assert "start_new_session" not in kwargs


class TestCommandFor:
    def test_macos_bundle_uses_open(self) -> None:
        browser = make_browser("safari", path="/Applications/Safari.app/Contents/MacOS/Safari")

        assert command_for(browser, "https://x.test", platform="darwin") == [
            "open",
            "-a",
            "/Applications/Safari.app",
            "https://x.test",
        ]

    def test_macos_plain_executable_runs_directly(self) -> None:
        browser = make_browser("custom", path="/usr/local/bin/custom-browser")

        assert command_for(browser, "https://x.test", platform="darwin") == [
            "/usr/local/bin/custom-browser",
            "https://x.test",
        ]
