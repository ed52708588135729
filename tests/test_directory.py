"""Tests for BrowserDirectory scanning and snapshots."""

import threading

from browserport.directory import BrowserDirectory, dedupe_by_id

from tests.fakes import make_browser


class TestBrowserDirectoryScan:
    def test_list_is_empty_before_scan(self) -> None:
        directory = BrowserDirectory(prober=lambda: [make_browser("chrome")])

        assert directory.list() == ()
        assert directory.is_scanned is False

    def test_scan_keeps_discovery_order(self) -> None:
        browsers = [make_browser("firefox"), make_browser("chrome"), make_browser("brave")]
        directory = BrowserDirectory(prober=lambda: browsers)

        directory.scan()

        assert [b.id for b in directory.list()] == ["firefox", "chrome", "brave"]
        assert directory.is_scanned is True

    def test_duplicate_ids_first_found_wins(self) -> None:
        first = make_browser("chrome", path="/opt/google/chrome/chrome")
        second = make_browser("chrome", path="/usr/bin/google-chrome")
        directory = BrowserDirectory(prober=lambda: [first, make_browser("firefox"), second])

        directory.scan()

        ids = [b.id for b in directory.list()]
        assert ids == ["chrome", "firefox"]
        assert directory.get("chrome") == first

    def test_excluded_ids_are_dropped(self) -> None:
        directory = BrowserDirectory(
            prober=lambda: [make_browser("chrome"), make_browser("edge")],
            excluded_ids=["EDGE "],
        )

        directory.scan()

        assert [b.id for b in directory.list()] == ["chrome"]

    def test_failed_scan_leaves_directory_empty(self) -> None:
        def broken_prober():
            raise RuntimeError("registry exploded")

        directory = BrowserDirectory(prober=broken_prober)

        directory.scan()  # must not raise

        assert directory.list() == ()
        assert directory.is_scanned is True

    def test_zero_browsers_is_a_valid_result(self) -> None:
        directory = BrowserDirectory(prober=lambda: [])

        directory.scan()

        assert directory.list() == ()
        assert directory.get("chrome") is None

    def test_scan_runs_prober_once(self) -> None:
        calls = []

        def prober():
            calls.append(1)
            return [make_browser("chrome")]

        directory = BrowserDirectory(prober=prober)
        directory.scan()
        directory.scan()

        assert len(calls) == 1

    def test_background_scan_does_not_block_readers(self) -> None:
        release = threading.Event()

        def slow_prober():
            release.wait(5)
            return [make_browser("chrome"), make_browser("firefox")]

        directory = BrowserDirectory(prober=slow_prober)
        thread = directory.scan_in_background()

        # Scan still running: readers see the empty snapshot, never a partial one.
        assert directory.list() == ()

        release.set()
        assert directory.wait(5)
        thread.join(5)
        assert [b.id for b in directory.list()] == ["chrome", "firefox"]


def test_dedupe_by_id_preserves_first_occurrence() -> None:
    result = dedupe_by_id([make_browser("a"), make_browser("b"), make_browser("a", path="/other")])

    assert [(b.id, b.executable_path) for b in result] == [("a", "/path/to/a"), ("b", "/path/to/b")]
