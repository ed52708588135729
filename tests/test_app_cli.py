"""Tests for the command line entry point (no GUI started)."""

import json
import logging
from pathlib import Path
from typing import Iterator, List

import pytest

from browserport import app as app_module
from browserport.config import AppConfig

from tests.fakes import make_browser


@pytest.fixture
def isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    root = logging.getLogger()
    saved = list(root.handlers)
    monkeypatch.setattr(app_module, "user_data_dir", lambda: tmp_path)
    yield tmp_path
    for h in list(root.handlers):
        if h not in saved:
            root.removeHandler(h)
            h.close()


def test_parser_leaves_urls_for_intake() -> None:
    args, rest = app_module.build_parser().parse_known_args(["--dev", "https://x.test"])

    assert args.dev is True
    assert rest == ["https://x.test"]


def test_list_browsers_prints_directory(
    isolated: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    monkeypatch.setattr(
        app_module,
        "probe_browsers",
        lambda: [make_browser("chrome", name="Google Chrome"), make_browser("edge")],
    )
    (isolated / "browserport_config.json").write_text('{"excluded_browsers": ["edge"]}', encoding="utf-8")

    code = app_module.main(["browserport", "--list-browsers"])

    out = capsys.readouterr().out
    assert code == 0
    assert "chrome" in out and "Google Chrome" in out
    assert "edge" not in out


def test_list_browsers_with_none_found(
    isolated: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    monkeypatch.setattr(app_module, "probe_browsers", lambda: [])

    assert app_module.main(["browserport", "--list-browsers"]) == 0
    assert "No browsers found." in capsys.readouterr().out


def test_register_uses_handler_result(isolated: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: List[List[str]] = []

    def fake_register(command):
        seen.append(list(command))
        return False

    monkeypatch.setattr(app_module, "register_as_default_handler", fake_register)

    assert app_module.main(["browserport", "--register"]) == 1
    assert seen and seen[0][-2:] == ["-m", "browserport"]


def test_build_directory_appends_extra_browsers(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    exe = tmp_path / "mybrowser"
    exe.write_text("#!/bin/sh\n", encoding="utf-8")
    exe.chmod(0o755)
    monkeypatch.setattr(app_module, "probe_browsers", lambda: [make_browser("chrome")])
    config = AppConfig(extra_browsers=[{"id": "mine", "name": "Mine", "path": str(exe)}])

    directory = app_module.build_directory(config)
    directory.scan()

    assert [b.id for b in directory.list()] == ["chrome", "mine"]


def test_first_run_writes_editable_config(isolated: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app_module, "probe_browsers", lambda: [])

    app_module.main(["browserport", "--list-browsers"])

    written = json.loads((isolated / "browserport_config.json").read_text(encoding="utf-8"))
    assert written["dev_mode"] is False
    assert written["excluded_browsers"] == []


def test_cli_flags_do_not_leak_into_written_config(isolated: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app_module, "probe_browsers", lambda: [])

    app_module.main(["browserport", "--dev", "--list-browsers"])

    written = json.loads((isolated / "browserport_config.json").read_text(encoding="utf-8"))
    assert written["dev_mode"] is False
