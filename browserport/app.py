#===============================================================================
#  BrowserPort | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Wires directory, dispatcher and intake to the Qt shell (picker window,
#  tray, single-instance relay, OS open-url events) and parses the command
#  line.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import sys
import threading
from pathlib import Path
from typing import List, Optional, Sequence

from PySide6.QtCore import QEvent, QObject, Qt, QTimer, Signal
from PySide6.QtWidgets import QApplication, QSystemTrayIcon

from .browser_catalog import custom_descriptors, probe_browsers
from .config import AppConfig, config_path, ensure_config_file, load_config, user_data_dir
from .constants import APP_TITLE, APP_VERSION, SINGLE_INSTANCE_KEY
from .directory import BrowserDirectory
from .dispatcher import LaunchDispatcher
from .errors import UpdateCheckError
from .intake import UrlIntake
from .logging_setup import setup_logging
from .picker_window import PickerWindow
from .protocol_handler import register_as_default_handler
from .single_instance import SingleInstance
from .tray import TrayIcon
from .update_check import check_for_update
from .url_args import find_url_in_args, looks_like_url

logger = logging.getLogger(__name__)


def build_directory(config: AppConfig) -> BrowserDirectory:
    def prober():
        return list(probe_browsers()) + custom_descriptors(config.extra_browsers)

    return BrowserDirectory(prober=prober, excluded_ids=config.excluded_browsers)


class IntakePump(QObject):
    """Runs UrlIntake.process_pending on the GUI thread whenever something is posted."""

    wake = Signal()


class OpenUrlFilter(QObject):
    """Turns QFileOpenEvent (macOS 'open location') into intake URLs."""

    def __init__(self, intake: UrlIntake, parent=None):
        super().__init__(parent)
        self.intake = intake

    def eventFilter(self, obj, event):
        if event.type() == QEvent.Type.FileOpen:
            url = event.url().toString() or event.file()
            if url and looks_like_url(url):
                self.intake.url_arrived(url, source="open-url")
                return True
        return super().eventFilter(obj, event)


class BrowserPortApp:
    def __init__(self, qt_app: QApplication, config: AppConfig, instance: SingleInstance, config_file: Path):
        self.qt_app = qt_app
        self.config = config
        self.config_file = config_file
        self.instance = instance

        self.directory = build_directory(config)
        self.dispatcher = LaunchDispatcher(self.directory)

        self.pump = IntakePump()
        self.intake = UrlIntake(
            forward=self._show_url,
            dev_mode=config.dev_mode,
            placeholder_url=config.placeholder_url,
            wake=self.pump.wake.emit,
        )
        self.pump.wake.connect(self.intake.process_pending, Qt.QueuedConnection)

        self.tray: Optional[TrayIcon] = None
        self.window: Optional[PickerWindow] = None

        self.open_url_filter = OpenUrlFilter(self.intake)
        self.qt_app.installEventFilter(self.open_url_filter)
        self.instance.message_received.connect(self._on_second_instance)

    def start(self, argv: Sequence[str]) -> None:
        self.directory.scan_in_background()

        url = find_url_in_args(argv[1:])
        if url:
            self.intake.url_arrived(url, source="argv")

        self._create_tray()
        self.ensure_window()

        if self.config.update_check_on_start and getattr(sys, "frozen", False):
            QTimer.singleShot(self.config.update_check_delay_ms, self._start_background_update_check)

    # ----------------------------
    # Surface lifecycle
    # ----------------------------
    def ensure_window(self) -> PickerWindow:
        if self.window is None:
            w = PickerWindow(self.directory, self.dispatcher, keep_alive=self.tray is not None)
            w.setAttribute(Qt.WA_DeleteOnClose, True)
            w.ready.connect(self.intake.surface_became_ready)
            w.destroyed.connect(self._on_window_destroyed)
            self.window = w
        return self.window

    def _on_window_destroyed(self, *_):
        self.window = None
        self.intake.surface_became_not_ready()

    def _show_url(self, url: str) -> None:
        if self.window is None:
            # Torn down after the forward was decided; buffer it again.
            self.intake.url_arrived(url, source="requeue")
            return
        self.window.show_url(url)

    # ----------------------------
    # URL sources
    # ----------------------------
    def _on_second_instance(self, argv: List[str]):
        url = find_url_in_args(argv[1:])
        if url:
            self.ensure_window()
            self.intake.url_arrived(url, source="second-instance")
        elif self.window is not None and self.window.isVisible():
            self.window.raise_()
            self.window.activateWindow()

    # ----------------------------
    # Tray + updates
    # ----------------------------
    def _create_tray(self):
        if not QSystemTrayIcon.isSystemTrayAvailable():
            logger.warning("No system tray; the app quits when the picker closes")
            self.qt_app.setQuitOnLastWindowClosed(True)
            return
        self.tray = TrayIcon(self.config.update_repo, self.config_file)
        self.tray.show()
        self.qt_app.setQuitOnLastWindowClosed(False)

    def _start_background_update_check(self):
        threading.Thread(target=self._background_update_check, name="update-check", daemon=True).start()

    def _background_update_check(self):
        try:
            info = check_for_update(APP_VERSION, self.config.update_repo)
        except UpdateCheckError as e:
            logger.warning("Update check failed: %s", e)
            return
        if info is not None and self.tray is not None:
            self.tray.update_found.emit(info)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="browserport", description=f"{APP_TITLE}: choose a browser for every link")
    p.add_argument("--dev", action="store_true", help="show a placeholder URL when started without one")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    p.add_argument("--config", type=Path, default=None, help="path to browserport_config.json")
    p.add_argument("--register", action="store_true", help="register as the http/https handler and exit")
    p.add_argument("--list-browsers", action="store_true", help="print detected browsers and exit")
    return p


def _self_command() -> List[str]:
    if getattr(sys, "frozen", False):
        return [sys.executable]
    return [sys.executable, "-m", "browserport"]


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    args, _rest = build_parser().parse_known_args(argv[1:])

    data_dir = user_data_dir()
    config_file = args.config or config_path(data_dir)
    config = load_config(config_file)
    ensure_config_file(config_file, config)
    if args.dev:
        config.dev_mode = True
    if args.log_level:
        config.log_level = args.log_level.upper()
    setup_logging(config.log_level, data_dir / "logs")

    if args.register:
        return 0 if register_as_default_handler(_self_command()) else 1

    if args.list_browsers:
        directory = build_directory(config)
        directory.scan()
        for b in directory.list():
            print(f"{b.id:20} {b.display_name:28} {b.executable_path}")
        if not directory.list():
            print("No browsers found.")
        return 0

    qt_app = QApplication(argv)
    qt_app.setApplicationName(APP_TITLE)
    qt_app.setApplicationVersion(APP_VERSION)

    instance = SingleInstance(SINGLE_INSTANCE_KEY)
    if instance.try_relay(argv):
        return 0
    instance.listen()

    app = BrowserPortApp(qt_app, config, instance, config_file)
    app.start(argv)
    logger.info("%s v%s started (dev_mode=%s)", APP_TITLE, APP_VERSION, config.dev_mode)
    try:
        return qt_app.exec()
    finally:
        instance.close()
