#===============================================================================
#  BrowserPort | tray.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Tray icon: About, Check for Updates..., Quit.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt, QUrl, Signal
from PySide6.QtGui import QAction, QDesktopServices
from PySide6.QtWidgets import QApplication, QMenu, QMessageBox, QStyle, QSystemTrayIcon

from .config import AppConfig, ensure_config_file
from .constants import APP_TITLE, APP_VERSION
from .errors import UpdateCheckError
from .update_check import check_for_update, describe_update

logger = logging.getLogger(__name__)


class TrayIcon(QSystemTrayIcon):
    # Emitted from the background update check; delivered on the GUI thread.
    update_found = Signal(object)

    def __init__(self, update_repo: str, config_file: Path, parent=None):
        super().__init__(QApplication.style().standardIcon(QStyle.SP_DriveNetIcon), parent)
        self.update_repo = update_repo
        self.config_file = config_file
        self.setToolTip(APP_TITLE)

        menu = QMenu()
        act_about = QAction(f"About {APP_TITLE}", menu)
        act_about.triggered.connect(self.show_about)
        menu.addAction(act_about)
        menu.addSeparator()

        act_settings = QAction("Open Settings File...", menu)
        act_settings.triggered.connect(self.open_settings)
        menu.addAction(act_settings)

        act_update = QAction("Check for Updates...", menu)
        act_update.triggered.connect(self.check_updates_interactive)
        menu.addAction(act_update)
        menu.addSeparator()

        act_quit = QAction("Quit", menu)
        act_quit.triggered.connect(QApplication.quit)
        menu.addAction(act_quit)

        self._menu = menu
        self.setContextMenu(menu)
        self.update_found.connect(self._notify_update)

    def show_about(self):
        QMessageBox.about(
            None,
            f"About {APP_TITLE}",
            f"<b>{APP_TITLE}</b> v{APP_VERSION}<br><br>A cross-platform browser picker.",
        )

    def check_updates_interactive(self):
        QApplication.setOverrideCursor(Qt.WaitCursor)
        try:
            info = check_for_update(APP_VERSION, self.update_repo)
        except UpdateCheckError as e:
            QApplication.restoreOverrideCursor()
            QMessageBox.warning(None, "Update Error", f"Failed to check for updates\n\n{e}")
            return
        QApplication.restoreOverrideCursor()

        if info is None:
            QMessageBox.information(None, "No Updates", f"You're running the latest version (v{APP_VERSION})")
            return

        box = QMessageBox(QMessageBox.Information, "Update Available", describe_update(info))
        box.setInformativeText("Open the release page?")
        if info.release_notes:
            box.setDetailedText(info.release_notes)
        box.setStandardButtons(QMessageBox.Yes | QMessageBox.No)
        if box.exec() == QMessageBox.Yes and info.release_url:
            QDesktopServices.openUrl(QUrl(info.release_url))

    def open_settings(self):
        ensure_config_file(self.config_file, AppConfig())
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(str(self.config_file))):
            QMessageBox.information(None, "Settings", f"Settings file:\n{self.config_file}")

    def _notify_update(self, info):
        self.showMessage(APP_TITLE, f"{describe_update(info)} Use 'Check for Updates...' to get it.")
