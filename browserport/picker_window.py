#===============================================================================
#  BrowserPort | picker_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  The picker: a frameless, always-on-top window showing the incoming URL
#  and one tile per installed browser.
#    - Arrows move, Enter launches, 1-9 launch the nth browser
#    - Escape dismisses
#    - Hides itself after a successful launch, shows the error otherwise
#===============================================================================

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from .constants import APP_TITLE, METRO_BG, PICKER_SIZE
from .directory import BrowserDirectory
from .dispatcher import LaunchDispatcher
from .ui_widgets import BrowserGrid

logger = logging.getLogger(__name__)


class PickerWindow(QWidget):
    ready = Signal()

    def __init__(self, directory: BrowserDirectory, dispatcher: LaunchDispatcher, keep_alive: bool = True):
        super().__init__()
        self.directory = directory
        self.dispatcher = dispatcher
        self.keep_alive = keep_alive  # hide instead of close (tray keeps the app running)
        self.url: Optional[str] = None

        self.setWindowTitle(APP_TITLE)
        self.setWindowFlags(Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint | Qt.Tool)
        self.setFixedSize(PICKER_SIZE)

        self.setStyleSheet(f"""
        QWidget {{ background: {METRO_BG}; }}
        QLabel {{ color: white; font-family: "Segoe UI"; }}
        QLabel#StatusLabel {{ color: #FFB900; }}
        QPushButton {{
            font-family: "Segoe UI";
            color: white;
            background: #1a1a1a;
            border: 1px solid #2a2a2a;
            padding: 4px 10px;
        }}
        QPushButton:hover {{ background: #222; }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)

        header = QHBoxLayout()
        self.url_label = QLabel("")
        self.url_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        header.addWidget(self.url_label, 1)

        self.btn_close = QPushButton("Esc")
        self.btn_close.clicked.connect(self.dismiss)
        header.addWidget(self.btn_close)
        layout.addLayout(header)

        self.grid = BrowserGrid()
        self.grid.itemActivated.connect(lambda item: self.launch_browser(item.data(Qt.UserRole)))
        layout.addWidget(self.grid, 1)

        self.status_label = QLabel("")
        self.status_label.setObjectName("StatusLabel")
        self.status_label.setWordWrap(True)
        self.status_label.setVisible(False)
        layout.addWidget(self.status_label)

        hint = QLabel("↑↓←→ select   Enter open   1-9 quick pick   Esc cancel")
        hint.setStyleSheet("color: rgba(255,255,255,0.55);")
        layout.addWidget(hint)

        # Emitted once the event loop is running, i.e. the window can be shown.
        QTimer.singleShot(0, self.ready.emit)

    # ----------------------------
    # Surface API
    # ----------------------------
    def show_url(self, url: str):
        self.url = url
        self.url_label.setText(self.url_label.fontMetrics().elidedText(url, Qt.ElideMiddle, PICKER_SIZE.width() - 100))
        self.url_label.setToolTip(url)
        self.rebuild()
        self.show()
        self.raise_()
        self.activateWindow()
        self.grid.setFocus()

    def rebuild(self):
        browsers = self.directory.list()
        self.grid.set_browsers(browsers)
        if browsers:
            self._set_status("")
        elif self.directory.is_scanned:
            self._set_status("No browsers found.")
        else:
            self._set_status("Looking for browsers…")

    def launch_browser(self, browser_id: Optional[str]):
        if not browser_id or not self.url:
            return
        result = self.dispatcher.launch(browser_id, self.url)
        if result.success:
            self.dismiss()
        else:
            self._set_status(result.error or "Launch failed.")

    def dismiss(self):
        if self.keep_alive:
            self.hide()
        else:
            self.close()

    # ----------------------------
    # Qt events
    # ----------------------------
    def keyPressEvent(self, event):
        key = event.key()
        if key == Qt.Key_Escape:
            self.dismiss()
            return
        if key in (Qt.Key_Return, Qt.Key_Enter):
            self.launch_browser(self.grid.current_browser_id())
            return
        if Qt.Key_1 <= key <= Qt.Key_9:
            self.launch_browser(self.grid.browser_id_at(key - Qt.Key_1))
            return
        super().keyPressEvent(event)

    def closeEvent(self, event):
        if self.keep_alive:
            event.ignore()
            self.hide()
            return
        super().closeEvent(event)

    def _set_status(self, text: str):
        self.status_label.setText(text)
        self.status_label.setVisible(bool(text))
