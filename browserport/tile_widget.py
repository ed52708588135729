#===============================================================================
#  BrowserPort | tile_widget.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Metro-style browser tiles for the picker grid, plus icon lookup.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import hashlib
from pathlib import Path

from PySide6.QtCore import Qt, QFileInfo, QSize
from PySide6.QtGui import QFont, QIcon
from PySide6.QtWidgets import QApplication, QFileIconProvider, QFrame, QLabel, QStyle, QVBoxLayout

from .constants import METRO_TILE_COLORS
from .models import BrowserDescriptor


def tile_color_for(browser_id: str) -> str:
    h = hashlib.sha1(browser_id.encode("utf-8")).hexdigest()
    return METRO_TILE_COLORS[int(h[:2], 16) % len(METRO_TILE_COLORS)]


def icon_for(browser: BrowserDescriptor) -> QIcon:
    """Bundle/exe icon if the hint is a path, theme icon if it is a name."""
    hint = browser.icon_hint
    if hint and Path(hint).exists():
        icon = QFileIconProvider().icon(QFileInfo(hint))
        if not icon.isNull():
            return icon
    elif hint:
        icon = QIcon.fromTheme(hint)
        if not icon.isNull():
            return icon
    return QApplication.style().standardIcon(QStyle.SP_ComputerIcon)


class BrowserTile(QFrame):
    """One browser in the picker: icon, name and its 1-9 shortcut."""

    def __init__(self, browser: BrowserDescriptor, index: int, size: QSize, parent=None):
        super().__init__(parent)
        self.browser = browser
        self.setObjectName("BrowserTile")
        self.setFixedSize(size)
        self._color = tile_color_for(browser.id)
        self.set_selected(False)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)

        icon_label = QLabel()
        icon_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        icon_label.setFixedHeight(36)
        icon_label.setPixmap(icon_for(browser).pixmap(28, 28))
        layout.addWidget(icon_label)

        layout.addStretch(1)

        title = QLabel(browser.display_name)
        title.setAlignment(Qt.AlignLeft | Qt.AlignBottom)
        f = QFont("Segoe UI", 11)
        f.setBold(True)
        title.setFont(f)
        title.setStyleSheet("color: white;")
        title.setWordWrap(True)
        layout.addWidget(title)

        hotkey = QLabel(f"Press {index + 1}" if index < 9 else "")
        hotkey.setFont(QFont("Segoe UI", 9))
        hotkey.setStyleSheet("color: rgba(255,255,255,0.85);")
        hotkey.setVisible(index < 9)
        layout.addWidget(hotkey)

    def set_selected(self, selected: bool):
        border = "3px solid white" if selected else "3px solid transparent"
        self.setStyleSheet(f"QFrame#BrowserTile {{ background: {self._color}; border: {border}; }}")
