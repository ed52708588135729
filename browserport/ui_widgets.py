#===============================================================================
#  BrowserPort | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Browser grid used by the picker window.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QListWidget, QListWidgetItem

from .constants import ICON_SIZE, TILE_SIZE
from .models import BrowserDescriptor
from .tile_widget import BrowserTile


class BrowserGrid(QListWidget):
    """Fixed-order tile grid. Order is discovery order; no drag/drop."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setViewMode(QListWidget.IconMode)
        self.setMovement(QListWidget.Static)
        self.setResizeMode(QListWidget.Adjust)
        self.setUniformItemSizes(True)
        self.setIconSize(ICON_SIZE)
        self.setGridSize(TILE_SIZE)
        self.setSpacing(10)
        self.setSelectionMode(QListWidget.SingleSelection)
        self.setFrameShape(QListWidget.NoFrame)
        self.currentRowChanged.connect(self._highlight)

    def set_browsers(self, browsers: Sequence[BrowserDescriptor]):
        self.clear()
        for i, browser in enumerate(browsers):
            item = QListWidgetItem()
            item.setData(Qt.UserRole, browser.id)
            item.setSizeHint(TILE_SIZE)
            self.addItem(item)
            self.setItemWidget(item, BrowserTile(browser, i, TILE_SIZE))
        if browsers:
            self.setCurrentRow(0)

    def browser_id_at(self, row: int) -> Optional[str]:
        item = self.item(row)
        return item.data(Qt.UserRole) if item is not None else None

    def current_browser_id(self) -> Optional[str]:
        return self.browser_id_at(self.currentRow())

    def _highlight(self, row: int):
        for i in range(self.count()):
            tile = self.itemWidget(self.item(i))
            if isinstance(tile, BrowserTile):
                tile.set_selected(i == row)
