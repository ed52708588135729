#===============================================================================
#  BrowserPort | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for names, picker sizing and theme.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import QSize

APP_TITLE = "BrowserPort"
APP_VERSION = "1.0.0"
APP_DIR_NAME = "BrowserPort"
CONFIG_FILE_NAME = "browserport_config.json"
LOG_FILE_NAME = "browserport.log"
SINGLE_INSTANCE_KEY = "browserport-single-instance"
DEFAULT_UPDATE_REPO = "jcyrus/browserport"

# --- Metro / Windows Phone style theme ---
METRO_BG = "#101010"

METRO_TILE_COLORS = [
    "#0078D7",  # blue
    "#00B294",  # teal
    "#E81123",  # red
    "#FFB900",  # yellow
    "#8764B8",  # purple
    "#2D7D9A",  # steel
    "#107C10",  # green
    "#5C2D91",  # deep purple
]

PICKER_SIZE = QSize(600, 400)
TILE_SIZE = QSize(150, 110)
ICON_SIZE = QSize(48, 48)
