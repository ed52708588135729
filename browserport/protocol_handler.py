#===============================================================================
#  BrowserPort | protocol_handler.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Registers BrowserPort as the http/https handler so the OS sends links
#  here. macOS declares this in the bundle's Info.plist instead.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .constants import APP_TITLE

logger = logging.getLogger(__name__)

DESKTOP_FILE_NAME = "browserport.desktop"
SCHEMES = ("http", "https")
WINDOWS_PROG_ID = "BrowserPortURL"

Runner = Callable[[List[str]], None]


def _run_checked(cmd: List[str]) -> None:
    subprocess.run(cmd, check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


def desktop_entry(command: Sequence[str]) -> str:
    exec_line = " ".join(shlex.quote(c) for c in command)
    mime = "".join(f"x-scheme-handler/{s};" for s in SCHEMES)
    return (
        "[Desktop Entry]\n"
        "Type=Application\n"
        f"Name={APP_TITLE}\n"
        "Comment=Choose a browser for every link\n"
        f"Exec={exec_line} %u\n"
        "Terminal=false\n"
        "NoDisplay=false\n"
        "Categories=Network;WebBrowser;\n"
        f"MimeType={mime}\n"
    )


def register_linux(command: Sequence[str], home: Optional[Path] = None, run: Runner = _run_checked) -> Path:
    """Write the .desktop file and make it the default for http/https."""
    home = home if home is not None else Path.home()
    apps_dir = home / ".local" / "share" / "applications"
    apps_dir.mkdir(parents=True, exist_ok=True)
    desktop_file = apps_dir / DESKTOP_FILE_NAME
    desktop_file.write_text(desktop_entry(command), encoding="utf-8")

    for scheme in SCHEMES:
        run(["xdg-mime", "default", DESKTOP_FILE_NAME, f"x-scheme-handler/{scheme}"])
    return desktop_file


def register_windows(command: Sequence[str]) -> None:
    """Per-user registration under HKCU (no admin rights needed)."""
    import winreg  # Windows only

    open_cmd = subprocess.list2cmdline(list(command)) + ' "%1"'
    classes = r"Software\Classes"
    cap_path = rf"Software\{APP_TITLE}\Capabilities"

    with winreg.CreateKey(winreg.HKEY_CURRENT_USER, rf"{classes}\{WINDOWS_PROG_ID}") as k:
        winreg.SetValueEx(k, "", 0, winreg.REG_SZ, f"{APP_TITLE} URL")
    with winreg.CreateKey(winreg.HKEY_CURRENT_USER, rf"{classes}\{WINDOWS_PROG_ID}\shell\open\command") as k:
        winreg.SetValueEx(k, "", 0, winreg.REG_SZ, open_cmd)
    with winreg.CreateKey(winreg.HKEY_CURRENT_USER, cap_path) as k:
        winreg.SetValueEx(k, "ApplicationName", 0, winreg.REG_SZ, APP_TITLE)
        winreg.SetValueEx(k, "ApplicationDescription", 0, winreg.REG_SZ, "Choose a browser for every link")
    with winreg.CreateKey(winreg.HKEY_CURRENT_USER, rf"{cap_path}\URLAssociations") as k:
        for scheme in SCHEMES:
            winreg.SetValueEx(k, scheme, 0, winreg.REG_SZ, WINDOWS_PROG_ID)
    with winreg.CreateKey(winreg.HKEY_CURRENT_USER, r"Software\RegisteredApplications") as k:
        winreg.SetValueEx(k, APP_TITLE, 0, winreg.REG_SZ, cap_path)


def register_as_default_handler(command: Sequence[str], platform: Optional[str] = None) -> bool:
    """Register *command* (argv that starts BrowserPort) for http/https. False if unsupported."""
    platform = platform or sys.platform
    try:
        if platform.startswith("win"):
            register_windows(command)
            logger.info("Registered as URL handler (Windows, HKCU). Pick BrowserPort in Default Apps to finish.")
            return True
        if platform == "darwin":
            logger.info("On macOS the URL handler is declared by the app bundle; nothing to do")
            return False
        path = register_linux(command)
        logger.info("Registered as URL handler via %s", path)
        return True
    except (OSError, subprocess.CalledProcessError) as e:
        logger.error("URL handler registration failed: %s", e)
        return False
