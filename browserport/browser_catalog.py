#===============================================================================
#  BrowserPort | browser_catalog.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Known browsers and where each platform installs them. Probing is a pure
#  existence check: nothing is executed while looking for browsers.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from .models import BrowserDescriptor

logger = logging.getLogger(__name__)

WhichFn = Callable[[str], Optional[str]]
RegistryFn = Callable[[str], Optional[str]]

# Roots that Windows installers use, in probe order.
WINDOWS_PROGRAM_ROOTS = ("PROGRAMFILES", "PROGRAMFILES(X86)", "LOCALAPPDATA")


@dataclass(frozen=True)
class CatalogEntry:
    """Where one browser identity lives on each platform."""
    id: str
    display_name: str
    mac_apps: Tuple[Tuple[str, str], ...] = ()          # (bundle name, executable inside Contents/MacOS)
    windows_paths: Tuple[str, ...] = ()                 # relative to WINDOWS_PROGRAM_ROOTS
    windows_extra: Tuple[Tuple[str, str], ...] = ()     # (env var root, relative path)
    windows_app_path: Optional[str] = None              # exe name under the "App Paths" registry key
    linux_commands: Tuple[str, ...] = ()                # resolved on PATH
    linux_paths: Tuple[str, ...] = ()                   # absolute or "~/" relative
    icon_name: Optional[str] = None                     # freedesktop icon name


def _flatpak(app_id: str) -> Tuple[str, str]:
    return (
        f"/var/lib/flatpak/exports/bin/{app_id}",
        f"~/.local/share/flatpak/exports/bin/{app_id}",
    )


# Order is the default ranking in the picker.
CATALOG: Tuple[CatalogEntry, ...] = (
    CatalogEntry(
        id="chrome",
        display_name="Google Chrome",
        mac_apps=(("Google Chrome", "Google Chrome"),),
        windows_paths=("Google/Chrome/Application/chrome.exe",),
        windows_app_path="chrome.exe",
        linux_commands=("google-chrome", "google-chrome-stable"),
        linux_paths=_flatpak("com.google.Chrome"),
        icon_name="google-chrome",
    ),
    CatalogEntry(
        id="firefox",
        display_name="Firefox",
        mac_apps=(("Firefox", "firefox"),),
        windows_paths=("Mozilla Firefox/firefox.exe",),
        windows_app_path="firefox.exe",
        linux_commands=("firefox",),
        linux_paths=("/snap/bin/firefox",) + _flatpak("org.mozilla.firefox"),
        icon_name="firefox",
    ),
    CatalogEntry(
        id="safari",
        display_name="Safari",
        mac_apps=(("Safari", "Safari"),),
    ),
    CatalogEntry(
        id="edge",
        display_name="Microsoft Edge",
        mac_apps=(("Microsoft Edge", "Microsoft Edge"),),
        windows_paths=("Microsoft/Edge/Application/msedge.exe",),
        windows_app_path="msedge.exe",
        linux_commands=("microsoft-edge", "microsoft-edge-stable"),
        linux_paths=_flatpak("com.microsoft.Edge"),
        icon_name="microsoft-edge",
    ),
    CatalogEntry(
        id="brave",
        display_name="Brave",
        mac_apps=(("Brave Browser", "Brave Browser"),),
        windows_paths=("BraveSoftware/Brave-Browser/Application/brave.exe",),
        windows_app_path="brave.exe",
        linux_commands=("brave-browser", "brave"),
        linux_paths=("/snap/bin/brave",) + _flatpak("com.brave.Browser"),
        icon_name="brave-browser",
    ),
    CatalogEntry(
        id="chromium",
        display_name="Chromium",
        mac_apps=(("Chromium", "Chromium"),),
        windows_paths=("Chromium/Application/chrome.exe",),
        linux_commands=("chromium", "chromium-browser"),
        linux_paths=("/snap/bin/chromium",) + _flatpak("org.chromium.Chromium"),
        icon_name="chromium",
    ),
    CatalogEntry(
        id="tor",
        display_name="Tor Browser",
        mac_apps=(("Tor Browser", "firefox"),),
        windows_extra=(
            ("USERPROFILE", "Desktop/Tor Browser/Browser/firefox.exe"),
            ("LOCALAPPDATA", "Tor Browser/Browser/firefox.exe"),
        ),
        linux_commands=("torbrowser-launcher",),
        linux_paths=(
            "~/.local/share/torbrowser/tbb/x86_64/tor-browser/Browser/start-tor-browser",
            "~/tor-browser/Browser/start-tor-browser",
        ) + _flatpak("org.torproject.torbrowser-launcher"),
        icon_name="torbrowser",
    ),
    CatalogEntry(
        id="opera",
        display_name="Opera",
        mac_apps=(("Opera", "Opera"),),
        windows_extra=(("LOCALAPPDATA", "Programs/Opera/launcher.exe"),),
        windows_app_path="opera.exe",
        linux_commands=("opera",),
        linux_paths=("/snap/bin/opera",),
        icon_name="opera",
    ),
    CatalogEntry(
        id="vivaldi",
        display_name="Vivaldi",
        mac_apps=(("Vivaldi", "Vivaldi"),),
        windows_paths=("Vivaldi/Application/vivaldi.exe",),
        windows_app_path="vivaldi.exe",
        linux_commands=("vivaldi", "vivaldi-stable"),
        icon_name="vivaldi",
    ),
    CatalogEntry(
        id="firefox-developer",
        display_name="Firefox Developer Edition",
        mac_apps=(("Firefox Developer Edition", "firefox"),),
        windows_paths=("Firefox Developer Edition/firefox.exe",),
        linux_commands=("firefox-developer-edition",),
        icon_name="firefox-developer-edition",
    ),
    CatalogEntry(
        id="librewolf",
        display_name="LibreWolf",
        mac_apps=(("LibreWolf", "librewolf"),),
        windows_paths=("LibreWolf/librewolf.exe",),
        windows_app_path="librewolf.exe",
        linux_commands=("librewolf",),
        linux_paths=_flatpak("io.gitlab.librewolf-community"),
        icon_name="librewolf",
    ),
    CatalogEntry(
        id="arc",
        display_name="Arc",
        mac_apps=(("Arc", "Arc"),),
    ),
)


def is_executable(path: Path) -> bool:
    if not path.exists() or path.is_dir():
        return False
    if os.access(path, os.X_OK):
        return True
    return path.suffix.lower() in (".exe", ".bat", ".cmd")


def read_windows_app_path(exe_name: str) -> Optional[str]:
    """Default value of ...\\CurrentVersion\\App Paths\\<exe_name>, HKCU before HKLM."""
    import winreg  # Windows only

    key_path = rf"SOFTWARE\Microsoft\Windows\CurrentVersion\App Paths\{exe_name}"
    for hive in (winreg.HKEY_CURRENT_USER, winreg.HKEY_LOCAL_MACHINE):
        try:
            with winreg.OpenKey(hive, key_path) as key:
                value, _ = winreg.QueryValueEx(key, "")
        except OSError:
            continue
        if value:
            return str(value)
    return None


def _expand(raw: str, home: Path) -> Path:
    if raw.startswith("~/"):
        return home / raw[2:]
    return Path(raw)


def _mac_candidates(entry: CatalogEntry, home: Path) -> Iterator[Tuple[Path, Optional[str]]]:
    for root in (Path("/Applications"), home / "Applications"):
        for bundle, exe in entry.mac_apps:
            app = root / f"{bundle}.app"
            yield app / "Contents" / "MacOS" / exe, str(app)


def _windows_candidates(
    entry: CatalogEntry,
    environ: Mapping[str, str],
    registry: Optional[RegistryFn],
) -> Iterator[Tuple[Path, Optional[str]]]:
    for root_key in WINDOWS_PROGRAM_ROOTS:
        root = environ.get(root_key)
        if not root:
            continue
        for suffix in entry.windows_paths:
            p = Path(root) / suffix
            yield p, str(p)

    for root_key, suffix in entry.windows_extra:
        root = environ.get(root_key)
        if root:
            p = Path(root) / suffix
            yield p, str(p)

    if entry.windows_app_path and registry is not None:
        try:
            value = registry(entry.windows_app_path)
        except (OSError, ValueError) as e:
            logger.debug("App Paths lookup failed for %s: %s", entry.windows_app_path, e)
            value = None
        if value:
            p = Path(value.strip().strip('"'))
            yield p, str(p)


def _linux_candidates(entry: CatalogEntry, home: Path, which: WhichFn) -> Iterator[Tuple[Path, Optional[str]]]:
    for command in entry.linux_commands:
        resolved = which(command)
        if resolved:
            yield Path(resolved), entry.icon_name
    for raw in entry.linux_paths:
        yield _expand(raw, home), entry.icon_name


def _candidates_for(
    entry: CatalogEntry,
    platform: str,
    home: Path,
    environ: Mapping[str, str],
    which: WhichFn,
    registry: Optional[RegistryFn],
) -> Iterable[Tuple[Path, Optional[str]]]:
    if platform == "darwin":
        return _mac_candidates(entry, home)
    if platform.startswith("win"):
        return _windows_candidates(entry, environ, registry)
    return _linux_candidates(entry, home, which)


def probe_entry(
    entry: CatalogEntry,
    platform: str,
    home: Path,
    environ: Mapping[str, str],
    which: WhichFn,
    registry: Optional[RegistryFn],
) -> Optional[BrowserDescriptor]:
    """First existing candidate for *entry*, or None."""
    candidates = iter(_candidates_for(entry, platform, home, environ, which, registry))
    while True:
        try:
            path, icon_hint = next(candidates)
            found = is_executable(path)
        except StopIteration:
            return None
        except (OSError, ValueError) as e:
            # One unreadable candidate; keep looking.
            logger.debug("Probe failed for %s: %s", entry.id, e)
            continue
        if found:
            return BrowserDescriptor(
                id=entry.id,
                display_name=entry.display_name,
                executable_path=str(path),
                icon_hint=icon_hint,
            )


def probe_browsers(
    platform: Optional[str] = None,
    home: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    which: WhichFn = shutil.which,
    registry: Optional[RegistryFn] = None,
    catalog: Sequence[CatalogEntry] = CATALOG,
) -> List[BrowserDescriptor]:
    """Walk the catalog in order and return every browser found on this host."""
    platform = platform or sys.platform
    home = home if home is not None else Path.home()
    environ = environ if environ is not None else os.environ
    if registry is None and platform.startswith("win") and sys.platform.startswith("win"):
        registry = read_windows_app_path

    found: List[BrowserDescriptor] = []
    for entry in catalog:
        descriptor = probe_entry(entry, platform, home, environ, which, registry)
        if descriptor:
            logger.debug("Found %s at %s", descriptor.id, descriptor.executable_path)
            found.append(descriptor)
    return found


def custom_descriptors(extra: Iterable[Mapping[str, str]]) -> List[BrowserDescriptor]:
    """User-defined browsers from config ({id, name, path}); missing executables are skipped."""
    out: List[BrowserDescriptor] = []
    for item in extra:
        browser_id = str(item.get("id", "")).strip().lower()
        path = str(item.get("path", "")).strip()
        if not browser_id or not path:
            logger.warning("Ignoring custom browser without id/path: %r", dict(item))
            continue
        p = Path(path).expanduser()
        try:
            if not is_executable(p):
                logger.info("Custom browser %s not found at %s", browser_id, p)
                continue
        except OSError as e:
            logger.debug("Probe failed for custom browser %s: %s", browser_id, e)
            continue
        out.append(
            BrowserDescriptor(
                id=browser_id,
                display_name=str(item.get("name") or browser_id),
                executable_path=str(p),
                icon_hint=str(p),
            )
        )
    return out
