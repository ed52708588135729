#===============================================================================
#  BrowserPort | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models: browser descriptors, launch requests/results, updates.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class BrowserDescriptor:
    """One installed browser, as found by a directory scan."""
    id: str                          # lowercase stable key, e.g. "chrome"
    display_name: str                # label shown on the tile
    executable_path: str             # absolute, OS-native
    icon_hint: Optional[str] = None  # .app bundle, .exe or freedesktop icon name


class LaunchErrorKind(str, Enum):
    BROWSER_NOT_FOUND = "browser_not_found"
    SPAWN_FAILED = "spawn_failed"


@dataclass(frozen=True)
class LaunchRequest:
    browser_id: str
    url: str


@dataclass(frozen=True)
class LaunchResult:
    success: bool
    error: Optional[str] = None
    error_kind: Optional[LaunchErrorKind] = None

    @classmethod
    def ok(cls) -> "LaunchResult":
        return cls(success=True)

    @classmethod
    def failed(cls, kind: LaunchErrorKind, message: str) -> "LaunchResult":
        return cls(success=False, error=message, error_kind=kind)


@dataclass(frozen=True)
class UpdateInfo:
    """A published release newer than the running version."""
    version: str
    release_name: str = ""
    release_url: str = ""
    release_notes: str = ""
