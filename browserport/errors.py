#===============================================================================
#  BrowserPort | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Exception types. Launch errors are converted to LaunchResult at the
#  dispatcher boundary; none of these is meant to reach the event loop.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class BrowserPortError(RuntimeError):
    """Base class for all BrowserPort errors."""


class BrowserNotFoundError(BrowserPortError):
    def __init__(self, browser_id: str):
        super().__init__(f"Browser not found: {browser_id!r}")
        self.browser_id = browser_id


class SpawnFailedError(BrowserPortError):
    def __init__(self, executable: str, cause: Exception):
        reason = getattr(cause, "strerror", None) or cause
        super().__init__(f"Failed to start {executable}: {reason}")
        self.executable = executable
        self.cause = cause


class ConfigError(BrowserPortError):
    pass


class UpdateCheckError(BrowserPortError):
    pass
