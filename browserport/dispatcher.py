#===============================================================================
#  BrowserPort | dispatcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Starts the chosen browser with a URL. Fire-and-forget: the child process is
#  detached and never waited on.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .directory import BrowserDirectory
from .errors import BrowserNotFoundError, SpawnFailedError
from .models import BrowserDescriptor, LaunchErrorKind, LaunchRequest, LaunchResult

logger = logging.getLogger(__name__)

PopenFactory = Callable[..., Any]

# Not defined on non-Windows builds of subprocess.
DETACHED_PROCESS = 0x00000008
CREATE_NEW_PROCESS_GROUP = 0x00000200


def _app_bundle(executable: str) -> Optional[str]:
    """'/Applications/X.app/Contents/MacOS/x' -> '/Applications/X.app'."""
    for parent in Path(executable).parents:
        if parent.suffix == ".app":
            return str(parent)
    return None


def command_for(descriptor: BrowserDescriptor, url: str, platform: Optional[str] = None) -> List[str]:
    """argv used to open *url* in *descriptor*. The URL is always one argument, untouched."""
    platform = platform or sys.platform
    if platform == "darwin":
        bundle = _app_bundle(descriptor.executable_path)
        if bundle:
            return ["open", "-a", bundle, url]
    return [descriptor.executable_path, url]


def popen_kwargs(platform: Optional[str] = None) -> Dict[str, Any]:
    platform = platform or sys.platform
    kwargs: Dict[str, Any] = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
        "close_fds": True,
    }
    if platform.startswith("win"):
        kwargs["creationflags"] = DETACHED_PROCESS | CREATE_NEW_PROCESS_GROUP
    else:
        kwargs["start_new_session"] = True
    return kwargs


class LaunchDispatcher:
    def __init__(
        self,
        directory: BrowserDirectory,
        popen: PopenFactory = subprocess.Popen,
        platform: Optional[str] = None,
    ):
        self.directory = directory
        self._popen = popen
        self._platform = platform or sys.platform

    def launch(self, browser_id: str, url: str) -> LaunchResult:
        """Open *url* in the browser with *browser_id*. Errors come back as a LaunchResult."""
        try:
            self._spawn(LaunchRequest(browser_id=browser_id, url=url))
        except BrowserNotFoundError as e:
            logger.warning("%s", e)
            return LaunchResult.failed(LaunchErrorKind.BROWSER_NOT_FOUND, str(e))
        except SpawnFailedError as e:
            logger.error("%s", e)
            return LaunchResult.failed(LaunchErrorKind.SPAWN_FAILED, str(e))
        return LaunchResult.ok()

    def _spawn(self, request: LaunchRequest) -> None:
        descriptor = self.directory.get(request.browser_id)
        if descriptor is None:
            raise BrowserNotFoundError(request.browser_id)

        cmd = command_for(descriptor, request.url, self._platform)
        try:
            self._popen(cmd, **popen_kwargs(self._platform))
        except (OSError, ValueError) as e:
            # ValueError: argv the OS cannot represent (e.g. an embedded NUL).
            raise SpawnFailedError(descriptor.executable_path, e) from e
        logger.info("Launched %s (%s)", descriptor.id, cmd[0])
