#===============================================================================
#  BrowserPort | update_check.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  "Is there a newer release?" check against GitHub releases. Downloading and
#  installing updates is left to the user.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

import requests

from .errors import UpdateCheckError
from .models import UpdateInfo

logger = logging.getLogger(__name__)

# NOTE:
# - This module only does GitHub I/O and version math.
# - UI concerns (message boxes) live in the tray/controller layer.


def _version_parts(v: str) -> List[int]:
    parts = []
    for piece in v.strip().lstrip("vV").split("."):
        m = re.match(r"\d+", piece)
        parts.append(int(m.group(0)) if m else 0)
    return parts


def compare_versions(v1: str, v2: str) -> int:
    """1 if v1 > v2, -1 if v1 < v2, 0 if equal. Missing parts count as 0."""
    a, b = _version_parts(v1), _version_parts(v2)
    for i in range(max(len(a), len(b))):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        if x > y:
            return 1
        if x < y:
            return -1
    return 0


def fetch_latest_release(repo: str, session: Optional[Any] = None) -> Dict[str, Any]:
    """GET /repos/<owner>/<repo>/releases/latest and return the JSON body."""
    api = f"https://api.github.com/repos/{repo}/releases/latest"
    http = session or requests
    try:
        r = http.get(api, timeout=20, headers={"Accept": "application/vnd.github+json"})
        r.raise_for_status()
        data = r.json()
    except requests.exceptions.HTTPError as e:
        raise UpdateCheckError(f"HTTP error: {e}") from e
    except requests.exceptions.RequestException as e:
        raise UpdateCheckError(f"Network error: {e}") from e
    except ValueError as e:
        raise UpdateCheckError(f"Invalid response from {api}: {e}") from e
    if not isinstance(data, dict) or not data.get("tag_name"):
        raise UpdateCheckError(f"No release information at {api}")
    return data


def check_for_update(current_version: str, repo: str, session: Optional[Any] = None) -> Optional[UpdateInfo]:
    """UpdateInfo for the latest release if it is newer than *current_version*, else None."""
    data = fetch_latest_release(repo, session=session)
    latest = str(data["tag_name"])
    if compare_versions(latest, current_version) <= 0:
        logger.info("Up to date (v%s, latest %s)", current_version, latest)
        return None
    logger.info("Update available: %s", latest)
    return UpdateInfo(
        version=latest.lstrip("vV"),
        release_name=data.get("name") or "",
        release_url=data.get("html_url") or "",
        release_notes=data.get("body") or "",
    )


def describe_update(info: UpdateInfo) -> str:
    """One-line summary for the tray message and update dialog."""
    name = info.release_name.strip()
    if name and info.version not in name:
        return f"Version {info.version} ({name}) is available."
    if name:
        return f"{name} is available."
    return f"Version {info.version} is available."
