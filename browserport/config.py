#===============================================================================
#  BrowserPort | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Load/save of browserport_config.json (dev mode, logging, update check,
#  excluded and extra browsers). Missing keys fall back to defaults.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import APP_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_UPDATE_REPO
from .errors import ConfigError
from .intake import DEFAULT_PLACEHOLDER_URL

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    dev_mode: bool = False
    log_level: str = "INFO"
    placeholder_url: str = DEFAULT_PLACEHOLDER_URL
    update_repo: str = DEFAULT_UPDATE_REPO
    update_check_on_start: bool = True
    update_check_delay_ms: int = 3000
    excluded_browsers: List[str] = field(default_factory=list)  # ids never shown
    extra_browsers: List[Dict[str, str]] = field(default_factory=list)  # {id, name, path}


def default_config() -> Dict[str, Any]:
    return asdict(AppConfig())


def user_data_dir(platform: Optional[str] = None, home: Optional[Path] = None) -> Path:
    """Per-user folder for config and logs."""
    platform = platform or sys.platform
    home = home if home is not None else Path.home()
    if platform.startswith("win"):
        root = os.environ.get("APPDATA")
        return (Path(root) if root else home / "AppData" / "Roaming") / APP_DIR_NAME
    if platform == "darwin":
        return home / "Library" / "Application Support" / APP_DIR_NAME
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return (Path(xdg) if xdg else home / ".config") / APP_DIR_NAME.lower()


def config_path(base_dir: Path) -> Path:
    return base_dir / CONFIG_FILE_NAME


def config_from_dict(data: Dict[str, Any]) -> AppConfig:
    """Build an AppConfig, ignoring unknown keys. Raises ConfigError on wrong types."""
    d = default_config()
    known = {f.name for f in fields(AppConfig)}
    for k, v in data.items():
        if k in known:
            d[k] = v

    if not isinstance(d["excluded_browsers"], list) or not isinstance(d["extra_browsers"], list):
        raise ConfigError("excluded_browsers and extra_browsers must be lists")
    try:
        d["update_check_delay_ms"] = int(d["update_check_delay_ms"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"update_check_delay_ms must be an integer: {e}") from e
    d["dev_mode"] = bool(d["dev_mode"])
    d["update_check_on_start"] = bool(d["update_check_on_start"])
    d["log_level"] = str(d["log_level"]).upper()
    return AppConfig(**d)


def load_config(path: Path) -> AppConfig:
    """Load config from disk (or defaults). A broken file is logged and ignored."""
    if not path.exists():
        return AppConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ConfigError("top-level value must be an object")
        return config_from_dict(data)
    except (OSError, ValueError, ConfigError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return AppConfig()


def save_config(path: Path, config: AppConfig) -> None:
    """Persist config to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(config), indent=2), encoding="utf-8")


def ensure_config_file(path: Path, config: AppConfig) -> bool:
    """Write *config* to *path* if nothing is there yet, so users have a file to edit.

    Returns True if a file was written. An unwritable location is logged, not raised.
    """
    if path.exists():
        return False
    try:
        save_config(path, config)
    except OSError as e:
        logger.warning("Could not create config %s: %s", path, e)
        return False
    logger.info("Wrote default config to %s", path)
    return True
