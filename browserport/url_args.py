#===============================================================================
#  BrowserPort | url_args.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Picks the URL out of a command line (ours or a relayed second instance).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Iterable, Optional


def looks_like_url(arg: str) -> bool:
    return arg.strip().lower().startswith(("http://", "https://"))


def find_url_in_args(args: Iterable[str]) -> Optional[str]:
    """First argument that looks like an http(s) URL; later ones are ignored."""
    for arg in args:
        if isinstance(arg, str) and looks_like_url(arg):
            return arg
    return None
