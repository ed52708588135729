#===============================================================================
#  BrowserPort | directory.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  In-memory registry of installed browsers. Populated once by a background
#  scan at startup, read-only afterwards.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .browser_catalog import probe_browsers
from .models import BrowserDescriptor

logger = logging.getLogger(__name__)

Prober = Callable[[], Sequence[BrowserDescriptor]]


def dedupe_by_id(descriptors: Iterable[BrowserDescriptor]) -> List[BrowserDescriptor]:
    """Keep the first descriptor for each id, preserving order."""
    seen = set()
    out: List[BrowserDescriptor] = []
    for d in descriptors:
        if d.id in seen:
            continue
        seen.add(d.id)
        out.append(d)
    return out


class BrowserDirectory:
    """Ordered, deduplicated snapshot of the browsers on this host.

    Readers always get a whole tuple: either the empty pre-scan snapshot or
    the complete post-scan one. The scan builds its result privately and
    swaps it in with a single assignment.
    """

    def __init__(self, prober: Optional[Prober] = None, excluded_ids: Iterable[str] = ()):
        self._prober: Prober = prober or probe_browsers
        self._excluded = {i.strip().lower() for i in excluded_ids}
        self._browsers: Tuple[BrowserDescriptor, ...] = ()
        self._lock = threading.Lock()
        self._started = False
        self._done = threading.Event()

    @property
    def is_scanned(self) -> bool:
        return self._done.is_set()

    def scan(self) -> None:
        """Probe the host once. Never raises; a failed scan leaves the directory empty."""
        with self._lock:
            if self._started:
                return
            self._started = True

        try:
            found = dedupe_by_id(
                d for d in self._prober() if d.id not in self._excluded
            )
            with self._lock:
                self._browsers = tuple(found)
            if found:
                logger.info("Browser scan found %d: %s", len(found), ", ".join(d.id for d in found))
            else:
                logger.info("Browser scan found no browsers")
        except Exception:
            logger.exception("Browser scan failed; directory left empty")
        finally:
            self._done.set()

    def scan_in_background(self) -> threading.Thread:
        t = threading.Thread(target=self.scan, name="browser-scan", daemon=True)
        t.start()
        return t

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the scan has finished (or timed out). True if finished."""
        return self._done.wait(timeout)

    def list(self) -> Tuple[BrowserDescriptor, ...]:
        return self._browsers

    def get(self, browser_id: str) -> Optional[BrowserDescriptor]:
        for d in self._browsers:
            if d.id == browser_id:
                return d
        return None
