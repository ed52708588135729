#===============================================================================
#  BrowserPort | intake.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Incoming-URL intake. URLs can arrive from startup args, a second instance
#  or an OS open-url event, possibly before the picker window exists. They
#  are held in a single pending slot (last write wins) until the window
#  reports it is ready.
#
#  All inputs are posted to a queue and applied by one consumer
#  (process_pending), so state is only ever touched from one thread.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER_URL = "https://github.com/electron/electron"


class IntakeState(str, Enum):
    IDLE = "idle"            # nothing pending, surface not ready
    BUFFERED = "buffered"    # URL pending, surface not ready
    READY = "ready"          # surface ready, slot empty


class EventKind(str, Enum):
    URL_ARRIVED = "url_arrived"
    SURFACE_READY = "surface_ready"
    SURFACE_TORN_DOWN = "surface_torn_down"


@dataclass(frozen=True)
class IntakeEvent:
    kind: EventKind
    url: Optional[str] = None
    source: str = ""


class UrlIntake:
    """Single-slot buffer between URL sources and the picker window.

    forward: called with each URL handed to the surface.
    wake:    called after every post, so the host can schedule
             process_pending() on the consumer thread.
    """

    def __init__(
        self,
        forward: Callable[[str], None],
        dev_mode: bool = False,
        placeholder_url: str = DEFAULT_PLACEHOLDER_URL,
        wake: Optional[Callable[[], None]] = None,
    ):
        self._forward = forward
        self._wake = wake
        self.dev_mode = dev_mode
        self.placeholder_url = placeholder_url

        self._events: "queue.Queue[IntakeEvent]" = queue.Queue()
        self._pending: Optional[str] = None
        self._ready = False

    # ----------------------------
    # Producers (any thread)
    # ----------------------------
    def url_arrived(self, url: str, source: str = "") -> None:
        self._post(IntakeEvent(EventKind.URL_ARRIVED, url=url, source=source))

    def surface_became_ready(self) -> None:
        self._post(IntakeEvent(EventKind.SURFACE_READY))

    def surface_became_not_ready(self) -> None:
        self._post(IntakeEvent(EventKind.SURFACE_TORN_DOWN))

    def _post(self, event: IntakeEvent) -> None:
        self._events.put(event)
        if self._wake is not None:
            self._wake()

    # ----------------------------
    # Consumer (one thread)
    # ----------------------------
    def process_pending(self) -> int:
        """Apply every queued event in arrival order. Returns how many were applied."""
        applied = 0
        while True:
            try:
                event = self._events.get_nowait()
            except queue.Empty:
                return applied
            self._apply(event)
            applied += 1

    def _apply(self, event: IntakeEvent) -> None:
        if event.kind is EventKind.URL_ARRIVED:
            if self._ready:
                self._deliver(event.url)
            else:
                if self._pending is not None:
                    logger.debug("Replacing pending URL")
                self._pending = event.url
                logger.debug("Buffered URL from %s", event.source or "unknown source")

        elif event.kind is EventKind.SURFACE_READY:
            was_ready, self._ready = self._ready, True
            if self._pending is not None:
                url, self._pending = self._pending, None
                self._deliver(url)
            elif self.dev_mode and not was_ready:
                self._deliver(self.placeholder_url, keep_on_failure=False)

        elif event.kind is EventKind.SURFACE_TORN_DOWN:
            self._ready = False

    def _deliver(self, url: Optional[str], keep_on_failure: bool = True) -> None:
        """Hand *url* to the surface. A surface that fails to take it counts as
        not ready, and the URL goes back into the slot for the next ready signal."""
        if url is None:
            return
        try:
            self._forward(url)
        except Exception:
            logger.exception("Forwarding URL to the picker failed; holding it until the picker is ready again")
            self._ready = False
            if keep_on_failure:
                self._pending = url

    # ----------------------------
    # Introspection
    # ----------------------------
    @property
    def state(self) -> IntakeState:
        if self._ready:
            return IntakeState.READY
        return IntakeState.BUFFERED if self._pending is not None else IntakeState.IDLE

    @property
    def pending_url(self) -> Optional[str]:
        return self._pending

    @property
    def surface_ready(self) -> bool:
        return self._ready
