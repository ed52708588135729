"""Test doubles shared across the suite."""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests

from browserport.directory import BrowserDirectory
from browserport.models import BrowserDescriptor


def make_browser(id: str, path: Optional[str] = None, name: Optional[str] = None) -> BrowserDescriptor:
    return BrowserDescriptor(
        id=id,
        display_name=name or id.title(),
        executable_path=path or f"/path/to/{id}",
    )


def scanned_directory(*browsers: BrowserDescriptor) -> BrowserDirectory:
    directory = BrowserDirectory(prober=lambda: list(browsers))
    directory.scan()
    return directory


class FakePopen:
    """Records spawn calls instead of starting processes."""

    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.calls: List[Tuple[List[str], Dict[str, Any]]] = []
        self._lock = threading.Lock()

    def __call__(self, cmd: Sequence[str], **kwargs: Any) -> "FakePopen":
        with self._lock:
            self.calls.append((list(cmd), kwargs))
        if self.error is not None:
            raise self.error
        return self


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None) -> None:
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.requested: List[str] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response
