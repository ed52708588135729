#===============================================================================
#  BrowserPort | single_instance.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  One BrowserPort per user session. A second launch hands its command line
#  to the running instance over a local socket and exits.
#
#  Wire format: one JSON array of strings per line (UTF-8).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from typing import Dict, List, Sequence

from PySide6.QtCore import QObject, Signal
from PySide6.QtNetwork import QLocalServer, QLocalSocket

logger = logging.getLogger(__name__)


def encode_argv(argv: Sequence[str]) -> bytes:
    return json.dumps([str(a) for a in argv]).encode("utf-8") + b"\n"


def decode_argv(line: bytes) -> List[str]:
    data = json.loads(line.decode("utf-8"))
    if not isinstance(data, list) or not all(isinstance(a, str) for a in data):
        raise ValueError("expected a JSON array of strings")
    return data


class SingleInstance(QObject):
    """Local-socket server for the first instance, client for later ones."""

    message_received = Signal(list)

    def __init__(self, key: str, parent=None):
        super().__init__(parent)
        self.key = key
        self._server = None
        self._buffers: Dict[int, bytearray] = {}

    def try_relay(self, argv: Sequence[str], timeout_ms: int = 500) -> bool:
        """Send *argv* to a running instance. True if one received it."""
        sock = QLocalSocket()
        sock.connectToServer(self.key)
        if not sock.waitForConnected(timeout_ms):
            return False
        sock.write(encode_argv(argv))
        sock.flush()
        sock.waitForBytesWritten(timeout_ms)
        sock.disconnectFromServer()
        logger.info("Handed command line to the running instance")
        return True

    def listen(self) -> bool:
        server = QLocalServer(self)
        if not server.listen(self.key):
            # Left over from a crashed instance (Unix domain socket file).
            QLocalServer.removeServer(self.key)
            if not server.listen(self.key):
                logger.warning("Single-instance server unavailable: %s", server.errorString())
                return False
        server.newConnection.connect(self._on_new_connection)
        self._server = server
        return True

    def close(self) -> None:
        if self._server is not None:
            self._server.close()
            self._server = None

    def _on_new_connection(self):
        while self._server is not None and self._server.hasPendingConnections():
            sock = self._server.nextPendingConnection()
            self._buffers[id(sock)] = bytearray()
            sock.readyRead.connect(lambda s=sock: self._read(s))
            sock.disconnected.connect(lambda s=sock: self._drop(s))

    def _read(self, sock: QLocalSocket):
        buf = self._buffers.setdefault(id(sock), bytearray())
        buf += bytes(sock.readAll().data())
        while b"\n" in buf:
            line, _, rest = bytes(buf).partition(b"\n")
            buf[:] = rest
            try:
                argv = decode_argv(line)
            except ValueError as e:
                logger.warning("Ignoring malformed second-instance message: %s", e)
                continue
            self.message_received.emit(argv)

    def _drop(self, sock: QLocalSocket):
        self._read(sock)
        self._buffers.pop(id(sock), None)
        sock.deleteLater()
