#!/usr/bin/env python3
"""Background HTTP listener for the GUI app."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server

from core.errors import ListenerError

logger = logging.getLogger("standalone_gui.server")


class GuiServer:
    """Threaded WSGI server bound at construction time.

    Binding happens in ``__init__`` so a busy port fails before any thread
    starts. ``start`` runs ``serve_forever`` on a background thread and
    signals readiness just before entering the loop.
    """

    def __init__(self, app: Flask, host: str = "127.0.0.1", port: int = 8080) -> None:
        try:
            self._server: BaseWSGIServer = make_server(host, port, app, threaded=True)
        except (OSError, SystemExit) as exc:
            # werkzeug prints the bind error and calls sys.exit(1) itself.
            raise ListenerError(f"could not listen on {host}:{port}: {exc}") from exc
        self.host = host
        self._ready = threading.Event()
        self._thread: Optional[threading.Thread] = None
        logger.info({"evt": "listener_bound", "host": host, "port": self.port})

    @property
    def port(self) -> int:
        return self._server.server_port

    def _serve(self) -> None:
        self._ready.set()
        self._server.serve_forever()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("listener already started")
        self._thread = threading.Thread(target=self._serve, name="gui-listener", daemon=True)
        self._thread.start()

    def wait_ready(self, timeout: Optional[float] = None) -> bool:
        ready = self._ready.wait(timeout)
        if ready:
            logger.info({"evt": "listener_ready", "port": self.port})
        return ready

    def shutdown(self) -> None:
        if self._thread is not None:
            self._server.shutdown()
            self._thread.join()
            self._thread = None
        self._server.server_close()
        logger.info({"evt": "listener_stopped", "port": self.port})


__all__ = ["GuiServer"]
