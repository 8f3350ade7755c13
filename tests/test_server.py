import socket
import urllib.request

import pytest

from core.errors import ListenerError
from web.server import GuiServer


def test_serves_page_after_ready(app):
    server = GuiServer(app, "127.0.0.1", 0)
    server.start()
    try:
        assert server.wait_ready(5)
        with urllib.request.urlopen(f"http://127.0.0.1:{server.port}/thegui", timeout=5) as resp:
            assert resp.status == 200
            assert b"Golang Standalone GUI Example" in resp.read()
    finally:
        server.shutdown()


def test_not_ready_before_start(app):
    server = GuiServer(app, "127.0.0.1", 0)
    try:
        assert not server.wait_ready(0.05)
    finally:
        server.shutdown()


def test_double_start_rejected(app):
    server = GuiServer(app, "127.0.0.1", 0)
    server.start()
    try:
        with pytest.raises(RuntimeError):
            server.start()
    finally:
        server.shutdown()


def test_port_in_use_is_listener_error(app):
    busy = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    busy.bind(("127.0.0.1", 0))
    busy.listen(1)
    try:
        with pytest.raises(ListenerError):
            GuiServer(app, "127.0.0.1", busy.getsockname()[1])
    finally:
        busy.close()
