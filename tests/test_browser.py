import webbrowser

import pytest

from core.errors import BrowserLaunchError
from modules.browser import BrowserLauncher

URL = "http://127.0.0.1:8080/thegui"


def test_open_passes_url(monkeypatch):
    calls = []
    monkeypatch.setattr(webbrowser, "open", lambda url, new=0: calls.append((url, new)) or True)
    assert BrowserLauncher().open(URL) is True
    assert calls == [(URL, 2)]


def test_failure_is_fatal_when_required(monkeypatch):
    monkeypatch.setattr(webbrowser, "open", lambda url, new=0: False)
    with pytest.raises(BrowserLaunchError):
        BrowserLauncher(required=True).open(URL)


def test_browser_error_is_fatal_when_required(monkeypatch):
    def broken(url, new=0):
        raise webbrowser.Error("could not locate runnable browser")

    monkeypatch.setattr(webbrowser, "open", broken)
    with pytest.raises(BrowserLaunchError, match="runnable browser"):
        BrowserLauncher().open(URL)


def test_failure_is_a_warning_when_optional(monkeypatch):
    monkeypatch.setattr(webbrowser, "open", lambda url, new=0: False)
    assert BrowserLauncher(required=False).open(URL) is False
