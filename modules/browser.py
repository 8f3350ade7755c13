#!/usr/bin/env python3
"""Open the GUI page in the user's default browser."""

from __future__ import annotations

import logging
import webbrowser

from core.errors import BrowserLaunchError

logger = logging.getLogger("standalone_gui.browser")


class BrowserLauncher:
    """Starts a browser tab for the GUI.

    With ``required`` set, a failed launch raises `BrowserLaunchError`;
    otherwise it is logged and the GUI keeps serving.
    """

    def __init__(self, *, required: bool = True, new: int = 2) -> None:
        self.required = required
        self.new = new

    def open(self, url: str) -> bool:
        try:
            opened = webbrowser.open(url, new=self.new)
        except webbrowser.Error as exc:
            return self._failed(url, str(exc))
        if not opened:
            return self._failed(url, "no runnable browser found")
        logger.info({"evt": "browser_opened", "url": url})
        return True

    def _failed(self, url: str, reason: str) -> bool:
        if self.required:
            raise BrowserLaunchError(f"could not open {url}: {reason}")
        logger.warning({"evt": "browser_open_failed", "url": url, "reason": reason})
        return False


__all__ = ["BrowserLauncher"]
