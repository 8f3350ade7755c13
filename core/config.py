"""Launcher settings, read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

BUNDLED_ASSET_DIR = Path(__file__).resolve().parent.parent / "web" / "files"
PAGE_ROUTE = "/thegui"

_TRUE_VALUES = ("1", "true", "on", "yes")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")
_WILDCARD_HOSTS = ("", "0.0.0.0", "::")


def _flag(env: Mapping[str, str], name: str, default: str) -> bool:
    return env.get(name, default).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8080
    asset_dir: Path = BUNDLED_ASSET_DIR
    open_browser: bool = True
    browser_required: bool = True
    expose_templates: bool = False
    ready_timeout: float = 5.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Malformed numbers raise ``ValueError``.
        """
        env = os.environ if environ is None else environ
        log_level = env.get("LOG_LEVEL", "INFO").strip().upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"unknown LOG_LEVEL {log_level!r}")
        return cls(
            host=env.get("GUI_HOST", "127.0.0.1").strip(),
            port=int(env.get("GUI_PORT", "8080")),
            asset_dir=Path(env.get("GUI_ASSET_DIR", str(BUNDLED_ASSET_DIR))),
            open_browser=_flag(env, "GUI_OPEN_BROWSER", "1"),
            browser_required=_flag(env, "GUI_BROWSER_REQUIRED", "1"),
            expose_templates=_flag(env, "GUI_EXPOSE_TEMPLATES", "0"),
            ready_timeout=float(env.get("GUI_READY_TIMEOUT", "5.0")),
            log_level=log_level,
        )

    def page_url(self, port: Optional[int] = None) -> str:
        """URL the browser is pointed at; wildcard binds are reached via loopback."""
        host = "127.0.0.1" if self.host in _WILDCARD_HOSTS else self.host
        if ":" in host:
            host = f"[{host}]"
        return f"http://{host}:{port if port is not None else self.port}{PAGE_ROUTE}"


__all__ = ["BUNDLED_ASSET_DIR", "PAGE_ROUTE", "Settings"]
