#!/usr/bin/env python3
"""Project entry point. Loads the assets, starts the web server and opens the GUI."""

from __future__ import annotations

import logging
import signal
import threading
from typing import Optional

from core import AssetStore, Core, Settings
from core.errors import BrowserLaunchError, ListenerError, TemplateLoadError
from modules.browser import BrowserLauncher
from web.app import create_app
from web.server import GuiServer

logger = logging.getLogger("standalone_gui")


def configure_logging(log_level: str) -> None:
    level = getattr(logging, log_level, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(message)s',
    )


def build_core(settings: Settings) -> Core:
    """Populate the asset store and parse the page template."""
    store = AssetStore.from_directory(settings.asset_dir)
    return Core.from_store(store, expose_templates=settings.expose_templates)


def _install_signal_handlers(stop: threading.Event) -> None:
    def _handle(signum, _frame):
        logger.info({"evt": "signal", "signum": signum})
        stop.set()

    signal.signal(signal.SIGINT, _handle)
    signal.signal(signal.SIGTERM, _handle)


def _abort(stage: str, exc: BaseException) -> SystemExit:
    logger.error({"evt": "startup_failed", "stage": stage, "error": str(exc)})
    return SystemExit(1)


def run(settings: Settings, stop_event: Optional[threading.Event] = None) -> None:
    """Start the GUI and block until ``stop_event`` is set.

    Without ``stop_event`` the process waits for SIGINT/SIGTERM. Start-up
    failures exit with status 1; the template is parsed before anything binds.
    """
    try:
        core = build_core(settings)
    except (TemplateLoadError, FileNotFoundError) as exc:
        raise _abort("template", exc) from exc

    try:
        server = GuiServer(create_app(core), settings.host, settings.port)
    except ListenerError as exc:
        raise _abort("listen", exc) from exc

    server.start()
    try:
        if not server.wait_ready(settings.ready_timeout):
            raise _abort("listen", ListenerError(f"listener not ready after {settings.ready_timeout}s"))

        url = settings.page_url(server.port)
        if settings.open_browser:
            try:
                BrowserLauncher(required=settings.browser_required).open(url)
            except BrowserLaunchError as exc:
                raise _abort("browser", exc) from exc
        logger.info({"evt": "gui_available", "url": url})

        stop = stop_event
        if stop is None:
            stop = threading.Event()
            _install_signal_handlers(stop)
        while not stop.wait(0.5):
            pass
    finally:
        server.shutdown()
    logger.info({"evt": "finished"})


def main() -> None:
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        configure_logging("INFO")
        raise _abort("config", exc) from exc
    configure_logging(settings.log_level)
    logger.info({"evt": "startup", "component": "gui", "log_level": settings.log_level})
    run(settings)


if __name__ == "__main__":
    main()
