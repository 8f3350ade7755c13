#!/usr/bin/env python3
"""Flask application routing asset requests and the GUI page."""

from __future__ import annotations

import io
import logging
import mimetypes

from flask import Flask, Response, jsonify, request

from core.config import PAGE_ROUTE
from core.core import ASSET_NAMESPACE, Core
from core.errors import AssetNotFound, RenderError

logger = logging.getLogger("standalone_gui.web")


def _plain(message: str, status: int) -> Response:
    return Response(message + "\n", status=status, mimetype="text/plain")


def create_app(core: Core) -> Flask:
    """Build the WSGI app around an already-initialised ``core``."""
    app = Flask(__name__, static_folder=None)

    @app.route('/files/<path:filename>')
    def send_asset(filename):
        path = ASSET_NAMESPACE + filename
        data = core.get_asset(path)
        mimetype = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        resp = Response(data, mimetype=mimetype)
        resp.set_etag(core.assets.etag(path))
        resp.last_modified = core.assets.loaded_at
        return resp.make_conditional(request, accept_ranges=True, complete_length=len(data))

    @app.route(PAGE_ROUTE)
    def the_gui():
        # Render into a per-request buffer so a failure can still become a 500.
        buffer = io.StringIO()
        core.render_page(buffer)
        logger.debug({"evt": "page_rendered", "bytes": buffer.tell()})
        return Response(buffer.getvalue(), mimetype="text/html")

    @app.route('/health')
    def health():
        return jsonify({"status": "ok", "template": core.template.path})

    @app.errorhandler(AssetNotFound)
    def asset_not_found(exc):
        logger.info({"evt": "asset_not_found", "path": exc.path})
        return _plain("404 page not found", 404)

    @app.errorhandler(RenderError)
    def render_failed(exc):
        logger.error({"evt": "render_error", "path": request.path, "error": str(exc)})
        return _plain(str(exc), 500)

    return app


__all__ = ["create_app"]
