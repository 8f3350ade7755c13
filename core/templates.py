"""Parse the GUI page template once and render it against a view model."""

from __future__ import annotations

import dataclasses
import io
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Union

import jinja2

from .assets import AssetStore
from .errors import AssetNotFound, RenderError, TemplateLoadError
from .view_model import ViewModel

logger = logging.getLogger("standalone_gui.templates")

TEMPLATE_PATH = "files/templates/maingui.html"


class OutputSink(Protocol):
    """Anything with a text ``write`` method (response buffer, file, StringIO)."""

    def write(self, text: str) -> Any: ...


def _store_source(store: AssetStore) -> Callable[[str], Optional[str]]:
    def load(name: str) -> Optional[str]:
        try:
            data = store.get(name)
        except AssetNotFound:
            return None
        return data.decode("utf-8")

    return load


def _context_for(view_model: Union[ViewModel, Mapping[str, Any]]) -> Dict[str, Any]:
    if dataclasses.is_dataclass(view_model) and not isinstance(view_model, type):
        return dataclasses.asdict(view_model)
    return dict(view_model)


class PageTemplate:
    """A parsed, immutable page template, shared by every request."""

    def __init__(self, template: jinja2.Template, path: str) -> None:
        self._template = template
        self.path = path

    @classmethod
    def load(cls, store: AssetStore, path: str = TEMPLATE_PATH) -> "PageTemplate":
        """Read ``path`` from ``store`` and parse it.

        Raises `TemplateLoadError` when the document is absent, is not UTF-8
        or has a syntax error. Callers treat this as fatal.
        """
        env = jinja2.Environment(
            loader=jinja2.FunctionLoader(_store_source(store)),
            autoescape=True,
            undefined=jinja2.StrictUndefined,
        )
        try:
            template = env.get_template(path)
        except jinja2.TemplateNotFound as exc:
            raise TemplateLoadError(f"template {path!r} not found in asset store") from exc
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateLoadError(f"template {path!r} line {exc.lineno}: {exc.message}") from exc
        except UnicodeDecodeError as exc:
            raise TemplateLoadError(f"template {path!r} is not valid UTF-8") from exc
        logger.info({"evt": "template_parsed", "path": path})
        return cls(template, path)

    def render(self, view_model: Union[ViewModel, Mapping[str, Any]], sink: OutputSink) -> None:
        """Stream the rendered page into ``sink``.

        Output already written stays in the sink when a `RenderError` is raised.
        """
        context = _context_for(view_model)
        try:
            for chunk in self._template.generate(context):
                sink.write(chunk)
        except jinja2.TemplateError as exc:
            raise RenderError(f"rendering {self.path!r} failed: {exc}") from exc

    def render_to_string(self, view_model: Union[ViewModel, Mapping[str, Any]]) -> str:
        buffer = io.StringIO()
        self.render(view_model, buffer)
        return buffer.getvalue()


__all__ = ["OutputSink", "PageTemplate", "TEMPLATE_PATH"]
