"""Central coordinator that owns the asset store and the page render pipeline."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .assets import AssetStore
from .errors import AssetNotFound
from .templates import OutputSink, PageTemplate
from .view_model import ViewModel, build_view_model

logger = logging.getLogger("standalone_gui.core")

ASSET_NAMESPACE = "files/"
TEMPLATE_NAMESPACE = "files/templates/"


class ViewModelBuilder(Protocol):
    """Zero-argument callable producing the state for one page render."""

    def __call__(self) -> ViewModel: ...


class Core:
    """Application kernel shared by every request thread.

    Everything it holds is read-only after construction.
    """

    def __init__(
        self,
        assets: AssetStore,
        template: PageTemplate,
        *,
        view_model_builder: Optional[ViewModelBuilder] = None,
        expose_templates: bool = False,
    ) -> None:
        self._assets = assets
        self._template = template
        self._build_view_model: ViewModelBuilder = view_model_builder or build_view_model
        self._expose_templates = expose_templates

    @classmethod
    def from_store(cls, assets: AssetStore, *, expose_templates: bool = False) -> "Core":
        """Parse the page template out of ``assets``. Raises `TemplateLoadError`."""
        return cls(assets, PageTemplate.load(assets), expose_templates=expose_templates)

    @property
    def assets(self) -> AssetStore:
        return self._assets

    @property
    def template(self) -> PageTemplate:
        return self._template

    def is_public(self, path: str) -> bool:
        """Whether ``path`` may be served through the static namespace."""
        path = path.lstrip("/")
        if not path.startswith(ASSET_NAMESPACE):
            return False
        if path.startswith(TEMPLATE_NAMESPACE) and not self._expose_templates:
            return False
        return True

    def get_asset(self, path: str) -> bytes:
        """Return a publicly served asset; hidden or unknown paths raise `AssetNotFound`."""
        if not self.is_public(path):
            raise AssetNotFound(path)
        return self._assets.get(path)

    def render_page(self, sink: OutputSink) -> ViewModel:
        """Build a fresh view model and stream the page into ``sink``."""
        view_model = self._build_view_model()
        self._template.render(view_model, sink)
        return view_model


__all__ = ["ASSET_NAMESPACE", "Core", "TEMPLATE_NAMESPACE", "ViewModelBuilder"]
