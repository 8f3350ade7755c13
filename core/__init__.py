"""Core package exposing the asset store, render pipeline and coordinator."""

from .assets import AssetStore
from .config import Settings
from .core import Core
from .errors import (
    AssetNotFound,
    BrowserLaunchError,
    GuiError,
    ListenerError,
    RenderError,
    TemplateLoadError,
)
from .templates import TEMPLATE_PATH, PageTemplate
from .view_model import RowRecord, ViewModel, build_view_model

__all__ = [
    "AssetNotFound",
    "AssetStore",
    "BrowserLaunchError",
    "Core",
    "GuiError",
    "ListenerError",
    "PageTemplate",
    "RenderError",
    "RowRecord",
    "Settings",
    "TEMPLATE_PATH",
    "TemplateLoadError",
    "ViewModel",
    "build_view_model",
]
