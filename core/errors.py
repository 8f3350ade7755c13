"""Exception types shared by the GUI core and the web layer."""

from __future__ import annotations


class GuiError(Exception):
    """Base class for every error raised by this package."""


class AssetNotFound(GuiError, KeyError):
    """Raised when a logical asset path is not present in the store."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"asset not found: {self.path}"


class TemplateLoadError(GuiError):
    """The page template is missing or could not be parsed. Fatal at start-up."""


class RenderError(GuiError):
    """Rendering failed for a single request (e.g. view model missing a field)."""


class ListenerError(GuiError):
    """The HTTP listener could not bind or did not become ready."""


class BrowserLaunchError(GuiError):
    """No browser could be started for the GUI page."""


__all__ = [
    "AssetNotFound",
    "BrowserLaunchError",
    "GuiError",
    "ListenerError",
    "RenderError",
    "TemplateLoadError",
]
