"""sitepdf error hierarchy.

All sitepdf-specific errors inherit from SitePdfError for easy catching.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitepdf.export.jobs import BatchResult


class SitePdfError(Exception):
    """Base error for all sitepdf operations."""


class ConfigError(SitePdfError):
    """Invalid or missing configuration."""


class ServerError(SitePdfError):
    """The local static server could not be started."""


class RenderError(SitePdfError):
    """A single page could not be rendered to PDF."""


class ExportError(SitePdfError):
    """One or more pages in an export batch failed.

    ``result`` holds the settled batch, including the pages that did export.
    """

    def __init__(self, message: str, result: BatchResult | None = None) -> None:
        super().__init__(message)
        self.result = result
