"""Page path to PDF filename mapping.

Every exported page gets a flat, filesystem-safe name derived from its URL::

    /                   -> index
    /about/             -> about
    /docs/intro/        -> docs-intro

"""

from __future__ import annotations


def normalize_page_name(page_path: str = "") -> str:
    """Convert a site-relative page path to a base filename.

    Strips one leading and one trailing slash, maps the root to ``index``
    and replaces the remaining separators with ``-``.

    """
    name = page_path[1:] if page_path.startswith("/") else page_path
    name = name[:-1] if name.endswith("/") else name
    if not name:
        return "index"
    return name.replace("/", "-")


def pdf_filename(page_path: str, prefix: str | None = None) -> str:
    """Return the PDF filename for *page_path*, with an optional prefix."""
    return f"{prefix or ''}{normalize_page_name(page_path)}.pdf"
