"""Known pages — enumerate the page paths of a built site.

Static site generators write clean URLs as ``<route>/index.html``, so the
built output directory is enough to recover the list of pages::

    public/index.html               -> /
    public/about/index.html         -> /about/
    public/docs/intro/index.html    -> /docs/intro/

Page lists handed over by a build system go through ``filter_page_paths``,
which drops entries that can never become PDFs.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

# Development-only 404 page some static site generators emit
DEV_404_PAGE = "/dev-404-page/"

_FILE_SUFFIXES = (".html", ".htm")


def filter_page_paths(paths: Iterable[str | None]) -> tuple[str, ...]:
    """Drop empty paths, the dev 404 page and paths naming an HTML file."""
    return tuple(
        path
        for path in paths
        if path
        and path != DEV_404_PAGE
        and not path.lower().endswith(_FILE_SUFFIXES)
    )


def discover_pages(
    public_dir: Path,
    *,
    exclude: Iterable[Path] = (),
) -> tuple[str, ...]:
    """List the page paths of the site built into *public_dir*.

    Hidden directories and any directory under *exclude* (e.g. a previous
    PDF output folder) are skipped.

    Returns:
        Sorted page paths, root first.  Empty if *public_dir* does not exist.

    """
    if not public_dir.is_dir():
        return ()

    excluded = tuple(p.resolve() for p in exclude)
    root = public_dir.resolve()
    found: list[str] = []

    for index_file in root.rglob("index.html"):
        page_dir = index_file.parent
        if any(page_dir == ex or ex in page_dir.parents for ex in excluded):
            continue
        relative = page_dir.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        found.append(_to_page_path(relative))

    return filter_page_paths(sorted(found, key=lambda p: (p != "/", p)))


def _to_page_path(relative: Path) -> str:
    if not relative.parts:
        return "/"
    return f"/{relative.as_posix()}/"
