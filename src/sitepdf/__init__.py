"""sitepdf — render the pages of a built static site to PDF.

Runs after a static site generator has written its output.  Serves the
built site on a throwaway local port, opens each selected page in headless
Chromium and prints it to ``<output>/<prefix><page-name>.pdf``.

Quick start::

    import sitepdf

    sitepdf.export("my-site/", all_pages=True)

From a build hook that already knows its pages::

    sitepdf.on_post_build(pages, root="my-site/", paths=["/", "/about/"])

Page names are flattened: ``/`` -> ``index.pdf``, ``/docs/intro/`` ->
``docs-intro.pdf``.
"""

__version__ = "0.1.0"
__all__ = [
    "BatchResult",
    "ExportConfig",
    "__version__",
    "export",
    "normalize_page_name",
    "on_post_build",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import sitepdf`` fast; Playwright is only imported when an
    export entry point is first used.
    """
    if name == "ExportConfig":
        from sitepdf.config import ExportConfig

        return ExportConfig

    if name == "BatchResult":
        from sitepdf.export.jobs import BatchResult

        return BatchResult

    if name == "normalize_page_name":
        from sitepdf.naming import normalize_page_name

        return normalize_page_name

    if name == "export":
        from sitepdf.app import export

        return export

    if name == "on_post_build":
        from sitepdf.app import on_post_build

        return on_post_build

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
