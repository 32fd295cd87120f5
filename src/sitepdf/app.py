"""sitepdf application — the post-build entry points.

``on_post_build`` is called by a build system that already knows its page
list.  ``export`` discovers the pages from the built output itself.  Both
validate configuration before any browser starts, run one batch and fail
after every job has settled if any page could not be exported.
"""

import asyncio
from collections.abc import Iterable
from pathlib import Path

from sitepdf._errors import ExportError, ServerError
from sitepdf.banner import print_banner, print_summary
from sitepdf.config import ExportConfig
from sitepdf.config_loader import load_config
from sitepdf.export.jobs import BatchResult
from sitepdf.export.render import BrowserOptions
from sitepdf.export.scheduler import build_jobs, run_batch
from sitepdf.observability import ExportCollector
from sitepdf.pages import discover_pages, filter_page_paths


async def run_export(
    config: ExportConfig,
    known_pages: Iterable[str],
    *,
    collector: ExportCollector | None = None,
) -> BatchResult:
    """Select, render and report one batch.  Never raises for page failures."""
    collector = collector if collector is not None else ExportCollector()
    jobs, skipped = build_jobs(config, known_pages, collector=collector)

    print_banner(config, len(jobs), skipped=skipped)

    browser = BrowserOptions(executable_path=config.chromium_path)
    result = await run_batch(
        jobs,
        config.public_path,
        stagger_ms=config.stagger_ms,
        max_concurrency=config.max_concurrency,
        browser=browser,
        collector=collector,
        skipped=skipped,
    )

    print_summary(result)
    return result


def on_post_build(
    known_pages: Iterable[str | None],
    root: str | Path = ".",
    *,
    collector: ExportCollector | None = None,
    **options: object,
) -> BatchResult:
    """Export PDFs for a build whose page list is already known.

    Args:
        known_pages: Every page path the build produced.
        root: Project directory; relative paths resolve against it.
        collector: Receives per-job events.
        **options: ExportConfig fields (camelCase plugin names accepted).

    Raises:
        ConfigError: Before any job starts, if the options are invalid.
        ServerError: If the built site cannot be served.
        ExportError: After all jobs settle, if any page failed.

    """
    config = load_config(Path(root), **options)
    pages = filter_page_paths(known_pages)
    result = asyncio.run(run_export(config, pages, collector=collector))
    _raise_on_failure(result)
    return result


def export(
    root: str | Path = ".",
    *,
    collector: ExportCollector | None = None,
    **options: object,
) -> BatchResult:
    """Export PDFs for the site built under ``root / public_dir``.

    Pages are discovered from the build output.  See ``on_post_build``
    for the error contract.

    """
    config = load_config(Path(root), **options)
    if not config.public_path.is_dir():
        msg = f"Site directory {config.public_path} does not exist. Build the site first."
        raise ServerError(msg)
    pages = discover_pages(config.public_path, exclude=(config.output_dir,))
    result = asyncio.run(run_export(config, pages, collector=collector))
    _raise_on_failure(result)
    return result


def _raise_on_failure(result: BatchResult) -> None:
    if result.ok:
        return
    failed = ", ".join(o.page_path for o in result.failed)
    msg = (
        f"{len(result.failed)} of {len(result.outcomes)} pages failed to export: {failed}"
    )
    raise ExportError(msg, result)
