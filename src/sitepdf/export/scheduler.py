"""Batch scheduler — select pages, build jobs, render them concurrently.

One static server is shared by every job in a batch.  Jobs run as
concurrent asyncio tasks, each waiting ``stagger_ms * index`` before it
starts so browser launches are spread over time.  An optional semaphore
caps how many browsers run at once.

Every job settles before the batch returns: a failing page becomes a
failed ``JobOutcome`` and its siblings keep running.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable, Iterable, Sequence
from typing import TYPE_CHECKING

from sitepdf.export.jobs import BatchResult, ExportJob, JobOutcome
from sitepdf.export.render import BrowserOptions, render_to_pdf
from sitepdf.observability import ExportCollector
from sitepdf.server import serve_directory

if TYPE_CHECKING:
    from pathlib import Path

    from sitepdf._types import PagePath
    from sitepdf.config import ExportConfig

type RenderFunc = Callable[..., Awaitable[Path]]


def select_pages(
    known_pages: Iterable[PagePath],
    *,
    all_pages: bool,
    paths: Sequence[PagePath] = (),
    collector: ExportCollector | None = None,
) -> tuple[tuple[PagePath, ...], tuple[PagePath, ...]]:
    """Pick the page paths to export.

    In all-pages mode every known page is selected in the order supplied.
    Otherwise the explicit *paths* are kept in their own order when the site
    contains them; the rest are reported and returned as skipped.

    Returns:
        ``(selected, skipped)``

    """
    known = tuple(known_pages)
    if all_pages:
        return known, ()

    collector = collector if collector is not None else ExportCollector()
    known_set = frozenset(known)
    selected: list[str] = []
    skipped: list[str] = []
    for path in paths:
        if path in known_set:
            selected.append(path)
        else:
            skipped.append(path)
            collector.record_skipped(path)
    return tuple(selected), tuple(skipped)


def build_jobs(
    config: ExportConfig,
    known_pages: Iterable[PagePath],
    *,
    collector: ExportCollector | None = None,
) -> tuple[tuple[ExportJob, ...], tuple[str, ...]]:
    """Create one ExportJob per selected page.

    Returns:
        ``(jobs, skipped)`` where ``skipped`` lists unknown explicit paths.

    """
    selected, skipped = select_pages(
        known_pages,
        all_pages=config.all_pages,
        paths=config.paths,
        collector=collector,
    )
    output_dir = config.output_dir
    style_tag = config.resolved_style_tag
    jobs = tuple(
        ExportJob(
            page_path=path,
            output_dir=output_dir,
            file_prefix=config.file_prefix,
            pdf_options=config.pdf_options,
            style_tag=style_tag,
            index=index,
            create_parents=config.create_parents,
        )
        for index, path in enumerate(selected)
    )
    return jobs, skipped


async def run_batch(
    jobs: Sequence[ExportJob],
    site_dir: Path,
    *,
    stagger_ms: int = 1000,
    max_concurrency: int = 0,
    browser: BrowserOptions | None = None,
    render: RenderFunc | None = None,
    collector: ExportCollector | None = None,
    skipped: Sequence[str] = (),
) -> BatchResult:
    """Serve *site_dir* once and render every job against it.

    Args:
        jobs: Jobs to run.  ``job.index`` sets each job's start delay.
        site_dir: Built site directory served to the browsers.
        stagger_ms: Delay unit; job *i* starts no earlier than ``i * stagger_ms``.
        max_concurrency: Maximum number of jobs rendering at once (0 = unbounded).
        browser: Chromium launch options.
        render: Coroutine that renders one job; ``render_to_pdf`` by default.
        collector: Receives per-job events.
        skipped: Unknown paths from selection, carried into the result.

    Returns:
        BatchResult with one outcome per job, in job order.

    Raises:
        ServerError: If the static server cannot be started.

    """
    collector = collector if collector is not None else ExportCollector()
    browser = browser or BrowserOptions()
    render = render or render_to_pdf
    start = time.perf_counter()

    if not jobs:
        return BatchResult(outcomes=(), skipped=tuple(skipped))

    async with serve_directory(site_dir) as base_url:
        limit = asyncio.Semaphore(max_concurrency) if max_concurrency > 0 else None

        async def _run(job: ExportJob) -> JobOutcome:
            await asyncio.sleep(stagger_ms * job.index / 1000)
            waited_ms = (time.perf_counter() - start) * 1000
            if limit is not None:
                async with limit:
                    return await _render_one(job, base_url, waited_ms)
            return await _render_one(job, base_url, waited_ms)

        async def _render_one(job: ExportJob, url: str, waited_ms: float) -> JobOutcome:
            collector.record_started(job.page_path, index=job.index, delay_ms=waited_ms)
            t0 = time.perf_counter()
            try:
                target = await render(url, job, browser=browser)
            except Exception as exc:  # noqa: BLE001
                elapsed = (time.perf_counter() - t0) * 1000
                reason = str(exc) or type(exc).__name__
                collector.record_failed(job.page_path, reason, duration_ms=elapsed)
                return JobOutcome(
                    page_path=job.page_path,
                    output_path=job.output_file,
                    ok=False,
                    error=reason,
                    duration_ms=elapsed,
                )
            elapsed = (time.perf_counter() - t0) * 1000
            collector.record_completed(job.page_path, str(target), duration_ms=elapsed)
            return JobOutcome(
                page_path=job.page_path,
                output_path=target,
                ok=True,
                duration_ms=elapsed,
            )

        outcomes = await asyncio.gather(*(_run(job) for job in jobs))

    return BatchResult(
        outcomes=tuple(outcomes),
        skipped=tuple(skipped),
        base_url=base_url,
        duration_ms=(time.perf_counter() - start) * 1000,
    )
