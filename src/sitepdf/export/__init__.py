"""Export layer — render built pages to PDF files.

Selects pages, turns them into jobs and renders each job in its own
headless browser against a shared local static server.
"""

from sitepdf.export.jobs import BatchResult, ExportJob, JobOutcome
from sitepdf.export.render import BrowserOptions, render_to_pdf
from sitepdf.export.scheduler import build_jobs, run_batch, select_pages

__all__ = [
    "BatchResult",
    "BrowserOptions",
    "ExportJob",
    "JobOutcome",
    "build_jobs",
    "render_to_pdf",
    "run_batch",
    "select_pages",
]
