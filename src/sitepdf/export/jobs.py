"""Export data types — jobs, per-job outcomes and batch results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from sitepdf.naming import pdf_filename

if TYPE_CHECKING:
    from sitepdf._types import PagePath, PdfOptions
    from sitepdf.config import StyleTag


@dataclass(frozen=True, slots=True)
class ExportJob:
    """One page to render into one PDF.

    Attributes:
        page_path: Site-relative page path (e.g., ``"/about/"``).
        output_dir: Absolute directory the PDF is written to.
        file_prefix: Optional filename prefix.
        pdf_options: Options passed through to the PDF capture call.
        style_tag: Optional stylesheet injected before capture.
        index: Position of the job in the batch; drives the stagger delay.
        create_parents: Create missing parents of ``output_dir``.

    """

    page_path: PagePath
    output_dir: Path
    file_prefix: str | None = None
    pdf_options: PdfOptions = field(default_factory=lambda: MappingProxyType({}))
    style_tag: StyleTag | None = None
    index: int = 0
    create_parents: bool = False

    @property
    def output_file(self) -> Path:
        """Where the rendered PDF lands."""
        return self.output_dir / pdf_filename(self.page_path, self.file_prefix)


@dataclass(frozen=True, slots=True)
class JobOutcome:
    """Settled result of a single job.

    Attributes:
        page_path: Page path of the job.
        output_path: Target PDF path (written only when ``ok``).
        ok: True if the PDF was written.
        error: Failure reason when not ``ok``.
        duration_ms: Render time, excluding the stagger delay.

    """

    page_path: PagePath
    output_path: Path
    ok: bool
    error: str | None = None
    duration_ms: float = 0.0


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Aggregate result of an export batch.

    Attributes:
        outcomes: One outcome per job, in job order.
        skipped: Requested page paths that the site does not contain.
        base_url: URL the static server listened on.
        duration_ms: Total wall-clock time of the batch.

    """

    outcomes: tuple[JobOutcome, ...]
    skipped: tuple[str, ...] = ()
    base_url: str = ""
    duration_ms: float = 0.0

    @property
    def succeeded(self) -> tuple[JobOutcome, ...]:
        return tuple(o for o in self.outcomes if o.ok)

    @property
    def failed(self) -> tuple[JobOutcome, ...]:
        return tuple(o for o in self.outcomes if not o.ok)

    @property
    def ok(self) -> bool:
        """True when no job failed.  Skipped paths do not count as failures."""
        return not self.failed
