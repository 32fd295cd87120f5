"""Tests for sitepdf.banner — export banner and summary output."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from unittest.mock import patch

from sitepdf.banner import print_banner, print_summary
from sitepdf.config import ExportConfig
from sitepdf.export.jobs import BatchResult, JobOutcome


def _capture(func: object, *args: object, **kwargs: object) -> str:
    buf = io.StringIO()
    with patch.object(sys, "stderr", buf):
        func(*args, **kwargs)  # type: ignore[operator]
    return buf.getvalue()


class TestPrintBanner:
    """Tests for the export banner."""

    def test_all_pages_banner(self) -> None:
        config = ExportConfig(root=Path("/tmp/test-site"), all_pages=True)
        output = _capture(print_banner, config, 5)

        assert "sitepdf" in output
        assert "5 pages to export" in output
        assert "all pages" in output
        assert "unbounded" in output
        assert "/tmp/test-site/public/exports" in output

    def test_single_page_singular(self) -> None:
        config = ExportConfig(root=Path("/tmp/test-site"), paths=("/",))
        output = _capture(print_banner, config, 1)

        assert "1 page to export" in output
        assert "selected paths" in output

    def test_concurrency_shown(self) -> None:
        config = ExportConfig(root=Path("/tmp/test-site"), max_concurrency=4)
        assert "browsers: 4" in _capture(print_banner, config, 2)

    def test_skipped_paths_listed(self) -> None:
        config = ExportConfig(root=Path("/tmp/test-site"), paths=("/missing",))
        output = _capture(print_banner, config, 0, skipped=("/missing",))
        assert "/missing does not exist" in output


class TestPrintSummary:
    """Tests for the completion summary."""

    def test_success_summary(self) -> None:
        result = BatchResult(
            outcomes=(
                JobOutcome("/", Path("/out/index.pdf"), ok=True),
                JobOutcome("/about/", Path("/out/about.pdf"), ok=True),
            ),
            duration_ms=1234.0,
        )
        output = _capture(print_summary, result)

        assert "Exported 2 PDFs" in output
        assert "Output: /out" in output
        assert "1234ms" in output
        assert "Failed" not in output

    def test_failures_listed(self) -> None:
        result = BatchResult(
            outcomes=(
                JobOutcome("/", Path("/out/index.pdf"), ok=True),
                JobOutcome("/slow/", Path("/out/slow.pdf"), ok=False, error="Timeout"),
            ),
        )
        output = _capture(print_summary, result)

        assert "Exported 1 PDF" in output
        assert "Failed 1 page" in output
        assert "/slow/: Timeout" in output

    def test_skipped_counted(self) -> None:
        result = BatchResult(outcomes=(), skipped=("/a", "/b"))
        assert "Skipped 2 unknown paths" in _capture(print_summary, result)
