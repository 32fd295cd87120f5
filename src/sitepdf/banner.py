"""Terminal output — export banner and completion summary.

Prints to stderr with ANSI colour when the terminal supports it.
Detects ``NO_COLOR`` / ``TERM`` for safe fallback.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitepdf.config import ExportConfig
    from sitepdf.export.jobs import BatchResult


# ---------------------------------------------------------------------------
# ANSI helpers, respecting NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""
_RED = "\033[31m" if _COLOR else ""


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def print_banner(
    config: ExportConfig,
    page_count: int,
    *,
    skipped: tuple[str, ...] = (),
) -> None:
    """Print the export banner to stderr.

    Args:
        config: Resolved ExportConfig.
        page_count: Number of pages selected for export.
        skipped: Requested page paths the site does not contain.

    """
    from sitepdf import __version__

    mode = "all pages" if config.all_pages else "selected paths"
    lines: list[str] = [
        "",
        f"  {_BOLD}sitepdf{_RESET} {_DIM}v{__version__}{_RESET}  {_YELLOW}[export]{_RESET}",
        f"  {_DIM}{'─' * 43}{_RESET}",
        f"  {_DIM}├─{_RESET} {_plural(page_count, 'page')} to export {_DIM}({mode}){_RESET}",
        f"  {_DIM}├─{_RESET} site: {_DIM}{config.public_path}{_RESET}",
    ]

    concurrency = str(config.max_concurrency) if config.max_concurrency > 0 else "unbounded"
    lines.append(
        f"  {_DIM}├─{_RESET} browsers: {concurrency}, "
        f"stagger {config.stagger_ms}ms"
    )
    lines.append(f"  {_DIM}└─{_RESET} output: {_DIM}{config.output_dir}{_RESET}")

    if skipped:
        lines.append("")
        lines.extend(
            f"  {_YELLOW}!{_RESET} {path} does not exist, skipped" for path in skipped
        )

    lines.append("")
    print("\n".join(lines), file=sys.stderr)


def print_summary(result: BatchResult) -> None:
    """Print export completion summary to stderr."""
    exported = len(result.succeeded)
    lines = [
        "",
        "─" * 41,
        f"  {_GREEN}Exported{_RESET} {_plural(exported, 'PDF')}",
    ]
    if result.failed:
        lines.append(f"  {_RED}Failed{_RESET} {_plural(len(result.failed), 'page')}:")
        lines.extend(f"    {o.page_path}: {o.error}" for o in result.failed)
    if result.skipped:
        lines.append(f"  Skipped {_plural(len(result.skipped), 'unknown path')}")
    if result.succeeded:
        lines.append(f"  Output: {result.succeeded[0].output_path.parent}")
    lines.append(f"  Done in {result.duration_ms:.0f}ms")

    print("\n".join(lines), file=sys.stderr)
