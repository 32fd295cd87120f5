"""Render session — one headless Chromium per page, captured to PDF.

Each job launches its own browser, loads the page from the batch's static
server, waits for the network to go idle, optionally injects a stylesheet
and prints the page to PDF.  The browser is closed on every exit path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from sitepdf._errors import RenderError

if TYPE_CHECKING:
    from pathlib import Path

    from sitepdf._types import PdfOptions
    from sitepdf.export.jobs import ExportJob

VIEWPORT = {"width": 1920, "height": 1080}

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/61.0.3163.100 Safari/537.36"
)

# Puppeteer-style option names -> Playwright keyword names.
_PDF_OPTION_ALIASES: dict[str, str] = {
    "displayHeaderFooter": "display_header_footer",
    "headerTemplate": "header_template",
    "footerTemplate": "footer_template",
    "printBackground": "print_background",
    "pageRanges": "page_ranges",
    "preferCSSPageSize": "prefer_css_page_size",
}


@dataclass(frozen=True, slots=True)
class BrowserOptions:
    """How to launch Chromium for a render session.

    Attributes:
        executable_path: Chromium binary to use instead of Playwright's bundled one.
        args: Extra command-line switches.
        navigation_timeout_ms: Upper bound for the page to reach network idle.

    """

    executable_path: str | None = None
    args: tuple[str, ...] = ("--no-sandbox", "--disable-dev-shm-usage")
    navigation_timeout_ms: float = 30_000


def pdf_kwargs(options: PdfOptions) -> dict[str, Any]:
    """Translate PDF options into ``Page.pdf`` keyword arguments.

    Values pass through untouched.  ``path`` is dropped since the output
    filename is derived from the page path.
    """
    kwargs: dict[str, Any] = {}
    for key, value in options.items():
        if key == "path":
            continue
        kwargs[_PDF_OPTION_ALIASES.get(key, key)] = value
    return kwargs


def ensure_output_dir(directory: Path, *, parents: bool = False) -> None:
    """Create the output directory if it is missing.

    Without *parents* only the last path component is created, so a missing
    intermediate directory raises ``FileNotFoundError``.
    """
    if not directory.exists():
        directory.mkdir(parents=parents, exist_ok=True)


async def render_to_pdf(
    base_url: str,
    job: ExportJob,
    *,
    browser: BrowserOptions | None = None,
) -> Path:
    """Render ``base_url + job.page_path`` to ``job.output_file``.

    Returns:
        Path of the written PDF.

    Raises:
        RenderError: If the browser fails to launch, the page fails to load
            in time, the stylesheet cannot be injected, the output directory
            cannot be created or the capture fails.

    """
    options = browser or BrowserOptions()
    target = job.output_file
    url = base_url + job.page_path

    try:
        async with async_playwright() as pw:
            instance = await pw.chromium.launch(
                headless=True,
                executable_path=options.executable_path,
                args=list(options.args),
            )
            try:
                context = await instance.new_context(
                    viewport=VIEWPORT,
                    is_mobile=False,
                    user_agent=USER_AGENT,
                    ignore_https_errors=True,
                )
                page = await context.new_page()
                await page.emulate_media(media="screen")

                ensure_output_dir(job.output_dir, parents=job.create_parents)

                await page.goto(
                    url,
                    wait_until="networkidle",
                    timeout=options.navigation_timeout_ms,
                )
                if job.style_tag is not None and not job.style_tag.is_empty:
                    await page.add_style_tag(**job.style_tag.as_kwargs())

                await page.pdf(path=str(target), **pdf_kwargs(job.pdf_options))
            finally:
                await instance.close()
    except (PlaywrightError, OSError, TypeError) as exc:
        msg = f"Failed to render {job.page_path!r} from {url}: {exc}"
        raise RenderError(msg) from exc

    return target
