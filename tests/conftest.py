"""Shared test fixtures for sitepdf."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitepdf.export.jobs import ExportJob


@pytest.fixture
def built_site(tmp_path: Path) -> Path:
    """Create a minimal built site under ``tmp_path/public``.

    Returns the project root.  Pages: ``/``, ``/about/``, ``/docs/intro/``.
    """
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<!DOCTYPE html>\n<html><body>Home</body></html>\n")

    about = public / "about"
    about.mkdir()
    (about / "index.html").write_text("<!DOCTYPE html>\n<html><body>About</body></html>\n")

    intro = public / "docs" / "intro"
    intro.mkdir(parents=True)
    (intro / "index.html").write_text("<!DOCTYPE html>\n<html><body>Intro</body></html>\n")

    (public / "style.css").write_text("body { margin: 0; }\n")
    (public / "404.html").write_text("<html><body>Not found</body></html>\n")

    return tmp_path


class FakeRender:
    """Stand-in for ``render_to_pdf`` that writes a tiny file instead of a PDF.

    Records the base URL and job of each call.  Pages listed in ``fail``
    raise ``RenderError`` the way a navigation timeout would.
    """

    def __init__(self, fail: tuple[str, ...] = ()) -> None:
        self.fail = fail
        self.calls: list[tuple[str, ExportJob]] = []

    async def __call__(self, base_url: str, job: ExportJob, **_: object) -> Path:
        from sitepdf._errors import RenderError

        self.calls.append((base_url, job))
        if job.page_path in self.fail:
            msg = f"Failed to render {job.page_path!r}: Timeout 30000ms exceeded"
            raise RenderError(msg)
        job.output_dir.mkdir(exist_ok=True)
        job.output_file.write_bytes(b"%PDF-1.4\n")
        return job.output_file


@pytest.fixture
def fake_render() -> FakeRender:
    return FakeRender()
