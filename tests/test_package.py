"""Tests for sitepdf package exports and metadata."""

import pytest

import sitepdf


class TestPackageMetadata:
    """Package-level exports and metadata."""

    def test_version_string(self) -> None:
        assert isinstance(sitepdf.__version__, str)
        assert "0.1.0" in sitepdf.__version__

    def test_all_exports_resolvable(self) -> None:
        for name in sitepdf.__all__:
            getattr(sitepdf, name)

    def test_lazy_normalize(self) -> None:
        assert sitepdf.normalize_page_name("/about/") == "about"

    def test_invalid_attribute_raises(self) -> None:
        with pytest.raises(AttributeError, match="no attribute"):
            sitepdf.nonexistent_thing  # type: ignore[attr-defined]  # noqa: B018


class TestTypeAliases:
    """sitepdf._types — the aliases used across the export package."""

    def test_aliases_defined(self) -> None:
        from sitepdf import _types

        aliases = {name for name, value in vars(_types).items() if hasattr(value, "__value__")}
        assert aliases == {"PagePath", "PdfOptions", "ServerBody"}

    def test_job_fields_use_aliases(self) -> None:
        from sitepdf.export.jobs import ExportJob

        assert ExportJob.__annotations__["page_path"] == "PagePath"
        assert ExportJob.__annotations__["pdf_options"] == "PdfOptions"
