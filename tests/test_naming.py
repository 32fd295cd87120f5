"""Tests for sitepdf.naming — page path to filename mapping."""

import pytest

from sitepdf.naming import normalize_page_name, pdf_filename


class TestNormalizePageName:
    """normalize_page_name — flat, filesystem-safe names."""

    def test_root_slash(self) -> None:
        assert normalize_page_name("/") == "index"

    def test_empty_string(self) -> None:
        assert normalize_page_name("") == "index"

    def test_default_argument(self) -> None:
        assert normalize_page_name() == "index"

    def test_trailing_slash(self) -> None:
        assert normalize_page_name("/about/") == "about"

    def test_nested_without_trailing_slash(self) -> None:
        assert normalize_page_name("/a/b/c") == "a-b-c"

    def test_nested_with_trailing_slash(self) -> None:
        assert normalize_page_name("/docs/intro/") == "docs-intro"

    def test_no_leading_slash(self) -> None:
        assert normalize_page_name("blog/post") == "blog-post"

    def test_strips_only_one_slash_each_side(self) -> None:
        assert normalize_page_name("//a//") == "-a-"

    def test_double_slash_is_root(self) -> None:
        assert normalize_page_name("//") == "index"

    @pytest.mark.parametrize(
        "path", ["/", "", "/about/", "/a/b/c", "/docs/intro/", "x", "//a//"],
    )
    def test_idempotent_on_own_output(self, path: str) -> None:
        once = normalize_page_name(path)
        assert normalize_page_name(once) == once


class TestPdfFilename:
    """pdf_filename — normalized name plus optional prefix."""

    def test_without_prefix(self) -> None:
        assert pdf_filename("/about/") == "about.pdf"

    def test_with_prefix(self) -> None:
        assert pdf_filename("/about/", "site-") == "site-about.pdf"

    def test_root_with_prefix(self) -> None:
        assert pdf_filename("/", "site-") == "site-index.pdf"

    def test_empty_prefix(self) -> None:
        assert pdf_filename("/a/b", "") == "a-b.pdf"
