"""Tests for sitepdf.config_loader — sitepdf.yaml / sitepdf.toml merging."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitepdf._errors import ConfigError
from sitepdf.config import StyleTag
from sitepdf.config_loader import load_config, normalize_keys


class TestLoadConfig:
    """load_config — file config merged with overrides."""

    def test_no_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config.root == tmp_path
        assert config.all_pages is False

    def test_yaml_section(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.yaml").write_text(
            "sitepdf:\n"
            "  paths: ['/', '/about/']\n"
            "  file_prefix: site-\n"
            "  pdf_options:\n"
            "    format: A4\n"
        )
        config = load_config(tmp_path)
        assert config.paths == ("/", "/about/")
        assert config.file_prefix == "site-"
        assert config.pdf_options["format"] == "A4"

    def test_yaml_top_level_keys(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.yml").write_text("all_pages: true\nmax_concurrency: 2\n")
        config = load_config(tmp_path)
        assert config.all_pages is True
        assert config.max_concurrency == 2

    def test_plugin_aliases(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.yaml").write_text(
            "allPages: true\n"
            "filePrefix: doc-\n"
            "outputPath: out/pdf\n"
            "pdfOptions:\n"
            "  printBackground: true\n"
            "styleTagOptions:\n"
            "  content: 'nav { display: none; }'\n"
        )
        config = load_config(tmp_path)
        assert config.all_pages is True
        assert config.file_prefix == "doc-"
        assert config.output_dir == tmp_path / "out" / "pdf"
        assert dict(config.pdf_options) == {"printBackground": True}
        assert config.style_tag == StyleTag(content="nav { display: none; }")

    def test_toml(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.toml").write_text(
            '[sitepdf]\npaths = ["/about/"]\nstagger_ms = 250\n'
        )
        config = load_config(tmp_path)
        assert config.paths == ("/about/",)
        assert config.stagger_ms == 250

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.yaml").write_text("file_prefix: file-\n")
        config = load_config(tmp_path, file_prefix="override-")
        assert config.file_prefix == "override-"

    def test_camel_case_overrides(self, tmp_path: Path) -> None:
        config = load_config(tmp_path, allPages=True, outputPath="pdfs")
        assert config.all_pages is True
        assert config.output_dir == tmp_path / "pdfs"

    def test_plugin_default_output_path(self, tmp_path: Path) -> None:
        config = load_config(tmp_path, outputPath="/public/exports")
        assert config.output_dir == tmp_path / "public" / "exports"

    def test_unrelated_top_level_keys_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.yaml").write_text("title: My Site\nall_pages: true\n")
        assert load_config(tmp_path).all_pages is True


class TestLoadConfigErrors:
    """Malformed configuration surfaces as ConfigError."""

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.yaml").write_text("paths: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_config(tmp_path)

    def test_yaml_not_a_mapping(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.yaml").write_text("- /\n- /about/\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(tmp_path)

    def test_malformed_toml(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.toml").write_text("[sitepdf\n")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_config(tmp_path)

    def test_unknown_option(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Invalid sitepdf configuration"):
            load_config(tmp_path, no_such_option=True)

    def test_unknown_key_in_section(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.yaml").write_text("sitepdf:\n  colour: blue\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_invalid_type(self, tmp_path: Path) -> None:
        (tmp_path / "sitepdf.yaml").write_text("all_pages: 'yes'\n")
        with pytest.raises(ConfigError, match="all_pages"):
            load_config(tmp_path)


class TestNormalizeKeys:
    def test_aliases_mapped(self) -> None:
        assert normalize_keys({"allPages": True, "paths": ["/"]}) == {
            "all_pages": True,
            "paths": ["/"],
        }
