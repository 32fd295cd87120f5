"""Load ExportConfig from sitepdf.yaml / sitepdf.toml if present.

Merges file config with caller kwargs. Kwargs override file values.
camelCase option names (``allPages``, ``filePrefix``,
``outputPath``, ``pdfOptions``, ``styleTagOptions``) are accepted as aliases.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from sitepdf._errors import ConfigError
from sitepdf.config import ExportConfig

_ALIASES: dict[str, str] = {
    "allPages": "all_pages",
    "filePrefix": "file_prefix",
    "outputPath": "output_path",
    "pdfOptions": "pdf_options",
    "styleTagOptions": "style_tag",
    "publicDir": "public_dir",
    "staggerMs": "stagger_ms",
    "maxConcurrency": "max_concurrency",
    "createParents": "create_parents",
    "chromiumPath": "chromium_path",
}

_KNOWN_KEYS = frozenset({
    "public_dir", "all_pages", "paths", "file_prefix", "output_path",
    "pdf_options", "style_tag", "stagger_ms", "max_concurrency",
    "create_parents", "chromium_path",
})


def load_config(root: Path, **overrides: object) -> ExportConfig:
    """Load ExportConfig from root, optionally merging sitepdf.yaml.

    Looks for sitepdf.yaml, sitepdf.yml, or sitepdf.toml in root. If found,
    loads and merges with overrides. Overrides take precedence.

    Raises:
        ConfigError: If the config file is malformed or holds invalid values.

    """
    file_config = _read_sitepdf_config(root)
    merged = {**file_config, **normalize_keys(overrides)}
    if "output_path" in merged and not isinstance(merged["output_path"], Path):
        merged["output_path"] = Path(str(merged["output_path"]))
    try:
        return ExportConfig(root=root, **merged)
    except TypeError as exc:
        msg = f"Invalid sitepdf configuration: {exc}"
        raise ConfigError(msg) from exc


def normalize_keys(options: dict[str, object]) -> dict[str, object]:
    """Map camelCase aliases onto ExportConfig field names."""
    return {_ALIASES.get(key, key): value for key, value in options.items()}


def _read_sitepdf_config(root: Path) -> dict[str, object]:
    """Read sitepdf config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("sitepdf.yaml", "sitepdf.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "sitepdf.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        msg = f"Failed to parse {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)
    return _flatten_sitepdf_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as exc:
        msg = f"Failed to parse {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_sitepdf_section(data)


def _flatten_sitepdf_section(data: dict[str, object]) -> dict[str, object]:
    """Extract sitepdf.* keys into top-level config."""
    result: dict[str, object] = {}
    section = data.get("sitepdf")
    if isinstance(section, dict):
        result.update(normalize_keys(section))
    for key, value in normalize_keys(data).items():
        if key != "sitepdf" and key in _KNOWN_KEYS:
            result.setdefault(key, value)
    return result
