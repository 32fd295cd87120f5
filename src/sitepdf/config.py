"""sitepdf configuration.

ExportConfig is the central configuration object, validated and frozen on
creation.  StyleTag describes the optional stylesheet injected before capture.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from sitepdf._errors import ConfigError


@dataclass(frozen=True, slots=True)
class StyleTag:
    """A single stylesheet source injected into the page before capture.

    At most one of the three sources may be set.

    Attributes:
        url: URL of a ``<link>`` stylesheet.
        path: Local CSS file.  Relative paths resolve against the site root.
        content: Raw CSS.

    """

    url: str | None = None
    path: str | None = None
    content: str | None = None

    def __post_init__(self) -> None:
        for name in ("url", "path", "content"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                msg = f"style_tag.{name} must be a string, got {type(value).__name__}"
                raise ConfigError(msg)
        sources = [name for name in ("url", "path", "content") if getattr(self, name)]
        if len(sources) > 1:
            msg = f"style_tag accepts at most one of url, path, content (got {', '.join(sources)})"
            raise ConfigError(msg)

    @property
    def is_empty(self) -> bool:
        return not (self.url or self.path or self.content)

    def resolved(self, root: Path) -> StyleTag:
        """Return a copy whose relative ``path`` is anchored at *root*."""
        if self.path and not Path(self.path).is_absolute():
            return StyleTag(path=str(root / self.path))
        return self

    def as_kwargs(self) -> dict[str, str]:
        """Keyword arguments for ``Page.add_style_tag``."""
        if self.url:
            return {"url": self.url}
        if self.path:
            return {"path": self.path}
        if self.content:
            return {"content": self.content}
        return {}

    @classmethod
    def from_value(cls, value: object) -> StyleTag | None:
        """Coerce a mapping (or an existing StyleTag) into a StyleTag."""
        if value is None or isinstance(value, StyleTag):
            return value
        if not isinstance(value, Mapping):
            msg = f"style_tag must be a mapping, got {type(value).__name__}"
            raise ConfigError(msg)
        unknown = set(value) - {"url", "path", "content"}
        if unknown:
            msg = f"style_tag has unknown keys: {', '.join(sorted(unknown))}"
            raise ConfigError(msg)
        return cls(**value)


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Configuration for a PDF export batch.

    Attributes:
        root: Project directory.  Every relative path below resolves against it.
              Always resolved to an absolute path on construction.
        public_dir: Directory holding the built static site.
        all_pages: Export every known page.  ``paths`` is ignored when set.
        paths: Explicit page paths to export (each must start with ``/``).
        file_prefix: Optional prefix prepended to every PDF filename.
        output_path: Directory PDFs are written to.
        pdf_options: Options passed through to the PDF capture call.
        style_tag: Optional stylesheet injected before capture.
        stagger_ms: Start delay per job position, in milliseconds.
        max_concurrency: Upper bound on simultaneous browsers (0 = unbounded).
        create_parents: Create missing parent directories of ``output_path``.
        chromium_path: Chromium executable to launch instead of Playwright's.

    """

    root: Path = field(default_factory=Path.cwd)
    public_dir: str = "public"
    all_pages: bool = False
    paths: tuple[str, ...] = ()
    file_prefix: str | None = None
    output_path: Path = field(default_factory=lambda: Path("public/exports"))
    pdf_options: Mapping[str, Any] = field(default_factory=dict)
    style_tag: StyleTag | None = None
    stagger_ms: int = 1000
    max_concurrency: int = 0
    create_parents: bool = False
    chromium_path: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.root, Path):
            object.__setattr__(self, "root", Path(str(self.root)))
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        if isinstance(self.output_path, str):
            object.__setattr__(self, "output_path", Path(self.output_path))
        if isinstance(self.paths, list):
            object.__setattr__(self, "paths", tuple(self.paths))
        object.__setattr__(self, "style_tag", StyleTag.from_value(self.style_tag))
        if isinstance(self.pdf_options, Mapping):
            object.__setattr__(self, "pdf_options", MappingProxyType(dict(self.pdf_options)))
        self._validate()

    def _validate(self) -> None:
        _expect(self, "public_dir", str)
        _expect(self, "all_pages", bool)
        _expect(self, "create_parents", bool)
        _expect(self, "output_path", Path)
        _expect(self, "pdf_options", Mapping)
        _expect(self, "file_prefix", str, optional=True)
        _expect(self, "chromium_path", str, optional=True)

        if not isinstance(self.paths, tuple) or not all(isinstance(p, str) for p in self.paths):
            msg = "paths must be a list of strings"
            raise ConfigError(msg)
        for path in self.paths:
            if not path.startswith("/"):
                msg = f"page path {path!r} must start with a leading '/'"
                raise ConfigError(msg)

        for name in ("stagger_ms", "max_concurrency"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"{name} must be an integer, got {type(value).__name__}"
                raise ConfigError(msg)
            if value < 0:
                msg = f"{name} must not be negative, got {value}"
                raise ConfigError(msg)

    @property
    def public_path(self) -> Path:
        """Absolute path to the built site."""
        return self.root / self.public_dir

    @property
    def output_dir(self) -> Path:
        """Absolute path to the PDF output directory.

        ``output_path`` is always taken relative to ``root``; a leading ``/``
        (as in ``/public/exports``) does not escape the project.
        """
        if self.output_path.is_absolute():
            return self.root / self.output_path.relative_to(self.output_path.anchor)
        return self.root / self.output_path

    @property
    def resolved_style_tag(self) -> StyleTag | None:
        """The style tag with a relative ``path`` anchored at ``root``."""
        if self.style_tag is None or self.style_tag.is_empty:
            return None
        return self.style_tag.resolved(self.root)


def _expect(config: ExportConfig, name: str, kind: type, *, optional: bool = False) -> None:
    value = getattr(config, name)
    if optional and value is None:
        return
    # bool is an int subclass; keep the two apart
    if kind is not bool and isinstance(value, bool):
        ok = False
    else:
        ok = isinstance(value, kind)
    if not ok:
        msg = f"{name} must be {kind.__name__}, got {type(value).__name__}"
        raise ConfigError(msg)
