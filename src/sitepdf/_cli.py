"""sitepdf CLI — sitepdf export / sitepdf pages.

Entry point for the ``sitepdf`` command-line interface.
"""

from __future__ import annotations

import argparse
import logging
import sys

from sitepdf._errors import ConfigError, SitePdfError


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the sitepdf CLI."""
    parser = argparse.ArgumentParser(
        prog="sitepdf",
        description="Render the pages of a built static site to PDF files.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # sitepdf export
    export_parser = subparsers.add_parser(
        "export",
        help="Render built pages to PDF",
    )
    export_parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    export_parser.add_argument(
        "--all-pages", action="store_true", default=None, help="Export every built page",
    )
    export_parser.add_argument(
        "--path", dest="paths", action="append", metavar="PATH",
        help="Page path to export (repeatable), e.g. /about/",
    )
    export_parser.add_argument("--public", dest="public_dir", help="Built site directory")
    export_parser.add_argument("--output", dest="output_path", help="PDF output directory")
    export_parser.add_argument("--prefix", dest="file_prefix", help="PDF filename prefix")
    export_parser.add_argument(
        "--stagger-ms", type=int, help="Start delay per job position in milliseconds",
    )
    export_parser.add_argument(
        "--concurrency", dest="max_concurrency", type=int,
        help="Maximum simultaneous browsers (0 = unbounded)",
    )
    export_parser.add_argument(
        "--chromium", dest="chromium_path", help="Chromium executable to launch",
    )
    export_parser.add_argument(
        "--parents", dest="create_parents", action="store_true", default=None,
        help="Create missing parent directories of the output path",
    )
    css = export_parser.add_mutually_exclusive_group()
    css.add_argument("--css-url", help="Stylesheet URL to inject before capture")
    css.add_argument("--css-path", help="Local stylesheet to inject before capture")
    css.add_argument("--css", dest="css_content", help="Raw CSS to inject before capture")
    export_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every request and job",
    )

    # sitepdf pages
    pages_parser = subparsers.add_parser(
        "pages",
        help="List the page paths found in the built site",
    )
    pages_parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    pages_parser.add_argument("--public", dest="public_dir", help="Built site directory")

    return parser


def _get_version() -> str:
    """Get the package version."""
    from sitepdf import __version__

    return __version__


def _export_overrides(args: argparse.Namespace) -> dict[str, object]:
    """Collect the export flags that were actually given on the command line."""
    overrides: dict[str, object] = {
        name: value
        for name in (
            "all_pages", "public_dir", "output_path", "file_prefix",
            "stagger_ms", "max_concurrency", "chromium_path", "create_parents",
        )
        if (value := getattr(args, name)) is not None
    }
    if args.paths:
        overrides["paths"] = tuple(args.paths)
    if args.css_url:
        overrides["style_tag"] = {"url": args.css_url}
    elif args.css_path:
        overrides["style_tag"] = {"path": args.css_path}
    elif args.css_content:
        overrides["style_tag"] = {"content": args.css_content}
    return overrides


def _list_pages(root: str, public_dir: str | None) -> None:
    from pathlib import Path

    from sitepdf.config_loader import load_config
    from sitepdf.pages import discover_pages

    overrides = {"public_dir": public_dir} if public_dir else {}
    config = load_config(Path(root), **overrides)
    for path in discover_pages(config.public_path, exclude=(config.output_dir,)):
        print(path)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Exit codes: 0 on success, 1 if any page failed, 2 on configuration errors.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="  %(levelname)s %(name)s: %(message)s",
    )

    from sitepdf.app import export

    try:
        if args.command == "export":
            export(root=args.root, **_export_overrides(args))
        elif args.command == "pages":
            _list_pages(args.root, args.public_dir)
    except ConfigError as exc:
        print(f"sitepdf: configuration error: {exc}", file=sys.stderr)
        sys.exit(2)
    except SitePdfError as exc:
        print(f"sitepdf: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
