"""Ephemeral static file server for the built site.

The browser needs real HTTP (not ``file://``) so that root-relative asset
URLs, fetch() calls and client-side routing behave as they do in production.
Each batch gets its own server on an OS-assigned port, torn down when the
batch body exits.

Usage::

    async with serve_directory(config.public_path) as base_url:
        ...  # "http://127.0.0.1:54321"

"""

from __future__ import annotations

import asyncio
import functools
import logging
import threading
from contextlib import asynccontextmanager
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import TYPE_CHECKING

from sitepdf._errors import ServerError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sitepdf._types import ServerBody

logger = logging.getLogger("sitepdf.server")

_BIND_HOST = "127.0.0.1"


class _QuietHandler(SimpleHTTPRequestHandler):
    """Static file handler that logs through ``logging`` instead of stderr."""

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)


class StaticServer:
    """A threaded HTTP server exposing one directory on an ephemeral port.

    The socket is bound and listening as soon as the constructor returns;
    ``start()`` begins answering requests from a daemon thread.

    Args:
        site_dir: Directory to serve.  Files are served unmodified.

    Raises:
        ServerError: If the directory is missing or the socket cannot be bound.

    """

    def __init__(self, site_dir: Path) -> None:
        if not site_dir.is_dir():
            msg = f"Site directory {site_dir} does not exist. Build the site first."
            raise ServerError(msg)
        handler = functools.partial(_QuietHandler, directory=str(site_dir))
        try:
            self._httpd = ThreadingHTTPServer((_BIND_HOST, 0), handler)
        except OSError as exc:
            msg = f"Failed to start static server for {site_dir}: {exc}"
            raise ServerError(msg) from exc
        self._httpd.daemon_threads = True
        self._site_dir = site_dir
        self._thread: threading.Thread | None = None

    @property
    def port(self) -> int:
        return self._httpd.server_address[1]

    @property
    def base_url(self) -> str:
        return f"http://{_BIND_HOST}:{self.port}"

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Serve requests from a background thread."""
        if self.is_running:
            return
        self._thread = threading.Thread(
            target=self._httpd.serve_forever,
            name=f"sitepdf-server-{self.port}",
            daemon=True,
        )
        self._thread.start()
        logger.debug("Serving %s at %s", self._site_dir, self.base_url)

    def close(self) -> None:
        """Stop the serving thread and close the listening socket."""
        if self._thread is not None:
            self._httpd.shutdown()
            self._thread.join(timeout=5.0)
            self._thread = None
        self._httpd.server_close()
        logger.debug("Closed static server for %s", self._site_dir)


@asynccontextmanager
async def serve_directory(site_dir: Path) -> AsyncIterator[str]:
    """Serve *site_dir* for the duration of the ``async with`` block.

    Yields the base URL.  The server is closed on exit whether the block
    completes or raises; exceptions from the block propagate unchanged.

    """
    server = StaticServer(site_dir)
    server.start()
    try:
        yield server.base_url
    finally:
        # shutdown() blocks until serve_forever returns; keep it off the loop
        await asyncio.to_thread(server.close)


async def with_server[T](site_dir: Path, body: ServerBody[T]) -> T:
    """Run ``body(base_url)`` against a freshly started server and return its result."""
    async with serve_directory(site_dir) as base_url:
        return await body(base_url)
