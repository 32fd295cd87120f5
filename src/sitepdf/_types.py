"""Shared type definitions for sitepdf."""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

# Site-relative route of a built page (e.g., "/", "/docs/intro/")
type PagePath = str

# Options forwarded to the PDF capture call
type PdfOptions = Mapping[str, Any]

# Coroutine invoked with the base URL of the running static server
type ServerBody[T] = Callable[[str], Awaitable[T]]
