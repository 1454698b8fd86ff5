"""Clients for external document archives."""
from __future__ import annotations

from .presidency import DEFAULT_BASE_URL, DEFAULT_CATALOG_PATH, DocumentSource, PresidencyClient

__all__ = ["DEFAULT_BASE_URL", "DEFAULT_CATALOG_PATH", "DocumentSource", "PresidencyClient"]
