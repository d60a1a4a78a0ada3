"""Resolução de endpoints do provedor a partir da config do canal."""

from __future__ import annotations

from urllib.parse import urljoin, urlsplit

from utils.errors import ConfigurationError


def ensure_absolute_url(url: str) -> str:
    """Garante URL absoluta http(s).

    Raises:
        ConfigurationError: Se a URL não tiver esquema http(s) e host
    """
    parts = urlsplit(url or "")
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigurationError(f"invalid base url: {url!r}")
    return url


def resolve_endpoint(base_url: str, path: str) -> str:
    """Resolve `path` contra `base_url` (path absoluto substitui o do base)."""
    return urljoin(ensure_absolute_url(base_url), path)
