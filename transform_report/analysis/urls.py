"""
URL helpers used to turn page markers into report links.

All helpers are total: unset or malformed input degrades to an empty string.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

_ABSOLUTE_URL_MARKERS = ("https://", "http://")


def base_tenant_url(site_url: Optional[str]) -> str:
    """
    Reduce an absolute site URL to its scheme and host.
    
    Example:
        "https://contoso.sharepoint.com/sites/hr" -> "https://contoso.sharepoint.com"
    
    Args:
        site_url: Source site URL as logged by the producer
    
    Returns:
        "scheme://host", or "" when the value is unset, relative or unparsable
    """
    if not site_url or not any(m in site_url.lower() for m in _ABSOLUTE_URL_MARKERS):
        return ""
    
    try:
        parts = urlsplit(site_url.strip())
        host = parts.hostname
    except ValueError as e:
        logger.debug(f"Unparsable site URL {site_url!r}: {e}")
        return ""
    
    if not parts.scheme or not host:
        return ""
    return f"{parts.scheme}://{host}"


def prepend_if_not_none(value: Optional[str], prefix: str) -> str:
    """Return prefix + value, or "" when value is unset."""
    if value is None:
        return ""
    return f"{prefix}{value}"


def strip_relative_url_section(value: Optional[str]) -> str:
    """
    Keep the last segment of a server-relative URL for use as link text.
    
    "/sites/x/SitePages/page1.aspx" -> "page1.aspx"
    """
    if not value:
        return ""
    return value.rstrip("/").rsplit("/", 1)[-1]
