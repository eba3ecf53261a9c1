"""HTTP fetcher: the only blocking step in the pipeline."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import httpx

from pagedigest.config import settings
from pagedigest.scraper.models import RawPage

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


class InvalidUrlError(ValueError):
    """Raised when a URL is not an absolute http(s) URL."""


def validate_url(url: str) -> str:
    """Return *url* stripped of surrounding whitespace, or raise.

    Raises:
        InvalidUrlError: If *url* is empty, has no host, or uses a scheme
            other than ``http``/``https``.
    """
    candidate = (url or "").strip()
    if not candidate:
        raise InvalidUrlError("URL is required")
    try:
        parsed = urlparse(candidate)
        parsed.port  # raises ValueError when out of range
    except ValueError as exc:
        raise InvalidUrlError(f"Invalid URL format: {candidate!r}") from exc
    if parsed.scheme.lower() not in _ALLOWED_SCHEMES or not parsed.netloc:
        raise InvalidUrlError(f"Invalid URL format: {candidate!r}")
    return candidate


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Raises:
        InvalidUrlError: If *url* is not a valid http(s) URL, including URLs
            that httpx itself refuses to build a request for.
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.RequestError: On connection failures and timeouts.
    """
    url = validate_url(url)

    with httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        try:
            response = client.get(url)
        except httpx.InvalidURL as exc:
            raise InvalidUrlError(f"Invalid URL format: {url!r}") from exc
        response.raise_for_status()
        html = response.text
        status_code = response.status_code

    logger.debug("Fetched %s (HTTP %d, %d chars)", url, status_code, len(html))
    return RawPage(url=url, html=html, status_code=status_code)
