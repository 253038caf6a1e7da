"""Base URL handling."""

import httpx

BaseURL = httpx.URL | None


def to_base_url(url: str | httpx.URL | None) -> BaseURL:
    """Coerce a URL-like value into the base URL used for a parse.

    Args:
        url: A URL string, an existing httpx.URL, or None.

    Returns:
        The httpx.URL as-is, a new httpx.URL built from the string,
        or None when no (or an empty) URL was given.

    Raises:
        httpx.InvalidURL: If the string cannot be parsed as a URL.

    """
    if url is None or isinstance(url, httpx.URL):
        return url
    if not url:
        return None
    return httpx.URL(url)
