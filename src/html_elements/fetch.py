"""Fetch the MDN HTML element reference page."""

import httpx

MDN_HOST = "https://developer.mozilla.org"
MDN_ELEMENTS_URL = f"{MDN_HOST}/en-US/docs/Web/HTML/Reference/Elements"


class FetchError(Exception):
    """Raised when the reference page cannot be fetched."""


def fetch_html(url: str = MDN_ELEMENTS_URL, timeout: int = 30) -> str:
    """Fetch HTML from URL.

    Args:
        url: URL to fetch
        timeout: Request timeout in seconds

    Returns:
        HTML content as string

    Raises:
        FetchError: If request fails or returns a non-success status
    """
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response.text
    except httpx.HTTPStatusError as e:
        raise FetchError(f"HTTP {e.response.status_code} for {url}") from e
    except httpx.RequestError as e:
        raise FetchError(f"Request failed for {url}: {e}") from e


def validate_index_html(html: str, url: str) -> None:
    """Reject an empty response body.

    An empty body counts as a failed fetch so the bundled registry is not
    overwritten with nothing. HTML that parses but lacks the expected
    sections is still accepted; it just yields a smaller registry.

    Raises:
        FetchError: If HTML is empty
    """
    if not html.strip():
        raise FetchError(f"Empty HTML from {url}")
