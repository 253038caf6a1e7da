"""HTTP fetching of documents to parse."""

from types import TracebackType
from typing import NamedTuple, Self

import httpx

from micrometa.exceptions import FetchError
from micrometa.logger import logger


class FetchedDocument(NamedTuple):
    """A fetched document and the URL it was finally served from."""

    html: str
    url: str


class DocumentFetcher:
    """HTTP client for fetching HTML documents.

    Uses a persistent httpx client to reuse connections across requests.
    """

    def __init__(self, timeout: float, user_agent: str) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds.
            user_agent: User-Agent header sent with every request.

        """
        self._timeout = timeout
        self._client = httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            headers={"User-Agent": user_agent},
        )

    def fetch(self, url: str) -> FetchedDocument:
        """Fetch a document.

        Args:
            url: URL of the document.

        Returns:
            FetchedDocument with the body and the final URL after redirects.

        Raises:
            FetchError: If the request fails or the server returns an error status.

        """
        try:
            logger.debug("[FETCH STARTED] for URL: %s", url)
            resp = self._client.get(url)
            resp.raise_for_status()

        except httpx.HTTPStatusError as e:
            raise FetchError(f"Server returned error: {e}") from e

        except httpx.RequestError as e:
            raise FetchError(f"Server did not respond: {e}") from e

        final_url = str(resp.url)
        logger.debug("Fetched %d characters from %s", len(resp.text), final_url)
        return FetchedDocument(html=resp.text, url=final_url)

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        logger.debug("Closing document fetcher")
        self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
