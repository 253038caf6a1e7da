"""Unit tests for the document fetcher."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from micrometa.exceptions import FetchError
from micrometa.fetcher import DocumentFetcher, FetchedDocument


class TestDocumentFetcher:
    """Test document fetcher functionality."""

    @pytest.fixture
    def fetcher(self) -> DocumentFetcher:
        """Create a document fetcher for testing."""
        return DocumentFetcher(timeout=5.0, user_agent="micrometa-test")

    def test_client_configuration(self, fetcher: DocumentFetcher) -> None:
        """Test that redirects are followed and the user agent is sent."""
        assert fetcher._client.follow_redirects is True
        assert fetcher._client.headers["User-Agent"] == "micrometa-test"

    def test_fetch_success(self, fetcher: DocumentFetcher) -> None:
        """Test that the body and final URL are returned."""
        mock_response = MagicMock()
        mock_response.text = "<html><body class='h-card'>Jane</body></html>"
        mock_response.url = httpx.URL("https://example.com/final")

        with patch.object(fetcher._client, "get", return_value=mock_response) as mock_get:
            result = fetcher.fetch("https://example.com/start")

        mock_get.assert_called_once_with("https://example.com/start")
        mock_response.raise_for_status.assert_called_once()
        assert result == FetchedDocument(
            html="<html><body class='h-card'>Jane</body></html>",
            url="https://example.com/final",
        )

    def test_fetch_http_status_error(self, fetcher: DocumentFetcher) -> None:
        """Test that error statuses raise FetchError."""
        request = httpx.Request("GET", "https://example.com/missing")
        response = httpx.Response(404, request=request)

        with (
            patch.object(fetcher._client, "get", return_value=response),
            pytest.raises(FetchError, match="Server returned error"),
        ):
            fetcher.fetch("https://example.com/missing")

    def test_fetch_request_error(self, fetcher: DocumentFetcher) -> None:
        """Test that connection failures raise FetchError."""
        error = httpx.ConnectError("Connection refused")

        with (
            patch.object(fetcher._client, "get", side_effect=error),
            pytest.raises(FetchError, match="Server did not respond"),
        ):
            fetcher.fetch("https://example.com/")

    def test_fetch_unexpected_error_propagates(self, fetcher: DocumentFetcher) -> None:
        """Test that other exceptions are not wrapped."""
        with (
            patch.object(fetcher._client, "get", side_effect=Exception("Unexpected")),
            pytest.raises(Exception, match="Unexpected"),
        ):
            fetcher.fetch("https://example.com/")

    def test_context_manager_closes_client(self) -> None:
        """Test that leaving the context closes the HTTP client."""
        with DocumentFetcher(timeout=5.0, user_agent="ua") as fetcher:
            client = fetcher._client

        assert client.is_closed
