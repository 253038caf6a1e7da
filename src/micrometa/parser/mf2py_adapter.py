"""Structural microformats2 parsing with mf2py."""

import html
from collections.abc import Mapping
from typing import Any

import httpx
import mf2py
from bs4 import Tag

from micrometa.exceptions import ParserError
from micrometa.logger import logger


class Mf2pyParser:
    """Structural parser backed by the mf2py library."""

    def __init__(self, html_parser: str | None = None) -> None:
        """Initialize the parser.

        Args:
            html_parser: BeautifulSoup tree builder used for string documents
                (e.g. "html.parser", "lxml"). None lets BeautifulSoup choose.

        """
        self._html_parser = html_parser

    def parse(
        self,
        document: Any,
        base_url: str | None,
        scope: Tag | None = None,
        convert_classic: bool = False,
    ) -> dict[str, Any]:
        """Parse microformats2 from a document.

        Args:
            document: HTML string or bytes, or a BeautifulSoup tree.
            base_url: Absolute URL of the document for relative URL resolution.
            scope: Optional element; only it and its descendants are parsed.
            convert_classic: Whether to HTML-encode non e-* property values.

        Returns:
            The mf2py result dictionary (``items``, ``rels``, ``rel-urls``).

        Raises:
            ParserError: If no document was given.

        """
        if document is None:
            # mf2py would otherwise fetch base_url over the network
            raise ParserError("No document to parse")

        doc = document
        if scope is not None:
            # The scope only limits which items are found; the page base still applies
            doc = scope
            base_url = _document_base_url(scope, base_url)

        logger.debug(
            "[MF2 PARSE STARTED] url=%s scoped=%s parser=%s",
            base_url,
            scope is not None,
            self._html_parser,
        )
        result: dict[str, Any] = mf2py.parse(doc=doc, url=base_url, html_parser=self._html_parser)

        if convert_classic:
            result["items"] = [_encode_item(item) for item in result.get("items", [])]

        logger.debug("Found %d top-level items", len(result.get("items", [])))
        return result


def _document_base_url(scope: Tag, base_url: str | None) -> str | None:
    """Apply the <base href> of the tree owning ``scope`` to ``base_url``."""
    root = scope
    for parent in scope.parents:
        root = parent
    base = root.find("base", href=True)
    if base is None:
        return base_url
    href = str(base["href"])
    if base_url is None:
        return href
    return str(httpx.URL(base_url).join(href))


def _encode_item(item: Mapping[str, Any]) -> dict[str, Any]:
    encoded = dict(item)
    if "properties" in item:
        encoded["properties"] = {
            name: [_encode_value(value) for value in values]
            for name, values in item["properties"].items()
        }
    if isinstance(item.get("value"), str):
        encoded["value"] = _escape(item["value"])
    if "children" in item:
        encoded["children"] = [_encode_item(child) for child in item["children"]]
    return encoded


def _encode_value(value: Any) -> Any:
    if isinstance(value, str):
        return _escape(value)
    if isinstance(value, Mapping):
        if "type" in value:
            return _encode_item(value)
        # e-* values already carry their markup
        if "html" in value:
            return value
        return {key: _escape(v) if isinstance(v, str) else v for key, v in value.items()}
    return value


def _escape(text: str) -> str:
    return html.escape(text, quote=False)
