"""Microformats2 document parsing with item refinement."""

import logging
from typing import Any

import httpx
from bs4 import Tag
from bs4.builder import builder_registry

from micrometa.config import Settings, get_settings
from micrometa.exceptions import ParserSetupError
from micrometa.logger import logger
from micrometa.parser.protocols import StructuralParser
from micrometa.parser.refiner import refine
from micrometa.timing import timeit
from micrometa.urls import BaseURL, to_base_url


def create_structural_parser(settings: Settings | None = None) -> StructuralParser:
    """Build the default structural parser.

    Args:
        settings: Application settings; the cached settings are used if omitted.

    Returns:
        An mf2py backed StructuralParser.

    Raises:
        ParserSetupError: If mf2py is not installed or the configured
            BeautifulSoup tree builder is unavailable.

    """
    settings = settings or get_settings()

    try:
        from micrometa.parser.mf2py_adapter import Mf2pyParser
    except ImportError as e:
        msg = "mf2py is required for microformats2 parsing, install it with 'pip install mf2py'"
        raise ParserSetupError(msg) from e

    html_parser = settings.mf2_html_parser
    if builder_registry.lookup(html_parser) is None:
        msg = f"BeautifulSoup tree builder {html_parser!r} is not installed"
        raise ParserSetupError(msg)

    logger.debug("Using mf2py with tree builder %s", html_parser)
    return Mf2pyParser(html_parser=html_parser)


class Microformats2Document:
    """A document to be parsed for microformats2 items.

    Binds the document to its base URL and turns the raw items of the
    structural parser into refined items.
    """

    def __init__(
        self,
        document: Any,
        url: str | httpx.URL | None = None,
        parser: StructuralParser | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the document.

        Args:
            document: HTML string or bytes, or a BeautifulSoup tree.
            url: URL of the document, used for relative URL resolution.
            parser: Structural parser; built with create_structural_parser if omitted.
            settings: Application settings; the cached settings are used if omitted.

        Raises:
            ParserSetupError: If no parser was given and the default one cannot be built.

        """
        self._settings = settings or get_settings()
        self._document = document
        self._url = to_base_url(url)
        self._parser = parser if parser is not None else create_structural_parser(self._settings)

    @property
    def url(self) -> BaseURL:
        """Base URL of the document."""
        return self._url

    @timeit("Microformats2 parsing", logging.DEBUG)
    def parse(self, convert_classic: bool | None = None, context: Tag | None = None) -> dict[str, Any]:
        """Parse the document and refine the items found.

        If ``convert_classic`` is set, angle brackets in non e-* property values
        are HTML-encoded, bringing all output to the same level of encoding.

        If ``context`` is given, only that element and its descendants are
        parsed for microformats.

        Args:
            convert_classic: Whether to HTML-encode non e-* properties.
                Defaults to the ``mf2_convert_classic`` setting.
            context: Optional element from which to parse microformats.

        Returns:
            The structural parser result with ``items`` replaced by refined items.

        """
        if convert_classic is None:
            convert_classic = self._settings.mf2_convert_classic

        base_url = str(self._url) if self._url is not None else None
        results = self._parser.parse(self._document, base_url, context, convert_classic)
        results["items"] = refine(results.get("items", []), self._url)
        return results
