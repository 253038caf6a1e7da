"""Protocol definitions for the parser package.

Contains structural typing protocols that define interfaces for
parser components, enabling better type checking and extensibility.
"""

from typing import Any, Protocol

from bs4 import Tag


class StructuralParser(Protocol):
    """Protocol defining the interface for structural microformats2 parsers.

    A structural parser walks the HTML, applies the microformats2 class
    grammar and returns the parsed document as a plain dictionary.

    Implementations should:
    - Return a dictionary with an ``items`` list of raw item records
    - Pass any other top-level results (``rels``, ``rel-urls``) through
    - Let their own parsing errors propagate unchanged
    """

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
            scope: Optional element restricting the parse to its subtree.
            convert_classic: Whether to HTML-encode non e-* property values.

        Returns:
            Parse result with at least an ``items`` key.

        """
        ...
