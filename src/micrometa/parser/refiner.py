"""Refinement of raw parser records into items."""

from collections.abc import Iterable, Mapping
from typing import Any

from micrometa.parser.item import Item
from micrometa.urls import BaseURL


def refine(raw_items: Iterable[Mapping[str, Any]], base_url: BaseURL) -> list[Item]:
    """Wrap raw item records into items sharing one base URL.

    The mapping is one-to-one and keeps the input order. Records are neither
    validated nor copied, and nested items are left for the items to refine
    on access.

    Args:
        raw_items: Raw item records in document order.
        base_url: Base URL of the parsed document.

    Returns:
        List of items, one per raw record.

    """
    return [Item(data, base_url) for data in raw_items]
