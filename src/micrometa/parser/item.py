"""Refined microformats2 items."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from micrometa.exceptions import InvalidVocableError
from micrometa.parser.vocable import decamelize
from micrometa.urls import BaseURL


class Item:
    """A microformats2 item wrapping one raw parser record.

    Properties can be read with ``get``/``first`` or as attributes using
    their camel cased name (``item.photoUrl``, ``item.url``). Names taken by
    the accessors below (``id``, ``value``, ``types``, ``properties``, ...)
    must be read with ``get``. The document base URL is ``base_url``.

    The raw record is never modified. Nested items found in property values
    or children are refined on access and share this item's base URL.
    """

    __slots__ = ("_data", "_url")

    def __init__(self, data: Mapping[str, Any], url: BaseURL = None) -> None:
        """Initialize the item.

        Args:
            data: Raw item record as produced by the structural parser.
            url: Base URL of the parsed document.

        """
        self._data = data
        self._url = url

    @property
    def raw(self) -> Mapping[str, Any]:
        """Read-only view of the wrapped raw record."""
        return MappingProxyType(self._data)

    @property
    def base_url(self) -> BaseURL:
        """Base URL in effect when the item was parsed."""
        return self._url

    @property
    def types(self) -> tuple[str, ...]:
        """Root types of the item, e.g. ``("h-card",)``."""
        return tuple(self._data.get("type", ()))

    @property
    def id(self) -> str | None:
        """The item's id attribute, if any."""
        return self._data.get("id")

    @property
    def value(self) -> Any:
        """Plain value of the item when it is embedded as a property value."""
        return self._data.get("value")

    @property
    def properties(self) -> dict[str, list[Any]]:
        """Item properties with nested items refined."""
        return {
            name: [self._refine_value(value) for value in values]
            for name, values in self._data.get("properties", {}).items()
        }

    @property
    def children(self) -> list["Item"]:
        """Nested child items."""
        return [Item(child, self._url) for child in self._data.get("children", ())]

    def get(self, name: str) -> list[Any]:
        """Return all values of a property.

        Args:
            name: Property vocable, hyphenated or camel case (``photoUrl``).

        Returns:
            List of property values, empty if the property is absent.

        Raises:
            InvalidVocableError: If ``name`` is not a valid vocable.

        """
        values = self._data.get("properties", {}).get(decamelize(name), ())
        return [self._refine_value(value) for value in values]

    def first(self, name: str, default: Any = None) -> Any:
        """Return the first value of a property, or ``default`` if it has none."""
        values = self.get(name)
        return values[0] if values else default

    def is_of_type(self, *types: str) -> bool:
        """Check whether the item has any of the given root types.

        Types may omit the ``h-`` prefix and may be camel cased,
        so ``"card"``, ``"hCard"`` and ``"h-card"`` are equivalent.
        """
        own_types = set(self.types)
        for item_type in types:
            normalized = decamelize(item_type)
            if not normalized.startswith("h-"):
                normalized = f"h-{normalized}"
            if normalized in own_types:
                return True
        return False

    def resolve(self, href: str) -> str:
        """Resolve a possibly relative reference against the base URL."""
        if self._url is None:
            return href
        return str(self._url.join(href))

    def to_dict(self) -> dict[str, Any]:
        """Return the item in microformats2 JSON shape."""
        result: dict[str, Any] = {
            "type": list(self.types),
            "properties": {
                name: [_value_to_dict(value) for value in values]
                for name, values in self.properties.items()
            },
        }
        for key in ("id", "value"):
            if key in self._data:
                result[key] = self._data[key]
        if "children" in self._data:
            result["children"] = [child.to_dict() for child in self.children]
        return result

    def _refine_value(self, value: Any) -> Any:
        if isinstance(value, Mapping) and "type" in value:
            return Item(value, self._url)
        return value

    def __getattr__(self, name: str) -> list[Any]:
        # Only reached for names that are not regular attributes
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            values = self.get(name)
        except InvalidVocableError as e:
            raise AttributeError(name) from e
        if not values:
            raise AttributeError(name)
        return values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self._data == other._data and self._url == other._url

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Item(types={list(self.types)!r}, url={str(self._url) if self._url else None!r})"


def _value_to_dict(value: Any) -> Any:
    return value.to_dict() if isinstance(value, Item) else value
