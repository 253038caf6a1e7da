"""Integration tests parsing real HTML with mf2py."""

import httpx
from bs4 import BeautifulSoup

from micrometa.config import Settings
from micrometa.parser.item import Item
from micrometa.parser.microformats2 import Microformats2Document

BASE_URL = "https://blog.example/2024/parsing"


def test_parse_document(entry_html: str, settings: Settings) -> None:
    """Test that top-level items are refined and rels pass through."""
    result = Microformats2Document(entry_html, BASE_URL, settings=settings).parse()

    items = result["items"]
    expected_count = 2
    assert len(items) == expected_count
    assert all(isinstance(item, Item) for item in items)
    assert items[0].is_of_type("entry")
    assert items[1].is_of_type("card")
    assert all(item.base_url == httpx.URL(BASE_URL) for item in items)
    assert result["rels"]["me"] == ["https://social.example/@jane"]


def test_nested_author_and_urls(entry_html: str, settings: Settings) -> None:
    """Test nested item refinement and relative URL resolution by mf2py."""
    entry = Microformats2Document(entry_html, BASE_URL, settings=settings).parse()["items"][0]

    assert entry.id == "post"
    assert entry.first("url") == "https://blog.example/posts/1"

    author = entry.first("author")
    assert isinstance(author, Item)
    assert author.is_of_type("hCard")
    assert author.first("name") == "Jane Doe"
    assert author.first("photo") == {"value": "https://blog.example/2024/jane.jpg", "alt": "Jane"}
    assert author.base_url == entry.base_url


def test_convert_classic(entry_html: str, settings: Settings) -> None:
    """Test HTML encoding of non e-* values and untouched e-* values."""
    document = Microformats2Document(entry_html, BASE_URL, settings=settings)

    encoded = document.parse(convert_classic=True)["items"]
    plain = document.parse(convert_classic=False)["items"]

    assert encoded[1].first("name") == "Second &lt;card&gt;"
    assert plain[1].first("name") == "Second <card>"
    assert encoded[0].first("content")["html"] == plain[0].first("content")["html"]


def test_scoped_parse(entry_html: str, settings: Settings) -> None:
    """Test that a scoping element restricts the parse to its subtree."""
    soup = BeautifulSoup(entry_html, "html.parser")
    standalone_card = soup.body.find_all("div", recursive=False)[0]

    result = Microformats2Document(soup, BASE_URL, settings=settings).parse(context=standalone_card)

    assert [item.types for item in result["items"]] == [("h-card",)]
    assert result["items"][0].first("name") == "Second &lt;card&gt;"


def test_document_without_microformats(settings: Settings) -> None:
    """Test that a document without items yields an empty item list."""
    result = Microformats2Document(
        "<html><head><link rel='author' href='/me'></head><body><p>Hi</p></body></html>",
        BASE_URL,
        settings=settings,
    ).parse()

    assert result["items"] == []
    assert result["rels"] == {"author": ["https://blog.example/me"]}


def test_to_dict_is_json_shaped(entry_html: str, settings: Settings) -> None:
    """Test that refined items convert back to microformats2 JSON."""
    items = Microformats2Document(entry_html, BASE_URL, settings=settings).parse()["items"]

    entry = items[0].to_dict()

    assert entry["type"] == ["h-entry"]
    assert entry["properties"]["author"][0]["type"] == ["h-card"]
    assert isinstance(entry["properties"]["author"][0], dict)


def test_scoped_parse_keeps_document_base(settings: Settings) -> None:
    """Test that a scoped parse resolves URLs against the page's <base href>."""
    html = (
        '<html><head><base href="https://cdn.example/x/"></head><body>'
        '<div class="h-card"><a class="p-name u-url" href="me">Me</a></div>'
        "</body></html>"
    )
    soup = BeautifulSoup(html, "html.parser")
    document = Microformats2Document(soup, "https://a.example/", settings=settings)

    full = document.parse()["items"][0]
    scoped = document.parse(context=soup.find("div"))["items"][0]

    assert full.first("url") == "https://cdn.example/x/me"
    assert scoped.first("url") == "https://cdn.example/x/me"
