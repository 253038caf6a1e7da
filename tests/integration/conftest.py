"""Pytest configuration for integration tests.

These tests run the real mf2py parser over HTML fixtures.
No network access is needed.
"""

import pytest

from micrometa.config import Settings

ENTRY_HTML = """<!DOCTYPE html>
<html>
<head>
  <link rel="me" href="https://social.example/@jane">
</head>
<body>
  <article class="h-entry" id="post">
    <h1 class="p-name">Parsing <em>microformats</em></h1>
    <a class="u-url" href="/posts/1">Permalink</a>
    <div class="p-author h-card">
      <img class="u-photo" src="jane.jpg" alt="Jane">
      <a class="p-name u-url" href="/">Jane Doe</a>
    </div>
    <div class="e-content"><p>Hello <b>world</b> &amp; friends</p></div>
  </article>
  <div class="h-card"><span class="p-name">Second &lt;card&gt;</span></div>
</body>
</html>
"""


@pytest.fixture
def entry_html() -> str:
    """Provide a document with an h-entry and a standalone h-card."""
    return ENTRY_HTML


@pytest.fixture
def settings() -> Settings:
    """Provide explicit settings independent of the environment."""
    return Settings(mf2_html_parser="html.parser", mf2_convert_classic=True)
