"""micrometa - microformats2 parsing with refined items.

Wraps an mf2py parse, binds the document's base URL and turns the raw
items into Item objects. Also validates and normalizes microformats2 vocables.
"""

from micrometa.config import Settings, settings
from micrometa.exceptions import InvalidVocableError, MicrometaError
from micrometa.parser import Item, Microformats2Document, decamelize, is_valid_vocable
from micrometa.version import __version__

__all__ = [
    "InvalidVocableError",
    "Item",
    "MicrometaError",
    "Microformats2Document",
    "Settings",
    "__version__",
    "decamelize",
    "is_valid_vocable",
    "settings",
]
