"""Parser package for microformats2 extraction.

This package wraps a structural microformats2 parser, refines its raw
items into Item objects and provides the vocable rules used for type
and property names.
"""

from micrometa.exceptions import InvalidVocableError, ParserSetupError
from micrometa.parser.item import Item
from micrometa.parser.microformats2 import Microformats2Document, create_structural_parser
from micrometa.parser.protocols import StructuralParser
from micrometa.parser.refiner import refine
from micrometa.parser.vocable import VocableResult, decamelize, is_valid_vocable, try_decamelize

__all__ = [
    "InvalidVocableError",
    "Item",
    "Microformats2Document",
    "ParserSetupError",
    "StructuralParser",
    "VocableResult",
    "create_structural_parser",
    "decamelize",
    "is_valid_vocable",
    "refine",
    "try_decamelize",
]
