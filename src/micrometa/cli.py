"""Command line interface: emit the microformats2 items of a page as JSON."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

import httpx

from micrometa.config import get_settings
from micrometa.exceptions import MicrometaError
from micrometa.fetcher import DocumentFetcher
from micrometa.logger import logger, setup_logging
from micrometa.parser.item import Item
from micrometa.parser.microformats2 import Microformats2Document
from micrometa.timing import timer


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``micrometa`` command."""
    parser = argparse.ArgumentParser(
        prog="micrometa",
        description="Emit JSON that contains the microformats2 items found in an HTML page",
    )
    parser.add_argument("--stdin", action="store_true", help="Read the HTML from standard input")
    parser.add_argument(
        "--base-url",
        help="Base URL for relative URL resolution (defaults to the fetched URL)",
    )
    parser.add_argument(
        "--no-convert-classic",
        dest="convert_classic",
        action="store_false",
        default=None,
        help="Do not HTML-encode non e-* property values",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Log debug messages")
    parser.add_argument("url", nargs="?", help="URL to fetch when not reading from stdin")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Command line arguments without the program name.

    Returns:
        Process exit code.

    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    if args.stdin and args.url:
        parser.error("either give --stdin or a URL, not both")
    if not args.stdin and not args.url:
        parser.error("a URL or --stdin is required")

    settings = get_settings()
    try:
        if args.stdin:
            html, url = sys.stdin.read(), args.base_url
        else:
            with (
                DocumentFetcher(settings.fetch_timeout, settings.fetch_user_agent) as fetcher,
                timer("Document fetch", logging.DEBUG),
            ):
                fetched = fetcher.fetch(args.url)
            html, url = fetched.html, args.base_url or fetched.url

        document = Microformats2Document(html, url, settings=settings)
        results = document.parse(convert_classic=args.convert_classic)
    except (MicrometaError, httpx.InvalidURL) as e:
        logger.error("%s", e)
        return 1

    print(json.dumps(results, indent=4, sort_keys=True, default=_to_json))
    return 0


def _to_json(obj: Any) -> Any:
    if isinstance(obj, Item):
        return obj.to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


if __name__ == "__main__":
    sys.exit(main())
