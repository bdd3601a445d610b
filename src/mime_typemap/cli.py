#!/usr/bin/env python3
"""Command line interface for mime-typemap.

Examples
--------
.. code-block:: bash

    # Look up extensions in the built-in map plus a local file
    mime-typemap --file ~/.mime.types lookup html png

    # Parse and normalize a media type
    mime-typemap parse 'Text/HTML ; Charset="utf-8"'

    # Print every binding as a positional type map
    mime-typemap --no-builtin --url https://example.com/mime.types dump
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config.settings import get_settings
from .exceptions import MimeTypemapError
from .media.defaults import DEFAULT_TYPEMAP
from .media.registry import MimeTypeRegistry
from .media.tokens import quote
from .media.types import MimeType
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mime-typemap", description="MIME type map lookups"
    )
    parser.add_argument(
        "--file",
        action="append",
        default=[],
        help="Type-map file to load (repeatable)",
    )
    parser.add_argument("--url", help="Type-map URL to load")
    parser.add_argument(
        "--no-builtin",
        action="store_true",
        help="Do not load the built-in type map",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: from MIME_TYPEMAP_LOG_LEVEL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    lookup = sub.add_parser("lookup", help="Print the type bound to extensions")
    lookup.add_argument("extensions", nargs="+")

    parse = sub.add_parser("parse", help="Parse and normalize a media type")
    parse.add_argument("text")

    sub.add_parser("dump", help="Print all bindings")
    return parser


async def build_registry(args: argparse.Namespace) -> Optional[MimeTypeRegistry]:
    """Build a registry from the built-in map and the requested sources.

    :return: The registry, or None if a requested source failed to load
    :rtype: Optional[MimeTypeRegistry]
    """
    settings = get_settings()
    registry = MimeTypeRegistry()
    if settings.load_builtin_types and not args.no_builtin:
        registry.parse(DEFAULT_TYPEMAP)

    sources: List[str] = [str(p) for p in settings.typemap_paths]
    sources.extend(args.file)
    url = args.url or settings.typemap_url
    if url:
        sources.append(url)

    for source in sources:
        result = await registry.load(
            source, encoding=settings.encoding, timeout=settings.http_timeout
        )
        if not result.succeeded:
            print(f"error: {source}: {result.error}", file=sys.stderr)
            return None
    return registry


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool.

    :param argv: Arguments (default: ``sys.argv[1:]``)
    :type argv: Optional[List[str]]
    :return: Process exit status
    :rtype: int
    """
    args = build_parser().parse_args(argv)
    setup_logging(
        level=args.log_level or get_settings().log_level, stream=sys.stderr
    )

    if args.command == "parse":
        try:
            mime_type = MimeType(args.text)
        except MimeTypemapError as e:
            print(f"error: {e.message}", file=sys.stderr)
            return 1
        print(mime_type)
        return 0

    registry = asyncio.run(build_registry(args))
    if registry is None:
        return 1

    if args.command == "lookup":
        status = 0
        for extension in args.extensions:
            mime_type = registry.get_mime_type_string(extension)
            if mime_type is None:
                print(f"{extension}\t(unknown)")
                status = 1
            else:
                print(f"{extension}\t{mime_type}")
        return status

    # Positional lines cannot carry parameters with spaces
    for extension in sorted(registry.get_extensions()):
        mime_type = registry.get_mime_type(extension)
        if mime_type.get_parameters().is_empty():
            print(f"{mime_type} {extension}")
        else:
            print(f"type={quote(str(mime_type))} exts={extension}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
