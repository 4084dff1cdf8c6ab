"""Markdown file previewer."""

import argparse
import logging
import sys
from typing import Optional

from mdpreview.console import ConsoleHandler
from mdpreview.converters import CONVERTERS, DEFAULT_CONVERTER, get_converter
from mdpreview.core.errors import MdPreviewError
from mdpreview.pipeline import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """builds the command line parser."""
    parser = argparse.ArgumentParser(
        prog="mdpreview",
        description="Render a Markdown file to index.html and open it",
    )
    parser.add_argument(
        "-file",
        "--file",
        dest="file",
        metavar="PATH",
        help="Markdown file to preview",
    )
    parser.add_argument(
        "-t",
        "--template",
        metavar="PATH",
        help="alternative HTML template file",
    )
    parser.add_argument(
        "-s",
        "--skip-preview",
        action="store_true",
        help="skip auto-preview",
    )
    parser.add_argument(
        "-e",
        "--engine",
        choices=sorted(CONVERTERS),
        default=DEFAULT_CONVERTER,
        help=f"Markdown converter (default: {DEFAULT_CONVERTER})",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="don't show the status spinner while the viewer starts",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for mdpreview CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 fatal error or missing -file)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.file:
        parser.print_usage(sys.stderr)
        return 1

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    console = ConsoleHandler(quiet=args.quiet)
    try:
        run(
            args.file,
            sys.stdout,
            skip_preview=args.skip_preview,
            template_file=args.template,
            converter=get_converter(args.engine),
            console=console,
        )
    except MdPreviewError as e:
        logger.error("Fatal error: %s", e)
        logger.debug("run aborted", exc_info=True)
        console.log_error(str(e))
        return 1

    return 0
