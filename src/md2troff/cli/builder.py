#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/cli/builder.py
"""Argument parser construction and exit code mapping for the md2troff CLI."""

from __future__ import annotations

import argparse

from md2troff.constants import (
    EXIT_ERROR,
    EXIT_EXTERNAL_TOOL_ERROR,
    EXIT_FILE_ERROR,
    EXIT_VALIDATION_ERROR,
    TROFF_BINARY_ENV_VAR,
)
from md2troff.exceptions import ExternalToolError, ValidationError


def _option_help(options_class: type, name: str) -> str:
    # argparse applies %-formatting to help strings
    return options_class.option_help(name).replace("%", "%%")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    from md2troff import __version__
    from md2troff.options import MarkdownParserOptions, MsRendererOptions, TypesetOptions

    parser = argparse.ArgumentParser(
        prog="md2troff",
        description="Render markdown as troff ms macros, or typeset it to PDF.",
        epilog=f"The troff binary defaults to ${TROFF_BINARY_ENV_VAR} when it is set.",
    )

    parser.add_argument("input", metavar="INPUT", help="Markdown file to render, or '-' to read stdin")
    parser.add_argument(
        "--out",
        "-o",
        dest="output",
        metavar="OUTPUT",
        help="Write the result to OUTPUT instead of stdout",
    )
    parser.add_argument(
        "--pdf",
        action="store_true",
        help="Typeset the macros with troff, tr2post and ps2pdf and write PDF",
    )
    parser.add_argument(
        "--sniff-front-matter",
        action="store_true",
        help=_option_help(MsRendererOptions, "sniff_front_matter"),
    )
    parser.add_argument(
        "--no-title-block",
        dest="title_block",
        action="store_false",
        help="Do not " + _option_help(MarkdownParserOptions, "parse_title_block").lower(),
    )
    parser.add_argument("--troff", metavar="PATH", help=_option_help(TypesetOptions, "troff_binary"))
    parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help=_option_help(TypesetOptions, "timeout"),
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Also write log messages to PATH")
    parser.add_argument("--trace", action="store_true", help="Enable trace logging with timestamps")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, ValueError, TypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, ExternalToolError):
        return EXIT_EXTERNAL_TOOL_ERROR

    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR

    # Parsing, rendering and unexpected errors
    return EXIT_ERROR
