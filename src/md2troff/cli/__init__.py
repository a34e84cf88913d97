#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for md2troff.

The CLI reads one markdown document and writes its ms macro source, or with
``--pdf`` the typeset PDF, to stdout or to the file given with ``--out``.

Environment Variable Support
----------------------------
MD2TROFF_TROFF names the troff executable used for ``--pdf`` when
``--troff`` is not given.

Examples
--------
Render macros to stdout::

    $ md2troff paper.md

Typeset a PDF::

    $ md2troff paper.md --pdf --out paper.pdf

Read stdin and use another troff::

    $ cat paper.md | md2troff - --pdf --troff /usr/local/plan9/bin/troff > paper.pdf

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from md2troff.cli.builder import create_parser, get_exit_code_for_exception
from md2troff.constants import EXIT_FILE_ERROR, EXIT_SUCCESS, TROFF_BINARY_ENV_VAR
from md2troff.exceptions import Md2TroffError
from md2troff.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "get_exit_code_for_exception"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _read_input(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _build_options(parsed_args: argparse.Namespace) -> tuple:
    from md2troff.options import MarkdownParserOptions, MsRendererOptions, TypesetOptions

    parser_options = MarkdownParserOptions(parse_title_block=parsed_args.title_block)
    renderer_options = MsRendererOptions(sniff_front_matter=parsed_args.sniff_front_matter)

    typeset_options = TypesetOptions(timeout=parsed_args.timeout)
    troff_binary = parsed_args.troff or os.environ.get(TROFF_BINARY_ENV_VAR)
    if troff_binary:
        typeset_options = typeset_options.create_updated(troff_binary=troff_binary)

    return parser_options, renderer_options, typeset_options


def _write_output(content: bytes, output: str | None) -> None:
    if output:
        Path(output).write_bytes(content)
        logger.info("Wrote %d bytes to %s", len(content), output)
    else:
        sys.stdout.buffer.write(content)
        sys.stdout.buffer.flush()


def main(args: list[str] | None = None) -> int:
    """Execute the md2troff command line and return the exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        source = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    # Lazy import keeps --help and --version fast
    from md2troff import markdown_to_ms
    from md2troff.typeset import typeset_pdf

    try:
        parser_options, renderer_options, typeset_options = _build_options(parsed_args)
        content = markdown_to_ms(source, parser_options, renderer_options)
        if parsed_args.pdf:
            content = typeset_pdf(content, typeset_options)
        _write_output(content, parsed_args.output)
    except (Md2TroffError, OSError, ValueError, TypeError) as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
