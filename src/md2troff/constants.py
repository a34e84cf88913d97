#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2troff.

This module centralizes the ms macro names, the default configuration values
and the CLI exit codes used across the library.

Constants are organized by category:
1. ms Macro Names - Immutable names of the ms macros emitted by the renderer
2. Rendering Defaults - Defaults for the ms renderer
3. Parsing Defaults - Defaults for the markdown adapter
4. Typesetting Defaults - External formatter binaries and their arguments
5. CLI Exit Codes
6. Logging - Log line formats used by the CLI
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# ms Macro Names
# =============================================================================
# See https://plan9.io/sys/doc/troff.pdf and ms(7).

SINGLE_COLUMN: Final = "1C"
DOUBLE_COLUMN: Final = "2C"
BEGIN_ABSTRACT: Final = "AB"
END_ABSTRACT: Final = "AE"
INSTITUTION: Final = "AI"
AUTHOR: Final = "AU"
BOLD: Final = "B"
DATE_ON_PAGE: Final = "DA"
DISPLAY_END: Final = "DE"
DISPLAY_START: Final = "DS"
TABLE_END: Final = "TE"
TABLE_START: Final = "TS"
BEGIN_EQUATION: Final = "EQ"
END_EQUATION: Final = "EN"
BEGIN_FOOTNOTE: Final = "FS"
END_FOOTNOTE: Final = "FE"
ITALIC: Final = "I"
BEGIN_AND_INDENT_PARAGRAPH: Final = "IP"
END_KEEP: Final = "KE"
BEGIN_KEEP: Final = "KF"
START_KEEP: Final = "KS"
INCREASE_TYPE_SIZE: Final = "LG"
LEFT_ALIGNED_PARAGRAPH: Final = "LP"
CHANGE_DATE: Final = "ND"
NUMBERED_HEADING: Final = "NH"
NORMAL_TYPE: Final = "NL"
BEGIN_PARAGRAPH: Final = "PP"
ROMAN: Final = "R"
RELEASE_PAPER: Final = "RP"
END_INDENT: Final = "RE"
BEGIN_INDENT: Final = "RS"
SIGNATURE: Final = "SG"
SECTION_HEADING: Final = "SH"
DECREASE_TYPE_SIZE: Final = "SM"
TITLE: Final = "TL"
TABLE_HEADING: Final = "TH"
UNDERLINE: Final = "UL"
BEGIN_CODE_BLOCK: Final = "P1"
END_CODE_BLOCK: Final = "P2"
HTML: Final = "HTML"

LINEBREAK: Final = "\n"

# Table header flag passed to .TS
TABLE_HAS_HEADER: Final = "H"

# ms date format used by .ND, e.g. "Feb 22, 2020" (no zero padding on the day)
CHANGE_DATE_FORMAT: Final = "{month} {day}, {year}"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_MS_PREAMBLE = ""
DEFAULT_MS_SNIFF_FRONT_MATTER = False

# Prefix that marks a text block as front matter when sniffing is enabled
FRONT_MATTER_SNIFF_PREFIX = "title:"

# Minimum number of spaces between aligned table columns
TABLE_COLUMN_PADDING = 4

# =============================================================================
# Parsing Defaults
# =============================================================================

DEFAULT_MARKDOWN_PARSE_TITLE_BLOCK = True
DEFAULT_MARKDOWN_PARSE_TABLES = True
DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH = False

# Lines at the very start of a markdown file that carry the title block
TITLE_BLOCK_LINE_PREFIX = "%"

# =============================================================================
# Typesetting Defaults
# =============================================================================

DEFAULT_TROFF_BINARY = "/usr/lib/plan9/bin/troff"
DEFAULT_TROFF_ARGS = ("-Tutf", "-ms", "-mpictures")
DEFAULT_TR2POST_BINARY = "tr2post"
DEFAULT_TR2POST_ARGS: tuple[str, ...] = ()
DEFAULT_PS2PDF_BINARY = "ps2pdf"
DEFAULT_PS2PDF_ARGS = ("-", "-")
DEFAULT_TYPESET_TIMEOUT: float | None = None

# Environment variable that overrides the troff binary in the CLI
TROFF_BINARY_ENV_VAR = "MD2TROFF_TROFF"

# =============================================================================
# CLI Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_EXTERNAL_TOOL_ERROR = 6

# =============================================================================
# Logging
# =============================================================================

LOG_FORMAT = "md2troff: %(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
