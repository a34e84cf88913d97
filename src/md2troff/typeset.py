#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/typeset.py
"""Typesetting passes that turn ms macro source into PDF.

Each pass runs one external program with its input on stdin and returns
whatever the program writes to stdout. The programs are opaque byte
transforms::

    ms macros --troff--> troff output --tr2post--> PostScript --ps2pdf--> PDF

"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from md2troff.exceptions import ExternalToolError
from md2troff.options.typeset import TypesetOptions

logger = logging.getLogger(__name__)


def _run_pass(binary: str, args: Sequence[str], payload: bytes, timeout: float | None) -> bytes:
    """Run ``binary args...`` with ``payload`` on stdin and return its stdout.

    Raises
    ------
    ExternalToolError
        If the binary cannot be started, times out or exits with a non-zero
        status

    """
    command = [binary, *args]
    logger.debug("Running %s: %s", binary, command)

    try:
        result = subprocess.run(command, input=payload, capture_output=True, timeout=timeout, check=False)
    except subprocess.TimeoutExpired as e:
        raise ExternalToolError(binary, args, None, stderr=f"timed out after {timeout} seconds", original_error=e) from e
    except OSError as e:
        raise ExternalToolError(binary, args, None, stderr=str(e), original_error=e) from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise ExternalToolError(binary, args, result.returncode, stderr=stderr)

    logger.debug("%s produced %d bytes", binary, len(result.stdout))
    return result.stdout


def run_troff(payload: bytes, options: TypesetOptions | None = None) -> bytes:
    """Typeset ms macro source with troff.

    Parameters
    ----------
    payload : bytes
        ms macro source
    options : TypesetOptions or None, default = None
        Binaries and arguments to use

    Returns
    -------
    bytes
        Device-independent troff output

    """
    options = options or TypesetOptions()
    return _run_pass(options.troff_binary, options.troff_args, payload, options.timeout)


def run_tr2post(payload: bytes, options: TypesetOptions | None = None) -> bytes:
    """Convert troff output to PostScript."""
    options = options or TypesetOptions()
    return _run_pass(options.tr2post_binary, options.tr2post_args, payload, options.timeout)


def run_ps2pdf(payload: bytes, options: TypesetOptions | None = None) -> bytes:
    """Convert PostScript to PDF."""
    options = options or TypesetOptions()
    return _run_pass(options.ps2pdf_binary, options.ps2pdf_args, payload, options.timeout)


def typeset_pdf(payload: bytes, options: TypesetOptions | None = None) -> bytes:
    """Run ms macro source through troff, tr2post and ps2pdf.

    Parameters
    ----------
    payload : bytes
        ms macro source
    options : TypesetOptions or None, default = None
        Binaries and arguments to use

    Returns
    -------
    bytes
        PDF document

    Raises
    ------
    ExternalToolError
        If any pass fails; later passes are not run

    """
    options = options or TypesetOptions()
    troff_output = run_troff(payload, options)
    postscript = run_tr2post(troff_output, options)
    return run_ps2pdf(postscript, options)
