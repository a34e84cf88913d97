#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2troff library.

This module defines specialized exception classes for the error conditions
that can occur while turning a document tree into ms macros and while handing
that output to the external typesetting tools.

Exception Hierarchy
-------------------
- Md2TroffError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)

  - ParsingError (markdown to document tree failures)

  - RenderingError (macro generation failures, always fatal for the render)
    - UnknownNodeKindError (node kind the renderer has no behavior for)
    - FrontMatterError (malformed or missing front-matter payload)
    - TableLayoutError (empty or malformed table buffer)

  - ExternalToolError (troff, tr2post, ps2pdf failures)

"""

from typing import Any, Sequence


class Md2TroffError(Exception):
    """Base exception class for all md2troff-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2TroffError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Md2TroffError):
    """Exception raised when markdown cannot be turned into a document tree.

    Parameters
    ----------
    message : str
        What could not be parsed
    parsing_stage : str, optional
        Where parsing stopped, e.g. ``"tree_building"``
    original_error : Exception, optional
        The mistune or decoding error, if any

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with the stage it occurred in."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2TroffError):
    """Exception raised when macro rendering fails.

    Rendering errors abort the current render. No partial output is returned.

    Parameters
    ----------
    message : str
        What could not be rendered
    rendering_stage : str, optional
        Where rendering stopped: ``"dispatch"``, ``"front_matter"``, ``"table"`` or ``"list"``
    original_error : Exception, optional
        The error that aborted the render, if any

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error with the stage it occurred in."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnknownNodeKindError(RenderingError):
    """Exception raised when the renderer meets a node kind it has no behavior for.

    Parameters
    ----------
    kind : Any
        The offending node kind
    entering : bool, optional
        Visitation phase in which the node was met

    """

    def __init__(self, kind: Any, entering: bool | None = None):
        """Initialize the error with the unknown kind."""
        kind_name = getattr(kind, "value", kind)
        message = f"Cannot render node of unknown kind {kind_name!r}"
        if entering is not None:
            message += f" ({'enter' if entering else 'exit'})"
        super().__init__(message, rendering_stage="dispatch")
        self.kind = kind


class FrontMatterError(RenderingError):
    """Exception raised when the front-matter payload cannot be used.

    Parameters
    ----------
    message : str
        Description of the problem
    payload : str, optional
        The raw front-matter text
    original_error : Exception, optional
        The YAML or date parsing error, if any

    """

    def __init__(self, message: str, payload: str | None = None, original_error: Exception | None = None):
        """Initialize the front matter error."""
        super().__init__(message, rendering_stage="front_matter", original_error=original_error)
        self.payload = payload


class TableLayoutError(RenderingError):
    """Exception raised when a buffered table cannot be split into header and body."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the table layout error."""
        super().__init__(message, rendering_stage="table", original_error=original_error)


class ExternalToolError(Md2TroffError):
    """Exception raised when an external typesetting tool fails.

    Parameters
    ----------
    tool : str
        Binary that was run
    args : sequence of str
        Arguments passed to the binary
    returncode : int or None
        Exit status, or None when the tool could not be started
    stderr : str
        Diagnostic output captured from the tool

    """

    def __init__(
        self,
        tool: str,
        args: Sequence[str],
        returncode: int | None,
        stderr: str = "",
        original_error: Exception | None = None,
    ):
        """Initialize the error with the tool diagnostics."""
        if returncode is None:
            message = f"{tool}: could not be run"
        else:
            message = f"{tool}: exited with status {returncode}"
        message += f"\nargs= {list(args)}"
        if stderr:
            message += f"\n{stderr}"
        super().__init__(message, original_error)
        self.tool = tool
        self.tool_args = list(args)
        self.returncode = returncode
        self.stderr = stderr
