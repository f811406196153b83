#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the gdocs2html library.

This module defines the exception classes raised while loading, parsing and
rendering Google Docs documents. They carry more specific error information
than generic built-ins so callers can tell bad input from bad configuration.

Exception Hierarchy
-------------------
- Gdocs2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - InputError (source cannot be read or decoded)

  - ParsingError (document structure failures)
    - MalformedDocumentError (schema violations with a location path)

  - RenderingError (output generation failures)

"""

from typing import Any


class Gdocs2HtmlError(Exception):
    """Base exception class for all gdocs2html-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(Gdocs2HtmlError):
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

    For example, passing GdocsParserOptions to the HTML renderer.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

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


class InputError(Gdocs2HtmlError):
    """Exception raised when the source document cannot be loaded.

    Covers unreadable files, unsupported input types and invalid JSON.

    Parameters
    ----------
    message : str
        Description of the input problem
    input_path : str, optional
        Path of the input that failed to load
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, input_path: str | None = None, original_error: Exception | None = None):
        """Initialize the input error."""
        super().__init__(message, original_error)
        self.input_path = input_path


class ParsingError(Gdocs2HtmlError):
    """Exception raised when a document cannot be turned into an AST.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class MalformedDocumentError(ParsingError):
    """Exception raised when a document does not match the Docs API schema.

    Parameters
    ----------
    message : str
        Description of what is malformed
    path : str, optional
        Location of the offending value, e.g. ``body.content[3].table``
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    path : str or None
        Location of the offending value

    """

    def __init__(self, message: str, path: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed document error."""
        full_message = f"{message} (at {path})" if path else message
        super().__init__(full_message, parsing_stage="schema_validation", original_error=original_error)
        self.path = path


class RenderingError(Gdocs2HtmlError):
    """Exception raised when HTML rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage
