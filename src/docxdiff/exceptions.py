#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the docxdiff library.

This module defines specialized exception classes for the error conditions
that can occur while loading documents and producing a diff. The diff engine
itself never raises on mismatched structure; it records
:class:`MalformedInputError` diagnostics and keeps going.

Exception Hierarchy
-------------------
- DocxDiffError (base exception)

  - ValidationError (parameter/option validation)

  - FileError (file access and I/O)
    - DocumentNotFoundError (file doesn't exist)

  - ParsingError (converter output could not be read)

  - MalformedInputError (tree node missing required structure)

  - RenderingError (output generation failures)

  - DependencyError (missing optional packages)

"""

from typing import Any


class DocxDiffError(Exception):
    """Base exception class for all docxdiff-specific errors.

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


class ValidationError(DocxDiffError):
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


class FileError(DocxDiffError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class DocumentNotFoundError(FileError):
    """Exception raised when an input document cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(DocxDiffError):
    """Exception raised when converter output cannot be turned into a tree.

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


class MalformedInputError(DocxDiffError):
    """Diagnostic for a tree node that is missing required structure.

    The diff engine does not raise this exception. It builds one for every
    row or cell it has to skip and attaches the messages to the result
    document so callers get a best-effort partial result plus diagnostics.

    Parameters
    ----------
    message : str
        Description of the malformed node
    location : str, optional
        Human-readable location such as ``"table 2, row 5"``

    """

    def __init__(self, message: str, location: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed input diagnostic."""
        if location:
            message = f"{location}: {message}"
        super().__init__(message, original_error)
        self.location = location


class RenderingError(DocxDiffError):
    """Exception raised when output rendering fails."""

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class DependencyError(DocxDiffError):
    """Exception raised when an input converter's packages are not available.

    Parameters
    ----------
    converter_name : str
        Name of the converter requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        if message is None:
            message_parts = []
            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name.upper()} input requires the following packages: {pkg_list}")
            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name.upper()} input has version mismatches: {mismatch_str}")
            message = "\n".join(message_parts)

            if not install_command:
                all_packages = missing_packages + [(name, required) for name, required, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    install_command = f"pip install --upgrade {packages_str}"
            if install_command:
                message += f"\nInstall with: {install_command}"

        super().__init__(message, original_error=original_import_error)
        self.original_import_error = original_import_error
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command
