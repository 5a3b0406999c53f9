#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the acrodoc library.

This module defines the exception classes raised while registering, rendering
and sorting acronyms. Every one of them is fatal for the current document
conversion: callers are expected to let them propagate rather than guess a
fallback.

Exception Hierarchy
-------------------
- AcrodocError (base exception)

  - ValidationError (option/parameter validation)
    - InvalidConfigurationError (invalid option combinations)
    - UnknownStyleError (unrecognised style name)
    - UnknownSortCriterionError (unrecognised sorting criterion)

  - RegistryError (acronym table errors)
    - DuplicateKeyError (key registered twice)
    - AcronymNotFoundError (key never registered)

  - RenderingError (rendered fragment cannot be produced)
    - MissingPluralVariantError (rich name with no plural form)

  - ConfigFileError (unreadable or malformed configuration file)

"""

from typing import Any


class AcrodocError(Exception):
    """Base exception class for all acrodoc-specific errors.

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


class ValidationError(AcrodocError):
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


class InvalidConfigurationError(ValidationError):
    """Exception raised when options are individually valid but conflict.

    The canonical case is sorting by ``usage`` while also including unused
    acronyms, whose usage order is unset and cannot be compared.
    """


class UnknownStyleError(ValidationError):
    """Exception raised when a rendering style name is not recognised.

    Parameters
    ----------
    style : str
        The style name that was requested

    """

    def __init__(self, style: Any, original_error: Exception | None = None):
        """Initialize with the offending style name."""
        super().__init__(
            f"Style '{style}' does not exist",
            parameter_name="style",
            parameter_value=style,
            original_error=original_error,
        )
        self.style = style


class UnknownSortCriterionError(ValidationError):
    """Exception raised when a sorting criterion is not recognised.

    Parameters
    ----------
    criterion : str
        The criterion that was requested

    """

    def __init__(self, criterion: Any, original_error: Exception | None = None):
        """Initialize with the offending criterion."""
        super().__init__(
            f"Sorting criterion unrecognized: '{criterion}'. Please check the `sorting` option.",
            parameter_name="sorting",
            parameter_value=criterion,
            original_error=original_error,
        )
        self.criterion = criterion


class RegistryError(AcrodocError):
    """Base class for errors raised by the acronym registry.

    Parameters
    ----------
    message : str
        Description of the error
    key : str
        The acronym key involved

    """

    def __init__(self, message: str, key: str, original_error: Exception | None = None):
        """Initialize with the acronym key."""
        super().__init__(message, original_error=original_error)
        self.key = key


class DuplicateKeyError(RegistryError):
    """Exception raised when an acronym key is registered twice."""

    def __init__(self, key: str):
        """Initialize with the duplicated key."""
        super().__init__(f"Acronym key '{key}' is already registered", key=key)


class AcronymNotFoundError(RegistryError):
    """Exception raised when looking up an acronym key that was never registered."""

    def __init__(self, key: str):
        """Initialize with the missing key."""
        super().__init__(f"Acronym key '{key}' not found", key=key)


class RenderingError(AcrodocError):
    """Exception raised when an acronym cannot be rendered."""


class MissingPluralVariantError(RenderingError):
    """Exception raised when pluralizing a rich-formatted name without a plural form.

    Naive suffixing is only applied to plain names; formatted names must
    supply an explicit plural variant.

    Parameters
    ----------
    key : str
        Acronym key
    name_field : str
        Either ``"shortname"`` or ``"longname"``

    """

    def __init__(self, key: str, name_field: str):
        """Initialize with the acronym key and the name lacking a plural."""
        super().__init__(
            f"Acronym '{key}' has a formatted {name_field} but no plural {name_field} was provided; "
            f"please define `plural.{name_field}` explicitly"
        )
        self.key = key
        self.name_field = name_field


class ConfigFileError(AcrodocError):
    """Exception raised when a configuration file cannot be read or parsed.

    Parameters
    ----------
    message : str
        Description of the error
    file_path : str, optional
        Path of the offending file

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize with the configuration file path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path

