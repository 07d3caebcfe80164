"""Exceptions raised by envdiff.

This module defines all exceptions that can be raised while reading env
files, generating templates, and resolving runtime settings.
"""

from pathlib import Path
from typing import Any


class EnvdiffError(Exception):
    """Base exception for all envdiff errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize envdiff error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.details = details or {}


class EnvFileError(EnvdiffError):
    """Exception raised when an env file cannot be read or written."""

    def __init__(
        self,
        message: str,
        file_path: str | Path | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize env file error.

        Args:
            message: Human-readable error message
            file_path: Path to the problematic env file
            details: Optional dictionary with additional error details
        """
        super().__init__(message, details)
        self.file_path = str(file_path) if file_path is not None else None


class EnvFileNotFoundError(EnvFileError):
    """Exception raised when an input env file does not exist."""


class TemplateError(EnvdiffError):
    """Base exception for template generation failures."""


class TemplateSourceNotFoundError(TemplateError):
    """Exception raised when the template source file does not exist."""

    def __init__(self, source: str | Path, details: dict[str, Any] | None = None):
        super().__init__(f"Source file not found: {source}", details)
        self.source = str(source)


class TemplateTargetExistsError(TemplateError):
    """Exception raised when the target exists and overwrite was not requested."""

    def __init__(self, target: str | Path, details: dict[str, Any] | None = None):
        super().__init__(
            f"Target file already exists: {target}. Use --overwrite to replace it.",
            details,
        )
        self.target = str(target)


class SettingsError(EnvdiffError):
    """Base exception for runtime settings problems."""


class SettingsFileError(SettingsError):
    """Exception raised when a settings file cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        file_path: str | Path | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize settings file error.

        Args:
            message: Human-readable error message
            file_path: Path to the problematic settings file
            details: Optional dictionary with additional error details
        """
        super().__init__(message, details)
        self.file_path = str(file_path) if file_path is not None else None


class SettingsValidationError(SettingsError):
    """Exception raised when settings values fail validation."""

    def __init__(
        self,
        message: str,
        validation_errors: list[Any] | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize settings validation error.

        Args:
            message: Human-readable error message
            validation_errors: List of specific validation errors
            details: Optional dictionary with additional error details
        """
        super().__init__(message, details)
        self.validation_errors = validation_errors or []
