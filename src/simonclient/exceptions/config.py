"""Configuration-related exceptions.

- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Config file has invalid syntax
- ConfigValidationError: Config values fail validation
- UnknownInputModalityError: Input type is not one the client supports
- MissingColorMappingError: A color has no pin/note/key assigned
"""

from typing import Any, Optional

from .base import SimonClientError


class ConfigurationError(SimonClientError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The parsing error message
        """
        user_msg = "Configuration file has invalid syntax"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {file_path}"

        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        elif "empty" in parse_error.lower():
            user_msg = "Configuration file is empty"
            recovery = f"Delete {file_path} or run 'simonclient config init' to write defaults"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if field.startswith("input") or field.startswith("output"):
            recovery += "\nRun 'simonclient midi list' to see available MIDI ports"
        elif field.startswith("server"):
            recovery += "\nOr override it with --server / --port"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.file_path = file_path


class UnknownInputModalityError(ConfigValidationError):
    """The configured input type is not supported."""

    def __init__(self, modality: Any, file_path: Optional[str] = None):
        from simonclient.models.enums import InputModality

        supported = ", ".join(m.value for m in InputModality)
        super().__init__(
            field="input.type",
            value=modality,
            error_msg=f"unknown input modality {modality!r} (expected one of: {supported})",
            file_path=file_path,
        )
        self.modality = modality


class MissingColorMappingError(ConfigValidationError):
    """A color has no input or output assignment."""

    def __init__(self, field: str, error_msg: str, file_path: Optional[str] = None):
        super().__init__(field=field, value=None, error_msg=error_msg, file_path=file_path)
