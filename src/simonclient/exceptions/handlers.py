"""
Centralized error handling utilities.

1. **Custom Exceptions** - Typed, user-friendly error classes (see base, config, device, session)
2. **Error Context** - Preserve technical details for logging, show friendly messages to users
3. **Recovery Hints** - Tell users what to do when things fail

## Quick Reference

| Scenario | Use This |
|----------|----------|
| Config file syntax error | `ConfigFileInvalidError` |
| Config value invalid | `ConfigValidationError` (via `wrap_pydantic_error`) |
| Unknown input type | `UnknownInputModalityError` |
| Color without a button/sensor/LED | `MissingColorMappingError` |
| MIDI port missing | `MidiDeviceNotFoundError` |
| Critical section with auto-logging | `with ErrorContext("open MIDI input"): ...` |

## Architecture

```
┌─────────────────────────────────────┐
│  USER LAYER (CLI/TUI)               │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────┘
                  ↑ SimonClientError
┌─────────────────────────────────────┐
│  SESSION LAYER                      │
│  - Converts low-level exceptions    │
│  - Adds context and recovery hints  │
└─────────────────────────────────────┘
                  ↑ Exception, OSError, ValidationError
┌─────────────────────────────────────┐
│  LOW LEVEL (MIDI, WebSocket, I/O)   │
└─────────────────────────────────────┘
```
"""

import logging
from typing import Any, Optional

from .base import SimonClientError
from .config import (
    ConfigFileInvalidError,
    ConfigValidationError,
    MissingColorMappingError,
    UnknownInputModalityError,
)

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("open MIDI input", logger_instance=logger):
            port = mido.open_input(name, callback=callback)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True,
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Log any exception; return True to suppress it when re_raise is False."""
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, SimonClientError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> SimonClientError:
    """
    Convert Pydantic validation errors to simonclient exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError subclass with a user-friendly message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    if not isinstance(error, ValidationError):
        return ConfigValidationError(
            field="unknown", value=None, error_msg=error_msg, file_path=file_path
        )

    errors = error.errors()

    # Invalid JSON syntax is reported as a single json_invalid error
    for err in errors:
        if err.get("type") == "json_invalid":
            return ConfigFileInvalidError(file_path, err.get("msg", error_msg))

    # Unknown discriminator value on the input section
    for err in errors:
        loc = tuple(err.get("loc", ()))
        if err.get("type") == "union_tag_invalid" and loc[:1] == ("input",):
            tag = (err.get("ctx") or {}).get("tag")
            return UnknownInputModalityError(tag, file_path=file_path)

    # Color mapping gaps raised by field validators
    for err in errors:
        msg = err.get("msg", "")
        if "missing" in msg and "mapping" in msg:
            return MissingColorMappingError(
                field=_field_name(tuple(err.get("loc", ()))),
                error_msg=msg.removeprefix("Value error, "),
                file_path=file_path,
            )

    if len(errors) == 1:
        first_error = errors[0]
        return ConfigValidationError(
            field=_field_name(tuple(first_error.get("loc", ()))),
            value=first_error.get("input"),
            error_msg=first_error.get("msg", "validation failed"),
            file_path=file_path,
        )

    error_lines = [
        f"  - {_field_name(tuple(err.get('loc', ())))}: {err.get('msg', 'validation failed')}"
        for err in errors
    ]
    combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
    return ConfigValidationError(
        field="multiple fields", value=None, error_msg=combined_msg, file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, SimonClientError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
