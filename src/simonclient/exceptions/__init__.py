"""
Custom exception hierarchy for simonclient.

## Exception Hierarchy

```
SimonClientError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
│       ├── UnknownInputModalityError
│       └── MissingColorMappingError
├── DeviceError
│   └── MidiDeviceNotFoundError
├── TransportError
│   └── ChannelClosedError
└── SessionStateError
```

All custom exceptions inherit from `SimonClientError`, which provides
`user_message`, `technical_message`, `recovery_hint` and the `exit_code`
the CLI exits with.

### Example: Config Validation Error

```python
raise ConfigValidationError(
    field="server.port",
    value=0,
    error_msg="Input should be greater than or equal to 1",
    file_path="/home/me/.simonclient/config.json",
)
```

See `simonclient.exceptions.handlers` for utilities to handle these exceptions.
"""

from .base import SimonClientError
from .config import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    MissingColorMappingError,
    UnknownInputModalityError,
)
from .device import DeviceError, MidiDeviceNotFoundError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error
from .session import ChannelClosedError, SessionStateError, TransportError

__all__ = [
    "ChannelClosedError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Config
    "ConfigurationError",
    # Device
    "DeviceError",
    "ErrorContext",
    "MidiDeviceNotFoundError",
    "MissingColorMappingError",
    # Session
    "SessionStateError",
    # Base
    "SimonClientError",
    "TransportError",
    "UnknownInputModalityError",
    "format_error_for_display",
    # Handlers
    "wrap_pydantic_error",
]
