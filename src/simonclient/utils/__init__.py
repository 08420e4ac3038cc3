"""Generic utility modules for simonclient.

- observer: Observer list management
- persistence: JSON load/save for Pydantic models
"""

from .observer import ObserverManager
from .persistence import PydanticPersistence

__all__ = ["ObserverManager", "PydanticPersistence"]
