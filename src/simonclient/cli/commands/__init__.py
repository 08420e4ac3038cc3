"""CLI commands for simonclient."""

from .config import config
from .midi import midi_group

__all__ = ["config", "midi_group"]
