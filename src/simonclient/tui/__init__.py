"""Terminal user interface built with Textual."""

from .app import PadIndicators, SimonSaysApp

__all__ = ["PadIndicators", "SimonSaysApp"]
