"""Simon Says game client."""

__version__ = "0.1.0"
