"""Base exception class for simonclient.

Every client error carries two messages: `user_message` for the player
and `technical_message` for the log file. `recovery_hint` optionally says
how to fix the problem, and `exit_code` is the process status the CLI
exits with when the error ends a session.
"""

from typing import Optional


class SimonClientError(Exception):
    """Base exception for all simonclient errors."""

    exit_code = 1

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        """
        Args:
            user_message: Message to show to the player
            technical_message: Detailed message for logs (defaults to user_message)
            recovery_hint: Suggestion for how to fix the issue
        """
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, for one-shot display."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
