"""
Custom exceptions for catpath.

Every error that is expected to reach the user derives from CatPathError;
the CLI entry point reports those with the program name as prefix.
"""


class CatPathError(Exception):
    """Base exception for all catpath errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown catpath error occurred."


class UsageError(CatPathError):
    """Raised when the command line is malformed or self-contradictory."""

    @property
    def default_message(self) -> str:
        return "Invalid command line."
