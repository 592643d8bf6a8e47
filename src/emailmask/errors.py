"""Custom exceptions and error handling for emailmask.

Masking itself never raises. These exceptions are used where options are
checked explicitly (strict maskers and the command line) and come with
user-friendly hints.
"""

from typing import List, Optional


class EmailMaskError(Exception):
    """Base exception for emailmask errors."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message}\n\nHint: {self.suggestion}"
        return self.message


class ConfigurationError(EmailMaskError):
    """Raised when masking options are invalid."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = list(errors or [])
        suggestion = None
        if self.errors:
            suggestion = "Option errors:\n" + "\n".join(
                f"  - {e}" for e in self.errors
            )
        super().__init__(message, suggestion)


def format_error(e: Exception) -> str:
    """Format an exception into a user-friendly message.

    Args:
        e: The exception to format.

    Returns:
        A user-friendly error message with suggestions.
    """
    if isinstance(e, EmailMaskError):
        return str(e)

    if isinstance(e, ValueError):
        return f"Invalid value: {e}\n\nHint: Check your options match the expected format."

    if isinstance(e, TypeError):
        return f"Type error: {e}\n\nHint: Check that you're passing the right types (e.g. str, int, bool)."

    if isinstance(e, KeyError):
        return f"Missing key: {e}\n\nHint: Check that your records contain the fields you asked to mask."

    return (
        f"Unexpected error: {type(e).__name__}: {e}\n\n"
        "Hint: This looks like a bug. Please report it with the input that triggered it."
    )
