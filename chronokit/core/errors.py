"""Error hierarchy shared by the chronokit subsystems.

Centralizing exception types lets callers tell recoverable situations (a
display name that could not be resolved, an out-of-range ISO number) apart
from fatal ones (an unknown timezone). Submodules should raise the most
specific error available and chain the underlying fault as the cause.

Every error accepts the same four construction shapes::

    DateTimeFormatException()
    DateTimeFormatException("no name for 13")
    DateTimeFormatException(cause=exc)          # or DateTimeFormatException(exc)
    DateTimeFormatException("no name for 13", exc)
"""
from __future__ import annotations


class ChronoError(Exception):
    """Base class for all custom exceptions in the package."""

    def __init__(self, message: str | BaseException | None = None, cause: BaseException | None = None) -> None:
        if isinstance(message, BaseException) and cause is None:
            message, cause = None, message
        if message is None and cause is not None:
            message = f"{type(cause).__name__}: {cause}"
        super().__init__(*(() if message is None else (message,)))
        self.message: str | None = message
        self.cause: BaseException | None = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message or ""


class InvalidCalendarFieldError(ChronoError, ValueError):
    """Raised when a calendar field (ISO day number, month number, day) is out of range."""


class DateTimeArithmeticException(ChronoError, ArithmeticError):
    """Raised when the result of a calendrical computation cannot be represented."""


class IllegalTimeZoneException(ChronoError, ValueError):
    """Raised when a timezone identifier has no known rules."""


class DateTimeFormatException(ChronoError, ValueError):
    """Raised when a display-name lookup or textual parse fails."""


class ConfigurationError(ChronoError):
    """Raised when settings or name-table files are invalid."""
