"""Status definitions and exceptions for ExpenseTrackerMVC.

This module provides:
    - Status: enumeration of possible application states
    - STATUS_MESSAGE: user-facing messages for each status
    - get_message: retrieve the message for a status
    - BaseStatusException: base exception carrying a Status
    - Specific exceptions raised by the model and the settings API
"""
import enum
import logging
from typing import Dict


class Status(enum.StrEnum):
    """Enumeration of application status codes."""
    UnknownStatus = enum.auto()
    Okay = enum.auto()

    # Model status
    TransactionInvalid = enum.auto()
    FilterIndicesInvalid = enum.auto()

    # Controller status
    FilterNotSet = enum.auto()

    # Configuration status
    ConfigNotFound = enum.auto()
    ConfigInvalid = enum.auto()


STATUS_MESSAGE: Dict[Status, str] = {
    Status.UnknownStatus: 'Unknown status.',
    Status.Okay: 'Everything is okay.',

    Status.TransactionInvalid: 'The transaction must be a non-null Transaction instance.',
    Status.FilterIndicesInvalid: (
        'Each matched filter index must be between 0 (inclusive) '
        'and the number of transactions (exclusive).'
    ),

    Status.FilterNotSet: 'No filter applied',

    Status.ConfigNotFound: 'Could not find the tracker config.',
    Status.ConfigInvalid: 'The tracker config seems to be incomplete, or contains invalid values.',
}


def get_message(status: Status) -> str:
    """
    Get the message for a given status.

    Args:
        status (Status): The status enum.

    Returns:
        str: The message associated with the status.
    """
    return STATUS_MESSAGE.get(status, 'Unknown status')


class BaseStatusException(Exception):
    """Base exception for status-based errors in ExpenseTrackerMVC.

    Attributes:
        status (Status): Status code associated with this error.
        status_message (str): User-facing message for the status.

    Args:
        message (str): Optional additional context for the error.
    """
    status = Status.UnknownStatus

    def __init__(self, message: str = None):
        self.status_message = get_message(self.status)
        exception_message = f'{self.status_message} {message}' if message else self.status_message
        super().__init__(exception_message)

        logging.error(exception_message)

        from ..ui.actions import signals
        signals.error.emit(message or self.status_message)


class TransactionInvalidException(BaseStatusException, ValueError):
    """Exception raised when a missing or malformed transaction reaches the model."""
    status = Status.TransactionInvalid


class FilterIndicesInvalidException(BaseStatusException, ValueError):
    """Exception raised when matched filter indices are missing or out of range."""
    status = Status.FilterIndicesInvalid


class ConfigNotFoundException(BaseStatusException):
    """Exception raised when the tracker configuration file cannot be found."""
    status = Status.ConfigNotFound


class ConfigInvalidException(BaseStatusException):
    """Exception raised when the tracker configuration is invalid or malformed."""
    status = Status.ConfigInvalid
