"""Operation status shared by the resolver and the submitter.

The status is a small tagged union. The presentation layer reads it to show
a spinner or a dismissible banner; the operations only ever replace it
through the transition functions below.
"""

from dataclasses import dataclass
from typing import Union

INVALID_OR_EXPIRED_MESSAGE = "Invalid or expired URL"
GENERIC_ERROR_MESSAGE = "An error occurred"
SHORTENED_MESSAGE = "URL shortened successfully!"
COPIED_MESSAGE = "Copied to clipboard!"


@dataclass(frozen=True)
class Idle:
    kind = "idle"


@dataclass(frozen=True)
class Pending:
    kind = "pending"


@dataclass(frozen=True)
class Succeeded:
    message: str

    kind = "succeeded"


@dataclass(frozen=True)
class Failed:
    message: str

    kind = "failed"


OperationStatus = Union[Idle, Pending, Succeeded, Failed]

IDLE = Idle()
PENDING = Pending()


def begin(status: OperationStatus) -> OperationStatus:
    """Start a new operation. Any previous banner is dropped."""
    return PENDING


def succeed(status: OperationStatus, message: str) -> OperationStatus:
    return Succeeded(message)


def fail(status: OperationStatus, message: str) -> OperationStatus:
    return Failed(message)


def dismiss(status: OperationStatus) -> OperationStatus:
    """Clear a finished banner. A pending operation is left alone."""
    if isinstance(status, Pending):
        return status
    return IDLE
