"""Errors raised by the journal core.

Expected failures derive from :class:`DomainError`, a ``ValueError`` carrying a
short ``code`` the API layer forwards to clients. :class:`InvariantViolation`
signals corrupted persisted data and is never translated into a user error.
"""

from __future__ import annotations


class DomainError(ValueError):
    """Base class for recoverable, user-facing failures."""

    code = "invalid_request"


class InvalidTransition(DomainError):
    """The requested lifecycle transition is not legal from the current status."""

    code = "invalid_transition"


class Conflict(DomainError):
    """The persisted status no longer matches the status the caller expected."""

    code = "conflict"


class InvalidRange(DomainError):
    """A date range whose start falls after its end."""

    code = "invalid_range"


class NotFound(DomainError):
    """The referenced record does not exist."""

    code = "not_found"


class InvariantViolation(RuntimeError):
    """A persisted record is in a state the lifecycle can never produce."""


__all__ = [
    "Conflict",
    "DomainError",
    "InvalidRange",
    "InvalidTransition",
    "InvariantViolation",
    "NotFound",
]
