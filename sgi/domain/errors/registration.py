"""Registration errors for the authentication boundary."""

from __future__ import annotations

from sgi.domain.exceptions import SgiError


class DuplicateEmailError(SgiError):
    """Raised when registering an email that already belongs to a user.

    Duplicate email is the only registration-time validation owned by the
    core. Nothing is mutated when this error is raised.

    Attributes:
        email: The conflicting email address.
    """

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")
