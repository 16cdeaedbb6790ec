"""User and session domain models.

Users are created at registration, read at authentication and never
deleted within a session. Credentials are stored and compared as plain
text; hashing is the credential store's concern, which is out of scope.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UserRole(Enum):
    """Role of an account.

    Roles:
        CITIZEN: Reports defects and follows own requests
        ADMIN: Triages, dispatches, completes and cancels requests
    """

    CITIZEN = "citizen"
    ADMIN = "admin"


class SessionView(Enum):
    """Top-level screen the session is showing."""

    LOGIN = "login"
    CITIZEN = "citizen"
    ADMIN = "admin"

    @classmethod
    def for_role(cls, role: UserRole) -> SessionView:
        """Return the home view for a logged-in role."""
        return cls.ADMIN if role == UserRole.ADMIN else cls.CITIZEN


@dataclass(frozen=True, eq=True)
class User:
    """A registered account.

    Attributes:
        id: Unique numeric id (0 is reserved for the anonymous placeholder).
        name: Display name.
        email: Unique login email.
        phone: Contact phone.
        credential_secret: Plain-text password.
        role: Account role.
    """

    id: int
    name: str
    email: str
    phone: str
    credential_secret: str
    role: UserRole

    @property
    def is_anonymous(self) -> bool:
        """True for the logged-out placeholder."""
        return self.id == 0 and not self.email

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        # Keep the secret out of logs and tracebacks
        return (
            f"User(id={self.id!r}, name={self.name!r}, email={self.email!r}, "
            f"role={self.role.value!r})"
        )


ANONYMOUS_USER = User(
    id=0,
    name="",
    email="",
    phone="",
    credential_secret="",
    role=UserRole.CITIZEN,
)
