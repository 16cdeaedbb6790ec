"""Authentication boundary.

Exact-match login over the stored users and self-registration. Failures
degrade to a None / result value instead of raising, so the UI can show
an access-denied message without an exception path.
"""

from __future__ import annotations

from dataclasses import dataclass

from sgi.application.services.base import LoggingMixin
from sgi.application.services.entity_store import EntityStore
from sgi.domain.errors.registration import DuplicateEmailError
from sgi.domain.models.user import ANONYMOUS_USER, SessionView, User, UserRole

DUPLICATE_EMAIL = "duplicate_email"


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of a registration attempt.

    Attributes:
        ok: True if the account was created.
        user: The created (and now logged-in) user on success.
        error: Machine-readable failure code on failure.
    """

    ok: bool
    user: User | None = None
    error: str | None = None


class AuthenticationService(LoggingMixin):
    """Login, registration and logout over the entity store."""

    def __init__(self, store: EntityStore) -> None:
        self._store = store
        self._init_logger(component="auth")

    @property
    def current_user(self) -> User:
        return self._store.current_user

    @property
    def current_view(self) -> SessionView:
        return self._store.current_view

    def authenticate(self, email: str, password: str, role: UserRole) -> User | None:
        """Log in when email, password and role all match a stored user.

        Returns:
            The user on success, None on access denied.
        """
        log = self._log_operation("authenticate", role=role.value)
        for user in self._store.users():
            if (
                user.email == email
                and user.credential_secret == password
                and user.role == role
            ):
                self._store.set_session(user, SessionView.for_role(user.role))
                log.info("login_succeeded", user_id=user.id)
                return user

        log.info("login_denied")
        return None

    def register(
        self,
        name: str,
        email: str,
        phone: str,
        password: str,
        role: UserRole = UserRole.CITIZEN,
    ) -> RegistrationResult:
        """Create an account and log it in.

        A duplicate email leaves the store untouched and returns an error
        result.
        """
        log = self._log_operation("register", role=role.value)
        user = User(
            id=self._store.next_user_id(),
            name=name,
            email=email,
            phone=phone,
            credential_secret=password,
            role=role,
        )
        try:
            self._store.add_user(user)
        except DuplicateEmailError:
            log.info("registration_rejected_duplicate_email")
            return RegistrationResult(ok=False, error=DUPLICATE_EMAIL)

        self._store.set_session(user, SessionView.for_role(role))
        log.info("user_registered", user_id=user.id)
        return RegistrationResult(ok=True, user=user)

    def logout(self) -> None:
        self._store.set_session(ANONYMOUS_USER, SessionView.LOGIN)
        self._log_operation("logout").info("logged_out")
