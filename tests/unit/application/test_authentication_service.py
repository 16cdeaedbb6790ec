"""Unit tests for AuthenticationService."""

import pytest

from sgi.application.services.authentication_service import (
    DUPLICATE_EMAIL,
    AuthenticationService,
)
from sgi.application.services.entity_store import EntityStore
from sgi.domain.models.user import ANONYMOUS_USER, SessionView, UserRole
from sgi.infrastructure.stubs.in_memory_blob_store import InMemoryBlobStore


@pytest.fixture
def auth(seeded_store: EntityStore) -> AuthenticationService:
    return AuthenticationService(seeded_store)


class TestAuthenticate:
    """Tests for exact-match login."""

    def test_citizen_login(self, auth: AuthenticationService) -> None:
        user = auth.authenticate("maria.silva@email.com", "123456", UserRole.CITIZEN)

        assert user is not None
        assert user.name == "Maria Silva"
        assert auth.current_user == user
        assert auth.current_view == SessionView.CITIZEN

    def test_admin_login(self, auth: AuthenticationService) -> None:
        user = auth.authenticate("admin@maraba.pa.gov.br", "admin123", UserRole.ADMIN)
        assert user is not None
        assert auth.current_view == SessionView.ADMIN

    @pytest.mark.parametrize(
        ("email", "password", "role"),
        [
            ("maria.silva@email.com", "wrong", UserRole.CITIZEN),
            ("maria.silva@email.com", "123456", UserRole.ADMIN),
            ("nobody@email.com", "123456", UserRole.CITIZEN),
            ("MARIA.SILVA@email.com", "123456", UserRole.CITIZEN),
        ],
    )
    def test_denied(
        self, auth: AuthenticationService, email: str, password: str, role: UserRole
    ) -> None:
        assert auth.authenticate(email, password, role) is None
        assert auth.current_user == ANONYMOUS_USER
        assert auth.current_view == SessionView.LOGIN

    def test_session_is_persisted(
        self, auth: AuthenticationService, blob_store: InMemoryBlobStore
    ) -> None:
        auth.authenticate("maria.silva@email.com", "123456", UserRole.CITIZEN)
        reloaded = EntityStore(blob_store)
        assert reloaded.current_user.email == "maria.silva@email.com"
        assert reloaded.current_view == SessionView.CITIZEN


class TestRegister:
    """Tests for self-registration."""

    def test_register_logs_in(
        self, auth: AuthenticationService, seeded_store: EntityStore
    ) -> None:
        result = auth.register("Ana Paula", "ana@email.com", "(94) 96666-5555", "pw")

        assert result.ok
        assert result.error is None
        assert result.user is not None
        assert result.user.id == 3
        assert result.user.role == UserRole.CITIZEN
        assert auth.current_user == result.user
        assert auth.current_view == SessionView.CITIZEN
        assert len(seeded_store.users()) == 3

    def test_registered_user_can_authenticate(self, auth: AuthenticationService) -> None:
        auth.register("Ana Paula", "ana@email.com", "", "pw")
        auth.logout()
        assert auth.authenticate("ana@email.com", "pw", UserRole.CITIZEN) is not None

    def test_register_admin(self, auth: AuthenticationService) -> None:
        result = auth.register("Ops", "ops@maraba.pa.gov.br", "", "pw", UserRole.ADMIN)
        assert result.ok
        assert auth.current_view == SessionView.ADMIN

    def test_duplicate_email(
        self, auth: AuthenticationService, seeded_store: EntityStore
    ) -> None:
        result = auth.register("Other", "maria.silva@email.com", "", "pw")

        assert not result.ok
        assert result.error == DUPLICATE_EMAIL
        assert result.user is None
        assert len(seeded_store.users()) == 2
        assert auth.current_user == ANONYMOUS_USER


class TestLogout:
    def test_logout_resets_session(self, auth: AuthenticationService) -> None:
        auth.authenticate("admin@maraba.pa.gov.br", "admin123", UserRole.ADMIN)
        auth.logout()
        assert auth.current_user == ANONYMOUS_USER
        assert auth.current_view == SessionView.LOGIN
