"""Unit tests for the session domain service."""

from datetime import timedelta

import pytest

from board.adapter.store import MockStoreIdentityProvider
from board.domain.error import AuthenticationError
from board.domain.service import SessionService, parse_bearer
from board.util.error import ConfigurationError
from tests.harness import make_token, make_user


class TestParseBearer:
    """Unit tests for Authorization header parsing."""

    def test_missing_header(self):
        with pytest.raises(AuthenticationError, match="Missing Authorization header."):
            parse_bearer(None)

    @pytest.mark.parametrize("header", ["Basic abc", "Bearer", "Bearer ", "token"])
    def test_invalid_format(self, header):
        with pytest.raises(
            AuthenticationError, match="Invalid Authorization header format."
        ):
            parse_bearer(header)

    def test_scheme_is_case_insensitive(self):
        assert parse_bearer("bEaReR abc.def") == "abc.def"

    def test_only_first_two_parts_are_read(self):
        assert parse_bearer("Bearer abc extra parts") == "abc"


class TestSessionService:
    """Unit tests for SessionService."""

    @pytest.fixture
    def identity_provider(self) -> MockStoreIdentityProvider:
        return MockStoreIdentityProvider()

    @pytest.fixture
    def service(self, identity_provider) -> SessionService:
        return SessionService(identity_provider=identity_provider)

    @pytest.mark.asyncio
    async def test_authenticate_valid_token(self, service, identity_provider):
        # Arrange
        user = make_user("reader@example.org")
        token = make_token(user)
        identity_provider.register(token, user)

        # Act
        session = await service.authenticate(f"Bearer {token}")

        # Assert
        assert session.is_active
        assert session.user_id == user.id
        assert session.access_token == token

    @pytest.mark.asyncio
    async def test_expired_token_rejected_without_remote_call(
        self, service, identity_provider
    ):
        user = make_user()
        token = make_token(user, expires_in=timedelta(hours=-1))
        identity_provider.register(token, user)

        with pytest.raises(AuthenticationError, match="Invalid or expired session."):
            await service.authenticate(f"Bearer {token}")

        assert identity_provider.get_user_calls == 0

    @pytest.mark.asyncio
    async def test_unknown_token_rejected(self, service, identity_provider):
        token = make_token(make_user())

        with pytest.raises(AuthenticationError, match="Invalid or expired session."):
            await service.authenticate(f"Bearer {token}")

        assert identity_provider.get_user_calls == 1

    @pytest.mark.asyncio
    async def test_opaque_token_is_left_to_the_store(self, service, identity_provider):
        user = make_user()
        identity_provider.register("opaque-token", user)

        session = await service.authenticate("Bearer opaque-token")

        assert session.user_id == user.id

    @pytest.mark.asyncio
    async def test_optional_without_header_is_anonymous(self, service):
        assert await service.optional(None) is None

    def test_require_configured(self, service, identity_provider):
        service.require_configured(service_role=True)

        identity_provider.service_role = False
        service.require_configured()
        with pytest.raises(ConfigurationError):
            service.require_configured(service_role=True)

        identity_provider.configured = False
        with pytest.raises(ConfigurationError):
            service.require_configured()

    def test_sign_out_clears_session(self, service, session):
        service.sign_out(session)

        assert not session.is_active
        assert session.user is None
        assert session.access_token is None
