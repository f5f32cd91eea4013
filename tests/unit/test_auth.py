"""
Unit tests for accounts, tokens and role checks.
"""
from datetime import datetime, timedelta, timezone
import jwt
import pytest

from fencing.auth import Principal, can_mutate, decode_token, has_role, issue_token
from fencing.exceptions import AuthenticationError, ValidationError
from fencing.models import Role


class TestUserService:
    """Tests for UserService."""

    def test_register_hashes_password(self, services):
        user = services.users.register_user('admin', 'adminPass', 'admin@example.com', role=Role.ADMIN)

        assert user.id is not None
        assert user.role == Role.ADMIN
        assert user.password_hash != 'adminPass'
        assert 'password_hash' not in user.to_dict()

    def test_default_role_is_user(self, services):
        user = services.users.register_user('user', 'userPass', 'user@example.com')

        assert user.role == Role.USER

    def test_duplicate_username(self, services):
        services.users.register_user('user', 'userPass', 'user@example.com')

        with pytest.raises(ValidationError):
            services.users.register_user('user', 'other', 'other@example.com')

    @pytest.mark.parametrize('email', [None, '', 'not-an-email', 'fencer@', '@example.com', 'fencer@localhost', 'fen cer@example.com'])
    def test_invalid_email(self, services, email):
        with pytest.raises(ValidationError):
            services.users.register_user('user', 'userPass', email)

    def test_authenticate(self, services):
        services.users.register_user('user', 'userPass', 'user@example.com')

        assert services.users.authenticate('user', 'userPass').username == 'user'

    @pytest.mark.parametrize('username,password', [('user', 'wrong'), ('nobody', 'userPass')])
    def test_authenticate_failure(self, services, username, password):
        services.users.register_user('user', 'userPass', 'user@example.com')

        with pytest.raises(AuthenticationError):
            services.users.authenticate(username, password)


class TestTokens:
    """Tests for issue_token and decode_token."""

    def test_round_trip_claims(self, services):
        user = services.users.register_user('user', 'userPass', 'user@example.com')

        claims = decode_token(issue_token(user))

        assert claims['sub'] == 'user'
        assert claims['exp'] - claims['iat'] == 24 * 60 * 60

    def test_expired_token(self, services):
        user = services.users.register_user('user', 'userPass', 'user@example.com')
        token = issue_token(user, now=datetime.now(timezone.utc) - timedelta(hours=25))

        with pytest.raises(AuthenticationError, match="expired"):
            decode_token(token)

    def test_wrong_secret(self, services):
        token = jwt.encode(
            {'sub': 'user', 'exp': datetime.now(timezone.utc) + timedelta(hours=1)},
            b'another-secret-of-sufficient-length!!',
            algorithm='HS256'
        )

        with pytest.raises(AuthenticationError):
            decode_token(token)

    def test_garbage_token(self, services):
        with pytest.raises(AuthenticationError):
            decode_token('not.a.token')


class TestRoleChecks:
    """Tests for has_role and can_mutate."""

    def test_admin_can_mutate(self):
        assert can_mutate(Principal(1, 'admin', Role.ADMIN))

    def test_user_cannot_mutate(self):
        principal = Principal(2, 'user', Role.USER)

        assert has_role(principal, Role.USER)
        assert not can_mutate(principal)

    def test_anonymous(self):
        assert not can_mutate(None)
